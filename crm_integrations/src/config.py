"""
Configuration для клиента Bitrix24
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Bitrix24Settings(BaseSettings):
    """Настройки подключения к Битрикс24 (переменные окружения BITRIX24_*)"""

    model_config = SettingsConfigDict(
        env_prefix="BITRIX24_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Webhook
    webhook_url: Optional[str] = Field(None, description="Полный URL входящего webhook")
    portal_url: Optional[str] = Field(None, description="URL портала, например https://company.bitrix24.ru")
    webhook_secret: Optional[str] = Field(None, description="Секрет webhook (если нет webhook_url)")
    user_id: int = Field(default=1, description="ID пользователя, создавшего webhook")

    # HTTP
    timeout: float = Field(default=30.0, gt=0)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")

    @property
    def api_key(self) -> Optional[str]:
        """Webhook URL или секрет - то, что ожидает Bitrix24Client"""
        return self.webhook_url or self.webhook_secret


@lru_cache
def get_settings() -> Bitrix24Settings:
    """Закешированные настройки из окружения"""
    return Bitrix24Settings()
