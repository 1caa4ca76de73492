"""
Битрикс24 REST клиент

Документация API: https://apidocs.bitrix24.com/
Webhooks: https://helpdesk.bitrix24.com/courses/index.php?COURSE_ID=268&LESSON_ID=26002

URL формат: https://{domain}.bitrix24.ru/rest/{user_id}/{webhook_secret}/{method}

Особенности:
- Webhooks не требуют OAuth 2.0
- Max 50 команд в одном batch
- Ответ всегда JSON: {"result": ..., "time": ...} или {"error": ..., "error_description": ...}
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

import httpx
import structlog

from shared.models.bitrix import Method, method_name
from shared.utils.query import flatten_params
from ..config import Bitrix24Settings
from ..methods import BatchMethod, GetListMethod, QueryTypes

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Bitrix24Response:
    """Ответ Bitrix24 с распарсенным JSON"""

    status_code: int
    body: Any


class Bitrix24Client:
    """
    Клиент Битрикс24 через входящий webhook

    Требует:
        - api_key: Webhook URL или секретный ключ webhook
        - base_url: URL вашего Битрикс24 портала (например, https://your-company.bitrix24.ru)

    Формат webhook URL:
        https://your-company.bitrix24.ru/rest/{user_id}/{webhook_secret}/

    Usage:
        async with Bitrix24Client(api_key="https://company.bitrix24.ru/rest/1/xxx") as bitrix:
            deals = await bitrix.get_list(Method.LIST_DEALS, {"select": ["ID", "TITLE"]})
            payload = await bitrix.batch({
                "deals": {"method": Method.LIST_DEALS},
                "lead": {"method": Method.GET_LEAD, "params": {"ID": 11}},
            })
    """

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        user_id: int = 1,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """
        Args:
            api_key: Webhook URL или секретный ключ
            base_url: Базовый URL Битрикс24 портала
            user_id: ID пользователя webhook (если api_key не полный URL)
            timeout: Таймаут HTTP запросов в секундах
            http_client: Готовый httpx клиент (base_url должен указывать на REST URL)
        """
        # Определяем REST URL
        if api_key.startswith("http"):
            # api_key уже содержит полный URL webhook
            self.rest_url = api_key.rstrip("/")
        else:
            # api_key - это секрет webhook, нужен base_url
            if not base_url:
                raise ValueError("base_url обязателен, если api_key не полный URL")
            self.rest_url = f"{base_url.rstrip('/')}/rest/{user_id}/{api_key}"

        # HTTP client
        self._owns_client = http_client is None
        self.client = http_client or httpx.AsyncClient(
            base_url=self.rest_url + "/",
            timeout=timeout
        )

        self.batch = BatchMethod(self.get)
        self.get_list = GetListMethod(self.get)

        logger.info("bitrix24_client_initialized", rest_url=self.rest_url[:50] + "...")

    @classmethod
    def from_settings(cls, settings: Bitrix24Settings) -> "Bitrix24Client":
        """Создание клиента из Bitrix24Settings"""
        if not settings.api_key:
            raise ValueError("BITRIX24_WEBHOOK_URL или BITRIX24_WEBHOOK_SECRET обязателен")

        return cls(
            api_key=settings.api_key,
            base_url=settings.portal_url,
            user_id=settings.user_id,
            timeout=settings.timeout
        )

    async def get(self, path: str, *, query: QueryTypes = None) -> Bitrix24Response:
        """
        GET запрос к методу Bitrix24 API

        Args:
            path: Название метода API (например, crm.deal.list)
            query: Словарь параметров (вложенные разворачиваются в filter[ID]=...)
                   или готовая query строка

        Returns:
            Bitrix24Response с распарсенным JSON

        Raises:
            httpx.HTTPStatusError: Ответ с кодом 4xx/5xx
            httpx.RequestError: Сетевые ошибки
        """
        method = method_name(path)
        params = flatten_params(query) if isinstance(query, Mapping) else query

        try:
            response = await self.client.get(method, params=params)
            response.raise_for_status()

            return Bitrix24Response(status_code=response.status_code, body=response.json())

        except httpx.HTTPStatusError as e:
            logger.error(
                "bitrix24_http_error",
                status_code=e.response.status_code,
                method=method
            )
            raise
        except httpx.RequestError as e:
            logger.error("bitrix24_request_error", error=str(e), method=method)
            raise

    async def health_check(self) -> bool:
        """Проверка доступности Битрикс24 API"""
        try:
            # Простой запрос для проверки
            response = await self.get(Method.APP_INFO)
            return isinstance(response.body, dict) and "error" not in response.body
        except (httpx.HTTPError, ValueError) as e:
            logger.error("bitrix24_health_check_failed", error=str(e))
            return False

    async def close(self):
        """Закрывает HTTP клиент (только созданный самим клиентом)"""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
