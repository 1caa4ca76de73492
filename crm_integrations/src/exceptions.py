"""
Ошибки клиента Bitrix24

Транспортные ошибки httpx сюда не заворачиваются и пробрасываются как есть.
"""

from typing import List, Optional


class Bitrix24Error(Exception):
    """Базовая ошибка клиента Bitrix24"""


class TooManyCommandsError(Bitrix24Error):
    """В batch передано больше команд, чем разрешает Bitrix24"""

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(
            f"[batch] failed to process. Received {count} commands, but maximum {limit} allowed"
        )


class BatchCommandError(Bitrix24Error):
    """Одна или несколько команд batch вернули ошибку"""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__(
            f"[batch] failed to process. Received errors in {len(self.errors)} commands:\n"
            + "\n".join(self.errors)
        )


class ResourceFetchError(Bitrix24Error):
    """get/list метод вернул поле error"""

    def __init__(self, error: str, description: Optional[str] = None):
        self.error = error
        self.description = description
        super().__init__(f"[get] failed to get the resource: {error}.")


class InvalidPayloadError(Bitrix24Error):
    """Ответ API не совпадает с ожидаемой структурой"""

    def __init__(self, method: str, details: str):
        self.method = method
        self.details = details
        super().__init__(f"[{method}] unexpected payload: {details}")
