"""
Bitrix24 get/list методы

Ответ list методов: {"result": [...], "total": 120, "next": 50}
Ошибка: {"error": "NOT_FOUND", "error_description": "Not found"}
"""

from typing import Any, Union

import structlog
from pydantic import ValidationError

from shared.models.bitrix import ListPayload, Method, method_name
from ..exceptions import InvalidPayloadError, ResourceFetchError
from .base import HttpGet, QueryTypes

logger = structlog.get_logger(__name__)


def handle_get_list_payload(payload: ListPayload) -> ListPayload:
    """
    Проверка ответа get/list метода

    Raises:
        ResourceFetchError: Если в ответе есть поле error
    """
    if payload.error:
        raise ResourceFetchError(payload.error, payload.error_description)

    return payload


class GetListMethod:
    """
    Один GET запрос к listable методу

    Следующие страницы (next) не запрашиваются - только один запрос на вызов.
    """

    def __init__(self, get: HttpGet):
        self._get = get

    async def __call__(
        self,
        method: Union[Method, str],
        query: QueryTypes = None,
        result_type: Any = Any
    ) -> ListPayload:
        """
        Args:
            method: Метод API (например, Method.LIST_DEALS)
            query: Параметры запроса - словарь или готовая query строка
            result_type: Ожидаемый тип поля result

        Returns:
            ListPayload с распарсенным ответом
        """
        name = method_name(method)
        response = await self._get(name, query=query)

        try:
            payload = ListPayload[result_type].model_validate(response.body)
        except ValidationError as e:
            logger.error("bitrix24_list_invalid_payload", method=name, error=str(e))
            raise InvalidPayloadError(name, str(e)) from e

        try:
            return handle_get_list_payload(payload)
        except ResourceFetchError as e:
            logger.warning("bitrix24_list_failed", method=name, error=e.error)
            raise
