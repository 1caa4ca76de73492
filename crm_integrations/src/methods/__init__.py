"""
Методы Bitrix24 REST API поверх инжектируемого HTTP транспорта
"""

from .base import HttpGet, HttpResponse, QueryTypes
from .batch import (
    MAX_COMMANDS_PER_BATCH,
    BatchMethod,
    commands_to_batch_query,
    handle_batch_payload,
)
from .get_list import GetListMethod, handle_get_list_payload

__all__ = [
    "HttpGet",
    "HttpResponse",
    "QueryTypes",
    "MAX_COMMANDS_PER_BATCH",
    "BatchMethod",
    "commands_to_batch_query",
    "handle_batch_payload",
    "GetListMethod",
    "handle_get_list_payload",
]
