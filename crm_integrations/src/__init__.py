"""
CRM Integrations Package

Клиент Битрикс24: batch запросы и get/list методы
"""

from .adapters.bitrix24 import Bitrix24Client, Bitrix24Response
from .config import Bitrix24Settings, get_settings
from .exceptions import (
    Bitrix24Error,
    TooManyCommandsError,
    BatchCommandError,
    ResourceFetchError,
    InvalidPayloadError,
)
from .log import configure_logging
from .methods import (
    MAX_COMMANDS_PER_BATCH,
    BatchMethod,
    GetListMethod,
    commands_to_batch_query,
    handle_batch_payload,
    handle_get_list_payload,
)

__all__ = [
    "Bitrix24Client",
    "Bitrix24Response",
    "Bitrix24Settings",
    "get_settings",
    "Bitrix24Error",
    "TooManyCommandsError",
    "BatchCommandError",
    "ResourceFetchError",
    "InvalidPayloadError",
    "configure_logging",
    "MAX_COMMANDS_PER_BATCH",
    "BatchMethod",
    "GetListMethod",
    "commands_to_batch_query",
    "handle_batch_payload",
    "handle_get_list_payload",
]
