"""
Shared data models используемые клиентом Bitrix24
"""

from .bitrix import (
    Method,
    LISTABLE_METHODS,
    Command,
    BatchResult,
    BatchPayload,
    ListPayload,
    method_name,
)

__all__ = [
    "Method",
    "LISTABLE_METHODS",
    "Command",
    "BatchResult",
    "BatchPayload",
    "ListPayload",
    "method_name",
]
