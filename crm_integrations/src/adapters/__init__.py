"""
HTTP адаптеры CRM
"""

from .bitrix24 import Bitrix24Client, Bitrix24Response

__all__ = ["Bitrix24Client", "Bitrix24Response"]
