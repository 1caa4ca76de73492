"""
Query string helpers

Bitrix24 - PHP приложение, вложенные параметры разбираются как в http_build_query:
    {"filter": {"ID": 11}, "select": ["ID", "TITLE"]}
    -> filter[ID]=11&select[0]=ID&select[1]=TITLE
"""

from typing import Any, List, Mapping, Tuple

import httpx


def flatten_params(params: Mapping[str, Any], prefix: str = "") -> List[Tuple[str, Any]]:
    """
    Разворачивает вложенные словари и списки в плоский список пар

    Args:
        params: Параметры запроса (допускается вложенность)
        prefix: Префикс ключа для вложенных уровней

    Returns:
        Список пар (ключ, скалярное значение) в исходном порядке
    """
    items: List[Tuple[str, Any]] = []

    for key, value in params.items():
        full_key = f"{prefix}[{key}]" if prefix else str(key)

        if isinstance(value, Mapping):
            items.extend(flatten_params(value, full_key))
        elif isinstance(value, (list, tuple)):
            items.extend(flatten_params(dict(enumerate(value)), full_key))
        else:
            items.append((full_key, value))

    return items


def encode_params(params: Mapping[str, Any]) -> str:
    """URL-encode параметров (None -> пустая строка, bool -> true/false)"""
    return str(httpx.QueryParams(flatten_params(params)))
