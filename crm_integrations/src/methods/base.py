"""
Контракт HTTP транспорта, который получают методы клиента

Методы не знают про httpx: им передается async callable get(path, query=...),
возвращающий объект с уже распарсенным JSON в поле body.
"""

from typing import Any, Mapping, Optional, Protocol, Union

QueryTypes = Union[Mapping[str, Any], str, None]


class HttpResponse(Protocol):
    """Ответ транспорта"""

    body: Any


class HttpGet(Protocol):
    """GET запрос к методу REST API"""

    async def __call__(self, path: str, *, query: QueryTypes = None) -> HttpResponse:
        ...
