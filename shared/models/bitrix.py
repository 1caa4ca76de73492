"""
Bitrix24 data models - команды batch и обертки ответов REST API
"""

from enum import Enum
from typing import Any, Dict, Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

T = TypeVar("T")


class Method(str, Enum):
    """Методы Bitrix24 REST API, используемые клиентом"""

    BATCH = "batch"
    APP_INFO = "app.info"

    GET_DEAL = "crm.deal.get"
    LIST_DEALS = "crm.deal.list"
    GET_LEAD = "crm.lead.get"
    LIST_LEADS = "crm.lead.list"
    GET_CONTACT = "crm.contact.get"
    LIST_CONTACTS = "crm.contact.list"
    GET_COMPANY = "crm.company.get"
    LIST_COMPANIES = "crm.company.list"
    LIST_PRODUCTS = "crm.product.list"
    GET_USERS = "user.get"


def method_name(method: Union[Method, str]) -> str:
    """Имя метода в виде строки (Enum -> value)"""
    return method.value if isinstance(method, Enum) else str(method)


# Методы, которые отвечают в формате {"result": [...], "total": ..., "next": ...}
LISTABLE_METHODS = frozenset({
    Method.LIST_DEALS,
    Method.LIST_LEADS,
    Method.LIST_CONTACTS,
    Method.LIST_COMPANIES,
    Method.LIST_PRODUCTS,
    Method.GET_USERS,
})


class Command(BaseModel):
    """Одна команда внутри batch запроса"""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "method": "crm.lead.get",
                "params": {"ID": 11}
            }
        }
    )

    method: str = Field(..., description="Метод API, например crm.deal.get")
    params: Optional[Dict[str, Any]] = Field(None, description="Параметры метода")

    @field_validator("method", mode="before")
    @classmethod
    def _plain_method(cls, value: Any) -> Any:
        return value.value if isinstance(value, Enum) else value


class BatchResult(BaseModel, Generic[T]):
    """Содержимое поля result ответа batch"""

    model_config = ConfigDict(extra="allow")

    # Bitrix24 отдает массивы, если команды были переданы списком
    result: Union[Dict[str, T], List[T]] = Field(default_factory=dict)
    # Пустые ошибки приходят то как [], то как {}
    result_error: Union[List[Any], Dict[str, Any]] = Field(default_factory=list)
    result_total: Union[List[Any], Dict[str, Any]] = Field(default_factory=list)
    result_next: Union[List[Any], Dict[str, Any]] = Field(default_factory=list)
    result_time: Union[List[Any], Dict[str, Any]] = Field(default_factory=list)


class BatchPayload(BaseModel, Generic[T]):
    """Ответ метода batch"""

    model_config = ConfigDict(extra="allow")

    result: BatchResult[T]
    time: Optional[Dict[str, Any]] = None


class ListPayload(BaseModel, Generic[T]):
    """Ответ get/list метода"""

    model_config = ConfigDict(extra="allow")

    result: Optional[T] = None
    error: Optional[str] = None
    error_description: Optional[str] = None

    total: Optional[int] = None
    next: Optional[int] = None
    time: Optional[Dict[str, Any]] = None
