"""
Bitrix24 batch - несколько вызовов API в одном HTTP запросе

Документация: https://apidocs.bitrix24.com/api-reference/how-to-call-rest-api/batch.html

Формат запроса: cmd[<name>]=<method>?<urlencoded params>
Bitrix24 выполняет не больше 50 команд за один batch.
"""

from typing import Any, Dict, List, Mapping, Sequence, Union

import structlog
from pydantic import ValidationError

from shared.models.bitrix import BatchPayload, Command, Method
from shared.utils.query import encode_params
from ..exceptions import BatchCommandError, InvalidPayloadError, TooManyCommandsError
from .base import HttpGet

logger = structlog.get_logger(__name__)

MAX_COMMANDS_PER_BATCH = 50

CommandLike = Union[Command, Mapping[str, Any]]
Commands = Union[Mapping[Any, CommandLike], Sequence[CommandLike], None]


def _named_commands(commands: Commands) -> Dict[str, Command]:
    """Приводит mapping или список команд к {имя: Command}"""
    if not commands:
        return {}

    items = commands.items() if isinstance(commands, Mapping) else enumerate(commands)

    return {
        str(name): command if isinstance(command, Command) else Command.model_validate(command)
        for name, command in items
    }


def commands_to_batch_query(commands: Commands) -> Dict[str, str]:
    """
    Кодирование команд в query параметры метода batch

    Размер batch здесь не проверяется - это делает BatchMethod.

    Args:
        commands: {имя: команда} или список команд (имена - индексы)

    Returns:
        {"cmd[<name>]": "<method>[?<params>]"}
    """
    queries = {}

    for name, command in _named_commands(commands).items():
        stringified_params = f"?{encode_params(command.params)}" if command.params else ""
        queries[f"cmd[{name}]"] = f"{command.method}{stringified_params}"

    return queries


def _error_message(error: Any) -> str:
    # Bitrix24 может вернуть ошибку команды как {"error": ..., "error_description": ...}
    if isinstance(error, Mapping):
        code = error.get("error", "")
        description = error.get("error_description")
        return f"{code}: {description}" if description else str(code)
    return str(error)


def handle_batch_payload(payload: BatchPayload) -> BatchPayload:
    """
    Проверка ответа batch

    result_error бывает пустым массивом или объектом {имя: ошибка}.
    Любая ошибка валит весь batch: частичный результат не возвращается.

    Raises:
        BatchCommandError: Если хотя бы одна команда вернула ошибку
    """
    result_errors = payload.result.result_error

    if isinstance(result_errors, Mapping):
        errors: List[Any] = list(result_errors.values())
    else:
        errors = list(result_errors)

    if errors:
        raise BatchCommandError([_error_message(error) for error in errors])

    return payload


def _validate(model: Any, body: Any) -> BatchPayload:
    try:
        return model.model_validate(body)
    except ValidationError as e:
        logger.error("bitrix24_batch_invalid_payload", error=str(e))
        raise InvalidPayloadError(Method.BATCH.value, str(e)) from e


class BatchMethod:
    """
    Выполнение batch запроса

    Usage:
        batch = BatchMethod(client.get)
        payload = await batch({
            "deals": {"method": Method.LIST_DEALS},
            "lead": Command(method=Method.GET_LEAD, params={"ID": 11}),
        })
        payload.result.result["lead"]

    result_type задает тип результата каждой команды (pydantic валидирует
    payload.result.result), по умолчанию Any.
    """

    def __init__(self, get: HttpGet):
        self._get = get

    async def __call__(self, commands: Commands, result_type: Any = Any) -> BatchPayload:
        commands_amount = len(commands) if commands else 0

        if commands_amount > MAX_COMMANDS_PER_BATCH:
            raise TooManyCommandsError(commands_amount, MAX_COMMANDS_PER_BATCH)

        response = await self._get(Method.BATCH.value, query=commands_to_batch_query(commands))

        try:
            handle_batch_payload(_validate(BatchPayload, response.body))
        except BatchCommandError as e:
            logger.warning(
                "bitrix24_batch_failed",
                commands=commands_amount,
                errors=len(e.errors)
            )
            raise

        return _validate(BatchPayload[result_type], response.body)
