"""Проверки формы данных при десериализации сущностей.

Функции:
    require_mapping(data, entity)
        Убеждается, что на входе словарь.
    require_field(data, entity, field, expected)
        Достаёт обязательное поле нужного типа.
    optional_field(data, entity, field, expected, default)
        Достаёт необязательное поле (None/отсутствие -> default).
"""

from typing import Any, Mapping

from sticky_core.domain.errors import SchemaMismatchError


def require_mapping(data: Any, entity: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise SchemaMismatchError(entity, "*", f"expected object, got {type(data).__name__}")
    return data


def require_field(data: Mapping[str, Any], entity: str, field: str, expected: type) -> Any:
    """Обязательное поле.

    Raises:
        SchemaMismatchError: Поле отсутствует или другого типа.
    """
    if field not in data:
        raise SchemaMismatchError(entity, field, "missing")
    value = data[field]
    if not isinstance(value, expected):
        raise SchemaMismatchError(
            entity, field, f"expected {expected.__name__}, got {type(value).__name__}"
        )
    return value


def optional_field(
    data: Mapping[str, Any],
    entity: str,
    field: str,
    expected: type,
    default: Any,
) -> Any:
    value = data.get(field)
    if value is None:
        return default
    if not isinstance(value, expected):
        raise SchemaMismatchError(
            entity, field, f"expected {expected.__name__}, got {type(value).__name__}"
        )
    return value
