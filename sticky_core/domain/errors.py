"""Исключения и результаты операций.

Классы:
    Outcome
        Результат мутирующей операции (применена / отклонена / не найдено).
    StickyCoreError
        Базовое исключение пакета.
    SchemaMismatchError
        Данные не соответствуют ожидаемой форме сущности.
    CorruptPersistedStateError
        Сохранённое состояние не удалось прочитать.
"""

from enum import Enum


class Outcome(str, Enum):
    """Результат операции над хранилищем или реестром тегов.

    Attributes:
        APPLIED: Изменение применено.
        REJECTED: Отклонено валидацией (пустое имя, дубликат, защищённый тег).
        NOT_FOUND: Объект с таким id/именем не найден.
    """

    APPLIED = "applied"
    REJECTED = "rejected"
    NOT_FOUND = "not_found"

    def __bool__(self) -> bool:
        return self is Outcome.APPLIED


class StickyCoreError(Exception):
    """Базовое исключение Sticky Core."""

    pass


class SchemaMismatchError(StickyCoreError, ValueError):
    """Словарь не соответствует форме сущности.

    Attributes:
        entity: Имя сущности (Project, NoteItem, ...).
        field: Проблемное поле.
    """

    def __init__(self, entity: str, field: str, reason: str) -> None:
        self.entity = entity
        self.field = field
        super().__init__(f"{entity}.{field}: {reason}")


class CorruptPersistedStateError(StickyCoreError):
    """Сохранённое значение не является валидным JSON нужной формы.

    Attributes:
        key: Ключ хранилища, который не удалось прочитать.
        reason: Текст исходной ошибки.
    """

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"Повреждённое значение по ключу '{key}': {reason}")
