"""Доменный слой: сущности и их форма хранения.

Классы:
    Project
        Проект с упорядоченным списком заметок.
    NoteItem
        Заметка (стикер).
    ChecklistEntry
        Пункт чек-листа.
    Priority
        Приоритет заметки.
    Tag
        Тег с цветом.
    Outcome
        Результат операции.
    StickyCoreError, SchemaMismatchError, CorruptPersistedStateError
        Исключения.
"""

from sticky_core.domain.errors import (
    CorruptPersistedStateError,
    Outcome,
    SchemaMismatchError,
    StickyCoreError,
)
from sticky_core.domain.note_item import (
    ChecklistEntry,
    NoteItem,
    Priority,
    new_id,
    parse_checklist,
)
from sticky_core.domain.project import Project
from sticky_core.domain.tag import (
    ALL_TAG,
    PASTEL_PALETTE,
    PERSONAL_COLOR,
    PERSONAL_TAG,
    PROTECTED_TAGS,
    Tag,
    tag_key,
)

__all__ = [
    "Project",
    "NoteItem",
    "ChecklistEntry",
    "Priority",
    "Tag",
    "Outcome",
    "StickyCoreError",
    "SchemaMismatchError",
    "CorruptPersistedStateError",
    "new_id",
    "parse_checklist",
    "tag_key",
    "ALL_TAG",
    "PASTEL_PALETTE",
    "PERSONAL_COLOR",
    "PERSONAL_TAG",
    "PROTECTED_TAGS",
]
