"""Модель заметки (стикера) и пункта чек-листа.

Классы:
    Priority
        Перечисление приоритетов.
    ChecklistEntry
        Пункт чек-листа.
    NoteItem
        Заметка проекта: заголовок, описание, срок, приоритет, чек-лист, тег.
"""

import uuid
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Optional

from sticky_core.domain.errors import SchemaMismatchError
from sticky_core.domain.tag import PERSONAL_TAG
from sticky_core.domain.wire import optional_field, require_field, require_mapping


def new_id() -> str:
    """Новый непрозрачный идентификатор (uuid4)."""
    return str(uuid.uuid4())


class Priority(str, Enum):
    """Приоритет заметки.

    Attributes:
        LOW: Низкий.
        MEDIUM: Средний (по умолчанию).
        HIGH: Высокий.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass
class ChecklistEntry:
    """Пункт чек-листа.

    Attributes:
        text: Текст пункта.
        completed: Отмечен ли пункт.
    """

    text: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "completed": self.completed}

    @classmethod
    def from_dict(cls, data: Any) -> "ChecklistEntry":
        data = require_mapping(data, "ChecklistEntry")
        return cls(
            text=require_field(data, "ChecklistEntry", "text", str),
            completed=optional_field(data, "ChecklistEntry", "completed", bool, False),
        )


@dataclass
class NoteItem:
    """Заметка (стикер) внутри проекта.

    Поле tag хранит слабую ссылку на тег по имени: целостность при записи не
    проверяется, имя разрешается через реестр при чтении.

    Attributes:
        title: Заголовок.
        description: Описание.
        due_date: Срок (None, если не задан).
        priority: Приоритет.
        checklist: Упорядоченный чек-лист.
        tag: Имя тега.
        notes: Свободный текст.
        id: Идентификатор (генерируется при создании, сохраняется при загрузке).
    """

    title: str
    description: str = ""
    due_date: Optional[date] = None
    priority: Priority = Priority.MEDIUM
    checklist: list[ChecklistEntry] = field(default_factory=list)
    tag: str = PERSONAL_TAG
    notes: str = ""
    id: str = field(default_factory=new_id)

    def __post_init__(self) -> None:
        if isinstance(self.priority, str) and not isinstance(self.priority, Priority):
            self.priority = Priority(self.priority)

    def __repr__(self) -> str:
        done = sum(1 for entry in self.checklist if entry.completed)
        return (
            f"NoteItem(id={self.id}, title='{self.title}', tag='{self.tag}', "
            f"priority={self.priority.value}, checklist={done}/{len(self.checklist)})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Форма для хранения (ключи совместимы с сохранёнными данными)."""
        return {
            "title": self.title,
            "description": self.description,
            "dueDate": self.due_date.isoformat() if self.due_date else None,
            "priority": self.priority.value,
            "checklist": [entry.to_dict() for entry in self.checklist],
            "notes": self.notes,
            "tag": self.tag,
            "uuid": self.id,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "NoteItem":
        """Восстанавливает заметку, сохраняя исходный id.

        Пустая строка в dueDate (так форма сохраняла незаполненный срок)
        читается как None и при следующем сохранении записывается как null.

        Raises:
            SchemaMismatchError: Форма или типы полей не совпадают.
        """
        data = require_mapping(data, "NoteItem")

        raw_due = optional_field(data, "NoteItem", "dueDate", str, None)
        due_date = None
        if raw_due:
            try:
                due_date = date.fromisoformat(raw_due)
            except ValueError as e:
                raise SchemaMismatchError("NoteItem", "dueDate", str(e)) from e

        raw_priority = optional_field(data, "NoteItem", "priority", str, Priority.MEDIUM.value)
        try:
            priority = Priority(raw_priority)
        except ValueError as e:
            raise SchemaMismatchError("NoteItem", "priority", str(e)) from e

        checklist = optional_field(data, "NoteItem", "checklist", list, [])

        return cls(
            title=require_field(data, "NoteItem", "title", str),
            description=optional_field(data, "NoteItem", "description", str, ""),
            due_date=due_date,
            priority=priority,
            checklist=[ChecklistEntry.from_dict(entry) for entry in checklist],
            tag=optional_field(data, "NoteItem", "tag", str, PERSONAL_TAG),
            notes=optional_field(data, "NoteItem", "notes", str, ""),
            id=require_field(data, "NoteItem", "uuid", str),
        )


def parse_checklist(raw: str, separator: str = ",") -> list[ChecklistEntry]:
    """Разбирает строку "Молоко, Хлеб" в список невыполненных пунктов.

    Пустые элементы отбрасываются, пробелы по краям обрезаются.
    """
    return [
        ChecklistEntry(text=part.strip())
        for part in raw.split(separator)
        if part.strip()
    ]
