"""Модель проекта.

Классы:
    Project
        Контейнер с именем и упорядоченным списком заметок.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from sticky_core.domain.note_item import NoteItem, new_id
from sticky_core.domain.wire import optional_field, require_field, require_mapping


@dataclass
class Project:
    """Проект.

    Владеет своими заметками. Потребители используют только первую
    заметку (стикер), но список сохраняется целиком.

    Attributes:
        name: Имя проекта.
        note_items: Упорядоченные заметки.
        id: Идентификатор (генерируется при создании, сохраняется при загрузке).
    """

    name: str
    note_items: list[NoteItem] = field(default_factory=list)
    id: str = field(default_factory=new_id)

    def __repr__(self) -> str:
        return f"Project(id={self.id}, name='{self.name}', items={len(self.note_items)})"

    @property
    def sticky_note(self) -> Optional[NoteItem]:
        """Первая заметка проекта или None."""
        return self.note_items[0] if self.note_items else None

    def add_note_item(self, item: NoteItem) -> None:
        self.note_items.append(item)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "uuid": self.id,
            "todos": [item.to_dict() for item in self.note_items],
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Project":
        """Восстанавливает проект со всеми заметками.

        Raises:
            SchemaMismatchError: Форма или типы полей не совпадают.
        """
        data = require_mapping(data, "Project")
        todos = optional_field(data, "Project", "todos", list, [])
        return cls(
            name=require_field(data, "Project", "name", str),
            note_items=[NoteItem.from_dict(item) for item in todos],
            id=require_field(data, "Project", "uuid", str),
        )
