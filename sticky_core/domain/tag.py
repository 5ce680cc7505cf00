"""Модель тега и связанные константы.

Классы:
    Tag
        Именованная категория с цветом.

Константы:
    PERSONAL_TAG, PERSONAL_COLOR
        Постоянный тег по умолчанию и его цвет.
    ALL_TAG
        Виртуальный тег фильтра "все проекты" (никогда не хранится).
    PROTECTED_TAGS
        Имена, которые нельзя удалить.
    PASTEL_PALETTE
        Фиксированная палитра, исчерпываемая до генерации случайных цветов.
"""

from dataclasses import dataclass
from typing import Any

from sticky_core.domain.wire import require_field, require_mapping

PERSONAL_TAG: str = "Personal"
PERSONAL_COLOR: str = "#fff9c4"
ALL_TAG: str = "All"
PROTECTED_TAGS: frozenset[str] = frozenset({PERSONAL_TAG.casefold(), ALL_TAG.casefold()})

PASTEL_PALETTE: tuple[str, ...] = (
    "#f3d1b0",
    "#d0f4de",
    "#a9def9",
    "#e4c1f9",
    "#cfbaf0",
    "#b9fbc0",
)


def tag_key(name: str) -> str:
    """Ключ сравнения имён тегов (без учёта регистра)."""
    return name.casefold()


@dataclass
class Tag:
    """Тег.

    Attributes:
        name: Уникальное (без учёта регистра) имя.
        color: Цвет в hex или hsl().
    """

    name: str
    color: str

    @property
    def key(self) -> str:
        return tag_key(self.name)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "color": self.color}

    @classmethod
    def from_dict(cls, data: Any) -> "Tag":
        data = require_mapping(data, "Tag")
        return cls(
            name=require_field(data, "Tag", "name", str),
            color=require_field(data, "Tag", "color", str),
        )
