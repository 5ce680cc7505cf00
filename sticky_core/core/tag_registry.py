"""Реестр тегов и политика назначения цветов.

Классы:
    ColorAssignment
        Выбранный цвет и его происхождение.
    TagRegistry
        Набор тегов с уникальностью имён без учёта регистра.
"""

import random
from dataclasses import dataclass
from typing import Iterable, Literal, Optional

from sticky_core.domain import (
    ALL_TAG,
    PASTEL_PALETTE,
    PERSONAL_COLOR,
    PERSONAL_TAG,
    PROTECTED_TAGS,
    Outcome,
    StickyCoreError,
    Tag,
    tag_key,
)
from sticky_core.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_COLOR_ATTEMPTS: int = 20

# Пастель: умеренная насыщенность, высокая светлота
PASTEL_SATURATION: int = 70
PASTEL_LIGHTNESS: int = 90


def pastel_hsl(hue: int) -> str:
    return f"hsl({hue}, {PASTEL_SATURATION}%, {PASTEL_LIGHTNESS}%)"


@dataclass(frozen=True)
class ColorAssignment:
    """Результат подбора цвета.

    Attributes:
        color: Выбранный цвет.
        source: "palette" или "random".
        attempts: Число сгенерированных случайных цветов (0 для палитры).
        collided: True, если после всех попыток принят уже занятый цвет.
    """

    color: str
    source: Literal["palette", "random"]
    attempts: int = 0
    collided: bool = False


class TagRegistry:
    """Владеет набором тегов и назначением цветов.

    Тег "Personal" создаётся при инициализации и не удаляется.
    "All" это виртуальный фильтр, в реестре не хранится.

    Attributes:
        palette: Упорядоченная палитра предпочтительных цветов.
        max_color_attempts: Лимит попыток генерации случайного цвета.

    Example:
        >>> registry = TagRegistry()
        >>> registry.add_tag("Work")
        <Outcome.APPLIED: 'applied'>
        >>> registry.get_color("work")
        '#f3d1b0'
    """

    def __init__(
        self,
        palette: Iterable[str] = PASTEL_PALETTE,
        max_color_attempts: int = DEFAULT_MAX_COLOR_ATTEMPTS,
        rng: Optional[random.Random] = None,
    ) -> None:
        if max_color_attempts < 1:
            raise ValueError("max_color_attempts must be >= 1")

        self.palette: tuple[str, ...] = tuple(palette)
        self.max_color_attempts = max_color_attempts
        self._rng = rng or random.Random()
        self._tags: list[Tag] = [Tag(PERSONAL_TAG, PERSONAL_COLOR)]

    # === Чтение ===

    def get_all_tags(self) -> list[Tag]:
        """Живой список тегов (не изменять напрямую)."""
        return self._tags

    def find(self, name: str) -> Optional[Tag]:
        key = tag_key(name)
        for tag in self._tags:
            if tag.key == key:
                return tag
        return None

    def has_tag(self, name: str) -> bool:
        return self.find(name) is not None

    @property
    def personal(self) -> Tag:
        tag = self.find(PERSONAL_TAG)
        if tag is None:
            raise StickyCoreError(f"Tag registry lost the '{PERSONAL_TAG}' tag")
        return tag

    def get_color(self, name: str) -> str:
        """Цвет тега; для неизвестных имён (включая "All") берётся цвет "Personal"."""
        tag = self.find(name)
        return tag.color if tag is not None else self.personal.color

    def resolve_tag(self, name: str) -> str:
        """Каноническое имя существующего тега или "Personal".

        Запасной вариант для слабых ссылок, которые пережили
        удаление тега без каскада (например, правка данных вручную).
        """
        tag = self.find(name) if name else None
        return tag.name if tag is not None else self.personal.name

    # === Цвета ===

    def get_next_available_color(self) -> ColorAssignment:
        """Подбирает цвет для нового тега.

        Сначала первый свободный цвет палитры. Если палитра исчерпана,
        генерирует hsl(H, 70%, 90%) со случайным H и повторяет при
        совпадении с занятым цветом. После max_color_attempts попыток
        принимает последний вариант даже при совпадении (collided=True).

        Returns:
            ColorAssignment с цветом и признаками происхождения.
        """
        used = {tag.color for tag in self._tags}

        for color in self.palette:
            if color not in used:
                return ColorAssignment(color=color, source="palette")

        color = ""
        for attempt in range(1, self.max_color_attempts + 1):
            color = pastel_hsl(self._rng.randrange(360))
            if color not in used:
                return ColorAssignment(color=color, source="random", attempts=attempt)

        return ColorAssignment(
            color=color,
            source="random",
            attempts=self.max_color_attempts,
            collided=True,
        )

    # === Мутации ===

    def add_tag(self, name: str) -> Outcome:
        """Добавляет тег с автоматическим цветом.

        Args:
            name: Имя тега (пробелы по краям обрезаются).

        Returns:
            APPLIED: добавлен. REJECTED: пустое имя, "All" или дубликат
            без учёта регистра.
        """
        clean = name.strip()
        if not clean:
            logger.debug("Tag rejected: empty name")
            return Outcome.REJECTED
        if tag_key(clean) == tag_key(ALL_TAG):
            logger.debug("Tag rejected: reserved name", tag=clean)
            return Outcome.REJECTED

        existing = self.find(clean)
        if existing is not None:
            logger.debug("Tag rejected: duplicate", tag=clean, existing=existing.name)
            return Outcome.REJECTED

        assignment = self.get_next_available_color()
        if assignment.collided:
            logger.warning(
                "Color collision accepted after retries",
                tag=clean,
                color=assignment.color,
                attempts=assignment.attempts,
            )

        self._tags.append(Tag(clean, assignment.color))
        logger.info("Tag added", tag=clean, color=assignment.color, source=assignment.source)
        return Outcome.APPLIED

    def delete_tag(self, name: str) -> Outcome:
        """Удаляет тег из набора (без каскада по заметкам).

        Каскадное переназначение заметок выполняет ProjectStore.delete_tag.

        Returns:
            APPLIED: удалён. REJECTED: защищённое имя. NOT_FOUND: нет такого.
        """
        if tag_key(name) in PROTECTED_TAGS:
            logger.debug("Tag deletion rejected: protected", tag=name)
            return Outcome.REJECTED

        tag = self.find(name)
        if tag is None:
            return Outcome.NOT_FOUND

        self._tags.remove(tag)
        logger.info("Tag deleted", tag=tag.name)
        return Outcome.APPLIED

    def replace_tags(self, tags: Iterable[Tag]) -> None:
        """Полностью заменяет набор (при загрузке из хранилища).

        Дубликаты без учёта регистра и "All" отбрасываются. Если в
        наборе нет "Personal", он добавляется в начало с цветом по
        умолчанию.
        """
        replaced: list[Tag] = []
        seen: set[str] = set()
        for tag in tags:
            if tag.key in seen or tag.key == tag_key(ALL_TAG):
                logger.warning("Skipping invalid stored tag", tag=tag.name)
                continue
            seen.add(tag.key)
            replaced.append(Tag(tag.name, tag.color))

        if tag_key(PERSONAL_TAG) not in seen:
            logger.warning("Stored tags lack Personal, restoring default")
            replaced.insert(0, Tag(PERSONAL_TAG, PERSONAL_COLOR))

        self._tags = replaced
