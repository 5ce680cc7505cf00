"""Структурированный логгер с контекстом.

Классы:
    StickyLogger
        Адаптер над logging.Logger: kwargs-контекст, bind(), эмодзи модуля.
"""

from __future__ import annotations

import logging
from typing import Any

from .formatters import (
    LEVEL_EMOJI,
    _STANDARD_FIELDS,
    format_context_prefix,
    get_module_emoji,
)
from .levels import TRACE


class StickyLogger:
    """Логгер с привязываемым контекстом.

    Контекст передаётся именованными аргументами и попадает в
    LogRecord как extra. Ключи project_id/item_id дополнительно
    выводятся префиксом в самом сообщении.

    Attributes:
        name: Имя логгера.

    Example:
        >>> logger = StickyLogger("sticky_core.core.project_store")
        >>> log = logger.bind(project_id="3f2a...")
        >>> log.info("Project renamed", name="Groceries")
    """

    def __init__(self, name: str, context: dict[str, Any] | None = None) -> None:
        self.name = name
        self._logger = logging.getLogger(name)
        self._context: dict[str, Any] = context or {}

    def bind(self, **context: Any) -> StickyLogger:
        """Возвращает новый логгер с объединённым контекстом."""
        return StickyLogger(self.name, {**self._context, **context})

    def _log(self, level: int, msg: str, **context: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return

        merged = {**self._context, **context}

        # Ключи, совпадающие с полями LogRecord, logging не принимает
        extra = {
            (f"ctx_{key}" if key in _STANDARD_FIELDS else key): value
            for key, value in merged.items()
        }

        emoji = LEVEL_EMOJI.get(level, "") or get_module_emoji(self.name)
        formatted = f"{emoji} {format_context_prefix(merged)}{msg}"

        self._logger.log(level, formatted, extra=extra)

    def trace(self, msg: str, **context: Any) -> None:
        """TRACE (5): дампы сериализованного состояния."""
        self._log(TRACE, msg, **context)

    def debug(self, msg: str, **context: Any) -> None:
        """DEBUG (10): технические детали потока."""
        self._log(logging.DEBUG, msg, **context)

    def info(self, msg: str, **context: Any) -> None:
        """INFO (20): изменения состояния."""
        self._log(logging.INFO, msg, **context)

    def warning(self, msg: str, **context: Any) -> None:
        """WARNING (30): восстановимые проблемы (повреждённое хранилище и т.п.)."""
        self._log(logging.WARNING, msg, **context)
