"""Форматирование записей лога.

Функции:
    get_module_emoji(logger_name)
        Эмодзи модуля по имени логгера.
    format_context_prefix(context)
        Префикс вида "[project-id/item-id] ".
    format_extra_context(record)
        Пользовательский контекст записи без стандартных полей.

Классы:
    FileFormatter
        Подробный однострочный формат для файла логов.
"""

import json
import logging
from datetime import datetime
from typing import Any, Mapping

from .levels import TRACE

# Сопоставление частей имени модуля и эмодзи
EMOJI_MAP: dict[str, str] = {
    "project_store": "🗂️",
    "store": "🗂️",
    "tag_registry": "🏷️",
    "tags": "🏷️",
    "mutations": "✏️",
    "persistence": "💾",
    "storage": "💾",
    "memory": "💾",
    "peewee": "🗄️",
    "engine": "🗄️",
    "adapter": "🗄️",
    "models": "🗄️",
    "domain": "📝",
    "config": "⚙️",
    "cli": "🖥️",
    "commands": "🖥️",
}

LEVEL_EMOJI: dict[int, str] = {
    logging.CRITICAL: "💀",
    logging.ERROR: "❌",
    logging.WARNING: "⚠️",
    logging.INFO: "",  # для INFO берём эмодзи модуля
    logging.DEBUG: "🔧",
    TRACE: "🔬",
}

FALLBACK_EMOJI: str = "📌"

# Ключи контекста, которые выводятся в префиксе сообщения
CONTEXT_ID_KEYS: tuple[str, ...] = (
    "project_id",
    "item_id",
)

_STANDARD_FIELDS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys()
) | {"message", "asctime", "taskName"}


def get_module_emoji(logger_name: str) -> str:
    """Ищет эмодзи по частям имени логгера, начиная с самой специфичной."""
    for part in reversed(logger_name.lower().split(".")):
        if part in EMOJI_MAP:
            return EMOJI_MAP[part]
    return FALLBACK_EMOJI


def format_context_prefix(context: Mapping[str, Any]) -> str:
    """Собирает префикс из ключей CONTEXT_ID_KEYS.

    Args:
        context: Контекст сообщения (kwargs логгера или атрибуты записи).

    Returns:
        Строка "[a/b] " или пустая строка.
    """
    ids = [str(context[key]) for key in CONTEXT_ID_KEYS if context.get(key)]
    return f"[{'/'.join(ids)}] " if ids else ""


def format_extra_context(record: logging.LogRecord) -> dict[str, Any]:
    """Возвращает пользовательский контекст записи.

    Args:
        record: Запись лога.

    Returns:
        Словарь без стандартных полей LogRecord и без ключей префикса.
    """
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _STANDARD_FIELDS
        and key not in CONTEXT_ID_KEYS
        and not key.startswith("_")
    }


class FileFormatter(logging.Formatter):
    """Формат для файла логов.

    2026-01-05 14:20:02 | PROJECT_STORE | INFO | 🗂️ [id] Message | key=value
    """

    def __init__(self, json_context: bool = False) -> None:
        super().__init__()
        self.json_context = json_context

    def format(self, record: logging.LogRecord) -> str:
        time_str = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        module = record.name.split(".")[-1].upper()

        parts = [time_str, module, record.levelname, record.getMessage()]

        extra = format_extra_context(record)
        if extra:
            if self.json_context:
                parts.append(json.dumps(extra, ensure_ascii=False, default=str))
            else:
                parts.append(" ".join(f"{k}={v}" for k, v in extra.items()))

        result = " | ".join(parts)
        if record.exc_info:
            result += "\n" + self.formatException(record.exc_info)
        return result
