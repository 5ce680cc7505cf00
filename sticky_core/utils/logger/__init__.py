"""Логирование Sticky Core.

Функции:
    get_logger(name: str) -> StickyLogger
        Логгер для модуля (ленивая инициализация с дефолтами).
    setup_logging(config: LoggingConfig | None = None) -> None
        Настроить хендлеры корневого логгера sticky_core.

Классы:
    StickyLogger
        Адаптер с kwargs-контекстом и bind().
    LoggingConfig
        Настройки (pydantic-settings, STICKY_LOG_*).

Константы:
    TRACE: int
        Уровень 5, ниже DEBUG.

Example:
    >>> from sticky_core.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Tag added", tag="Work", color="#f3d1b0")
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from .config import LoggingConfig
from .formatters import FileFormatter
from .levels import TRACE, install_trace_level, level_from_name
from .logger import StickyLogger

install_trace_level()

ROOT_LOGGER_NAME: str = "sticky_core"

_logging_configured: bool = False


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Настраивает логирование пакета.

    Консоль: RichHandler в stderr (stdout остаётся для вывода CLI).
    Файл (если задан): FileHandler + FileFormatter.
    Повторный вызов заменяет ранее установленные хендлеры.

    Args:
        config: Настройки. Если None, читаются из окружения.
    """
    global _logging_configured

    config = config or LoggingConfig()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_level = level_from_name(config.level)
    file_level = level_from_name(config.file_level)

    # markup=False: префикс [project-id] не должен разбираться как rich-стиль
    console_handler = RichHandler(
        console=Console(stderr=True),
        level=console_level,
        show_time=True,
        show_level=False,
        show_path=config.show_path,
        markup=False,
        rich_tracebacks=True,
    )
    root_logger.addHandler(console_handler)

    min_level = console_level
    if config.file:
        config.file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(config.file, mode="a", encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(FileFormatter(json_context=config.json_context))
        root_logger.addHandler(file_handler)
        min_level = min(min_level, file_level)

    root_logger.setLevel(min_level)
    root_logger.propagate = False

    _logging_configured = True


def get_logger(name: str) -> StickyLogger:
    """Возвращает логгер для модуля.

    Args:
        name: Имя модуля (обычно __name__).

    Returns:
        StickyLogger.
    """
    if not _logging_configured:
        setup_logging()
    return StickyLogger(name)


__all__ = [
    "TRACE",
    "get_logger",
    "setup_logging",
    "StickyLogger",
    "LoggingConfig",
    "FileFormatter",
    "ROOT_LOGGER_NAME",
]
