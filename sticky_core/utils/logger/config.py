"""Конфигурация системы логирования.

Классы:
    LoggingConfig
        Pydantic-модель с загрузкой из environment variables (STICKY_LOG_*).
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseSettings):
    """Настройки логирования Sticky Core.

    Приоритет: явный параметр > environment variable > default.

    Attributes:
        level: Минимальный уровень для консоли.
        file_level: Минимальный уровень для файла.
        file: Путь к файлу логов (None = только консоль).
        json_context: Писать контекст в файл как JSON.
        show_path: Показывать путь к модулю в консоли.

    Environment Variables:
        STICKY_LOG_LEVEL, STICKY_LOG_FILE_LEVEL, STICKY_LOG_FILE,
        STICKY_LOG_JSON_CONTEXT, STICKY_LOG_SHOW_PATH.
    """

    level: LogLevel = Field(
        default="INFO",
        description="Минимальный уровень для консольного вывода",
    )

    file_level: LogLevel = Field(
        default="DEBUG",
        description="Минимальный уровень для файлового вывода",
    )

    file: Path | None = Field(
        default=None,
        description="Путь к файлу логов",
    )

    json_context: bool = Field(
        default=False,
        description="Контекст в файле как JSON вместо key=value",
    )

    show_path: bool = Field(
        default=False,
        description="Показывать путь к модулю в консоли",
    )

    model_config = SettingsConfigDict(
        env_prefix="STICKY_LOG_",
        env_file=None,
        extra="forbid",
        frozen=True,
    )
