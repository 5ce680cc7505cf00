"""Единая конфигурация Sticky Core.

Загружает настройки из (в порядке приоритета):
1. Явные аргументы (CLI опции)
2. Environment variables (STICKY_*)
3. Файл .env
4. sticky.toml в текущей или родительских директориях
5. Default values

Классы:
    StickyConfig
        Pydantic Settings с поддержкой TOML и env variables.

Функции:
    get_config
        Получить конфигурацию с возможными override'ами.
    reset_config
        Сбросить кэшированную конфигурацию (для тестов).
    find_config_file
        Найти sticky.toml вверх по дереву директорий.

Example:
    >>> from sticky_core.config import get_config
    >>> config = get_config(storage="memory", log_level="DEBUG")
    >>> config.projects_key
    'todoProjects'
"""

import tomllib
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import Field, field_validator
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from sticky_core.utils.logger import get_logger
from sticky_core.utils.logger.config import LogLevel

logger = get_logger(__name__)

CONFIG_FILE_NAME: str = "sticky.toml"
StorageType = Literal["sqlite", "memory"]

# Секции TOML -> поля конфига
_TOML_MAPPING: dict[tuple[str, str], str] = {
    ("storage", "type"): "storage",
    ("storage", "path"): "db_path",
    ("storage", "projects_key"): "projects_key",
    ("storage", "tags_key"): "tags_key",
    ("store", "default_project"): "default_project_name",
    ("store", "max_color_attempts"): "max_color_attempts",
    ("logging", "level"): "log_level",
    ("logging", "file"): "log_file",
}


def find_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Ищет sticky.toml в start_dir и выше (не более 10 уровней).

    Args:
        start_dir: Начальная директория (по умолчанию cwd).

    Returns:
        Путь к файлу или None.
    """
    current = (start_dir or Path.cwd()).resolve()
    for _ in range(10):
        candidate = current / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        if current.parent == current:
            break
        current = current.parent
    return None


def load_toml(path: Path) -> dict[str, Any]:
    """Читает sticky.toml и выравнивает секции в плоский словарь.

    Поддерживаются и секции ([storage] path = ...), и плоские ключи
    (db_path = ...). Нечитаемый файл логируется и игнорируется.
    """
    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to load TOML", path=str(path), error=str(e))
        return {}

    flat: dict[str, Any] = {}
    for (section, key), field_name in _TOML_MAPPING.items():
        section_data = raw.get(section)
        if isinstance(section_data, dict) and key in section_data:
            flat[field_name] = section_data[key]

    for field_name in StickyConfig.model_fields:
        if field_name in raw and not isinstance(raw[field_name], dict):
            flat[field_name] = raw[field_name]

    return flat


class TomlFileSource(PydanticBaseSettingsSource):
    """Источник настроек из sticky.toml (ищется от cwd вверх)."""

    def get_field_value(self, field: FieldInfo, field_name: str) -> tuple[Any, str, bool]:
        # Значения отдаются целиком в __call__
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        toml_path = find_config_file()
        if toml_path is None:
            return {}
        logger.debug("Loaded config from TOML", path=str(toml_path))
        return load_toml(toml_path)


class StickyConfig(BaseSettings):
    """Конфигурация Sticky Core.

    Attributes:
        storage: Носитель: sqlite (файл) или memory (до конца процесса).
        db_path: Путь к SQLite базе.
        projects_key: Ключ хранилища для проектов.
        tags_key: Ключ хранилища для тегов.
        default_project_name: Имя проекта для пустой коллекции.
        max_color_attempts: Лимит попыток подбора случайного цвета тега.
        log_level: Уровень логирования консоли.
        log_file: Путь к файлу логов.

    Environment Variables:
        STICKY_STORAGE, STICKY_DB_PATH, STICKY_PROJECTS_KEY, STICKY_TAGS_KEY,
        STICKY_DEFAULT_PROJECT_NAME, STICKY_MAX_COLOR_ATTEMPTS,
        STICKY_LOG_LEVEL, STICKY_LOG_FILE.
    """

    # === Storage ===
    storage: StorageType = Field(
        default="sqlite",
        description="Тип носителя",
    )

    db_path: Path = Field(
        default=Path("sticky.db"),
        description="Путь к SQLite базе данных",
    )

    projects_key: str = Field(
        default="todoProjects",
        min_length=1,
        description="Ключ для списка проектов",
    )

    tags_key: str = Field(
        default="todoTags",
        min_length=1,
        description="Ключ для списка тегов",
    )

    # === Store ===
    default_project_name: str = Field(
        default="Home",
        min_length=1,
        description="Имя проекта, создаваемого для пустой коллекции",
    )

    max_color_attempts: int = Field(
        default=20,
        ge=1,
        le=100,
        description="Попытки подбора незанятого случайного цвета",
    )

    # === Logging ===
    log_level: LogLevel = Field(
        default="INFO",
        description="Уровень логирования",
    )

    log_file: Optional[Path] = Field(
        default=None,
        description="Путь к файлу логов (None = только консоль)",
    )

    @field_validator("db_path", mode="before")
    @classmethod
    def validate_db_path(cls, v: Any) -> Path:
        if v is None or v == "":
            return Path("sticky.db")
        return Path(v).expanduser()

    @field_validator("log_file", mode="before")
    @classmethod
    def validate_log_file(cls, v: Any) -> Optional[Path]:
        if v is None or v == "":
            return None
        return Path(v).expanduser()

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    model_config = SettingsConfigDict(
        env_prefix="STICKY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """sticky.toml подключается последним источником (низший приоритет)."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
            TomlFileSource(settings_cls),
        )

    def to_toml_dict(self) -> dict[str, Any]:
        """Вложенная структура для записи в sticky.toml."""
        return {
            "storage": {
                "type": self.storage,
                "path": str(self.db_path),
                "projects_key": self.projects_key,
                "tags_key": self.tags_key,
            },
            "store": {
                "default_project": self.default_project_name,
                "max_color_attempts": self.max_color_attempts,
            },
            "logging": {
                "level": self.log_level,
                **({"file": str(self.log_file)} if self.log_file else {}),
            },
        }


_config: Optional[StickyConfig] = None


def get_config(**overrides: Any) -> StickyConfig:
    """Возвращает конфигурацию.

    Без overrides возвращает закэшированный экземпляр; с overrides
    всегда создаёт новый.

    Args:
        **overrides: Явные значения (например, из CLI).

    Returns:
        StickyConfig.
    """
    global _config

    if overrides or _config is None:
        _config = StickyConfig(**overrides)
    return _config


def reset_config() -> None:
    """Сбрасывает кэш конфигурации (для тестов)."""
    global _config
    _config = None


__all__ = [
    "StickyConfig",
    "StorageType",
    "get_config",
    "reset_config",
    "find_config_file",
    "load_toml",
    "CONFIG_FILE_NAME",
]
