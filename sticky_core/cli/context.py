"""CLI Context: контейнер зависимостей для команд.

Компоненты создаются лениво, чтобы --help не открывал базу.

Classes:
    CLIContext: Конфиг и ProjectStore с ленивой загрузкой.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from rich.console import Console

from sticky_core.cli.console import console as default_console
from sticky_core.config import StickyConfig, get_config
from sticky_core.core import ProjectStore


@dataclass
class CLIContext:
    """Контейнер зависимостей для CLI команд.

    Attributes:
        db_path: Override пути к БД из CLI.
        memory: Хранить состояние только в памяти процесса.
        log_level: Override уровня логирования из CLI.
        json_output: Режим JSON вывода (для скриптов).
        console: Rich Console для вывода.

    Example:
        >>> ctx = CLIContext(memory=True)
        >>> store = ctx.get_store()
    """

    db_path: Optional[Path] = None
    memory: bool = False
    log_level: Optional[str] = None
    json_output: bool = False
    console: Console = field(default_factory=lambda: default_console)

    _config: Optional[StickyConfig] = field(default=None, init=False, repr=False)
    _store: Optional[ProjectStore] = field(default=None, init=False, repr=False)
    _logging_configured: bool = field(default=False, init=False, repr=False)

    def get_config(self) -> StickyConfig:
        """Конфигурация с учётом CLI overrides."""
        if self._config is None:
            overrides = {}
            if self.db_path:
                overrides["db_path"] = self.db_path
            if self.memory:
                overrides["storage"] = "memory"
            if self.log_level:
                overrides["log_level"] = self.log_level

            self._config = get_config(**overrides)
        return self._config

    def get_store(self) -> ProjectStore:
        """Получить или создать ProjectStore."""
        if self._store is None:
            config = self.get_config()
            self._ensure_logging(config)

            from sticky_core.factory import build_store

            self._store = build_store(config)
        return self._store

    def _ensure_logging(self, config: StickyConfig) -> None:
        """Настройка логирования из конфига (один раз)."""
        if self._logging_configured:
            return

        from sticky_core.utils.logger import LoggingConfig, setup_logging

        level = config.log_level
        # JSON для скриптов: INFO-шум в консоль не пускаем
        if self.json_output and level in ("TRACE", "DEBUG", "INFO"):
            level = "WARNING"

        setup_logging(LoggingConfig(level=level, file=config.log_file))
        self._logging_configured = True


__all__ = ["CLIContext"]
