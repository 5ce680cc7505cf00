"""Тесты для модуля логирования sticky_core.utils.logger.

Покрытие:
- levels.py: регистрация TRACE, level_from_name
- config.py: LoggingConfig и env переменные
- formatters.py: EMOJI_MAP, get_module_emoji, префикс контекста, FileFormatter
- logger.py: StickyLogger, bind(), конфликтующие ключи extra
- setup_logging: хендлеры и запись в файл
"""

import json
import logging
from pathlib import Path

import pytest
from rich.logging import RichHandler

from sticky_core.utils.logger import (
    ROOT_LOGGER_NAME,
    TRACE,
    FileFormatter,
    LoggingConfig,
    StickyLogger,
    get_logger,
    setup_logging,
)
from sticky_core.utils.logger.formatters import (
    CONTEXT_ID_KEYS,
    EMOJI_MAP,
    FALLBACK_EMOJI,
    format_context_prefix,
    get_module_emoji,
)
from sticky_core.utils.logger.levels import install_trace_level, level_from_name


@pytest.fixture
def restore_logging():
    """Возвращает дефолтную настройку логирования после теста."""
    yield
    setup_logging(LoggingConfig())


class TestLevels:
    """Тесты для levels.py."""

    def test_trace_level_value(self):
        assert TRACE == 5
        assert logging.getLevelName(TRACE) == "TRACE"

    def test_install_trace_level_idempotent(self):
        install_trace_level()
        install_trace_level()
        assert logging.getLevelName(TRACE) == "TRACE"

    @pytest.mark.parametrize(
        "name, expected",
        [("trace", TRACE), ("DEBUG", logging.DEBUG), ("warning", logging.WARNING)],
    )
    def test_level_from_name(self, name, expected):
        assert level_from_name(name) == expected

    def test_unknown_level_uses_default(self):
        assert level_from_name("LOUD", default=logging.ERROR) == logging.ERROR


class TestLoggingConfig:
    """Тесты для config.py."""

    def test_defaults(self):
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.file_level == "DEBUG"
        assert config.file is None
        assert config.json_context is False

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("STICKY_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("STICKY_LOG_JSON_CONTEXT", "true")
        config = LoggingConfig()
        assert config.level == "DEBUG"
        assert config.json_context is True

    def test_unknown_field_forbidden(self):
        with pytest.raises(ValueError):
            LoggingConfig(colour=True)


class TestFormatters:
    """Тесты для formatters.py."""

    def test_module_emoji(self):
        assert get_module_emoji("sticky_core.core.tag_registry") == EMOJI_MAP["tag_registry"]
        assert get_module_emoji("sticky_core.core.persistence") == EMOJI_MAP["persistence"]
        assert get_module_emoji("somewhere.else") == FALLBACK_EMOJI

    def test_context_prefix(self):
        assert CONTEXT_ID_KEYS == ("project_id", "item_id")
        assert format_context_prefix({"project_id": "p1", "item_id": "n1"}) == "[p1/n1] "
        assert format_context_prefix({"project_id": "p1", "tag": "Work"}) == "[p1] "
        assert format_context_prefix({}) == ""

    def _record(self, **extra):
        record = logging.LogRecord(
            "sticky_core.core.project_store", logging.INFO, __file__, 1,
            "Project added", None, None,
        )
        record.__dict__.update(extra)
        return record

    def test_file_formatter_key_value(self):
        line = FileFormatter().format(self._record(tag="Work"))
        parts = line.split(" | ")
        assert parts[1] == "PROJECT_STORE"
        assert parts[2] == "INFO"
        assert parts[3] == "Project added"
        assert "tag=Work" in parts[4]

    def test_file_formatter_json_context(self):
        line = FileFormatter(json_context=True).format(self._record(tag="Work", project_id="p1"))
        context = json.loads(line.split(" | ")[-1])
        assert context == {"tag": "Work"}


class TestStickyLogger:
    """Тесты для StickyLogger."""

    def test_get_logger_returns_sticky_logger(self):
        logger = get_logger("sticky_core.core.project_store")
        assert isinstance(logger, StickyLogger)
        assert logger.name == "sticky_core.core.project_store"

    def test_context_in_extra_and_prefix(self, sticky_caplog):
        logger = get_logger("sticky_core.core.project_store")
        logger.info("Project added", project_id="p1", tag="Work")

        record = sticky_caplog.records[-1]
        assert record.tag == "Work"
        assert record.project_id == "p1"
        assert "[p1] Project added" in record.getMessage()

    def test_bind_merges_context(self, sticky_caplog):
        logger = get_logger("sticky_core.core.project_store").bind(project_id="p1")
        logger.bind(item_id="n1").debug("Note item added")

        record = sticky_caplog.records[-1]
        assert record.levelno == logging.DEBUG
        assert "[p1/n1]" in record.getMessage()

    def test_reserved_keys_renamed(self, sticky_caplog):
        """Ключи, совпадающие с полями LogRecord, получают префикс ctx_."""
        get_logger("sticky_core.core.project_store").info("Renamed", name="Inbox")

        record = sticky_caplog.records[-1]
        assert record.ctx_name == "Inbox"
        assert record.name == "sticky_core.core.project_store"

    def test_trace_level(self, sticky_caplog):
        sticky_caplog.set_level(TRACE, logger=ROOT_LOGGER_NAME)
        get_logger("sticky_core.core.persistence").trace("Payload", size=3)
        assert sticky_caplog.records[-1].levelno == TRACE

    def test_disabled_level_skipped(self, sticky_caplog):
        sticky_caplog.set_level(logging.WARNING, logger=ROOT_LOGGER_NAME)
        get_logger("sticky_core.core.persistence").debug("Hidden")
        assert sticky_caplog.records == []


class TestSetupLogging:
    """Тесты для setup_logging."""

    def test_console_handler_only(self, restore_logging):
        setup_logging(LoggingConfig(level="WARNING"))
        root = logging.getLogger(ROOT_LOGGER_NAME)
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], RichHandler)
        assert root.level == logging.WARNING
        assert root.propagate is False

    def test_console_writes_to_stderr(self, restore_logging):
        """stdout остаётся для вывода CLI (JSON, таблицы)."""
        setup_logging(LoggingConfig())
        handler = logging.getLogger(ROOT_LOGGER_NAME).handlers[0]
        assert handler.console.stderr is True

    def test_file_handler(self, tmp_path, restore_logging):
        log_file = tmp_path / "logs" / "sticky.log"
        setup_logging(LoggingConfig(level="ERROR", file=log_file, file_level="DEBUG"))

        get_logger("sticky_core.core.tag_registry").debug("Tag rejected", tag="All")
        for handler in logging.getLogger(ROOT_LOGGER_NAME).handlers:
            handler.flush()

        content = Path(log_file).read_text(encoding="utf-8")
        assert "TAG_REGISTRY | DEBUG" in content
        assert "tag=All" in content
        assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.DEBUG
