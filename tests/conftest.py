"""
Конфигурация pytest для Sticky Core.

Определяет фикстуры для:
- Носителей (память, временный SQLite файл)
- PersistenceAdapter и ProjectStore поверх них
- Изоляции конфигурации и перехвата логов
"""

import logging
import os
import random

import pytest

from sticky_core.config import reset_config
from sticky_core.core import PersistenceAdapter, ProjectStore, TagRegistry
from sticky_core.infrastructure.storage import (
    InMemoryStorage,
    PeeweeKeyValueStorage,
    init_peewee_database,
)
from sticky_core.utils.logger import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Чистая конфигурация: без STICKY_* из окружения и без sticky.toml/.env в cwd."""
    for name in list(os.environ):
        if name.upper().startswith("STICKY_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def memory_storage():
    """Пустое хранилище в памяти."""
    return InMemoryStorage()


@pytest.fixture
def db_path(tmp_path):
    """Путь к временному файлу SQLite."""
    return tmp_path / "sticky.db"


@pytest.fixture
def sqlite_storage(db_path):
    """Key-value хранилище во временном SQLite файле."""
    db = init_peewee_database(db_path)
    yield PeeweeKeyValueStorage(db)
    db.close()


@pytest.fixture
def persistence(memory_storage):
    return PersistenceAdapter(memory_storage)


@pytest.fixture
def rng():
    """Детерминированный генератор для подбора цветов."""
    return random.Random(42)


@pytest.fixture
def store(persistence, rng):
    """ProjectStore над пустым хранилищем (содержит проект "Home")."""
    return ProjectStore(persistence, registry=TagRegistry(rng=rng))


@pytest.fixture
def sticky_caplog(caplog):
    """caplog, подключённый к логгеру sticky_core (у него propagate=False)."""
    sticky_logger = logging.getLogger(ROOT_LOGGER_NAME)
    sticky_logger.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger=ROOT_LOGGER_NAME)
    yield caplog
    sticky_logger.removeHandler(caplog.handler)
