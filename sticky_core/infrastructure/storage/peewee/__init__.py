"""Реализация хранилища для Peewee + SQLite.

Модули:
    engine
        Инициализация SQLite.
    models
        Внутренние ORM модели.
    adapter
        Реализация BaseKeyValueStorage.
"""

from sticky_core.infrastructure.storage.peewee.adapter import PeeweeKeyValueStorage
from sticky_core.infrastructure.storage.peewee.engine import init_peewee_database

__all__ = [
    "PeeweeKeyValueStorage",
    "init_peewee_database",
]
