"""Носители для key-value хранилища.

Модули:
    memory
        Хранилище в памяти процесса.
    peewee
        SQLite + Peewee.
"""

from sticky_core.infrastructure.storage.memory import InMemoryStorage
from sticky_core.infrastructure.storage.peewee import (
    PeeweeKeyValueStorage,
    init_peewee_database,
)

__all__ = [
    "InMemoryStorage",
    "PeeweeKeyValueStorage",
    "init_peewee_database",
]
