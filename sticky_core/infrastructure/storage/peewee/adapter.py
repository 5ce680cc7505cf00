"""Реализация BaseKeyValueStorage для Peewee + SQLite.

Классы:
    PeeweeKeyValueStorage
        Key-value хранилище в таблице key_value.
"""

from datetime import datetime
from typing import Mapping, Optional

from peewee import SqliteDatabase

from sticky_core.infrastructure.storage.peewee.models import KeyValueModel
from sticky_core.interfaces import BaseKeyValueStorage
from sticky_core.utils.logger import get_logger

logger = get_logger(__name__)

_MODELS = [KeyValueModel]


class PeeweeKeyValueStorage(BaseKeyValueStorage):
    """Key-value хранилище поверх SQLite.

    Модель привязывается к своей БД на время каждой операции
    (bind_ctx), поэтому несколько хранилищ над разными файлами
    не мешают друг другу.

    Attributes:
        db: Экземпляр SqliteDatabase.
    """

    def __init__(self, database: SqliteDatabase):
        self.db = database
        with self.db.bind_ctx(_MODELS):
            self.db.create_tables(_MODELS, safe=True)
        logger.debug("PeeweeKeyValueStorage initialized", path=self.db.database)

    def get(self, key: str) -> Optional[str]:
        with self.db.bind_ctx(_MODELS):
            row = KeyValueModel.get_or_none(KeyValueModel.key == key)
        return row.value if row is not None else None

    def set(self, key: str, value: str) -> None:
        self.set_many({key: value})

    def set_many(self, items: Mapping[str, str]) -> None:
        """Записывает все значения в одной транзакции.

        Args:
            items: Словарь ключ -> значение.

        Raises:
            peewee.PeeweeException: Ошибка записи (транзакция откатывается).
        """
        now = datetime.now()
        rows = [
            {"key": key, "value": value, "updated_at": now}
            for key, value in items.items()
        ]
        if not rows:
            return

        with self.db.bind_ctx(_MODELS), self.db.atomic():
            KeyValueModel.insert_many(rows).on_conflict_replace().execute()

        logger.trace(
            "Values written",
            keys=list(items),
            size=sum(len(value) for value in items.values()),
        )

    def delete(self, key: str) -> bool:
        with self.db.bind_ctx(_MODELS):
            deleted = KeyValueModel.delete().where(KeyValueModel.key == key).execute()
        return deleted > 0

    def keys(self) -> list[str]:
        with self.db.bind_ctx(_MODELS):
            query = KeyValueModel.select(KeyValueModel.key).order_by(KeyValueModel.key)
            return [row.key for row in query]
