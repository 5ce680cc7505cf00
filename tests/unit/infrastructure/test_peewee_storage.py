"""Тесты носителей key-value: Peewee/SQLite и память."""

import pytest

from sticky_core.infrastructure.storage import (
    InMemoryStorage,
    PeeweeKeyValueStorage,
    init_peewee_database,
)


@pytest.fixture(params=["memory", "sqlite"])
def storage(request, tmp_path):
    """Оба носителя с одинаковым контрактом."""
    if request.param == "memory":
        yield InMemoryStorage()
        return
    db = init_peewee_database(tmp_path / "kv.db")
    yield PeeweeKeyValueStorage(db)
    db.close()


class TestKeyValueContract:
    """Общий контракт BaseKeyValueStorage."""

    def test_missing_key_is_none(self, storage):
        assert storage.get("absent") is None

    def test_set_and_overwrite(self, storage):
        storage.set("k", "one")
        storage.set("k", "two")
        assert storage.get("k") == "two"
        assert storage.keys() == ["k"]

    def test_set_many(self, storage):
        storage.set_many({"a": "1", "b": "2"})
        assert storage.get("a") == "1"
        assert storage.get("b") == "2"
        assert sorted(storage.keys()) == ["a", "b"]

    def test_delete(self, storage):
        storage.set("k", "v")
        assert storage.delete("k") is True
        assert storage.get("k") is None
        assert storage.delete("k") is False

    def test_unicode_values(self, storage):
        storage.set("k", '[{"name": "Покупки 🛒"}]')
        assert storage.get("k") == '[{"name": "Покупки 🛒"}]'


class TestPeeweeStorage:
    """Особенности SQLite носителя."""

    def test_values_survive_reopen(self, tmp_path):
        path = tmp_path / "nested" / "sticky.db"
        db = init_peewee_database(path)
        PeeweeKeyValueStorage(db).set_many({"todoProjects": "[]", "todoTags": "[]"})
        db.close()

        assert path.exists()
        reopened = init_peewee_database(path)
        storage = PeeweeKeyValueStorage(reopened)
        assert storage.get("todoProjects") == "[]"
        assert storage.keys() == ["todoProjects", "todoTags"]
        reopened.close()

    def test_two_databases_isolated(self, tmp_path):
        """Хранилища над разными файлами не делят модель."""
        db_a = init_peewee_database(tmp_path / "a.db")
        db_b = init_peewee_database(tmp_path / "b.db")
        a, b = PeeweeKeyValueStorage(db_a), PeeweeKeyValueStorage(db_b)

        a.set("k", "from-a")
        assert b.get("k") is None
        b.set("k", "from-b")
        assert a.get("k") == "from-a"

        db_a.close()
        db_b.close()

    def test_in_memory_database(self):
        storage = PeeweeKeyValueStorage(init_peewee_database(":memory:"))
        storage.set("k", "v")
        assert storage.get("k") == "v"
