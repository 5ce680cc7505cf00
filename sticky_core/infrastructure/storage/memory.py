"""Хранилище в памяти процесса.

Классы:
    InMemoryStorage
        dict-реализация BaseKeyValueStorage (тесты, режим --memory).
"""

from typing import Mapping, Optional

from sticky_core.interfaces import BaseKeyValueStorage


class InMemoryStorage(BaseKeyValueStorage):
    """Key-value хранилище на словаре.

    Живёт столько же, сколько объект. Несколько ProjectStore над одним
    экземпляром видят общее состояние, что удобно для проверки
    сохранения и загрузки без файлов.
    """

    def __init__(self, initial: Optional[Mapping[str, str]] = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def set_many(self, items: Mapping[str, str]) -> None:
        self._data.update(items)

    def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    def keys(self) -> list[str]:
        return list(self._data)
