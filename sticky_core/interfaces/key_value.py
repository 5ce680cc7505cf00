"""Интерфейс долговременного key-value хранилища.

Классы:
    BaseKeyValueStorage
        ABC для носителей, в которые PersistenceAdapter пишет строки.
"""

from abc import ABC, abstractmethod
from typing import Mapping, Optional


class BaseKeyValueStorage(ABC):
    """Абстрактное строковое key-value хранилище.

    Определяет контракт для всех носителей (память, SQLite через Peewee).
    Значения всегда строки; сериализацию выполняет вызывающий.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Возвращает значение или None, если ключа нет."""
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Записывает значение, полностью заменяя предыдущее."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Удаляет ключ.

        Returns:
            True, если ключ существовал.
        """
        raise NotImplementedError

    @abstractmethod
    def keys(self) -> list[str]:
        raise NotImplementedError

    def set_many(self, items: Mapping[str, str]) -> None:
        """Записывает несколько значений.

        Реализация по умолчанию пишет по одному ключу; носители с
        транзакциями переопределяют метод и пишут всё атомарно.

        Args:
            items: Словарь ключ -> значение.
        """
        for key, value in items.items():
            self.set(key, value)
