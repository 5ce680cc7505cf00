"""Сохранение и загрузка состояния через key-value хранилище.

Классы:
    PersistedState
        Прочитанное состояние (проекты и, если были сохранены, теги).
    PersistenceAdapter
        Сериализация проектов и тегов в две строки JSON.

Формат:
    todoProjects: [{"name", "uuid", "todos": [{"title", "description",
        "dueDate", "priority", "checklist", "notes", "tag", "uuid"}]}]
    todoTags: [{"name", "color"}]
"""

import json
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar

from sticky_core.domain import (
    CorruptPersistedStateError,
    Project,
    SchemaMismatchError,
    Tag,
)
from sticky_core.interfaces import BaseKeyValueStorage
from sticky_core.utils.logger import get_logger

logger = get_logger(__name__)

PROJECTS_KEY: str = "todoProjects"
TAGS_KEY: str = "todoTags"

T = TypeVar("T")


@dataclass
class PersistedState:
    """Результат load().

    Attributes:
        projects: Проекты (пустой список, если ключа нет).
        tags: Теги или None, если ключа нет (оставить теги по умолчанию).
    """

    projects: list[Project]
    tags: Optional[list[Tag]] = None


class PersistenceAdapter:
    """Переводит граф сущностей в строки хранилища и обратно.

    Каждая сущность сама знает свою форму (to_dict/from_dict), адаптер
    отвечает только за JSON и ключи.

    Attributes:
        storage: Носитель.
        projects_key: Ключ списка проектов.
        tags_key: Ключ списка тегов.
    """

    def __init__(
        self,
        storage: BaseKeyValueStorage,
        projects_key: str = PROJECTS_KEY,
        tags_key: str = TAGS_KEY,
    ) -> None:
        self.storage = storage
        self.projects_key = projects_key
        self.tags_key = tags_key

    def save(self, projects: list[Project], tags: list[Tag]) -> None:
        """Полностью перезаписывает оба ключа.

        Args:
            projects: Все проекты со всеми заметками.
            tags: Все теги.
        """
        start_time = time.perf_counter()

        projects_json = json.dumps([p.to_dict() for p in projects], ensure_ascii=False)
        tags_json = json.dumps([t.to_dict() for t in tags], ensure_ascii=False)

        self.storage.set_many({self.projects_key: projects_json, self.tags_key: tags_json})

        logger.debug(
            "State saved",
            projects=len(projects),
            tags=len(tags),
            latency_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        logger.trace("Saved projects payload", payload=projects_json)

    def load(self) -> PersistedState:
        """Читает оба ключа.

        Returns:
            PersistedState. Ids и все значения полей сохраняются как были.

        Raises:
            CorruptPersistedStateError: Невалидный JSON или форма данных.
        """
        projects = self.load_projects()
        tags = self.load_tags()

        logger.debug(
            "State loaded",
            projects=len(projects) if projects is not None else None,
            tags=len(tags) if tags is not None else None,
        )
        return PersistedState(projects=projects or [], tags=tags)

    def load_projects(self) -> Optional[list[Project]]:
        """Проекты или None, если ключа нет.

        Raises:
            CorruptPersistedStateError: Повреждено значение projects_key.
        """
        return self._read(self.projects_key, Project.from_dict)

    def load_tags(self) -> Optional[list[Tag]]:
        """Теги или None, если ключа нет.

        Raises:
            CorruptPersistedStateError: Повреждено значение tags_key.
        """
        return self._read(self.tags_key, Tag.from_dict)

    def _read(self, key: str, parse: Callable[[Any], T]) -> Optional[list[T]]:
        raw = self.storage.get(key)
        if raw is None:
            return None

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CorruptPersistedStateError(key, f"invalid JSON: {e}") from e

        if not isinstance(data, list):
            raise CorruptPersistedStateError(key, f"expected list, got {type(data).__name__}")

        try:
            return [parse(entry) for entry in data]
        except SchemaMismatchError as e:
            raise CorruptPersistedStateError(key, str(e)) from e
