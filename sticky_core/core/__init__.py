"""Бизнес-логика (core layer).

Модули:
    tag_registry
        Реестр тегов и политика цветов.
    mutations
        Чистые преобразования списков.
    persistence
        Сохранение/загрузка через key-value хранилище.
    project_store
        Оркестратор: проекты, текущий проект, теги.
"""

from sticky_core.core import mutations
from sticky_core.core.persistence import (
    PROJECTS_KEY,
    TAGS_KEY,
    PersistedState,
    PersistenceAdapter,
)
from sticky_core.core.project_store import DEFAULT_PROJECT_NAME, ProjectStore
from sticky_core.core.tag_registry import ColorAssignment, TagRegistry

__all__ = [
    "mutations",
    "PersistenceAdapter",
    "PersistedState",
    "PROJECTS_KEY",
    "TAGS_KEY",
    "ProjectStore",
    "DEFAULT_PROJECT_NAME",
    "TagRegistry",
    "ColorAssignment",
]
