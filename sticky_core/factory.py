"""Сборка ProjectStore из конфигурации.

Функции:
    build_storage(config)
        Носитель по config.storage.
    build_store(config)
        Полностью собранный ProjectStore.
"""

from typing import Optional

from sticky_core.config import StickyConfig, get_config
from sticky_core.core import PersistenceAdapter, ProjectStore, TagRegistry
from sticky_core.infrastructure.storage import (
    InMemoryStorage,
    PeeweeKeyValueStorage,
    init_peewee_database,
)
from sticky_core.interfaces import BaseKeyValueStorage


def build_storage(config: StickyConfig) -> BaseKeyValueStorage:
    if config.storage == "memory":
        return InMemoryStorage()
    return PeeweeKeyValueStorage(init_peewee_database(config.db_path))


def build_store(
    config: Optional[StickyConfig] = None,
    storage: Optional[BaseKeyValueStorage] = None,
) -> ProjectStore:
    """Собирает хранилище проектов.

    Args:
        config: Конфигурация (по умолчанию get_config()).
        storage: Готовый носитель; если None, создаётся по config.storage.

    Returns:
        ProjectStore с загруженным состоянием.
    """
    config = config or get_config()
    persistence = PersistenceAdapter(
        storage or build_storage(config),
        projects_key=config.projects_key,
        tags_key=config.tags_key,
    )
    registry = TagRegistry(max_color_attempts=config.max_color_attempts)
    return ProjectStore(
        persistence,
        registry=registry,
        default_project_name=config.default_project_name,
    )
