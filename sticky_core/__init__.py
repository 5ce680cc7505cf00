"""Sticky Core: ядро органайзера заметок-стикеров.

Архитектура:
    Domain: Сущности и их форма хранения (Project, NoteItem, Tag).
    Interfaces: Контракты (BaseKeyValueStorage).
    Infrastructure: Носители (InMemoryStorage, PeeweeKeyValueStorage).
    Core: TagRegistry, mutations, PersistenceAdapter, ProjectStore.

Пример:
    >>> from sticky_core import (
    ...     ProjectStore, PersistenceAdapter, PeeweeKeyValueStorage,
    ...     init_peewee_database, Project, NoteItem, ChecklistEntry,
    ... )
    >>>
    >>> db = init_peewee_database("sticky.db")
    >>> store = ProjectStore(PersistenceAdapter(PeeweeKeyValueStorage(db)))
    >>> store.add_tag("Work")
    >>>
    >>> project = Project("Groceries")
    >>> project.add_note_item(
    ...     NoteItem("Groceries", tag="Work", checklist=[ChecklistEntry("Milk")])
    ... )
    >>> store.add_project(project)
    >>> store.get_projects_by_tag("Work")
"""

__version__ = "0.1.0"

# Domain Layer
from sticky_core.domain import (
    ALL_TAG,
    PASTEL_PALETTE,
    PERSONAL_TAG,
    ChecklistEntry,
    CorruptPersistedStateError,
    NoteItem,
    Outcome,
    Priority,
    Project,
    SchemaMismatchError,
    StickyCoreError,
    Tag,
)

# Interfaces Layer
from sticky_core.interfaces import BaseKeyValueStorage

# Infrastructure Layer
from sticky_core.infrastructure.storage import (
    InMemoryStorage,
    PeeweeKeyValueStorage,
    init_peewee_database,
)

# Core Layer
from sticky_core.core import (
    ColorAssignment,
    PersistedState,
    PersistenceAdapter,
    ProjectStore,
    TagRegistry,
    mutations,
)

# Assembly
from sticky_core.factory import build_store

__all__ = [
    "__version__",
    # Domain
    "Project",
    "NoteItem",
    "ChecklistEntry",
    "Priority",
    "Tag",
    "Outcome",
    "StickyCoreError",
    "SchemaMismatchError",
    "CorruptPersistedStateError",
    "ALL_TAG",
    "PERSONAL_TAG",
    "PASTEL_PALETTE",
    # Interfaces
    "BaseKeyValueStorage",
    # Infrastructure
    "InMemoryStorage",
    "PeeweeKeyValueStorage",
    "init_peewee_database",
    # Core
    "TagRegistry",
    "ColorAssignment",
    "PersistenceAdapter",
    "PersistedState",
    "ProjectStore",
    "mutations",
    # Assembly
    "build_store",
]
