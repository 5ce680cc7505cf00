"""Хранилище проектов: единственная точка входа для UI.

Классы:
    ProjectStore
        Коллекция проектов, указатель текущего проекта и реестр тегов.
"""

from typing import Callable, Optional, TypeVar

from sticky_core.core import mutations
from sticky_core.core.persistence import PersistenceAdapter, PersistedState
from sticky_core.core.tag_registry import TagRegistry
from sticky_core.domain import (
    ALL_TAG,
    PERSONAL_TAG,
    CorruptPersistedStateError,
    NoteItem,
    Outcome,
    Project,
    Tag,
    tag_key,
)
from sticky_core.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_PROJECT_NAME: str = "Home"

T = TypeVar("T")


class ProjectStore:
    """Источник истины для проектов и тегов.

    Создаётся явно один раз при старте приложения и передаётся
    потребителям. При создании загружает состояние; после каждой
    мутации, меняющей сохраняемые данные, синхронно вызывает save().

    Инвариант: после любой завершённой операции коллекция не пуста.

    Attributes:
        persistence: Адаптер хранилища.
        tags: Реестр тегов.
        default_project_name: Имя проекта, создаваемого для пустой коллекции.

    Example:
        >>> from sticky_core.infrastructure.storage import InMemoryStorage
        >>> store = ProjectStore(PersistenceAdapter(InMemoryStorage()))
        >>> [p.name for p in store.get_all_projects()]
        ['Home']
    """

    def __init__(
        self,
        persistence: PersistenceAdapter,
        registry: Optional[TagRegistry] = None,
        default_project_name: str = DEFAULT_PROJECT_NAME,
    ) -> None:
        self.persistence = persistence
        self.tags = registry or TagRegistry()
        self.default_project_name = default_project_name

        self._projects: list[Project] = []
        self._current: Optional[Project] = None

        state = self._load_state()
        self._projects = state.projects
        if state.tags is not None:
            self.tags.replace_tags(state.tags)

        logger.info(
            "Store initialized",
            projects=len(self._projects),
            tags=len(self.tags.get_all_tags()),
        )

        if not self._projects:
            self._setup_default_project()

    def _load_state(self) -> PersistedState:
        """Читает ключи по отдельности.

        Повреждённый ключ проектов даёт пустую коллекцию, повреждённый
        ключ тегов оставляет теги по умолчанию; второй ключ при этом
        загружается как обычно.
        """
        projects = self._load_key(self.persistence.load_projects)
        tags = self._load_key(self.persistence.load_tags)
        return PersistedState(projects=projects or [], tags=tags)

    def _load_key(self, load: Callable[[], Optional[list[T]]]) -> Optional[list[T]]:
        try:
            return load()
        except CorruptPersistedStateError as e:
            logger.warning(
                "Persisted value is corrupt, using defaults",
                key=e.key,
                reason=e.reason,
            )
            return None

    def _setup_default_project(self) -> None:
        home = Project(self.default_project_name)
        self._projects.append(home)
        self._current = home
        logger.info("Default project created", project_id=home.id, name=home.name)
        self._persist()

    def _persist(self) -> None:
        self.persistence.save(self._projects, self.tags.get_all_tags())

    def save(self) -> None:
        """Явно сохраняет состояние.

        Нужно после прямой правки полей сущностей на месте
        (title, description и т.п.), которая сама save() не вызывает.
        """
        self._persist()

    # === Проекты ===

    @property
    def current_project(self) -> Optional[Project]:
        return self._current

    def add_project(self, project: Project) -> None:
        self._projects.append(project)
        logger.info("Project added", project_id=project.id, name=project.name)
        self._persist()

    def delete_project(self, project_id: str) -> Outcome:
        """Удаляет проект по id.

        Если удалён текущий проект, текущим становится первый оставшийся
        (или None). Если коллекция опустела, создаётся проект по умолчанию
        и становится текущим. Состояние сохраняется во всех ветках.

        Returns:
            APPLIED или NOT_FOUND.
        """
        before = len(self._projects)
        self._projects = mutations.remove_project_from_list(self._projects, project_id)
        removed = len(self._projects) != before

        if self._current is not None and self._current.id == project_id:
            self._current = self._projects[0] if self._projects else None

        if removed:
            logger.info("Project deleted", project_id=project_id)
        else:
            logger.debug("Project not found for deletion", project_id=project_id)

        if not self._projects:
            self._setup_default_project()
        else:
            self._persist()

        return Outcome.APPLIED if removed else Outcome.NOT_FOUND

    def get_project_by_id(self, project_id: str) -> Optional[Project]:
        for project in self._projects:
            if project.id == project_id:
                return project
        return None

    def set_current_project(self, project_id: str) -> Outcome:
        """Делает проект текущим. Неизвестный id оставляет указатель как есть."""
        project = self.get_project_by_id(project_id)
        if project is None:
            return Outcome.NOT_FOUND
        self._current = project
        return Outcome.APPLIED

    def rename_project(self, project_id: str, name: str) -> Outcome:
        project = self.get_project_by_id(project_id)
        if project is None:
            return Outcome.NOT_FOUND
        if not name.strip():
            return Outcome.REJECTED
        project.name = name.strip()
        self._persist()
        return Outcome.APPLIED

    def get_all_projects(self) -> list[Project]:
        """Живой список проектов. Только для чтения: мутации только через методы store."""
        return self._projects

    def filter_projects(self, predicate: Callable[[Project], bool]) -> list[Project]:
        return [project for project in self._projects if predicate(project)]

    def get_projects_by_tag(self, tag_name: str) -> list[Project]:
        """Проекты, чей стикер (первая заметка) помечен тегом tag_name.

        "All" возвращает всю коллекцию. Имена сравниваются без учёта
        регистра, как и в реестре тегов.
        """
        key = tag_key(tag_name)
        if key == tag_key(ALL_TAG):
            return self._projects
        return self.filter_projects(
            lambda project: project.sticky_note is not None
            and tag_key(project.sticky_note.tag) == key
        )

    def get_sticky_wall(self, tag_name: str = ALL_TAG) -> list[tuple[Project, NoteItem]]:
        """Стикеры для отображения: проекты с первой заметкой, по имени."""
        wall = [
            (project, project.sticky_note)
            for project in self.get_projects_by_tag(tag_name)
            if project.sticky_note is not None
        ]
        wall.sort(key=lambda pair: pair[0].name.casefold())
        return wall

    # === Заметки ===

    def add_todo_to_current(self, item: NoteItem) -> Outcome:
        """Добавляет заметку в текущий проект (NOT_FOUND, если его нет)."""
        if self._current is None:
            return Outcome.NOT_FOUND
        mutations.add_note_item_to_project(self._current, item)
        logger.debug("Note item added", project_id=self._current.id, item_id=item.id)
        self._persist()
        return Outcome.APPLIED

    def add_note_item(self, project_id: str, item: NoteItem) -> Outcome:
        project = self.get_project_by_id(project_id)
        if project is None:
            return Outcome.NOT_FOUND
        mutations.add_note_item_to_project(project, item)
        logger.debug("Note item added", project_id=project_id, item_id=item.id)
        self._persist()
        return Outcome.APPLIED

    def remove_note_item(self, project_id: str, item_id: str) -> Outcome:
        project = self.get_project_by_id(project_id)
        if project is None or not mutations.remove_note_item_from_project(project, item_id):
            return Outcome.NOT_FOUND
        logger.debug("Note item removed", project_id=project_id, item_id=item_id)
        self._persist()
        return Outcome.APPLIED

    def toggle_checklist_entry(
        self,
        project_id: str,
        index: int,
        item_index: int = 0,
    ) -> Outcome:
        """Переключает пункт чек-листа заметки проекта (по умолчанию стикера).

        Returns:
            APPLIED или NOT_FOUND, если нет проекта, заметки или пункта с таким индексом.
        """
        project = self.get_project_by_id(project_id)
        if project is None or not 0 <= item_index < len(project.note_items):
            return Outcome.NOT_FOUND
        if not mutations.toggle_checklist_entry(project.note_items[item_index], index):
            return Outcome.NOT_FOUND
        self._persist()
        return Outcome.APPLIED

    # === Теги ===

    def get_all_tags(self) -> list[Tag]:
        return self.tags.get_all_tags()

    def get_tag_color(self, tag_name: str) -> str:
        return self.tags.get_color(tag_name)

    def resolve_tag(self, tag_name: str) -> str:
        return self.tags.resolve_tag(tag_name)

    def add_tag(self, name: str) -> Outcome:
        outcome = self.tags.add_tag(name)
        if outcome is Outcome.APPLIED:
            self._persist()
        return outcome

    def delete_tag(self, name: str) -> Outcome:
        """Удаляет тег и переназначает его заметки на "Personal".

        Returns:
            APPLIED. REJECTED для "Personal"/"All". NOT_FOUND, если тега нет.
        """
        outcome = self.tags.delete_tag(name)
        if outcome is not Outcome.APPLIED:
            return outcome

        reassigned = mutations.reassign_tag(self._projects, name, self.tags.personal.name)
        logger.info("Tag cascade applied", tag=name, reassigned=reassigned, to=PERSONAL_TAG)
        self._persist()
        return outcome
