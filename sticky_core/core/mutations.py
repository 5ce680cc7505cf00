"""Чистые преобразования списков проектов и заметок.

Функции меняют только переданные аргументы и не сохраняют состояние;
сохраняет ProjectStore.

Функции:
    add_note_item_to_project(project, item)
    remove_note_item_from_project(project, item_id) -> bool
    toggle_checklist_entry(item, index) -> bool
    remove_project_from_list(projects, project_id) -> list[Project]
    reassign_tag(projects, old_name, new_name) -> int
"""

from sticky_core.domain import NoteItem, Project, tag_key


def add_note_item_to_project(project: Project, item: NoteItem) -> None:
    project.note_items.append(item)


def remove_note_item_from_project(project: Project, item_id: str) -> bool:
    """Заменяет список заметок проекта новым, без заметки item_id.

    Returns:
        True, если заметка была удалена.
    """
    remaining = [item for item in project.note_items if item.id != item_id]
    removed = len(remaining) != len(project.note_items)
    project.note_items = remaining
    return removed


def toggle_checklist_entry(item: NoteItem, index: int) -> bool:
    """Инвертирует completed у пункта чек-листа.

    Индекс вне диапазона (в том числе отрицательный) не ошибка,
    а пустая операция.

    Returns:
        True, если пункт переключён.
    """
    if not 0 <= index < len(item.checklist):
        return False
    entry = item.checklist[index]
    entry.completed = not entry.completed
    return True


def remove_project_from_list(projects: list[Project], project_id: str) -> list[Project]:
    """Новый список без проекта project_id. Исходный список не меняется."""
    return [project for project in projects if project.id != project_id]


def reassign_tag(projects: list[Project], old_name: str, new_name: str) -> int:
    """Переназначает заметки с тегом old_name (без учёта регистра) на new_name.

    Returns:
        Количество изменённых заметок.
    """
    old_key = tag_key(old_name)
    changed = 0
    for project in projects:
        for item in project.note_items:
            if tag_key(item.tag) == old_key:
                item.tag = new_name
                changed += 1
    return changed
