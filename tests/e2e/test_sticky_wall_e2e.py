"""E2E: полный сценарий над SQLite файлом.

Первый запуск создаёт данные, второй ProjectStore над тем же файлом
должен увидеть их без изменений.
"""

from datetime import date

from sticky_core import (
    PASTEL_PALETTE,
    PERSONAL_TAG,
    ChecklistEntry,
    NoteItem,
    Outcome,
    Project,
    build_store,
)
from sticky_core.config import StickyConfig


def test_sticky_wall_survives_restart(db_path):
    config = StickyConfig(db_path=db_path)

    # === Первый запуск ===
    store = build_store(config)
    assert [p.name for p in store.get_all_projects()] == ["Home"]

    assert store.add_tag("Work") is Outcome.APPLIED
    assert store.get_tag_color("Work") == PASTEL_PALETTE[0]

    groceries = Project("Groceries")
    groceries.add_note_item(
        NoteItem(
            "Groceries",
            due_date=date(2024, 12, 24),
            checklist=[ChecklistEntry("Milk"), ChecklistEntry("Eggs")],
            tag="Work",
        )
    )
    store.add_project(groceries)
    assert store.toggle_checklist_entry(groceries.id, 0) is Outcome.APPLIED
    assert store.get_projects_by_tag("Work") == [groceries]

    store.persistence.storage.db.close()

    # === Второй запуск над тем же файлом ===
    restarted = build_store(config)
    projects = restarted.get_all_projects()
    assert [p.name for p in projects] == ["Home", "Groceries"]

    loaded = restarted.get_project_by_id(groceries.id)
    assert loaded == groceries
    assert [e.completed for e in loaded.sticky_note.checklist] == [True, False]
    assert restarted.get_tag_color("Work") == PASTEL_PALETTE[0]
    assert restarted.get_projects_by_tag("work") == [loaded]

    # Каскад после перезапуска
    assert restarted.delete_tag("Work") is Outcome.APPLIED
    assert loaded.sticky_note.tag == PERSONAL_TAG
    restarted.persistence.storage.db.close()

    final = build_store(config)
    assert final.get_project_by_id(groceries.id).sticky_note.tag == PERSONAL_TAG
    assert [t.name for t in final.get_all_tags()] == [PERSONAL_TAG]
    final.persistence.storage.db.close()


def test_memory_storage_config():
    """storage="memory" не создаёт файлов."""
    store = build_store(StickyConfig(storage="memory"))
    store.add_tag("Work")
    assert store.get_tag_color("work") == PASTEL_PALETTE[0]
