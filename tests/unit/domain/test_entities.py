"""Тесты доменных сущностей sticky_core.domain.

Покрытие:
- ChecklistEntry, NoteItem, Project: форма хранения и восстановление
- Tag: ключ сравнения без учёта регистра
- parse_checklist: разбор строки через запятую
- SchemaMismatchError при неверной форме
"""

from datetime import date

import pytest

from sticky_core.domain import (
    PERSONAL_TAG,
    ChecklistEntry,
    NoteItem,
    Outcome,
    Priority,
    Project,
    SchemaMismatchError,
    Tag,
    parse_checklist,
    tag_key,
)


class TestNoteItem:
    """Тесты для NoteItem."""

    def test_defaults(self):
        """Дефолты: medium, Personal, без срока и чек-листа."""
        item = NoteItem("Groceries")
        assert item.priority is Priority.MEDIUM
        assert item.tag == PERSONAL_TAG
        assert item.due_date is None
        assert item.checklist == []
        assert item.description == ""
        assert item.notes == ""
        assert item.id

    def test_ids_are_unique(self):
        assert NoteItem("a").id != NoteItem("a").id

    def test_priority_coerced_from_string(self):
        """Строковый приоритет приводится к Priority."""
        item = NoteItem("Task", priority="high")
        assert item.priority is Priority.HIGH

    def test_to_dict_uses_stored_keys(self):
        """Ключи формы хранения совпадают с сохранёнными данными."""
        item = NoteItem(
            "Groceries",
            due_date=date(2024, 5, 1),
            checklist=[ChecklistEntry("Milk", completed=True)],
            tag="Work",
        )
        data = item.to_dict()

        assert set(data) == {
            "title", "description", "dueDate", "priority",
            "checklist", "notes", "tag", "uuid",
        }
        assert data["dueDate"] == "2024-05-01"
        assert data["priority"] == "medium"
        assert data["checklist"] == [{"text": "Milk", "completed": True}]
        assert data["uuid"] == item.id

    def test_null_due_date_round_trip(self):
        """Отсутствующий срок хранится как null и восстанавливается как None."""
        item = NoteItem("No deadline")
        data = item.to_dict()
        assert data["dueDate"] is None
        assert NoteItem.from_dict(data).due_date is None

    def test_empty_due_date_read_as_null(self):
        """Пустая строка dueDate читается как None и сохраняется обратно как null."""
        item = NoteItem.from_dict({"title": "x", "uuid": "n", "dueDate": ""})
        assert item.due_date is None
        assert item.to_dict()["dueDate"] is None

    def test_from_dict_preserves_id_and_fields(self):
        original = NoteItem(
            "Trip",
            description="Pack bags",
            due_date=date(2025, 1, 31),
            priority=Priority.LOW,
            checklist=[ChecklistEntry("Passport"), ChecklistEntry("Tickets", True)],
            tag="Travel",
            notes="Flight at 9",
        )
        restored = NoteItem.from_dict(original.to_dict())
        assert restored == original

    def test_from_dict_missing_optional_fields(self):
        """Необязательные поля получают дефолты."""
        item = NoteItem.from_dict({"title": "Bare", "uuid": "n-1"})
        assert item.id == "n-1"
        assert item.priority is Priority.MEDIUM
        assert item.tag == PERSONAL_TAG
        assert item.checklist == []

    @pytest.mark.parametrize(
        "patch, field",
        [
            ({"dueDate": "not-a-date"}, "dueDate"),
            ({"priority": "urgent"}, "priority"),
            ({"title": 42}, "title"),
            ({"checklist": "Milk"}, "checklist"),
        ],
    )
    def test_from_dict_schema_mismatch(self, patch, field):
        """Неверные типы и значения дают SchemaMismatchError с именем поля."""
        data = NoteItem("Bad").to_dict()
        data.update(patch)
        with pytest.raises(SchemaMismatchError) as exc_info:
            NoteItem.from_dict(data)
        assert exc_info.value.field == field

    def test_schema_mismatch_is_value_error(self):
        with pytest.raises(ValueError):
            NoteItem.from_dict("not an object")


class TestProject:
    """Тесты для Project."""

    def test_sticky_note_is_first_item(self):
        project = Project("Home")
        assert project.sticky_note is None

        first, second = NoteItem("first"), NoteItem("second")
        project.add_note_item(first)
        project.add_note_item(second)
        assert project.sticky_note is first

    def test_round_trip_keeps_order_and_ids(self):
        project = Project("Groceries", note_items=[NoteItem("a"), NoteItem("b")])
        data = project.to_dict()

        assert data["uuid"] == project.id
        assert [todo["title"] for todo in data["todos"]] == ["a", "b"]
        assert Project.from_dict(data) == project

    def test_from_dict_requires_uuid(self):
        with pytest.raises(SchemaMismatchError):
            Project.from_dict({"name": "No id", "todos": []})

    def test_from_dict_without_todos(self):
        project = Project.from_dict({"name": "Empty", "uuid": "p-1"})
        assert project.note_items == []


class TestTag:
    """Тесты для Tag и tag_key."""

    def test_key_is_case_insensitive(self):
        assert Tag("Work", "#fff").key == Tag("WORK", "#000").key == tag_key("work")

    def test_from_dict_requires_color(self):
        with pytest.raises(SchemaMismatchError):
            Tag.from_dict({"name": "Work"})


class TestParseChecklist:
    """Тесты для parse_checklist."""

    def test_comma_separated(self):
        entries = parse_checklist("Milk, Eggs ,Bread")
        assert [e.text for e in entries] == ["Milk", "Eggs", "Bread"]
        assert not any(e.completed for e in entries)

    def test_empty_parts_dropped(self):
        assert parse_checklist("") == []
        assert [e.text for e in parse_checklist("Milk,, ,Eggs")] == ["Milk", "Eggs"]


class TestOutcome:
    """Тесты для Outcome."""

    def test_truthiness(self):
        """Истинен только APPLIED."""
        assert Outcome.APPLIED
        assert not Outcome.REJECTED
        assert not Outcome.NOT_FOUND
