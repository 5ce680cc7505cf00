"""Команда projects: проекты и стикеры.

Подкоманды:
    list: Проекты в порядке создания (опционально по тегу).
    wall: Стена стикеров, отсортированная по имени проекта.
    add: Создать проект со стикером.
    delete: Удалить проект.
    use: Сделать проект текущим и показать его.

Usage:
    sticky projects list --tag Work
    sticky projects add Groceries --tag Work --checklist "Milk, Eggs"
"""

import json
from datetime import date
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from sticky_core.cli.app import get_cli_context
from sticky_core.cli.console import console, swatch
from sticky_core.core import ProjectStore
from sticky_core.domain import ALL_TAG, NoteItem, Outcome, Priority, Project, parse_checklist

app = typer.Typer(
    help="🗂️  Проекты и их стикеры.",
    no_args_is_help=True,
)

SHORT_ID_LENGTH = 8


def short_id(value: str) -> str:
    return value[:SHORT_ID_LENGTH]


def find_project(store: ProjectStore, ref: str) -> Optional[Project]:
    """Ищет проект по полному id или однозначному префиксу id.

    Returns:
        Проект или None (нет совпадений или префикс неоднозначен).
    """
    project = store.get_project_by_id(ref)
    if project is not None:
        return project
    matches = store.filter_projects(lambda p: p.id.startswith(ref))
    return matches[0] if len(matches) == 1 else None


def require_project(store: ProjectStore, ref: str) -> Project:
    """find_project или выход с кодом 1."""
    project = find_project(store, ref)
    if project is None:
        console.print(f"[red]❌ Проект не найден: {escape(ref)}[/red]")
        raise typer.Exit(1)
    return project


def project_summary(store: ProjectStore, project: Project) -> dict:
    """Плоское описание проекта для JSON вывода."""
    note = project.sticky_note
    tag = store.resolve_tag(note.tag) if note else None
    current = store.current_project
    return {
        "id": project.id,
        "name": project.name,
        "current": current is not None and current.id == project.id,
        "tag": tag,
        "color": store.get_tag_color(tag) if tag else None,
        "items": len(project.note_items),
        "note": note.to_dict() if note else None,
    }


@app.command("list")
def list_projects(
    tag: str = typer.Option(
        ALL_TAG,
        "--tag",
        "-t",
        help="Показать только проекты со стикером этого тега.",
    ),
) -> None:
    """Показать проекты (в порядке создания)."""
    cli_ctx = get_cli_context()
    store = cli_ctx.get_store()
    projects = store.get_projects_by_tag(tag)

    if cli_ctx.json_output:
        data = [project_summary(store, p) for p in projects]
        console.print_json(json.dumps(data, ensure_ascii=False))
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", style="dim")
    table.add_column("Проект", style="cyan")
    table.add_column("Тег")
    table.add_column("")
    table.add_column("Срок")
    table.add_column("Чек-лист")

    for project in projects:
        note = project.sticky_note
        if note is None:
            table.add_row(short_id(project.id), escape(project.name), "[dim]-[/dim]", "", "", "")
            continue
        tag_name = store.resolve_tag(note.tag)
        done = sum(entry.completed for entry in note.checklist)
        table.add_row(
            short_id(project.id),
            escape(project.name),
            escape(tag_name),
            swatch(store.get_tag_color(tag_name)),
            note.due_date.isoformat() if note.due_date else "",
            f"{done}/{len(note.checklist)}" if note.checklist else "",
        )

    console.print(table)


@app.command("wall")
def show_wall(
    tag: str = typer.Option(
        ALL_TAG,
        "--tag",
        "-t",
        help="Показать только стикеры с этим тегом.",
    ),
) -> None:
    """Показать стену стикеров (только проекты со стикером, по имени)."""
    cli_ctx = get_cli_context()
    store = cli_ctx.get_store()
    wall = store.get_sticky_wall(tag)

    if cli_ctx.json_output:
        data = [project_summary(store, project) for project, _ in wall]
        console.print_json(json.dumps(data, ensure_ascii=False))
        return

    if not wall:
        console.print("[dim]Стикеров нет[/dim]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("")
    table.add_column("Стикер", style="cyan")
    table.add_column("Тег")
    table.add_column("Чек-лист")

    for project, note in wall:
        tag_name = store.resolve_tag(note.tag)
        checklist = ", ".join(
            f"[strike]{escape(entry.text)}[/strike]" if entry.completed else escape(entry.text)
            for entry in note.checklist
        )
        table.add_row(
            swatch(store.get_tag_color(tag_name)),
            escape(note.title or project.name),
            escape(tag_name),
            checklist,
        )

    console.print(table)


@app.command("add")
def add_project(
    name: str = typer.Argument(..., help="Имя проекта (и заголовок стикера)."),
    tag: Optional[str] = typer.Option(None, "--tag", "-t", help="Тег стикера."),
    checklist: str = typer.Option(
        "",
        "--checklist",
        "-c",
        help='Пункты через запятую: "Milk, Eggs".',
    ),
    description: str = typer.Option("", "--description", help="Описание."),
    due: Optional[str] = typer.Option(None, "--due", help="Срок, YYYY-MM-DD."),
    priority: Priority = typer.Option(Priority.MEDIUM, "--priority", "-p", help="Приоритет."),
    notes: str = typer.Option("", "--notes", help="Свободный текст."),
) -> None:
    """Создать проект с одним стикером."""
    cli_ctx = get_cli_context()

    if not name.strip():
        console.print("[red]❌ Имя проекта не может быть пустым[/red]")
        raise typer.Exit(1)

    due_date = None
    if due:
        try:
            due_date = date.fromisoformat(due)
        except ValueError:
            console.print(f"[red]❌ Неверная дата: {escape(due)} (ожидается YYYY-MM-DD)[/red]")
            raise typer.Exit(1)

    store = cli_ctx.get_store()
    project = Project(name.strip())
    project.add_note_item(
        NoteItem(
            title=name.strip(),
            description=description,
            due_date=due_date,
            priority=priority,
            checklist=parse_checklist(checklist),
            tag=store.resolve_tag(tag) if tag else store.tags.personal.name,
            notes=notes,
        )
    )
    store.add_project(project)

    if cli_ctx.json_output:
        console.print_json(json.dumps(project_summary(store, project), ensure_ascii=False))
        return
    console.print(
        f"[green]✅ Проект создан:[/green] {escape(project.name)} [dim]({short_id(project.id)})[/dim]"
    )


@app.command("delete")
def delete_project(
    ref: str = typer.Argument(..., help="ID проекта или его префикс."),
) -> None:
    """Удалить проект (пустая коллекция получает проект по умолчанию)."""
    store = get_cli_context().get_store()
    project = require_project(store, ref)

    outcome = store.delete_project(project.id)
    if outcome is not Outcome.APPLIED:
        console.print(f"[red]❌ Не удалось удалить проект: {outcome.value}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]🗑️  Проект удалён:[/green] {escape(project.name)}")


@app.command("use")
def use_project(
    ref: str = typer.Argument(..., help="ID проекта или его префикс."),
) -> None:
    """Сделать проект текущим и показать его стикер.

    Указатель текущего проекта не сохраняется между запусками.
    """
    cli_ctx = get_cli_context()
    store = cli_ctx.get_store()
    project = require_project(store, ref)
    store.set_current_project(project.id)

    summary = project_summary(store, project)
    if cli_ctx.json_output:
        console.print_json(json.dumps(summary, ensure_ascii=False))
        return
    console.print(f"[bold]📌 Текущий проект:[/bold] {escape(project.name)}")
    if summary["tag"]:
        console.print(f"[dim]Тег:[/dim] {escape(summary['tag'])}")


__all__ = ["app", "find_project", "require_project", "project_summary", "short_id"]
