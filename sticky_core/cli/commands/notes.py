"""Команда notes: стикер проекта и его чек-лист.

Подкоманды:
    show: Показать заметку проекта.
    toggle: Отметить или снять отметку с пункта чек-листа.
"""

import json

import typer
from rich.markup import escape
from rich.panel import Panel

from sticky_core.cli.app import get_cli_context
from sticky_core.cli.commands.projects import require_project
from sticky_core.cli.console import console
from sticky_core.domain import NoteItem, Outcome

app = typer.Typer(
    help="📝 Заметки проектов.",
    no_args_is_help=True,
)


def _render_note(note: NoteItem, tag: str) -> str:
    lines = [f"[dim]Тег:[/dim] {escape(tag)}   [dim]Приоритет:[/dim] {note.priority.value}"]
    if note.due_date:
        lines.append(f"[dim]Срок:[/dim] {note.due_date.isoformat()}")
    if note.description:
        lines.append(escape(note.description))
    for index, entry in enumerate(note.checklist):
        mark = "☑" if entry.completed else "☐"
        lines.append(f"{index}. {mark} {escape(entry.text)}")
    if note.notes:
        lines.append(f"[dim]{escape(note.notes)}[/dim]")
    return "\n".join(lines)


@app.command("show")
def show(
    ref: str = typer.Argument(..., help="ID проекта или его префикс."),
    item: int = typer.Option(0, "--item", "-i", help="Индекс заметки в проекте."),
) -> None:
    """Показать заметку проекта (по умолчанию стикер)."""
    cli_ctx = get_cli_context()
    store = cli_ctx.get_store()
    project = require_project(store, ref)

    if not 0 <= item < len(project.note_items):
        console.print(f"[red]❌ В проекте нет заметки с индексом {item}[/red]")
        raise typer.Exit(1)

    note = project.note_items[item]
    if cli_ctx.json_output:
        console.print_json(json.dumps(note.to_dict(), ensure_ascii=False))
        return

    tag = store.resolve_tag(note.tag)
    color = store.get_tag_color(tag)
    console.print(
        Panel(
            _render_note(note, tag),
            title=escape(note.title),
            border_style=color if color.startswith("#") else "white",
        )
    )


@app.command("toggle")
def toggle(
    ref: str = typer.Argument(..., help="ID проекта или его префикс."),
    index: int = typer.Argument(..., help="Индекс пункта чек-листа."),
    item: int = typer.Option(0, "--item", "-i", help="Индекс заметки в проекте."),
) -> None:
    """Переключить отметку пункта чек-листа."""
    store = get_cli_context().get_store()
    project = require_project(store, ref)

    outcome = store.toggle_checklist_entry(project.id, index, item_index=item)
    if outcome is not Outcome.APPLIED:
        console.print(f"[red]❌ Пункт не найден: заметка {item}, пункт {index}[/red]")
        raise typer.Exit(1)

    entry = project.note_items[item].checklist[index]
    state = "☑" if entry.completed else "☐"
    console.print(f"{state} {escape(entry.text)}")


__all__ = ["app"]
