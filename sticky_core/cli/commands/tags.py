"""Команда tags: реестр тегов.

Подкоманды:
    list: Все теги с цветами.
    add: Добавить тег (цвет подбирается автоматически).
    delete: Удалить тег, его стикеры переходят в "Personal".
"""

import json

import typer
from rich.markup import escape
from rich.table import Table

from sticky_core.cli.app import get_cli_context
from sticky_core.cli.console import console, swatch
from sticky_core.domain import Outcome

app = typer.Typer(
    help="🏷️  Теги и их цвета.",
    no_args_is_help=True,
)


@app.command("list")
def list_tags() -> None:
    """Показать все теги."""
    cli_ctx = get_cli_context()
    store = cli_ctx.get_store()
    tags = store.get_all_tags()

    if cli_ctx.json_output:
        console.print_json(json.dumps([t.to_dict() for t in tags], ensure_ascii=False))
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Тег", style="cyan")
    table.add_column("Цвет")
    table.add_column("")
    table.add_column("Стикеров", justify="right")

    for tag in tags:
        table.add_row(
            escape(tag.name),
            tag.color,
            swatch(tag.color),
            str(len(store.get_projects_by_tag(tag.name))),
        )

    console.print(table)


@app.command("add")
def add_tag(
    name: str = typer.Argument(..., help="Имя тега."),
) -> None:
    """Добавить тег."""
    store = get_cli_context().get_store()
    outcome = store.add_tag(name)

    if outcome is Outcome.REJECTED:
        console.print(
            f"[red]❌ Тег не добавлен: {escape(name)} (пустое, зарезервированное или уже есть)[/red]"
        )
        raise typer.Exit(1)

    tag = store.tags.find(name.strip())
    console.print(f"[green]✅ Тег добавлен:[/green] {escape(tag.name)} {tag.color}")


@app.command("delete")
def delete_tag(
    name: str = typer.Argument(..., help="Имя тега."),
) -> None:
    """Удалить тег. Стикеры с этим тегом переходят в "Personal"."""
    store = get_cli_context().get_store()
    outcome = store.delete_tag(name)

    if outcome is Outcome.REJECTED:
        console.print(f"[red]❌ Тег {escape(name)} нельзя удалить[/red]")
        raise typer.Exit(1)
    if outcome is Outcome.NOT_FOUND:
        console.print(f"[red]❌ Тег не найден: {escape(name)}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]🗑️  Тег удалён:[/green] {escape(name)}")


__all__ = ["app"]
