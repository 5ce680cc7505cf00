"""Команда config: просмотр конфигурации.

Подкоманды:
    show: Показать текущую конфигурацию.

Usage:
    sticky config show
    sticky --json config show
"""

import json

import typer
from rich.table import Table

from sticky_core.cli.app import get_cli_context
from sticky_core.cli.console import console
from sticky_core.config import find_config_file

app = typer.Typer(
    help="🔧 Просмотр конфигурации.",
    no_args_is_help=True,
)


@app.command("show")
def show() -> None:
    """Показать текущую конфигурацию."""
    cli_ctx = get_cli_context()

    try:
        config = cli_ctx.get_config()
    except ValueError as e:
        console.print(f"[red]❌ Ошибка загрузки конфигурации: {e}[/red]")
        raise typer.Exit(1)

    toml_path = find_config_file()

    if cli_ctx.json_output:
        data = {
            "source": str(toml_path) if toml_path else None,
            "config": config.to_toml_dict(),
        }
        console.print_json(json.dumps(data, ensure_ascii=False))
        return

    source = f"{toml_path}" if toml_path else "[dim]defaults + environment[/dim]"
    console.print("\n[bold]⚙️  Текущая конфигурация[/bold]")
    console.print(f"[dim]Источник: {source}[/dim]\n")

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Настройка", style="cyan")
    table.add_column("Значение")

    for section, values in config.to_toml_dict().items():
        for key, value in values.items():
            table.add_row(f"{section}.{key}", str(value))
    if config.log_file is None:
        table.add_row("logging.file", "[dim]not set[/dim]")

    console.print(table)


__all__ = ["app"]
