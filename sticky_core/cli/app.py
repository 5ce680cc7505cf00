"""Typer приложение: главный CLI.

Определяет глобальные опции и монтирует команды.

Attributes:
    app: Главное Typer приложение.
"""

from pathlib import Path
from typing import Optional

import typer

from sticky_core.cli.context import CLIContext

app = typer.Typer(
    name="sticky",
    help="📌 Sticky Wall: проекты, заметки и теги в терминале.",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Контекст между callback и командами
_cli_context: Optional[CLIContext] = None


def get_cli_context() -> CLIContext:
    """Текущий CLI контекст (дефолтный, если callback не вызывался)."""
    if _cli_context is None:
        return CLIContext()
    return _cli_context


def version_callback(value: bool) -> None:
    """Показать версию и выйти."""
    if value:
        from sticky_core import __version__

        typer.echo(f"Sticky Core CLI v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    db_path: Optional[Path] = typer.Option(
        None,
        "--db-path",
        "-d",
        help="Путь к SQLite базе данных.",
    ),
    memory: bool = typer.Option(
        False,
        "--memory",
        "-m",
        help="Не сохранять состояние на диск (до конца процесса).",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Уровень логирования: TRACE, DEBUG, INFO, WARNING, ERROR.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Вывод в формате JSON (для скриптов).",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Показать версию и выйти.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """📌 Sticky Wall: проекты, заметки и теги в терминале."""
    global _cli_context

    _cli_context = CLIContext(
        db_path=db_path,
        memory=memory,
        log_level=log_level,
        json_output=json_output,
    )
    ctx.obj = _cli_context


# === Монтирование команд ===

from sticky_core.cli.commands import config_cmd, notes, projects, tags  # noqa: E402

app.add_typer(projects.app, name="projects")
app.add_typer(tags.app, name="tags")
app.add_typer(notes.app, name="notes")
app.add_typer(config_cmd.app, name="config")


__all__ = ["app", "get_cli_context"]
