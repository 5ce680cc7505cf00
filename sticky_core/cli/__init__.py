"""Sticky CLI: тонкий потребитель ProjectStore.

Функции:
    main: Точка входа CLI.

Example:
    $ sticky --help
    $ sticky projects add Groceries --tag Work --checklist "Milk, Eggs"
    $ sticky tags list
"""

from sticky_core.cli.app import app


def main() -> None:
    """Точка входа для CLI."""
    app()


__all__ = ["main", "app"]
