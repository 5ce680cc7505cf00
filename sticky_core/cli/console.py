"""Rich Console для CLI.

Attributes:
    console: Глобальный Rich Console.
"""

from rich.console import Console
from rich.text import Text

console = Console()


def swatch(color: str) -> Text:
    """Цветная плашка для таблиц (color: #hex или hsl(...))."""
    return Text("  ", style=f"on {color}") if color.startswith("#") else Text("")


__all__ = ["console", "swatch"]
