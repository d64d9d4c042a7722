"""Rich Console factory and theme for notekit output.

Consoles render to a StringIO buffer, preserving the
``format_result() -> str`` contract. In non-TTY environments (tests,
pipes) Rich disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

NOTEKIT_THEME = Theme(
    {
        "nk.ok": "bold green",
        "nk.error": "bold red",
        "nk.warning": "bold yellow",
        "nk.op": "bold cyan",
        "nk.key": "dim",
        "nk.id": "bold blue",
        "nk.title": "bold",
        "nk.type": "magenta",
        "nk.sortkey": "dim cyan",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=NOTEKIT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
