"""Rich Console factory and theme for localeroute output.

Consoles render into a StringIO buffer so renderers can return plain
strings. Rich drops color codes on its own in non-TTY environments
(tests, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

LR_THEME = Theme(
    {
        "lr.ok": "bold green",
        "lr.error": "bold red",
        "lr.warning": "bold yellow",
        "lr.op": "bold cyan",
        "lr.key": "dim",
        "lr.locale": "bold blue",
        "lr.path": "bold",
        "lr.domain": "magenta",
        "lr.unchanged": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps table layout stable in tests).
    """
    return Console(
        file=StringIO(),
        theme=LR_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
