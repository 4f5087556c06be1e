"""Rich Console factory and theme for presence output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PRESENCE_THEME = Theme(
    {
        "presence.ok": "bold green",
        "presence.error": "bold red",
        "presence.warning": "bold yellow",
        "presence.op": "bold cyan",
        "presence.key": "dim",
        "presence.exists": "green",
        "presence.absent": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=PRESENCE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_verdict(verdict: bool) -> str:
    """Return the Rich style name for an existence verdict."""
    return "presence.exists" if verdict else "presence.absent"
