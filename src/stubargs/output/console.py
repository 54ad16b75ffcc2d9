"""Rich Console factory and theme for stubargs output.

Consoles render into a StringIO buffer so renderers return plain strings.
Rich drops color codes on its own when output is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

STUBARGS_THEME = Theme(
    {
        "stub.ok": "bold green",
        "stub.error": "bold red",
        "stub.op": "bold cyan",
        "stub.key": "dim",
        "stub.literal": "bold magenta",
        "stub.type": "blue",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=STUBARGS_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
