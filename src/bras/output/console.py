"""Rich Console factory and theme for bras output.

Consoles render into a StringIO buffer so ``format_result() -> str`` stays a
pure function. In non-TTY environments (tests, pipes) Rich emits no color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

BRAS_THEME = Theme(
    {
        "bras.ok": "bold green",
        "bras.error": "bold red",
        "bras.warning": "bold yellow",
        "bras.op": "bold cyan",
        "bras.key": "dim",
        "bras.cpf": "bold blue",
    }
)


def create_console() -> Console:
    """Create a 100-column Console that renders to a StringIO buffer."""
    return Console(file=StringIO(), theme=BRAS_THEME, highlight=False, width=100)


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    buffer = console.file
    if not isinstance(buffer, StringIO):
        msg = "Console was not created by create_console()"
        raise TypeError(msg)
    return buffer.getvalue()
