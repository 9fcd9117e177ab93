"""Rich Console factory and theme for identiconctl output.

Consoles render into a StringIO buffer so the formatter layer keeps its
``format_result() -> str`` contract.  Outside a terminal (tests, pipes)
Rich drops color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

from identiconctl.domain.color import RGBColor

IDC_THEME = Theme(
    {
        "idc.ok": "bold green",
        "idc.error": "bold red",
        "idc.warning": "bold yellow",
        "idc.op": "bold cyan",
        "idc.key": "dim",
        "idc.path": "dim",
        "idc.name": "bold",
        "idc.format": "magenta",
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
        theme=IDC_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def swatch_style(color: RGBColor) -> str:
    """Rich style painting a block in *color*."""
    return f"on rgb({color.red},{color.green},{color.blue})"
