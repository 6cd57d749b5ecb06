"""Rich Console factory and theme for typetag output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TYPETAG_THEME = Theme(
    {
        "tt.ok": "bold green",
        "tt.error": "bold red",
        "tt.warning": "bold yellow",
        "tt.op": "bold cyan",
        "tt.key": "dim",
        "tt.value": "white",
        "tt.count": "magenta",
        "tt.yes": "green",
        "tt.no": "red",
        "tt.type.primitive": "cyan",
        "tt.type.special": "yellow",
        "tt.type.container": "blue",
        "tt.type.object": "bold",
    }
)

# Real types grouped by display style; see typetag.domain.tags.RealType.
_TYPE_STYLES: dict[str, str] = {
    **dict.fromkeys(
        ("string", "boolean", "bigint", "symbol", "number", "function"), "tt.type.primitive"
    ),
    **dict.fromkeys(("null", "undefined", "NaN", "Infinity", "unknown"), "tt.type.special"),
    **dict.fromkeys(("date", "regexp", "set", "map", "array"), "tt.type.container"),
    "object": "tt.type.object",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=TYPETAG_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_type(tag: str) -> str:
    """Return the Rich style name for a real type or shallow kind tag."""
    return _TYPE_STYLES.get(tag, "")
