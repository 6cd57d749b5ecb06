"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from typetag.output.console import create_console, get_output, style_for_type

if TYPE_CHECKING:
    from rich.console import Console

    from typetag.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, width: int | None = None) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(width=width)

    if result.ok:
        _OP_RENDERERS[result.op](result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal, pipe-friendly output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if result.op in ("classify", "catalog"):
        return "\n".join(item["type"] for item in data.get("items", []))
    if result.op == "count_types":
        return "\n".join(f"{row['type']}\t{row['count']}" for row in data.get("counts", []))
    if result.op == "same_kind":
        return _bool_word(data.get("same", False))
    return _bool_word(data.get("unique", False))


# ── Helpers ───────────────────────────────────────────────────────────


def _bool_word(value: bool) -> str:
    return "true" if value else "false"


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="tt.ok")
    op = Text(f"  {result.op}", style="tt.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    if isinstance(value, bool):
        v = Text("yes" if value else "no", style="tt.yes" if value else "tt.no")
    elif isinstance(value, int):
        v = Text(str(value), style="tt.count")
    else:
        v = Text(str(value))
    console.print(Text.assemble((f"  {key}: ", "tt.key"), v))


def _tag(tag: str) -> Text:
    return Text(tag, style=style_for_type(tag))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="tt.error")
    op = Text(f"  {result.op}", style="tt.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Classification renderers ──────────────────────────────────────────


def _render_items(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render classify and catalog results as a value/kind/type table."""
    _status_line(console, result)
    items: list[dict[str, Any]] = result.data.get("items", [])
    key_column = "label" if result.op == "catalog" else "index"

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#" if key_column == "index" else "Label", style="dim", no_wrap=True)
    table.add_column("Value", style="tt.value")
    table.add_column("Kind")
    table.add_column("Type")
    for item in items:
        table.add_row(
            str(item.get(key_column, "")),
            Text(str(item.get("value", ""))),
            _tag(str(item.get("kind", ""))),
            _tag(str(item.get("type", ""))),
        )
    console.print(table)
    _field(console, "count", result.data.get("count", len(items)))
    if verbose:
        _render_meta(console, result)


def _render_counts(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render count_types results as a sorted type/count table."""
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Type")
    table.add_column("Count", style="tt.count", justify="right")
    for row in result.data.get("counts", []):
        table.add_row(_tag(str(row["type"])), str(row["count"]))
    console.print(table)
    _field(console, "total", result.data.get("total", 0))
    if verbose:
        _render_meta(console, result)


def _render_predicate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render same_kind / unique_types: the verdict plus the tags it was based on."""
    _status_line(console, result)
    if result.op == "same_kind":
        _field(console, "same", result.data.get("same", False))
        tags = result.data.get("kinds", [])
    else:
        _field(console, "unique", result.data.get("unique", False))
        tags = result.data.get("types", [])
    _field(console, "count", result.data.get("count", len(tags)))
    if tags:
        line = Text.assemble(("  tags: ", "tt.key"))
        for i, tag in enumerate(tags):
            if i:
                line.append(", ")
            line.append_text(_tag(tag))
        console.print(line)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "classify": _render_items,
    "catalog": _render_items,
    "count_types": _render_counts,
    "same_kind": _render_predicate,
    "unique_types": _render_predicate,
}
