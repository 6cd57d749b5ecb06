"""Command: count values per real type."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from typetag.commands._base import TypetagCommand, read_values_text, values_input

if TYPE_CHECKING:
    from typetag.commands._context import AppContext


@click.command(
    cls=TypetagCommand,
    examples="""\
  typetag count '[true, null, false, true, {}]'
  typetag -q count -f values.json
  typetag --json count '["", null, {"$map": []}, {"$set": []}, {"$undefined": true}]'""",
)
@values_input
@click.pass_obj
def count(app: AppContext, values: str | None, source: Any) -> None:
    """Count values per real type, sorted by type name."""
    app.emit(app.service.count_types(read_values_text(values, source)))
