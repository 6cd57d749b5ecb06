"""Command: classify values by shallow kind and real type."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from typetag.commands._base import TypetagCommand, read_values_text, values_input

if TYPE_CHECKING:
    from typetag.commands._context import AppContext


@click.command(
    cls=TypetagCommand,
    examples="""\
  typetag classify '[null, "a", 1, NaN, Infinity, [], {}]'
  typetag classify '[{"$bigint": "10"}, {"$date": "2024-01-31"}, {"$regexp": "\\\\w+"}]'
  typetag --json classify -f values.json
  echo '[true, false]' | typetag -q classify""",
)
@values_input
@click.pass_obj
def classify(app: AppContext, values: str | None, source: Any) -> None:
    """Show the shallow kind and real type of each value in a JSON array."""
    app.emit(app.service.classify(read_values_text(values, source)))
