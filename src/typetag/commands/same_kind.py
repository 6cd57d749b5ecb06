"""Command: check that all values share one shallow kind."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from typetag.commands._base import TypetagCommand, read_values_text, values_input

if TYPE_CHECKING:
    from typetag.commands._context import AppContext


@click.command(
    "same-kind",
    cls=TypetagCommand,
    examples="""\
  typetag same-kind '[11, 12, 13]'
  typetag same-kind '[123, NaN, Infinity]'
  typetag -q same-kind '["11", 12]'""",
)
@values_input
@click.pass_obj
def same_kind(app: AppContext, values: str | None, source: Any) -> None:
    """Check whether every value has the first value's shallow kind."""
    app.emit(app.service.same_kind(read_values_text(values, source)))
