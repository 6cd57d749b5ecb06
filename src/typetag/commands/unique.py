"""Command: check that no two values share a real type."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from typetag.commands._base import TypetagCommand, read_values_text, values_input

if TYPE_CHECKING:
    from typetag.commands._context import AppContext


@click.command(
    cls=TypetagCommand,
    examples="""\
  typetag unique '[true, 123, "123"]'
  typetag -q unique '[true, 123, false]'""",
)
@values_input
@click.pass_obj
def unique(app: AppContext, values: str | None, source: Any) -> None:
    """Check whether every value has a distinct real type."""
    app.emit(app.service.unique_types(read_values_text(values, source)))
