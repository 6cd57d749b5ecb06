"""Command: list one known value per real type."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from typetag.commands._base import TypetagCommand

if TYPE_CHECKING:
    from typetag.commands._context import AppContext


@click.command(
    cls=TypetagCommand,
    examples="""\
  typetag catalog
  typetag --json catalog""",
)
@click.pass_obj
def catalog(app: AppContext) -> None:
    """List a sample value for each real type with its classification."""
    app.emit(app.service.catalog())
