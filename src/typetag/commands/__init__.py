"""Subcommand modules for typetag.

Provides register_commands() which uses deferred imports to keep
``typetag --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from typetag.commands.catalog import catalog
    from typetag.commands.classify import classify
    from typetag.commands.count import count
    from typetag.commands.same_kind import same_kind
    from typetag.commands.unique import unique

    cli.add_command(classify)
    cli.add_command(count)
    cli.add_command(same_kind)
    cli.add_command(unique)
    cli.add_command(catalog)
