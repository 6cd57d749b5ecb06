"""Custom Click command class with --examples support.

When ``--examples`` is passed, the command prints usage examples and exits.
This keeps ``--help`` concise while making examples available on demand.
"""

from __future__ import annotations

from typing import Any

import click


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class TypetagCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def values_input(func: Any) -> Any:
    """Decorate a command with the shared VALUES argument and ``--file`` option.

    The command receives a single ``text`` keyword: the JSON array source,
    taken from VALUES, then ``--file``, then stdin.
    """
    func = click.option(
        "-f",
        "--file",
        "source",
        type=click.File("r", encoding="utf-8"),
        default=None,
        help="Read the JSON array from a file ('-' for stdin).",
    )(func)
    func = click.argument("values", required=False)(func)
    return func


def read_values_text(values: str | None, source: Any) -> str:
    """Resolve the JSON text for a command from VALUES, ``--file``, or stdin."""
    if values is not None and source is not None:
        raise click.UsageError("Pass VALUES or --file, not both.")
    if values is not None:
        return values
    if source is not None:
        return source.read()
    return click.get_text_stream("stdin").read()
