"""Output mode dispatch for ServiceResult.

The CLI renders ServiceResult for humans (Rich tables and colors),
for machines (--json), or as bare lines for shell pipelines (--quiet).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from typetag.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from typetag.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Rendering switches derived from the global CLI flags."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    width: int = 120


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet; quiet wins over the default Rich rendering.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose, width=settings.width)
