"""Output mode dispatch — JSON, quiet, or Rich.

``format_result`` is the single entry point the CLI uses.  JSON mode
serializes the whole ServiceResult; quiet mode prints only the primary
value; everything else goes through the Rich renderers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from timeparts.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from timeparts.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags relevant to rendering."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
