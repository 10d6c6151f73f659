"""Output mode selection for ServiceResult.

``--json`` gets the serialized model, ``--quiet`` the bare answer, and
everything else the Rich renderers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from localeroute.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from localeroute.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags extracted from the CLI settings."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display. JSON wins over quiet."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
