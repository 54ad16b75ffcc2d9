"""Output mode dispatch for ServiceResult.

JSON for machines (--json), bare text for scripts (--quiet), and Rich
rendering for humans otherwise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from stubargs.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from stubargs.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags extracted from the CLI settings."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
