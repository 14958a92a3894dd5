"""Output mode dispatch for ServiceResult.

The CLI renders results for humans (Rich tables and panels), for scripts
(``--quiet``: names only), or for machines (``--json``).  Some operations
also carry a canonical plain-text rendering in their payload; human mode
prefers it when the caller asks for it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    from countryctl.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags resolved from the CLI."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    width: int | None = None
    no_color: bool = False


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    text_key: str | None = None,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output flags; defaults to human mode.
        text_key: Payload key holding a preformatted text rendering.
            Used in human mode for successful results that carry it.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)

    from countryctl.output.renderers import render_quiet, render_result

    if settings.quiet:
        return render_quiet(result)
    if result.ok and text_key and text_key in result.data:
        return str(result.data[text_key]).rstrip("\n")
    return render_result(
        result,
        verbose=settings.verbose,
        width=settings.width,
        no_color=settings.no_color,
    )
