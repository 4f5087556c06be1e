"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output, colors) or
machines (--json). The formatter layer adapts ServiceResult to the
requested output mode.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from rich.markup import escape

from presence.output.console import create_console, get_output, style_for_verdict

if TYPE_CHECKING:
    from rich.console import Console

    from presence.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags derived from the global CLI options."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    color: bool = True


def _render_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return _json.dumps(value, separators=(",", ":"))
    return str(value)


def _render_verdicts(console: Console, results: list[dict[str, Any]]) -> None:
    """One line per checked value: verdict, repr and type."""
    for entry in results:
        verdict = bool(entry.get("exists"))
        label = "exists" if verdict else "absent"
        console.print(
            f"  [{style_for_verdict(verdict)}]{label:<6}[/] "
            f"{escape(str(entry.get('value')))} "
            f"[presence.key]({escape(str(entry.get('type')))})[/]"
        )


def _format_human(result: ServiceResult, settings: OutputSettings) -> str:
    console = create_console(no_color=not settings.color)
    if not result.ok:
        error_msg = result.error.message if result.error else "Unknown error"
        console.print(
            f"[presence.error]ERROR:[/] [presence.op]{escape(result.op)}[/] - {escape(error_msg)}"
        )
        return get_output(console).rstrip("\n")

    console.print(f"[presence.ok]OK:[/] [presence.op]{escape(result.op)}[/]")
    if settings.quiet:
        return get_output(console).rstrip("\n")

    data = dict(result.data)
    results = data.pop("results", None)
    if isinstance(results, list):
        _render_verdicts(console, results)
    for key, value in data.items():
        console.print(f"  [presence.key]{escape(key)}:[/] {escape(_render_value(value))}")
    if settings.verbose and result.meta:
        console.print(f"  [presence.key]meta:[/] {escape(_render_value(result.meta))}")
    return get_output(console).rstrip("\n")


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode; takes precedence over *json_output*.
        json_output: Shortcut for ``OutputSettings(json_output=True)``.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)
    return _format_human(result, settings)
