"""Command: list plugins and registered existence checks."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from presence.commands._base import PresenceCommand

if TYPE_CHECKING:
    from presence.commands._context import AppContext


@click.command(
    cls=PresenceCommand,
    examples="""\
  presence hooks
  presence --json hooks""",
)
@click.pass_obj
def hooks(app: AppContext) -> None:
    """Show loaded plugins and the types with custom existence checks."""
    from presence.services.evaluate import EvaluateService

    svc = EvaluateService(app.plugins)
    app.emit(svc.describe_checks())
