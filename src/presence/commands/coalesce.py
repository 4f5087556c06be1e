"""Command: first existing value of a ``?else`` chain."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from presence.commands._base import PresenceCommand

if TYPE_CHECKING:
    from presence.commands._context import AppContext


@click.command(
    cls=PresenceCommand,
    examples="""\
  presence coalesce None nan 0
  presence coalesce ... "'default'"
  presence --json coalesce None None""",
)
@click.argument("values", nargs=-1, required=True)
@click.pass_obj
def coalesce(app: AppContext, values: tuple[str, ...]) -> None:
    """Evaluate VALUES left to right and print the first that exists."""
    from presence.services.evaluate import EvaluateService

    svc = EvaluateService(app.plugins)
    app.emit(svc.coalesce(values))
