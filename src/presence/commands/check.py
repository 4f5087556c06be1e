"""Command: existence verdicts for literal values."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from presence.commands._base import PresenceCommand

if TYPE_CHECKING:
    from presence.commands._context import AppContext


@click.command(
    cls=PresenceCommand,
    examples="""\
  presence check 0 "''" "[]" False
  presence check None ... NotImplemented nan
  presence check "Decimal('NaN')"
  presence --json check 1 None""",
)
@click.argument("values", nargs=-1, required=True)
@click.pass_obj
def check(app: AppContext, values: tuple[str, ...]) -> None:
    """Report whether each VALUE exists (is not an absence marker)."""
    from presence.services.evaluate import EvaluateService

    svc = EvaluateService(app.plugins)
    app.emit(svc.check(values))
