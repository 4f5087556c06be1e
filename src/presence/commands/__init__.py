"""Subcommand modules for presence.

Provides register_commands() which uses deferred imports to keep
``presence --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from presence.commands.check import check
    from presence.commands.coalesce import coalesce
    from presence.commands.hooks import hooks

    cli.add_command(check)
    cli.add_command(coalesce)
    cli.add_command(hooks)
