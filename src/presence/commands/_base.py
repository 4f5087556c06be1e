"""Click command class shared by every presence subcommand.

Sample invocations (literal values, ``--json`` output) are kept out of
``--help``; ``--help`` ends with a pointer and ``--examples`` prints them.
"""

from __future__ import annotations

from typing import Any

import click

EXAMPLES_EPILOG = "Run with --examples for sample invocations."


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class PresenceCommand(click.Command):
    """Command with an optional ``--examples`` flag and matching help epilog."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        if examples and kwargs.get("epilog") is None:
            kwargs["epilog"] = EXAMPLES_EPILOG
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)
