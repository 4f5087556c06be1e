"""``presence`` command line: evaluate existence for values typed in a shell.

The group builds one :class:`AppContext` from the global flags; the
commands themselves live in :mod:`presence.commands`.
"""

from __future__ import annotations

import click

from presence import __version__
from presence.commands import register_commands
from presence.commands._context import AppContext
from presence.config.settings import PresenceSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="presence")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="presence.toml or pyproject.toml to use instead of discovering one.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """Existence checks for values, independent of truthiness.

    None, NotImplemented, Ellipsis and NaN are absent; 0, "", [] and False
    exist.  Installed plugins can register checks for their own types.
    """
    ctx.ensure_object(dict)
    settings = PresenceSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
