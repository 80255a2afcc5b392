# topmark:header:start
#
#   project      : Autoexec
#   file         : main.py
#   file_relpath : src/autoexec/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point of the ``autoexec`` CLI.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read the console and levels from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from autoexec.cli.commands.dump_config import dump_config_command
from autoexec.cli.commands.generate import generate_command
from autoexec.cli.commands.version import version_command
from autoexec.cli.console import ClickConsole
from autoexec.cli.options import common_verbose_options, resolve_verbosity
from autoexec.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from autoexec.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, console) on the Click context.

    ``AUTOEXEC_LOG_LEVEL`` takes precedence over ``-v``/``-q`` for logging.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = verbose - quiet

    level_env: int | None = resolve_env_log_level()
    log_level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Generate DOSBox AUTOEXEC.BAT scripts.",
)
@common_verbose_options
@click.option("--no-color", "no_color", is_flag=True, help="Disable colored output.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the Autoexec CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'autoexec generate -- [DOSBOX ARGS...]' to build a script.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(dump_config_command)

cli.add_command(generate_command)

if __name__ == "__main__":
    cli()
