# topmark:header:start
#
#   project      : Autoexec
#   file         : version.py
#   file_relpath : src/autoexec/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Autoexec `version` command.

Prints the Autoexec version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from autoexec.cli.cmd_common import get_console
from autoexec.constants import AUTOEXEC_VERSION

if TYPE_CHECKING:
    from autoexec.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of Autoexec.",
)
def version_command() -> None:
    """Show the current version of Autoexec."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    if ctx.obj.get("verbosity_level", 0) > 0:
        console.print(console.styled("Autoexec version:", bold=True, underline=True))
        console.print(f"    {console.styled(AUTOEXEC_VERSION, bold=True)}")
    else:
        console.print(console.styled(AUTOEXEC_VERSION, bold=True))
