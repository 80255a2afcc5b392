# topmark:header:start
#
#   project      : Autoexec
#   file         : dump_config.py
#   file_relpath : src/autoexec/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Autoexec `dump-config` command.

Emits the effective configuration as TOML after applying defaults and any
config files. The output is wrapped between ``# === BEGIN ===`` and
``# === END ===`` markers for easy parsing in tests or tooling.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from autoexec.cli.cmd_common import build_config, get_console
from autoexec.cli.options import common_config_options
from autoexec.config.io import to_toml
from autoexec.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from autoexec.cli.console import ConsoleLike
    from autoexec.config.model import Config

logger = get_logger(__name__)

BEGIN_MARKER = "# === BEGIN ==="
END_MARKER = "# === END ==="


@click.command(
    name="dump-config",
    help="Dump the final merged Autoexec configuration as TOML.",
    epilog="Output is wrapped between '# === BEGIN ===' and '# === END ===' markers.",
)
@common_config_options
def dump_config_command(
    *,
    no_config: bool,
    config_paths: tuple[Path, ...],
) -> None:
    """Dump the final merged configuration as TOML.

    Args:
        no_config (bool): If True, skip loading config files.
        config_paths (tuple[Path, ...]): Config files to merge, in order.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    config: Config = build_config(ctx, config_paths=config_paths, no_config=no_config)

    console.print("# Merged Autoexec config (TOML):")
    for source in config.config_files:
        console.print(f"#   - {source}")
    console.print()
    console.print(BEGIN_MARKER)
    console.print(to_toml(config.to_toml_dict()).rstrip("\n"))
    console.print(END_MARKER)
