# topmark:header:start
#
#   project      : Autoexec
#   file         : cmd_common.py
#   file_relpath : src/autoexec/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the Autoexec CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from autoexec.cli.errors import AutoexecConfigError
from autoexec.config.logging import get_logger
from autoexec.config.model import MutableConfig

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from autoexec.cli.console import ConsoleLike
    from autoexec.config.model import Config

logger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the root context by the ``autoexec`` group."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def build_config(
    ctx: click.Context,
    *,
    config_paths: Iterable[Path],
    no_config: bool,
    strict: bool = False,
) -> Config:
    """Merge defaults and config files into a `Config`, reporting diagnostics.

    Args:
        ctx (click.Context): Current Click context.
        config_paths (Iterable[Path]): Explicit config files, merged in order.
        no_config (bool): Ignore config files altogether.
        strict (bool): Turn config warnings into a config error.

    Returns:
        Config: The frozen configuration.

    Raises:
        AutoexecConfigError: In strict mode, when loading produced warnings.
    """
    console: ConsoleLike = get_console(ctx)

    draft: MutableConfig = MutableConfig.load_merged(tuple(config_paths), no_config=no_config)
    config: Config = draft.freeze()
    logger.trace("Merged config: %s", config)

    for diagnostic in config.diagnostics:
        console.warn(f"[{diagnostic.level.value}] {diagnostic.message}")

    if strict and config.diagnostics:
        raise AutoexecConfigError(
            f"Configuration has {len(config.diagnostics)} issue(s); aborting (--strict)."
        )
    return config
