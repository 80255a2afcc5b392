# topmark:header:start
#
#   project      : Autoexec
#   file         : generate.py
#   file_relpath : src/autoexec/cli/commands/generate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Autoexec `generate` command.

Builds ``AUTOEXEC.BAT`` from the merged configuration and DOSBox-style launch
arguments, then prints it (canonical text) or writes it (DOS-encoded bytes).

DOSBox arguments use single-dash switches (``-c``, ``-exit``, ``-securemode``,
``-noautoexec``); pass them after ``--`` so that they reach the generator
untouched:

```bash
autoexec generate --code-page 850 -- -c "mount d ." -securemode game.bat
```
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

import click

from autoexec.cli.cmd_common import build_config, get_console
from autoexec.cli.errors import (
    AutoexecEncodingError,
    AutoexecIOError,
    AutoexecPipelineError,
    AutoexecUsageError,
)
from autoexec.cli.options import EnumChoiceParam, common_config_options
from autoexec.config.logging import get_logger
from autoexec.constants import DEFAULT_CODE_PAGE
from autoexec.core.errors import AutoexecError
from autoexec.core.launch import CommandLine
from autoexec.core.module import AutoexecModule
from autoexec.core.resources import ResourceLocator
from autoexec.core.shell import DictShellEnvironment

if TYPE_CHECKING:
    from autoexec.cli.console import ConsoleLike
    from autoexec.config.model import Config

logger = get_logger(__name__)


class ScriptFormat(str, Enum):
    """Representation of the generated script."""

    TEXT = "text"  # canonical text, CR+LF line endings
    BYTES = "bytes"  # exactly what the virtual drive exposes


def parse_assignment(assignment: str) -> tuple[str, str]:
    """Split ``NAME=value`` into its parts; the value may be empty.

    Raises:
        AutoexecUsageError: When ``assignment`` has no ``=`` or no name.
    """
    name, sep, value = assignment.partition("=")
    if not sep or not name.strip():
        raise AutoexecUsageError(f"Invalid --set value {assignment!r}; expected NAME=value.")
    return name.strip(), value


def _write_output(path: Path, *, text: str, data: bytes, output_format: ScriptFormat) -> None:
    try:
        if output_format is ScriptFormat.BYTES:
            path.write_bytes(data)
        else:
            with path.open("w", encoding="utf-8", newline="") as fh:
                fh.write(text)
    except OSError as exc:
        raise AutoexecIOError(f"Cannot write {path}: {exc}") from exc


@click.command(
    name="generate",
    help="Generate AUTOEXEC.BAT from config files and DOSBox launch arguments.",
    epilog="Put DOSBox arguments after '--', e.g.: autoexec generate -- -c dir -exit game.bat",
    # Single-dash DOSBox switches must not be parsed as short option clusters
    context_settings={"help_option_names": ["--help"], "ignore_unknown_options": True},
)
@common_config_options
@click.option(
    "--strict",
    is_flag=True,
    help="Fail when the configuration has warnings.",
)
@click.option(
    "--code-page",
    "code_page",
    type=click.IntRange(min=1),
    default=DEFAULT_CODE_PAGE,
    show_default=True,
    help="Active DOS code page used to encode the script.",
)
@click.option(
    "--resource-dir",
    "resource_dirs",
    multiple=True,
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
    help="Directory searched for 'drives/<letter>' (repeatable; default: CWD).",
)
@click.option(
    "--set",
    "assignments",
    multiple=True,
    metavar="NAME=VALUE",
    help="Export a variable through '@SET' (repeatable; empty value removes it).",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(file_okay=True, dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write the script to this file instead of stdout.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(ScriptFormat),
    default=ScriptFormat.TEXT.value,
    show_default=True,
    help=f"Output format ({', '.join(v.value for v in ScriptFormat)}).",
)
@click.argument("dosbox_args", nargs=-1, type=click.UNPROCESSED)
def generate_command(
    *,
    no_config: bool,
    config_paths: tuple[Path, ...],
    strict: bool,
    code_page: int,
    resource_dirs: tuple[Path, ...],
    assignments: tuple[str, ...],
    output_path: Path | None,
    output_format: ScriptFormat,
    dosbox_args: tuple[str, ...],
) -> None:
    """Generate ``AUTOEXEC.BAT``.

    Args:
        no_config (bool): Skip config files.
        config_paths (tuple[Path, ...]): Config files to merge, in order.
        strict (bool): Fail on config warnings.
        code_page (int): Active DOS code page.
        resource_dirs (tuple[Path, ...]): Search directories for drive resources.
        assignments (tuple[str, ...]): ``NAME=value`` variables to export.
        output_path (Path | None): Destination file; stdout when None.
        output_format (ScriptFormat): Text or encoded bytes.
        dosbox_args (tuple[str, ...]): DOSBox launch arguments.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    variables: list[tuple[str, str]] = [parse_assignment(a) for a in assignments]
    config: Config = build_config(
        ctx, config_paths=config_paths, no_config=no_config, strict=strict
    )

    shell = DictShellEnvironment()
    module = AutoexecModule(
        code_page_provider=lambda: code_page,
        locator=ResourceLocator(resource_dirs or None),
    )
    logger.debug("Launch arguments: %s", dosbox_args)

    try:
        module.initialize(config, CommandLine(dosbox_args))
        module.attach_shell(shell)
        for name, value in variables:
            module.set_variable(name, value)
        text: str = module.render()
        data: bytes = module.exposed_bytes()
    except UnicodeError as exc:
        raise AutoexecEncodingError(f"Cannot encode script for code page {code_page}: {exc}") from exc
    except AutoexecError as exc:
        raise AutoexecPipelineError(str(exc)) from exc

    if output_path is not None:
        _write_output(output_path, text=text, data=data, output_format=output_format)
        logger.info("Wrote %s (%d bytes)", output_path, len(data))
        return

    if output_format is ScriptFormat.BYTES:
        console.write_bytes(data)
    else:
        console.print(text, nl=False)
