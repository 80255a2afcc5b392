# topmark:header:start
#
#   project      : Autoexec
#   file         : errors.py
#   file_relpath : src/autoexec/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Autoexec CLI.

Raise these in commands to signal errors with standardized messages and exit
codes. Core errors (`autoexec.core.errors`) are translated at the command
boundary.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's
    default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from autoexec.cli.exit_codes import ExitCode


class AutoexecCliError(click.ClickException):
    """Base class for all Autoexec CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text, without color."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class AutoexecUsageError(AutoexecCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class AutoexecConfigError(AutoexecCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class AutoexecEncodingError(AutoexecCliError):
    """Error for script encoding failures."""

    exit_code = ExitCode.ENCODING_ERROR


class AutoexecIOError(AutoexecCliError):
    """Error for I/O errors writing the generated script."""

    exit_code = ExitCode.IO_ERROR


class AutoexecPipelineError(AutoexecCliError):
    """Error for script assembly failures."""

    exit_code = ExitCode.PIPELINE_ERROR

