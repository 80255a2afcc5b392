# topmark:header:start
#
#   project      : Autoexec
#   file         : errors.py
#   file_relpath : src/autoexec/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the Autoexec core.

These are framework-agnostic; the CLI maps them onto
[`autoexec.cli.errors`][autoexec.cli.errors] with sysexits-aligned exit codes.
"""

from __future__ import annotations


class AutoexecError(Exception):
    """Base class for all Autoexec core errors."""


class FatalValidationError(AutoexecError):
    """A variable name or value is not printable ASCII.

    This signals a programming error in the caller and is not meant to be
    recovered from; the CLI terminates with ``PIPELINE_ERROR``.
    """


class AutoexecStateError(AutoexecError):
    """An entry point was called in the wrong lifecycle state."""


class VirtualFileError(AutoexecError):
    """A virtual file was registered twice or updated before registration."""
