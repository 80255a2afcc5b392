# topmark:header:start
#
#   project      : Autoexec
#   file         : exit_codes.py
#   file_relpath : src/autoexec/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standardized exit codes used by the Autoexec CLI."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Autoexec CLI.

    Autoexec follows the BSD `sysexits` convention where practical so other
    tooling can interpret failures consistently.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure. Prefer a more specific code if available.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Script could not be encoded. Mirrors BSD ``EX_DATAERR (65)``.
        PIPELINE_ERROR: Script assembly failed (e.g. a variable failed
            validation). Mirrors BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: I/O error writing the output. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration error. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    PIPELINE_ERROR = 70  # EX_SOFTWARE (internal error)
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
