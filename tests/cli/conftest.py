# topmark:header:start
#
#   project      : Autoexec
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running Autoexec through Click's test runner.

Arguments meant for the generator (DOSBox-style single-dash switches) are
passed after ``--``. Assertions on program output use ``result.stdout`` so
that log records written to stderr never interfere.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

from click.testing import CliRunner, Result

from autoexec.cli.exit_codes import ExitCode
from autoexec.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI in the current working directory.

    Combine with the ``isolation`` fixture when the command reads
    ``autoexec.toml`` or relative launch directories.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g.
            ``["generate", "--no-config", "--", "-exit"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit_code(result: Result, expected: ExitCode) -> None:
    """Assert that the command exited with ``expected``."""
    assert result.exit_code == expected, result.output
