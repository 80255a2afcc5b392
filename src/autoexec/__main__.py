# topmark:header:start
#
#   project      : Autoexec
#   file         : __main__.py
#   file_relpath : src/autoexec/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Autoexec via ``python -m autoexec``.

It delegates directly to :func:`autoexec.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how Autoexec is launched.

Examples:
    Render the script for a game directory::

        python -m autoexec generate -- ./games/keen
"""

from __future__ import annotations

from autoexec.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
