# topmark:header:start
#
#   project      : Autoexec
#   file         : __init__.py
#   file_relpath : src/autoexec/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the ``autoexec`` CLI."""
