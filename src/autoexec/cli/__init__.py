# topmark:header:start
#
#   project      : Autoexec
#   file         : __init__.py
#   file_relpath : src/autoexec/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click command-line interface of Autoexec."""
