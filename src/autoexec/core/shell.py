# topmark:header:start
#
#   project      : Autoexec
#   file         : shell.py
#   file_relpath : src/autoexec/core/shell.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Live environment of a running DOS shell."""

from __future__ import annotations

from typing import Protocol


class ShellEnvironment(Protocol):
    """Environment of an already running command shell."""

    def set_env(self, name: str, value: str) -> bool:
        """Set (or, with an empty value, remove) ``name``; return False on failure."""
        ...


class DictShellEnvironment(ShellEnvironment):
    """Shell environment backed by a plain dict."""

    def __init__(self) -> None:
        self.variables: dict[str, str] = {}

    def set_env(self, name: str, value: str) -> bool:
        if value:
            self.variables[name] = value
        else:
            self.variables.pop(name, None)
        return True
