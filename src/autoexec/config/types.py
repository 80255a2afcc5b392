# topmark:header:start
#
#   project      : Autoexec
#   file         : types.py
#   file_relpath : src/autoexec/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight config types and aliases.

This module hosts stable, import-friendly definitions that other config modules
can depend on without risk of circular imports.

Exports:
    - `AutoexecSectionMode`: how ``[autoexec]`` sections of several config
      files are combined.
    - `StartupVerbosity`: the runtime's startup mode; only
      ``INSTANT_LAUNCH`` influences script generation.
"""

from __future__ import annotations

from enum import Enum


class AutoexecSectionMode(str, Enum):
    """Available strategies for combining ``[autoexec]`` sections."""

    OVERWRITE = "overwrite"
    JOIN = "join"

    @classmethod
    def from_name(cls, key_name: str | None) -> AutoexecSectionMode | None:
        """Finds the AutoexecSectionMode member by its case-insensitive value.

        Args:
            key_name (str | None): The configured value (e.g., "join") or None.

        Returns:
            AutoexecSectionMode | None: The matching member or None
                if the key is None or unmatched.
        """
        if key_name is None:
            return None
        return cls.__members__.get(key_name.strip().upper())


class StartupVerbosity(str, Enum):
    """Startup verbosity of the runtime."""

    HIGH = "high"
    LOW = "low"
    QUIET = "quiet"
    AUTO = "auto"
    INSTANT_LAUNCH = "instant-launch"

    @classmethod
    def from_name(cls, key_name: str | None) -> StartupVerbosity | None:
        """Finds the StartupVerbosity member by its case-insensitive value.

        Both ``instant-launch`` and ``instant_launch`` are accepted.

        Args:
            key_name (str | None): The configured value or None.

        Returns:
            StartupVerbosity | None: The matching member or None
                if the key is None or unmatched.
        """
        if key_name is None:
            return None
        target_name: str = key_name.strip().upper().replace("-", "_")
        return cls.__members__.get(target_name)
