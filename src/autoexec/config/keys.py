# topmark:header:start
#
#   project      : Autoexec
#   file         : keys.py
#   file_relpath : src/autoexec/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for Autoexec configuration.

This module defines the authoritative string constants used when reading,
writing, and validating Autoexec configuration from ``autoexec.toml`` and
from the per-drive ``drives/<letter>.conf`` files.

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
    - Launch switches are DOSBox command-line spellings and live in
      [`autoexec.core.launch`][autoexec.core.launch].
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by Autoexec configuration.

    Notes:
        - Values must match user-facing TOML keys exactly.
        - Renaming or removing a key is a breaking change.
    """

    # [dosbox]
    SECTION_DOSBOX: Final[str] = "dosbox"

    KEY_AUTOMOUNT: Final[str] = "automount"
    KEY_AUTOEXEC_SECTION: Final[str] = "autoexec_section"
    KEY_STARTUP_VERBOSITY: Final[str] = "startup_verbosity"

    # [autoexec]
    SECTION_AUTOEXEC: Final[str] = "autoexec"

    KEY_TEXT: Final[str] = "text"

    # [drive] (per-drive conf files)
    SECTION_DRIVE: Final[str] = "drive"

    KEY_DRIVE_TYPE: Final[str] = "type"
    KEY_DRIVE_LABEL: Final[str] = "label"
    KEY_DRIVE_PATH: Final[str] = "path"
    KEY_DRIVE_OVERRIDE: Final[str] = "override_drive"
    KEY_DRIVE_READONLY: Final[str] = "readonly"
