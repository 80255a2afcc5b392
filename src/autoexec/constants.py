# topmark:header:start
#
#   project      : Autoexec
#   file         : constants.py
#   file_relpath : src/autoexec/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Autoexec Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

AUTOEXEC_VERSION: str = get_version("autoexec")

# Name of the generated script as seen on the virtual drive
AUTOEXEC_FILE_NAME: Final[str] = "AUTOEXEC.BAT"

# Name of the config file discovered in the working directory
DEFAULT_CONFIG_FILE_NAME: Final[str] = "autoexec.toml"

# DOS line ending (CR+LF)
DOS_NEWLINE: Final[str] = "\r\n"

# Batch file comment prefix used for the provenance headers
COMMENT_PREFIX: Final[str] = ":: "

# Code page assumed when the runtime does not report one
DEFAULT_CODE_PAGE: Final[int] = 437

# Resource sub-directory scanned by the drive auto-mounter
DRIVES_RESOURCE_DIR: Final[str] = "drives"

# Extension of the optional per-drive configuration file
DRIVE_CONF_SUFFIX: Final[str] = ".conf"

# Environment variable used to force the internal log level
LOG_LEVEL_ENV_VAR: Final[str] = "AUTOEXEC_LOG_LEVEL"
