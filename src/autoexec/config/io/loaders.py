# topmark:header:start
#
#   project      : Autoexec
#   file         : loaders.py
#   file_relpath : src/autoexec/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading Autoexec configuration from
on-disk TOML files (``autoexec.toml`` and the per-drive ``<letter>.conf``
files), plus the runtime defaults.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from autoexec.config.keys import Toml
from autoexec.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from autoexec.config.logging import AutoexecLogger

    from .types import TomlTable

logger: AutoexecLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return Autoexec's **runtime defaults** as a Python dict.

    This function intentionally performs **no I/O**.

    Returns:
        A TOML-table-compatible dict containing the runtime defaults.

    Notes:
        The returned value is a new dict so callers can mutate it safely.
    """
    return {
        Toml.SECTION_DOSBOX: {
            Toml.KEY_AUTOMOUNT: True,
            Toml.KEY_AUTOEXEC_SECTION: "join",
            Toml.KEY_STARTUP_VERBOSITY: "auto",
        },
        Toml.SECTION_AUTOEXEC: {
            Toml.KEY_TEXT: "",
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``autoexec.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}
    except (TypeError, ValueError) as e:
        logger.error("Unknown error while reading TOML from %s: %s", path, e)
        return {}
