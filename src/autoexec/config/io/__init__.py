# topmark:header:start
#
#   project      : Autoexec
#   file         : __init__.py
#   file_relpath : src/autoexec/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for Autoexec configuration.

This package centralizes **pure** helpers for reading, validating, and writing TOML
used by Autoexec's configuration layer. Keeping these utilities separate helps avoid
import cycles and keeps the model classes small and focused.

TOML parsing/formatting:
    Autoexec uses `tomlkit` for parsing and rendering.

    - `load_toml_dict()` parses on-disk TOML using tomlkit and returns plain dicts.
    - `to_toml()` renders using tomlkit (after stripping `None` values).

Typical flow:
    1. Load defaults (``load_defaults_dict``).
    2. Load project TOML files (``load_toml_dict``).
    3. Read values with typed getters (unchecked or checked variants).
    4. Serialize back to TOML when needed (``to_toml``).
"""

from __future__ import annotations

from .getters import (
    get_bool_value,
    get_bool_value_or_none_checked,
    get_enum_value_or_none_checked,
    get_string_value,
    get_string_value_or_none_checked,
)
from .guards import get_table_value, is_toml_table
from .loaders import load_defaults_dict, load_toml_dict
from .render import to_toml
from .types import TomlTable

__all__ = [
    "TomlTable",
    "get_bool_value",
    "get_bool_value_or_none_checked",
    "get_enum_value_or_none_checked",
    "get_string_value",
    "get_string_value_or_none_checked",
    "get_table_value",
    "is_toml_table",
    "load_defaults_dict",
    "load_toml_dict",
    "to_toml",
]
