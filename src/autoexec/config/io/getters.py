# topmark:header:start
#
#   project      : Autoexec
#   file         : getters.py
#   file_relpath : src/autoexec/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value getters for TOML config tables.

Two families of getters exist:
- *Unchecked* getters: return defaults and only emit **debug** logs. Used for
  per-drive conf files, whose problems never stop a mount.
- *Checked* getters: validate the expected shape and record **warnings** in a
  `DiagnosticLog` (and also log a warning). Used for ``autoexec.toml``.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Final, TypeVar

from autoexec.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from autoexec.config.logging import AutoexecLogger
    from autoexec.core.diagnostics import DiagnosticLog

    from .types import TomlTable

logger: AutoexecLogger = get_logger(__name__)

E = TypeVar("E", bound=Enum)


def get_string_value(table: TomlTable, key: str, default: str = "") -> str:
    """Extract a string value from a TOML table.

    If the value is a ``str``, it is returned as is. If the value is of type
    ``int``, ``float``, or ``bool``, it is coerced to a string using ``str(...)``.
    When the key is missing or the value is not coercible, ``default`` is returned.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        default (str): Default value if the key is not found or not coercible.

    Returns:
        str: The extracted or coerced string value, or ``default``.
    """
    value: Any | None = table.get(key)
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, bool)):
        return str(value)
    logger.debug(
        "Cannot coerce %r to string, returning default (%s)",
        value,
        default,
    )
    return default


def get_bool_value(
    table: TomlTable,
    key: str,
    default: bool = False,
) -> bool:
    """Extract a boolean value from a TOML table.

    If the value is a ``bool``, it is returned as is. If the value is an integer,
    it is coerced via ``bool(value)``. When the key is missing or the value is not
    coercible, ``default`` is returned.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        default (bool): Default value if the key is not found or not coercible.

    Returns:
        bool: The extracted or coerced boolean value, or ``default``.
    """
    value: Any | None = table.get(key)
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    logger.debug(
        "Cannot coerce %r to bool, returning default (%r)",
        value,
        default,
    )
    return default


# --- Schema/shape validation helpers (checked) ---


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> str | None:
    """Return an optional string value, warning when present but not `str`."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value

    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected string in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected string in {loc}, got {type(value).__name__}: {value}")
    return None


def get_bool_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> bool | None:
    """Return an optional boolean value, warning when present but not `bool`.

    Unlike `get_bool_value()`, integers are not coerced.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value

    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected boolean in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected boolean in {loc}, got {type(value).__name__}: {value}")
    return None


def get_enum_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    parse: Callable[[str | None], E | None],
    where: str,
    diagnostics: DiagnosticLog,
) -> E | None:
    """Return an optional enum member parsed from a string value.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        parse (Callable[[str | None], E | None]): Parser such as an enum's
            ``from_name`` classmethod.
        where (str): Dotted location used in diagnostics (e.g. ``"dosbox"``).
        diagnostics (DiagnosticLog): Sink for warnings.

    Returns:
        E | None: The parsed member, or ``None`` when absent or invalid.
    """
    raw: str | None = get_string_value_or_none_checked(
        table, key, where=where, diagnostics=diagnostics
    )
    if raw is None:
        return None
    member: E | None = parse(raw)
    if member is None:
        loc: Final[str] = f"{where}.{key}"
        logger.warning("Invalid value in %s: %r", loc, raw)
        diagnostics.add_warning(f"Invalid value in {loc}: {raw!r}")
    return member
