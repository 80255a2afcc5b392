# topmark:header:start
#
#   project      : Autoexec
#   file         : variables.py
#   file_relpath : src/autoexec/core/variables.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry of environment variables exported at the top of ``AUTOEXEC.BAT``.

Names are normalized to upper case. An empty value removes the variable; the
registry never holds an explicit empty entry. Snapshots are sorted by name so
the rendered ``@SET`` block is deterministic.
"""

from __future__ import annotations

from autoexec.config.logging import get_logger
from autoexec.core.errors import FatalValidationError

logger = get_logger(__name__)


def is_printable_ascii(text: str) -> bool:
    """Return True if every character of ``text`` is in the range 0x20..0x7E."""
    return all(" " <= ch <= "~" for ch in text)


class VariableRegistry:
    """Name-to-value mapping iterated in sorted-name order.

    Args:
        validate (bool): When True, names and values must be printable ASCII;
            a violation raises `FatalValidationError`.
    """

    def __init__(self, *, validate: bool = True) -> None:
        self.validate = validate
        self._values: dict[str, str] = {}

    @staticmethod
    def normalize_name(name: str) -> str:
        """Return the registry key for ``name``."""
        return name.upper()

    def check(self, name: str, value: str) -> None:
        """Validate a name/value pair if validation is enabled.

        Raises:
            FatalValidationError: If ``name`` or ``value`` contains a character
                outside printable ASCII.
        """
        if not self.validate:
            return
        if not is_printable_ascii(name):
            raise FatalValidationError(f"AUTOEXEC: Variable name is not a printable ASCII: {name!r}")
        if not is_printable_ascii(value):
            raise FatalValidationError(
                f"AUTOEXEC: Variable value is not a printable ASCII: {value!r}"
            )

    def set(self, name: str, value: str) -> str:
        """Set, overwrite or (with an empty value) remove a variable.

        Returns:
            str: The normalized variable name.
        """
        self.check(name, value)
        key: str = self.normalize_name(name)
        if value:
            self._values[key] = value
            logger.debug("Variable %s=%s", key, value)
        elif self._values.pop(key, None) is not None:
            logger.debug("Variable %s removed", key)
        return key

    def get(self, name: str) -> str | None:
        """Return the value of ``name`` or None if unset."""
        return self._values.get(self.normalize_name(name))

    def snapshot(self) -> tuple[tuple[str, str], ...]:
        """Return ``(name, value)`` pairs sorted by name."""
        return tuple(sorted(self._values.items()))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.normalize_name(name) in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __bool__(self) -> bool:
        return bool(self._values)
