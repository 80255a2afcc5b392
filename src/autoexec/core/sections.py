# topmark:header:start
#
#   project      : Autoexec
#   file         : sections.py
#   file_relpath : src/autoexec/core/sections.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Section buffer holding the lines of the generated ``AUTOEXEC.BAT``.

The buffer has exactly three slots, one per [`Location`][autoexec.core.sections.Location]:

- ``BEFORE``: commands synthesized before the user content (auto-mounts,
  ``-c`` switches, launch target);
- ``USER_CONTENT``: the ``[autoexec]`` section from configuration;
- ``AFTER``: commands synthesized after the user content (trailing
  secure-mode command, ``@EXIT``).

Iteration always follows the ``Location`` order, never insertion order.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class Provenance(Enum):
    """Origin class of a block of lines; governs header-comment insertion."""

    GENERATED = "generated"
    CONFIG_SECTION = "config_section"


class Location(IntEnum):
    """Where a line is placed in the generated script."""

    BEFORE = 0
    USER_CONTENT = 1
    AFTER = 2

    @property
    def provenance(self) -> Provenance:
        """Return the provenance class of lines stored at this location."""
        if self is Location.USER_CONTENT:
            return Provenance.CONFIG_SECTION
        return Provenance.GENERATED


class SectionBuffer:
    """Three ordered line lists keyed by `Location`."""

    def __init__(self) -> None:
        self._slots: tuple[list[str], list[str], list[str]] = ([], [], [])

    def add(self, location: Location, line: str) -> None:
        """Append ``line`` to the slot at ``location``."""
        self._slots[location].append(line)

    def add_command_before(self, line: str) -> None:
        """Append a synthesized command placed before the user content."""
        self.add(Location.BEFORE, line)

    def add_command_after(self, line: str) -> None:
        """Append a synthesized command placed after the user content."""
        self.add(Location.AFTER, line)

    def add_autoexec_line(self, line: str) -> None:
        """Append a line of user content."""
        self.add(Location.USER_CONTENT, line)

    def lines(self, location: Location) -> tuple[str, ...]:
        """Return a snapshot of the lines stored at ``location``."""
        return tuple(self._slots[location])

    def items(self) -> Iterator[tuple[Location, tuple[str, ...]]]:
        """Yield ``(location, lines)`` pairs in rendering order."""
        for location in Location:
            yield location, self.lines(location)

    def is_empty(self) -> bool:
        """Return True if no slot holds any line."""
        return not any(self._slots)

    def clear(self) -> None:
        """Remove all lines from all slots."""
        for slot in self._slots:
            slot.clear()

    def __repr__(self) -> str:
        counts = ", ".join(f"{loc.name}={len(self._slots[loc])}" for loc in Location)
        return f"SectionBuffer({counts})"
