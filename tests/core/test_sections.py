# topmark:header:start
#
#   project      : Autoexec
#   file         : test_sections.py
#   file_relpath : tests/core/test_sections.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the three-slot section buffer."""

from __future__ import annotations

from autoexec.core.sections import Location, Provenance, SectionBuffer


def test_items_follow_location_order_not_insertion_order() -> None:
    buffer = SectionBuffer()
    buffer.add_command_after("@EXIT")
    buffer.add_autoexec_line("dir")
    buffer.add_command_before("@C:")

    assert [loc for loc, _ in buffer.items()] == [
        Location.BEFORE,
        Location.USER_CONTENT,
        Location.AFTER,
    ]
    assert dict(buffer.items()) == {
        Location.BEFORE: ("@C:",),
        Location.USER_CONTENT: ("dir",),
        Location.AFTER: ("@EXIT",),
    }


def test_insertion_order_is_kept_within_a_location() -> None:
    buffer = SectionBuffer()
    for line in ("one", "", "three"):
        buffer.add(Location.USER_CONTENT, line)

    assert buffer.lines(Location.USER_CONTENT) == ("one", "", "three")


def test_lines_returns_a_snapshot() -> None:
    buffer = SectionBuffer()
    buffer.add_command_before("a")
    snapshot = buffer.lines(Location.BEFORE)
    buffer.add_command_before("b")

    assert snapshot == ("a",)


def test_is_empty_and_clear() -> None:
    buffer = SectionBuffer()
    assert buffer.is_empty()

    buffer.add_command_before("")
    assert not buffer.is_empty()

    buffer.clear()
    assert buffer.is_empty()
    assert repr(buffer) == "SectionBuffer(BEFORE=0, USER_CONTENT=0, AFTER=0)"


def test_provenance_classes() -> None:
    assert Location.BEFORE.provenance is Provenance.GENERATED
    assert Location.AFTER.provenance is Provenance.GENERATED
    assert Location.USER_CONTENT.provenance is Provenance.CONFIG_SECTION
