# topmark:header:start
#
#   project      : Autoexec
#   file         : generator.py
#   file_relpath : src/autoexec/core/generator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render the canonical text of ``AUTOEXEC.BAT``.

Layout of the rendered script:

1. When echo is silenced or variables are set, a ``:: autogenerated`` header,
   then ``@ECHO OFF`` and one ``@SET NAME=value`` per variable (sorted), each
   group preceded by a blank line, and a blank separator line.
2. The non-empty locations of the section buffer in fixed order. Whenever the
   provenance class changes, a provenance header comment is inserted, framed
   by blank lines. Consecutive generated locations share one header.
3. Every line ends with CR+LF, blank lines included.

The renderer is a pure function of its inputs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from autoexec.constants import COMMENT_PREFIX, DOS_NEWLINE
from autoexec.core.messages import MSG_AUTOGENERATED, MSG_CONFIG_SECTION
from autoexec.core.sections import Provenance

if TYPE_CHECKING:
    from collections.abc import Iterable

    from autoexec.core.messages import MessageCatalog
    from autoexec.core.sections import SectionBuffer

ECHO_OFF_COMMAND = "@ECHO OFF"
SET_COMMAND = "@SET"

_PROVENANCE_MESSAGES: dict[Provenance, str] = {
    Provenance.GENERATED: MSG_AUTOGENERATED,
    Provenance.CONFIG_SECTION: MSG_CONFIG_SECTION,
}


def format_set_command(name: str, value: str) -> str:
    """Return the batch command exporting ``name``."""
    return f"{SET_COMMAND} {name}={value}"


class _ScriptWriter:
    """Accumulates DOS lines and tracks the provenance of the last block."""

    def __init__(self) -> None:
        self.parts: list[str] = []
        self.provenance: Provenance | None = None

    def is_empty(self) -> bool:
        return not self.parts

    def line(self, text: str = "") -> None:
        self.parts.append(text + DOS_NEWLINE)

    def text(self) -> str:
        return "".join(self.parts)


def render(
    sections: SectionBuffer,
    variables: Iterable[tuple[str, str]],
    *,
    echo_off: bool,
    messages: MessageCatalog,
) -> str:
    """Render the script as canonical text.

    Args:
        sections (SectionBuffer): Lines to render, by location.
        variables (Iterable[tuple[str, str]]): ``(name, value)`` pairs, already
            sorted by name (see `VariableRegistry.snapshot`).
        echo_off (bool): Whether the script starts with ``@ECHO OFF``.
        messages (MessageCatalog): Source of the header comment texts.

    Returns:
        str: The script text with CR+LF line endings; empty when there is
            nothing to render.
    """
    out = _ScriptWriter()
    variables = tuple(variables)

    def header(provenance: Provenance) -> str:
        return COMMENT_PREFIX + messages.get(_PROVENANCE_MESSAGES[provenance])

    if echo_off or variables:
        out.line(header(Provenance.GENERATED))
        out.provenance = Provenance.GENERATED

        if echo_off:
            out.line()
            out.line(ECHO_OFF_COMMAND)

        if variables:
            out.line()
            for name, value in variables:
                out.line(format_set_command(name, value))

        out.line()

    for location, lines in sections.items():
        if not lines:
            continue

        if out.provenance is not location.provenance:
            if not out.is_empty():
                out.line()
            out.line(header(location.provenance))
            out.line()
            out.provenance = location.provenance

        for text in lines:
            out.line(text)

    return out.text()
