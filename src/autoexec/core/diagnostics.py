# topmark:header:start
#
#   project      : Autoexec
#   file         : diagnostics.py
#   file_relpath : src/autoexec/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core diagnostic types and helpers for Autoexec.

Diagnostics collect the non-fatal problems found while loading configuration
(unknown enum values, wrongly typed keys). They are surfaced by the CLI and
kept on the frozen [`Config`][autoexec.config.model.Config].

Sections:
    * DiagnosticLevel: severity levels.
    * Diagnostic: immutable structured diagnostic payload (level + message).
    * DiagnosticLog: mutable collection with helpers for adding diagnostics.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from autoexec.config.logging import get_logger

if TYPE_CHECKING:
    from autoexec.config.logging import AutoexecLogger


logger: AutoexecLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics; config loading only reports warnings."""

    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level and message."""

    level: DiagnosticLevel
    message: str


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def _add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        logger.trace("Adding [%s]: %r", diagnostic.level.value, diagnostic.message)

    def add_warning(self, message: str) -> None:
        """Add a ``warning`` diagnostic to the diagnostic log."""
        self._add(Diagnostic(DiagnosticLevel.WARNING, message))

    def has_warning(self) -> bool:
        """Return True if the DiagnosticLog contains warning diagnostics."""
        return any(d.level == DiagnosticLevel.WARNING for d in self.items)

    def __len__(self) -> int:
        return len(self.items)
