"""Diagnostic message representation for minipas."""

from __future__ import annotations

from dataclasses import dataclass

from minipas.diagnostics.location import SourceLocation
from minipas.diagnostics.severity import DiagnosticKind, DiagnosticSeverity


@dataclass(frozen=True)
class Diagnostic:
    """A single diagnostic message.

    ``expected`` describes what the parser required (e.g. ``"';'"``) and
    ``found`` is the offending source text, when either applies.
    """

    severity: DiagnosticSeverity
    message: str
    location: SourceLocation | None = None
    notes: tuple[str, ...] = ()
    kind: DiagnosticKind | None = None
    expected: str | None = None
    found: str | None = None

    def __str__(self) -> str:
        loc = f"{self.location}: " if self.location else ""
        tag = f"{self.severity}[{self.kind}]" if self.kind else f"{self.severity}"
        return f"{loc}{tag}: {self.message}"
