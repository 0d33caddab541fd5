"""Diagnostic collector for accumulating messages during lexing and parsing."""

from __future__ import annotations

from minipas.diagnostics.diagnostic import Diagnostic
from minipas.diagnostics.location import SourceLocation
from minipas.diagnostics.severity import DiagnosticKind, DiagnosticSeverity
from minipas.diagnostics.source_map import SourceFile


class DiagnosticCollector:
    """Accumulates diagnostics during lexing and parsing."""

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def error(
        self,
        message: str,
        location: SourceLocation | None = None,
        *,
        kind: DiagnosticKind | None = None,
        expected: str | None = None,
        found: str | None = None,
        notes: tuple[str, ...] = (),
    ) -> Diagnostic:
        """Record an error diagnostic and return it."""
        diag = Diagnostic(
            DiagnosticSeverity.ERROR,
            message,
            location,
            notes,
            kind=kind,
            expected=expected,
            found=found,
        )
        self._diagnostics.append(diag)
        return diag

    def warning(
        self,
        message: str,
        location: SourceLocation | None = None,
        *,
        notes: tuple[str, ...] = (),
    ) -> None:
        """Record a warning diagnostic."""
        self._diagnostics.append(Diagnostic(DiagnosticSeverity.WARNING, message, location, notes))

    def info(
        self,
        message: str,
        location: SourceLocation | None = None,
        *,
        notes: tuple[str, ...] = (),
    ) -> None:
        """Record an informational diagnostic."""
        self._diagnostics.append(Diagnostic(DiagnosticSeverity.INFO, message, location, notes))

    def has_errors(self) -> bool:
        """Return True if any error diagnostics have been recorded."""
        return any(d.severity == DiagnosticSeverity.ERROR for d in self._diagnostics)

    def error_count(self) -> int:
        return sum(1 for d in self._diagnostics if d.severity == DiagnosticSeverity.ERROR)

    def errors(self) -> list[Diagnostic]:
        """Return the error diagnostics in the order they were recorded."""
        return [d for d in self._diagnostics if d.severity == DiagnosticSeverity.ERROR]

    def get_all(self) -> list[Diagnostic]:
        """Return a copy of all collected diagnostics."""
        return list(self._diagnostics)

    def format_all(self, source_file: SourceFile | None = None) -> str:
        """Format all diagnostics as a newline-separated string.

        When *source_file* is given, each located diagnostic is followed by
        the offending source line and a caret underline.
        """
        if source_file is None:
            return "\n".join(str(d) for d in self._diagnostics)
        return "\n".join(_render(d, source_file) for d in self._diagnostics)


def _render(diag: Diagnostic, source_file: SourceFile) -> str:
    loc = diag.location
    if loc is None or not 1 <= loc.line <= source_file.line_count:
        return str(diag)
    text = source_file.line_text(loc.line)
    width = 1
    if loc.end_line == loc.line and loc.end_column is not None:
        width = max(1, loc.end_column - loc.column)
    gutter = str(loc.line)
    pad = " " * len(gutter)
    underline = " " * (loc.column - 1) + "^" * width
    return f"{diag}\n {gutter} | {text}\n {pad} | {underline}"
