"""Lex and parse error types for the minipas front end."""

from __future__ import annotations

from minipas.diagnostics.location import SourceLocation
from minipas.diagnostics.severity import DiagnosticKind


class ParseError(Exception):
    """Raised during parsing once the failure has been recorded as a diagnostic."""

    def __init__(
        self,
        message: str,
        location: SourceLocation | None = None,
        *,
        kind: DiagnosticKind = DiagnosticKind.UNEXPECTED_TOKEN,
        expected: str | None = None,
        found: str | None = None,
    ) -> None:
        super().__init__(message)
        self.location = location
        self.kind = kind
        self.expected = expected
        self.found = found


class LexError(ParseError):
    """Raised by the lexer on malformed input text."""


class TooManyErrorsError(ParseError):
    """Raised when the error limit is reached; never recovered from."""

    def __init__(self, limit: int, location: SourceLocation | None = None) -> None:
        super().__init__(
            f"Too many errors ({limit}), giving up",
            location,
            kind=DiagnosticKind.TOO_MANY_ERRORS,
        )
        self.limit = limit


class NestingTooDeepError(ParseError):
    """Raised when blocks or parentheses nest past the depth limit; never recovered from."""

    def __init__(self, limit: int, location: SourceLocation | None = None) -> None:
        super().__init__(
            f"Nesting deeper than {limit} levels",
            location,
            kind=DiagnosticKind.NESTING_TOO_DEEP,
        )
        self.limit = limit
