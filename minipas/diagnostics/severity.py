"""Diagnostic severity levels and kinds for minipas."""

from __future__ import annotations

from enum import Enum


class DiagnosticSeverity(Enum):
    """Severity level of a diagnostic message."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    def __str__(self) -> str:
        return self.value


class DiagnosticKind(Enum):
    """Classification of lexical and syntax failures."""

    # Lexical
    UNEXPECTED_CHARACTER = "UnexpectedCharacter"
    UNTERMINATED_STRING = "UnterminatedString"
    MISSING_EXPONENT_DIGITS = "MissingExponentDigits"

    # Syntax
    EXPECTED_TOKEN = "ExpectedToken"
    UNEXPECTED_TOKEN = "UnexpectedToken"
    UNEXPECTED_END_OF_INPUT = "UnexpectedEndOfInput"

    # Well-formed but unrepresentable
    LITERAL_OUT_OF_RANGE = "LiteralOutOfRange"
    NESTING_TOO_DEEP = "NestingTooDeep"

    # Parser gave up after too many recorded errors
    TOO_MANY_ERRORS = "TooManyErrors"

    def __str__(self) -> str:
        return self.value

    def is_lexical(self) -> bool:
        """Return True if this kind is produced by the lexer."""
        return self in (
            DiagnosticKind.UNEXPECTED_CHARACTER,
            DiagnosticKind.UNTERMINATED_STRING,
            DiagnosticKind.MISSING_EXPONENT_DIGITS,
        )
