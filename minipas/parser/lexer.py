"""Lexer (tokenizer) for minipas source code."""

from __future__ import annotations

from collections.abc import Iterator
from typing import NoReturn

from minipas.diagnostics.collector import DiagnosticCollector
from minipas.diagnostics.location import SourceLocation
from minipas.diagnostics.severity import DiagnosticKind
from minipas.parser.errors import LexError
from minipas.parser.tokens import KEYWORDS, Token, TokenKind

_DIGITS = frozenset("0123456789")
_IDENT_START = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_")
_IDENT_BODY = _IDENT_START | _DIGITS
_WHITESPACE = frozenset(" \t\r\n")


class Lexer:
    """Tokenize minipas source on demand.

    ``next_token`` scans one token at a time and is what the parser pulls
    from.  Iterating the lexer restarts from the beginning of the source.
    Lexical errors are recorded in the diagnostic collector and raised as
    ``LexError``; the offending text has already been consumed, so scanning
    can continue with the next call.
    """

    # Single-character tokens that need no lookahead.
    _SINGLE_CHAR: dict[str, TokenKind] = {
        "+": TokenKind.PLUS,
        "-": TokenKind.MINUS,
        "*": TokenKind.STAR,
        "/": TokenKind.SLASH,
        "(": TokenKind.LPAREN,
        ")": TokenKind.RPAREN,
        "{": TokenKind.LBRACE,
        "}": TokenKind.RBRACE,
        ":": TokenKind.COLON,
        ";": TokenKind.SEMICOLON,
        ",": TokenKind.COMMA,
    }

    # Operators with a two-character form ending in '='.
    _EQ_SUFFIXED: dict[str, tuple[TokenKind, TokenKind]] = {
        "=": (TokenKind.EQUALS, TokenKind.EQ_EQ),
        "<": (TokenKind.LESS, TokenKind.LESS_EQ),
        ">": (TokenKind.GREATER, TokenKind.GREATER_EQ),
    }

    def __init__(
        self,
        source: str,
        filename: str = "<string>",
        diagnostics: DiagnosticCollector | None = None,
    ) -> None:
        if not isinstance(source, str):
            raise TypeError(f"source must be str, not {type(source).__name__}")
        self._source = source
        self._filename = filename
        self._diag = diagnostics or DiagnosticCollector()
        self._pos = 0
        self._line = 1
        self._col = 1

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def diagnostics(self) -> DiagnosticCollector:
        return self._diag

    def reset(self) -> None:
        """Rewind to the start of the source."""
        self._pos = 0
        self._line = 1
        self._col = 1

    # ------------------------------------------------------------------
    # Helper methods
    # ------------------------------------------------------------------

    def _peek(self, offset: int = 0) -> str:
        """Return character at current position + offset, or '' at EOF."""
        idx = self._pos + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _advance(self) -> str:
        """Consume and return the current character, updating line/col."""
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _span(self, start: int, line: int, col: int) -> SourceLocation:
        """Location from (start, line, col) up to the current position."""
        return SourceLocation(
            file=self._filename,
            line=line,
            column=col,
            end_line=self._line,
            end_column=self._col,
            offset=start,
        )

    def _token(self, kind: TokenKind, start: int, line: int, col: int) -> Token:
        return Token(kind, self._source[start : self._pos], self._span(start, line, col))

    def _error(
        self,
        kind: DiagnosticKind,
        message: str,
        start: int,
        line: int,
        col: int,
    ) -> NoReturn:
        """Record a lexical error spanning start..current and raise it."""
        loc = self._span(start, line, col)
        found = self._source[start : self._pos]
        self._diag.error(message, loc, kind=kind, found=found)
        raise LexError(message, loc, kind=kind, found=found)

    # ------------------------------------------------------------------
    # Scanning helpers
    # ------------------------------------------------------------------

    def _skip_whitespace(self) -> None:
        while self._peek() in _WHITESPACE:
            self._advance()

    def _scan_string(self, start: int, line: int, col: int) -> Token:
        """Scan a double-quoted string literal. Opening '"' already consumed."""
        while not self._at_end() and self._peek() not in ('"', "\n"):
            self._advance()
        if self._at_end() or self._peek() == "\n":
            # The newline itself is left for the whitespace skipper.
            self._error(
                DiagnosticKind.UNTERMINATED_STRING,
                "Missing terminating '\"' for string literal",
                start,
                line,
                col,
            )
        self._advance()  # closing '"'
        return self._token(TokenKind.STRING_LIT, start, line, col)

    def _scan_number(self, start: int, line: int, col: int) -> Token:
        """Scan an integer or float literal. Nothing consumed yet."""
        digits = 0
        while self._peek(digits) in _DIGITS:
            digits += 1

        # Float: digit+ '.' digit+ ([eE][+-]?digit+)?
        if self._peek(digits) == "." and self._peek(digits + 1) in _DIGITS:
            for _ in range(digits + 1):
                self._advance()
            while self._peek() in _DIGITS:
                self._advance()
            if self._peek() in ("e", "E"):
                exp_start, exp_line, exp_col = self._pos, self._line, self._col
                self._advance()
                if self._peek() in ("+", "-"):
                    self._advance()
                if self._peek() not in _DIGITS:
                    self._error(
                        DiagnosticKind.MISSING_EXPONENT_DIGITS,
                        "Missing exponent digits in float literal",
                        exp_start,
                        exp_line,
                        exp_col,
                    )
                while self._peek() in _DIGITS:
                    self._advance()
            return self._token(TokenKind.FLOAT_LIT, start, line, col)

        # Integer: '0' | [1-9][0-9]*.  A leading zero is a complete token.
        if self._peek() == "0":
            digits = 1
        for _ in range(digits):
            self._advance()
        return self._token(TokenKind.INT_LIT, start, line, col)

    def _scan_identifier_or_keyword(self, start: int, line: int, col: int) -> Token:
        """Scan an identifier or keyword. First char already consumed."""
        while self._peek() in _IDENT_BODY:
            self._advance()
        lexeme = self._source[start : self._pos]
        kind = KEYWORDS.get(lexeme, TokenKind.IDENT)
        return Token(kind, lexeme, self._span(start, line, col))

    # ------------------------------------------------------------------
    # Main entry points
    # ------------------------------------------------------------------

    def next_token(self) -> Token:
        """Scan and return the next token; returns EOF forever once exhausted."""
        self._skip_whitespace()
        start, line, col = self._pos, self._line, self._col

        if self._at_end():
            return Token(TokenKind.EOF, "", self._span(start, line, col))

        ch = self._peek()

        # --- String literal ---
        if ch == '"':
            self._advance()
            return self._scan_string(start, line, col)

        # --- Number literal ---
        if ch in _DIGITS:
            return self._scan_number(start, line, col)

        # --- Identifier / keyword ---
        if ch in _IDENT_START:
            self._advance()
            return self._scan_identifier_or_keyword(start, line, col)

        # --- '=', '==', '<', '<=', '>', '>=' (longest match) ---
        if ch in self._EQ_SUFFIXED:
            single, double = self._EQ_SUFFIXED[ch]
            self._advance()
            if self._peek() == "=":
                self._advance()
                return self._token(double, start, line, col)
            return self._token(single, start, line, col)

        # --- '!=' (a lone '!' is not a token) ---
        if ch == "!":
            self._advance()
            if self._peek() == "=":
                self._advance()
                return self._token(TokenKind.BANG_EQ, start, line, col)
            self._error(
                DiagnosticKind.UNEXPECTED_CHARACTER,
                "Unexpected character: '!'",
                start,
                line,
                col,
            )

        # --- Single-character tokens ---
        if ch in self._SINGLE_CHAR:
            self._advance()
            return self._token(self._SINGLE_CHAR[ch], start, line, col)

        # --- Unknown character ---
        self._advance()
        self._error(
            DiagnosticKind.UNEXPECTED_CHARACTER,
            f"Unexpected character: {ch!r}",
            start,
            line,
            col,
        )

    def __iter__(self) -> Iterator[Token]:
        """Lazily yield tokens from the start of the source through EOF."""
        self.reset()
        while True:
            tok = self.next_token()
            yield tok
            if tok.kind == TokenKind.EOF:
                return

    def tokenize(self) -> list[Token]:
        """Tokenize the entire source. Returns list ending with an EOF token.

        Lexical errors are recorded in the collector and the offending text
        is skipped.
        """
        self.reset()
        tokens: list[Token] = []
        while True:
            try:
                tok = self.next_token()
            except LexError:
                continue
            tokens.append(tok)
            if tok.kind == TokenKind.EOF:
                return tokens
