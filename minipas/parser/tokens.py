"""Token definitions for the minipas lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from minipas.diagnostics.location import SourceLocation


class TokenKind(Enum):
    """All token types recognized by the minipas lexer."""

    # === Keywords ===
    PROGRAM = auto()
    LET = auto()
    IF = auto()
    ELSE = auto()
    WHILE = auto()

    # Type keywords
    INT = auto()
    BOOL = auto()
    FLOAT = auto()
    STR = auto()

    # Operators
    PLUS = auto()  # +
    MINUS = auto()  # -
    STAR = auto()  # *
    SLASH = auto()  # /
    EQ_EQ = auto()  # ==
    BANG_EQ = auto()  # !=
    LESS = auto()  # <
    LESS_EQ = auto()  # <=
    GREATER = auto()  # >
    GREATER_EQ = auto()  # >=

    # Delimiters
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    LBRACE = auto()  # {
    RBRACE = auto()  # }
    COLON = auto()  # :
    SEMICOLON = auto()  # ;
    COMMA = auto()  # ,
    EQUALS = auto()  # =

    # Literals
    INT_LIT = auto()
    FLOAT_LIT = auto()
    STRING_LIT = auto()
    IDENT = auto()

    # Special
    EOF = auto()


# Keyword string -> TokenKind mapping.
# Identifiers are checked against this table during lexing.
KEYWORDS: dict[str, TokenKind] = {
    "program": TokenKind.PROGRAM,
    "let": TokenKind.LET,
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "while": TokenKind.WHILE,
    "int": TokenKind.INT,
    "bool": TokenKind.BOOL,
    "float": TokenKind.FLOAT,
    "str": TokenKind.STR,
}

# Human-readable spelling of fixed tokens, used in diagnostics.
TOKEN_SPELLINGS: dict[TokenKind, str] = {
    **{kind: word for word, kind in KEYWORDS.items()},
    TokenKind.PLUS: "+",
    TokenKind.MINUS: "-",
    TokenKind.STAR: "*",
    TokenKind.SLASH: "/",
    TokenKind.EQ_EQ: "==",
    TokenKind.BANG_EQ: "!=",
    TokenKind.LESS: "<",
    TokenKind.LESS_EQ: "<=",
    TokenKind.GREATER: ">",
    TokenKind.GREATER_EQ: ">=",
    TokenKind.LPAREN: "(",
    TokenKind.RPAREN: ")",
    TokenKind.LBRACE: "{",
    TokenKind.RBRACE: "}",
    TokenKind.COLON: ":",
    TokenKind.SEMICOLON: ";",
    TokenKind.COMMA: ",",
    TokenKind.EQUALS: "=",
}


def describe_kind(kind: TokenKind) -> str:
    """Return a short description of *kind* for error messages."""
    if kind in TOKEN_SPELLINGS:
        return f"'{TOKEN_SPELLINGS[kind]}'"
    return {
        TokenKind.IDENT: "identifier",
        TokenKind.INT_LIT: "integer literal",
        TokenKind.FLOAT_LIT: "float literal",
        TokenKind.STRING_LIT: "string literal",
        TokenKind.EOF: "end of input",
    }[kind]


@dataclass(frozen=True)
class Token:
    """A single token produced by the minipas lexer."""

    kind: TokenKind
    lexeme: str
    location: SourceLocation

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column

    @property
    def offset(self) -> int:
        return self.location.offset or 0

    @property
    def end_offset(self) -> int:
        return self.offset + len(self.lexeme)

    def describe(self) -> str:
        """Describe this token as it appeared in the source."""
        if self.kind == TokenKind.EOF:
            return "end of input"
        return repr(self.lexeme)
