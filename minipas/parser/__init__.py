"""minipas parser subpackage (Layer 2 -- depends on core, diagnostics)."""

from minipas.parser.ast_nodes import (
    AssignNode,
    BlockNode,
    CallNode,
    IfNode,
    ProgramNode,
    StmtNode,
    VarDeclNode,
    WhileNode,
    walk,
)
from minipas.parser.errors import LexError, NestingTooDeepError, ParseError, TooManyErrorsError
from minipas.parser.lexer import Lexer
from minipas.parser.parser import DEFAULT_MAX_DEPTH, DEFAULT_MAX_ERRORS, Parser, parse
from minipas.parser.tokens import KEYWORDS, Token, TokenKind

__all__ = [
    "TokenKind",
    "Token",
    "KEYWORDS",
    "Lexer",
    "ProgramNode",
    "VarDeclNode",
    "AssignNode",
    "CallNode",
    "BlockNode",
    "IfNode",
    "WhileNode",
    "StmtNode",
    "walk",
    "Parser",
    "parse",
    "DEFAULT_MAX_ERRORS",
    "DEFAULT_MAX_DEPTH",
    "ParseError",
    "LexError",
    "TooManyErrorsError",
    "NestingTooDeepError",
]
