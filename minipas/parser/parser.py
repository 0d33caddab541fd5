"""Recursive-descent parser for minipas source code.

Handles:
- ``program NAME ;``          (mandatory header)
- ``let NAME : TYPE ;``       declarations, all before the first statement
- ``NAME = expr ;`` and ``NAME ( args ) ;`` statements
- ``{ stmt+ }`` blocks, ``if expr block [else block]``, ``while expr block``
- Expressions over a fixed precedence chain, loosest first:
  ``+ -`` (plus a leading unary ``-``), ``* /``, ``== !=``, ``< <= > >=``

The chain nests equality and relational operators *inside* the
multiplicative level, so ``a * b == c`` groups as ``a * (b == c)`` and
``1 + 2 < 3`` as ``1 + (2 < 3)``.  This is the language's grammar as
written and is reproduced literally.

The parser holds one token of lookahead and pulls tokens from the lexer
on demand.  By default the first error aborts the parse.  With
``recover=True`` declaration and statement lists resynchronize after an
error and keep collecting diagnostics; any error still rejects the input.
Blocks and parentheses may nest at most ``max_depth`` levels; going deeper
is reported as ``NestingTooDeep`` and ends the parse in either mode.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import Callable, NoReturn

from minipas.core.expressions import (
    BinaryOp,
    BinaryOperator,
    ExprNode,
    FloatLiteral,
    Identifier,
    IntLiteral,
    ParenExpr,
    StringLiteral,
    UnaryOp,
    UnaryOperator,
)
from minipas.core.types import VarType
from minipas.diagnostics.collector import DiagnosticCollector
from minipas.diagnostics.severity import DiagnosticKind
from minipas.parser.ast_nodes import (
    AssignNode,
    BlockNode,
    CallNode,
    IfNode,
    ProgramNode,
    StmtNode,
    VarDeclNode,
    WhileNode,
)
from minipas.parser.errors import (
    LexError,
    NestingTooDeepError,
    ParseError,
    TooManyErrorsError,
)
from minipas.parser.lexer import Lexer
from minipas.parser.tokens import Token, TokenKind, describe_kind

logger = logging.getLogger(__name__)

DEFAULT_MAX_ERRORS = 20

# Combined depth of nested blocks and parentheses.  Each level costs a
# handful of Python frames, so this stays well under the interpreter's
# recursion limit.
DEFAULT_MAX_DEPTH = 100

_TYPE_TOKENS: dict[TokenKind, VarType] = {
    TokenKind.INT: VarType.INT,
    TokenKind.BOOL: VarType.BOOL,
    TokenKind.FLOAT: VarType.FLOAT,
    TokenKind.STR: VarType.STR,
}

# Operator tokens per precedence level.
_ADD_OPS: dict[TokenKind, BinaryOperator] = {
    TokenKind.PLUS: BinaryOperator.ADD,
    TokenKind.MINUS: BinaryOperator.SUB,
}
_MULT_OPS: dict[TokenKind, BinaryOperator] = {
    TokenKind.STAR: BinaryOperator.MUL,
    TokenKind.SLASH: BinaryOperator.DIV,
}
_EQ_OPS: dict[TokenKind, BinaryOperator] = {
    TokenKind.EQ_EQ: BinaryOperator.EQ,
    TokenKind.BANG_EQ: BinaryOperator.NE,
}
_REL_OPS: dict[TokenKind, BinaryOperator] = {
    TokenKind.LESS: BinaryOperator.LT,
    TokenKind.LESS_EQ: BinaryOperator.LE,
    TokenKind.GREATER: BinaryOperator.GT,
    TokenKind.GREATER_EQ: BinaryOperator.GE,
}

# Error recovery stops in front of these.
_SYNC_TOKENS: frozenset[TokenKind] = frozenset(
    {TokenKind.LBRACE, TokenKind.RBRACE, TokenKind.IF, TokenKind.WHILE, TokenKind.LET}
)


class _TokenFeed:
    """Serve a pre-lexed token list the way ``Lexer.next_token`` does."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        if not tokens or tokens[-1].kind != TokenKind.EOF:
            raise ValueError("token sequence must end with an EOF token")
        self._tokens = tokens
        self._pos = 0

    def __call__(self) -> Token:
        tok = self._tokens[self._pos]
        if self._pos < len(self._tokens) - 1:
            self._pos += 1
        return tok


class Parser:
    """Recursive-descent parser for minipas programs.

    *source* is either a ``Lexer``, whose collector is shared unless
    *diagnostics* is given, or a pre-lexed token list ending in EOF.  A
    token list carries no record of lexical errors: pass the collector the
    lexer reported into as *diagnostics* and check ``has_errors()`` on it,
    otherwise text the lexer skipped goes unnoticed.
    """

    def __init__(
        self,
        source: Lexer | Sequence[Token],
        diagnostics: DiagnosticCollector | None = None,
        *,
        recover: bool = False,
        max_errors: int = DEFAULT_MAX_ERRORS,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        self._fetch: Callable[[], Token]
        if isinstance(source, Lexer):
            self._fetch = source.next_token
            self._diag = diagnostics or source.diagnostics
        else:
            self._fetch = _TokenFeed(source)
            self._diag = diagnostics or DiagnosticCollector()
        self._recover = recover
        self._max_errors = max_errors
        self._max_depth = max_depth
        self._depth = 0
        self._current: Token | None = None

    @property
    def diagnostics(self) -> DiagnosticCollector:
        return self._diag

    # ------------------------------------------------------------------
    # Token stream helpers
    # ------------------------------------------------------------------

    def _fill(self) -> Token:
        """Pull the next token; in recovery mode, skip over lexical errors."""
        while True:
            try:
                return self._fetch()
            except LexError:
                if not self._recover:
                    raise
                self._check_error_limit()

    def _peek(self) -> Token:
        """Return the current token without consuming it."""
        if self._current is None:
            self._current = self._fill()
        return self._current

    def _at_end(self) -> bool:
        return self._peek().kind == TokenKind.EOF

    def _advance(self) -> Token:
        """Consume and return the current token."""
        tok = self._peek()
        if tok.kind != TokenKind.EOF:
            self._current = None
        return tok

    def _check(self, kind: TokenKind) -> bool:
        """Return True if the current token is *kind*."""
        return self._peek().kind == kind

    def _match(self, *kinds: TokenKind) -> Token | None:
        """If current token matches any of *kinds*, consume and return it."""
        for kind in kinds:
            if self._check(kind):
                return self._advance()
        return None

    def _expect(self, kind: TokenKind, context: str) -> Token:
        """Consume a token of *kind* or report an error."""
        tok = self._peek()
        if tok.kind == kind:
            return self._advance()
        self._fail_expected(describe_kind(kind), context, tok)

    # ------------------------------------------------------------------
    # Error reporting and recovery
    # ------------------------------------------------------------------

    def _fail(
        self,
        kind: DiagnosticKind,
        message: str,
        tok: Token,
        expected: str | None = None,
    ) -> NoReturn:
        """Record a diagnostic at *tok* and abort the current construct."""
        found = None if tok.kind == TokenKind.EOF else tok.lexeme
        self._diag.error(message, tok.location, kind=kind, expected=expected, found=found)
        raise ParseError(message, tok.location, kind=kind, expected=expected, found=found)

    def _fail_expected(self, expected: str, context: str, tok: Token) -> NoReturn:
        """A specific token was required at *tok*."""
        kind = (
            DiagnosticKind.UNEXPECTED_END_OF_INPUT
            if tok.kind == TokenKind.EOF
            else DiagnosticKind.EXPECTED_TOKEN
        )
        self._fail(kind, f"Expected {expected} {context}, found {tok.describe()}", tok, expected)

    def _fail_unexpected(self, what: str, tok: Token) -> NoReturn:
        """No production for *what* starts with *tok*."""
        kind = (
            DiagnosticKind.UNEXPECTED_END_OF_INPUT
            if tok.kind == TokenKind.EOF
            else DiagnosticKind.UNEXPECTED_TOKEN
        )
        self._fail(kind, f"Expected {what}, found {tok.describe()}", tok, what)

    def _check_error_limit(self) -> None:
        if self._diag.error_count() < self._max_errors:
            return
        loc = self._current.location if self._current is not None else None
        err = TooManyErrorsError(self._max_errors, loc)
        self._diag.error(str(err), loc, kind=err.kind)
        raise err

    def _synchronize(self, closing: TokenKind) -> None:
        """Skip to just past the next ';' or to the next statement boundary.

        Stops without consuming anything if the lookahead already is the
        enclosing list's *closing* token; otherwise consumes at least one.
        """
        self._check_error_limit()
        if self._check(closing):
            return
        while not self._at_end():
            tok = self._advance()
            if tok.kind == TokenKind.SEMICOLON or self._peek().kind in _SYNC_TOKENS:
                return

    def _recoverable(self, err: ParseError) -> bool:
        return self._recover and not isinstance(err, (TooManyErrorsError, NestingTooDeepError))

    def _enter_nested(self, tok: Token) -> None:
        """Open one level of block or parenthesis nesting at *tok*."""
        if self._depth >= self._max_depth:
            err = NestingTooDeepError(self._max_depth, tok.location)
            self._diag.error(str(err), tok.location, kind=err.kind, found=tok.lexeme)
            raise err
        self._depth += 1

    # ------------------------------------------------------------------
    # Top-level program parsing
    # ------------------------------------------------------------------

    def parse_program(self) -> ProgramNode:
        """Parse ``program NAME ; decl* stmt+`` through end of input."""
        prog_tok = self._expect(TokenKind.PROGRAM, "at start of program")
        name = self._parse_identifier("after 'program'")
        self._expect(TokenKind.SEMICOLON, "after program name")

        decls: list[VarDeclNode] = []
        while self._check(TokenKind.LET):
            try:
                decls.append(self.parse_declaration())
            except ParseError as err:
                if not self._recoverable(err):
                    raise
                self._synchronize(TokenKind.EOF)

        body = self._parse_statements(TokenKind.EOF)

        return ProgramNode(
            name=name,
            decls=tuple(decls),
            body=tuple(body),
            location=prog_tok.location,
        )

    # ------------------------------------------------------------------
    # Declarations
    # ------------------------------------------------------------------

    def parse_declaration(self) -> VarDeclNode:
        """Parse ``let NAME : TYPE ;``."""
        let_tok = self._expect(TokenKind.LET, "to start declaration")
        name = self._parse_identifier("after 'let'")
        self._expect(TokenKind.COLON, "after variable name")
        var_type = self._parse_type()
        self._expect(TokenKind.SEMICOLON, "after variable type")
        return VarDeclNode(name=name, var_type=var_type, location=let_tok.location)

    def _parse_type(self) -> VarType:
        tok = self._peek()
        if tok.kind in _TYPE_TOKENS:
            self._advance()
            return _TYPE_TOKENS[tok.kind]
        self._fail_expected("type name (int, bool, float, str)", "after ':'", tok)

    def _parse_identifier(self, context: str) -> Identifier:
        tok = self._expect(TokenKind.IDENT, context)
        return Identifier(name=tok.lexeme, location=tok.location)

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def _parse_statements(self, closing: TokenKind) -> list[StmtNode]:
        """Parse one or more statements up to *closing* (not consumed)."""
        stmts: list[StmtNode] = []
        while True:
            try:
                stmts.append(self.parse_statement())
            except ParseError as err:
                if not self._recoverable(err):
                    raise
                self._synchronize(closing)
            if self._check(closing) or self._at_end():
                return stmts

    def parse_statement(self) -> StmtNode:
        """Parse one statement, dispatching on the lookahead token."""
        tok = self._peek()

        if tok.kind == TokenKind.IDENT:
            name = self._parse_identifier("at start of statement")
            if self._check(TokenKind.LPAREN):
                return self._parse_call(name)
            if self._check(TokenKind.EQUALS):
                return self._parse_assignment(name)
            self._fail_expected("'=' or '('", f"after {name.name!r}", self._peek())

        if tok.kind == TokenKind.LBRACE:
            return self.parse_block()

        if tok.kind == TokenKind.IF:
            return self._parse_if()

        if tok.kind == TokenKind.WHILE:
            return self._parse_while()

        if tok.kind == TokenKind.LET:
            self._fail(
                DiagnosticKind.UNEXPECTED_TOKEN,
                "Declarations must come before the first statement, found 'let'",
                tok,
                "statement",
            )

        self._fail_unexpected("statement", tok)

    def _parse_assignment(self, target: Identifier) -> AssignNode:
        """Parse ``= expr ;`` after the target name."""
        self._expect(TokenKind.EQUALS, "in assignment")
        value = self.parse_expression()
        self._expect(TokenKind.SEMICOLON, "after assignment")
        return AssignNode(target=target, value=value, location=target.location)

    def _parse_call(self, callee: Identifier) -> CallNode:
        """Parse ``( [expr (, expr)*] ) ;`` after the callee name."""
        self._expect(TokenKind.LPAREN, "in call")
        args: list[ExprNode] = []
        if not self._check(TokenKind.RPAREN):
            args.append(self.parse_expression())
            while self._match(TokenKind.COMMA):
                args.append(self.parse_expression())
        self._expect(TokenKind.RPAREN, "after call arguments")
        self._expect(TokenKind.SEMICOLON, "after call")
        return CallNode(callee=callee, args=tuple(args), location=callee.location)

    def parse_block(self) -> BlockNode:
        """Parse ``{ stmt+ }``. An empty block is an error."""
        return self._parse_block("to open block")

    def _parse_block(self, context: str) -> BlockNode:
        lbrace = self._expect(TokenKind.LBRACE, context)
        self._enter_nested(lbrace)
        try:
            stmts = self._parse_statements(TokenKind.RBRACE)
            self._expect(TokenKind.RBRACE, "to close block")
        finally:
            self._depth -= 1
        return BlockNode(statements=tuple(stmts), location=lbrace.location)

    def _parse_if(self) -> IfNode:
        """Parse ``if expr block [else block]``."""
        if_tok = self._expect(TokenKind.IF, "to start if statement")
        condition = self.parse_expression()
        then_branch = self._parse_block("after if condition")
        else_branch: BlockNode | None = None
        if self._match(TokenKind.ELSE):
            else_branch = self._parse_block("after 'else'")
        return IfNode(
            condition=condition,
            then_branch=then_branch,
            else_branch=else_branch,
            location=if_tok.location,
        )

    def _parse_while(self) -> WhileNode:
        """Parse ``while expr block``."""
        while_tok = self._expect(TokenKind.WHILE, "to start while statement")
        condition = self.parse_expression()
        body = self._parse_block("after while condition")
        return WhileNode(condition=condition, body=body, location=while_tok.location)

    # ------------------------------------------------------------------
    # Expression parsing (one method per precedence level)
    # ------------------------------------------------------------------

    def parse_expression(self) -> ExprNode:
        """Parse an expression, starting at the loosest level."""
        return self._parse_additive()

    def _parse_additive(self) -> ExprNode:
        """``['-'] mult-expr (('+' | '-') mult-expr)*``, left-associative."""
        neg = self._match(TokenKind.MINUS)
        left = self._parse_multiplicative()
        if neg is not None:
            left = UnaryOp(op=UnaryOperator.NEG, operand=left, location=neg.location)
        while True:
            tok = self._match(*_ADD_OPS)
            if tok is None:
                break
            right = self._parse_multiplicative()
            left = BinaryOp(op=_ADD_OPS[tok.kind], left=left, right=right, location=tok.location)
        return left

    def _parse_multiplicative(self) -> ExprNode:
        """Left-associative ``*`` and ``/`` over equality operands."""
        left = self._parse_equality()
        while True:
            tok = self._match(*_MULT_OPS)
            if tok is None:
                break
            right = self._parse_equality()
            left = BinaryOp(op=_MULT_OPS[tok.kind], left=left, right=right, location=tok.location)
        return left

    def _parse_equality(self) -> ExprNode:
        """Left-associative ``==`` and ``!=`` over relational operands."""
        left = self._parse_relational()
        while True:
            tok = self._match(*_EQ_OPS)
            if tok is None:
                break
            right = self._parse_relational()
            left = BinaryOp(op=_EQ_OPS[tok.kind], left=left, right=right, location=tok.location)
        return left

    def _parse_relational(self) -> ExprNode:
        """Left-associative ``<``, ``<=``, ``>``, ``>=`` over primaries."""
        left = self._parse_primary()
        while True:
            tok = self._match(*_REL_OPS)
            if tok is None:
                break
            right = self._parse_primary()
            left = BinaryOp(op=_REL_OPS[tok.kind], left=left, right=right, location=tok.location)
        return left

    def _parse_primary(self) -> ExprNode:
        """Parse a primary expression: literal, identifier, or parenthesized."""
        tok = self._peek()

        # Integer literal
        if tok.kind == TokenKind.INT_LIT:
            try:
                int_value = int(tok.lexeme)
            except ValueError:
                # Over the interpreter's int string conversion limit.
                self._fail(
                    DiagnosticKind.LITERAL_OUT_OF_RANGE,
                    f"Integer literal too long ({len(tok.lexeme)} digits)",
                    tok,
                )
            self._advance()
            return IntLiteral(value=int_value, location=tok.location)

        # Float literal
        if tok.kind == TokenKind.FLOAT_LIT:
            float_value = float(tok.lexeme)
            if math.isinf(float_value):
                self._fail(
                    DiagnosticKind.LITERAL_OUT_OF_RANGE,
                    f"Float literal out of range: {tok.lexeme}",
                    tok,
                )
            self._advance()
            return FloatLiteral(value=float_value, location=tok.location)

        # String literal (contents kept verbatim, no escapes)
        if tok.kind == TokenKind.STRING_LIT:
            self._advance()
            return StringLiteral(value=tok.lexeme[1:-1], location=tok.location)

        # Identifier
        if tok.kind == TokenKind.IDENT:
            self._advance()
            return Identifier(name=tok.lexeme, location=tok.location)

        # Parenthesized expression
        if tok.kind == TokenKind.LPAREN:
            self._advance()
            self._enter_nested(tok)
            try:
                expr = self.parse_expression()
                self._expect(TokenKind.RPAREN, "to close parenthesized expression")
            finally:
                self._depth -= 1
            return ParenExpr(expr=expr, location=tok.location)

        self._fail_unexpected("expression", tok)


# ------------------------------------------------------------------
# Convenience function
# ------------------------------------------------------------------


def parse(
    source: str,
    filename: str = "<string>",
    *,
    recover: bool = False,
    max_errors: int = DEFAULT_MAX_ERRORS,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> tuple[ProgramNode | None, DiagnosticCollector]:
    """Parse minipas source code.

    Returns:
        A ``(program_ast, diagnostics)`` tuple.  ``program_ast`` is ``None``
        whenever any error was recorded.

    Raises:
        TypeError: If *source* is not a ``str``.
    """
    diag = DiagnosticCollector()
    lexer = Lexer(source, filename, diag)
    parser = Parser(lexer, diag, recover=recover, max_errors=max_errors, max_depth=max_depth)
    logger.debug("parsing %s (%d characters, recover=%s)", filename, len(source), recover)
    try:
        program: ProgramNode | None = parser.parse_program()
    except ParseError:
        program = None
    if diag.has_errors():
        logger.debug("%s rejected with %d error(s)", filename, diag.error_count())
        return None, diag
    return program, diag
