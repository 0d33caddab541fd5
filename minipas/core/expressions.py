"""Expression AST nodes and the expression source formatter for minipas."""

from __future__ import annotations

import math
from abc import ABC
from dataclasses import dataclass, field
from enum import Enum

from minipas.diagnostics.location import SourceLocation


class BinaryOperator(Enum):
    """Binary operators, valued by their source spelling."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    EQ = "=="
    NE = "!="
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="

    def __str__(self) -> str:
        return self.value


class UnaryOperator(Enum):
    """Unary operators, valued by their source spelling."""

    NEG = "-"

    def __str__(self) -> str:
        return self.value


class ExprNode(ABC):
    """Base type for expression nodes. All concrete subclasses are frozen dataclasses.

    Locations are excluded from equality so that trees can be compared
    structurally.
    """


@dataclass(frozen=True)
class IntLiteral(ExprNode):
    """Integer literal: 0, 42, 1000000."""

    value: int
    location: SourceLocation | None = field(default=None, compare=False)


@dataclass(frozen=True)
class FloatLiteral(ExprNode):
    """Float literal: 1.0, 0.00001, 2.5e-3."""

    value: float
    location: SourceLocation | None = field(default=None, compare=False)


@dataclass(frozen=True)
class StringLiteral(ExprNode):
    """String literal. ``value`` is the text between the quotes, unescaped."""

    value: str
    location: SourceLocation | None = field(default=None, compare=False)


@dataclass(frozen=True)
class Identifier(ExprNode):
    """Identifier reference: variable, program or callee name."""

    name: str
    location: SourceLocation | None = field(default=None, compare=False)


@dataclass(frozen=True)
class BinaryOp(ExprNode):
    """Binary operation: left op right."""

    op: BinaryOperator
    left: ExprNode
    right: ExprNode
    location: SourceLocation | None = field(default=None, compare=False)


@dataclass(frozen=True)
class UnaryOp(ExprNode):
    """Unary operation: -operand."""

    op: UnaryOperator
    operand: ExprNode
    location: SourceLocation | None = field(default=None, compare=False)


@dataclass(frozen=True)
class ParenExpr(ExprNode):
    """Parenthesized expression: (expr)."""

    expr: ExprNode
    location: SourceLocation | None = field(default=None, compare=False)


def format_expr(expr: ExprNode) -> str:
    """
    Render an expression back to minipas source text.

    Only the parentheses recorded as ``ParenExpr`` nodes are emitted, so the
    output re-parses to an equal tree for any expression the parser built.

    Args:
        expr: The expression to render.

    Returns:
        The source text.

    Raises:
        TypeError: If *expr* is not an expression node.
        ValueError: If a float literal is infinite or NaN, which has no
            source spelling.
    """
    if isinstance(expr, IntLiteral):
        return str(expr.value)
    elif isinstance(expr, FloatLiteral):
        return _format_float(expr.value)
    elif isinstance(expr, StringLiteral):
        return f'"{expr.value}"'
    elif isinstance(expr, Identifier):
        return expr.name
    elif isinstance(expr, BinaryOp):
        return f"{format_expr(expr.left)} {expr.op} {format_expr(expr.right)}"
    elif isinstance(expr, UnaryOp):
        return f"{expr.op}{format_expr(expr.operand)}"
    elif isinstance(expr, ParenExpr):
        return f"({format_expr(expr.expr)})"
    else:
        raise TypeError(f"Cannot format expression type: {type(expr).__name__}")


def _format_float(value: float) -> str:
    if not math.isfinite(value):
        raise ValueError(f"Float literal has no source form: {value!r}")
    # Python may drop the fraction ("1e-05"); the float grammar requires one.
    mantissa, sep, exponent = repr(value).partition("e")
    if "." not in mantissa:
        mantissa += ".0"
    return mantissa + sep + exponent
