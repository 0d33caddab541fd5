"""minipas core subpackage (Layer 1 -- depends only on diagnostics)."""

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
    format_expr,
)
from minipas.core.types import VarType

__all__ = [
    "VarType",
    "BinaryOperator",
    "UnaryOperator",
    "ExprNode",
    "IntLiteral",
    "FloatLiteral",
    "StringLiteral",
    "Identifier",
    "BinaryOp",
    "UnaryOp",
    "ParenExpr",
    "format_expr",
]
