"""AST node types for the minipas parser.

Expression nodes are defined in ``minipas.core.expressions`` and re-exported
here for convenience.  This module adds declaration-, statement- and
program-level nodes.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Union

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
from minipas.diagnostics.location import SourceLocation

# Re-export expression nodes so consumers can import everything from
# ``minipas.parser.ast_nodes``.
__all__ = [
    # Expression nodes (re-exported from core)
    "ExprNode",
    "IntLiteral",
    "FloatLiteral",
    "StringLiteral",
    "Identifier",
    "BinaryOp",
    "BinaryOperator",
    "UnaryOp",
    "UnaryOperator",
    "ParenExpr",
    "VarType",
    # Declaration node
    "VarDeclNode",
    # Statement nodes
    "AssignNode",
    "CallNode",
    "BlockNode",
    "IfNode",
    "WhileNode",
    # Statement union
    "StmtNode",
    # Program node
    "ProgramNode",
    # Traversal
    "walk",
]


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class VarDeclNode:
    """``let NAME : TYPE ;``."""

    name: Identifier
    var_type: VarType
    location: SourceLocation | None = field(default=None, compare=False)


# ---------------------------------------------------------------------------
# Statement nodes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AssignNode:
    """``NAME = expr ;``."""

    target: Identifier
    value: ExprNode
    location: SourceLocation | None = field(default=None, compare=False)


@dataclass(frozen=True)
class CallNode:
    """``NAME ( args ) ;``. Any identifier may be called."""

    callee: Identifier
    args: tuple[ExprNode, ...]
    location: SourceLocation | None = field(default=None, compare=False)


@dataclass(frozen=True)
class BlockNode:
    """``{ stmt+ }``. Never empty."""

    statements: tuple[StmtNode, ...]
    location: SourceLocation | None = field(default=None, compare=False)


@dataclass(frozen=True)
class IfNode:
    """``if expr block [else block]``."""

    condition: ExprNode
    then_branch: BlockNode
    else_branch: BlockNode | None = None
    location: SourceLocation | None = field(default=None, compare=False)


@dataclass(frozen=True)
class WhileNode:
    """``while expr block``."""

    condition: ExprNode
    body: BlockNode
    location: SourceLocation | None = field(default=None, compare=False)


# Union of all statement types the parser can produce.
StmtNode = Union[AssignNode, CallNode, BlockNode, IfNode, WhileNode]


# ---------------------------------------------------------------------------
# Program node
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ProgramNode:
    """Top-level program: name, declarations, then statements."""

    name: Identifier
    decls: tuple[VarDeclNode, ...]
    body: tuple[StmtNode, ...]
    location: SourceLocation | None = field(default=None, compare=False)


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------


def walk(node: object) -> Iterator[object]:
    """Yield *node* and every AST node below it, depth-first, pre-order."""
    yield node
    for f in fields(node):  # type: ignore[arg-type]
        if f.name == "location":
            continue
        value = getattr(node, f.name)
        children = value if isinstance(value, tuple) else (value,)
        for child in children:
            if is_dataclass(child):
                yield from walk(child)
