"""minipas variable type definitions."""

from __future__ import annotations

from enum import Enum


class VarType(Enum):
    """The four declarable variable types."""

    INT = "int"
    BOOL = "bool"
    FLOAT = "float"
    STR = "str"
