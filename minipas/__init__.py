"""minipas: lexer and parser front end for a small Pascal-like teaching language.

Layers:
    minipas/
    ├── diagnostics/   # Source locations, diagnostics, collector (layer 0)
    ├── core/          # Variable types and expression nodes (layer 1)
    ├── parser/        # Tokens, lexer, statement nodes, parser (layer 2)
    └── cli.py         # ``minipas run <file>``
"""

__version__ = "0.1.0"

from minipas.diagnostics import DiagnosticCollector, DiagnosticKind
from minipas.parser import Lexer, Parser, ProgramNode, parse

__all__ = [
    "Lexer",
    "Parser",
    "ProgramNode",
    "DiagnosticCollector",
    "DiagnosticKind",
    "parse",
    "__version__",
]
