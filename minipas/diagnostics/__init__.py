"""minipas diagnostics subpackage (Layer 0 -- zero internal dependencies)."""

from minipas.diagnostics.collector import DiagnosticCollector
from minipas.diagnostics.diagnostic import Diagnostic
from minipas.diagnostics.location import SourceLocation
from minipas.diagnostics.severity import DiagnosticKind, DiagnosticSeverity
from minipas.diagnostics.source_map import SourceFile

__all__ = [
    "SourceLocation",
    "SourceFile",
    "DiagnosticSeverity",
    "DiagnosticKind",
    "Diagnostic",
    "DiagnosticCollector",
]
