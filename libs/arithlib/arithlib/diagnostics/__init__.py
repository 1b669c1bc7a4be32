"""Diagnostics subpackage (Layer 0 -- zero internal dependencies)."""

from arithlib.diagnostics.codes import DiagnosticCode
from arithlib.diagnostics.collector import DiagnosticCollector
from arithlib.diagnostics.diagnostic import Diagnostic

__all__ = ["DiagnosticCode", "Diagnostic", "DiagnosticCollector"]
