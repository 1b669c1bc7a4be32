"""arithlib -- lexer, resilient parser and diagnostics for one-line arithmetic expressions."""

from arithlib.diagnostics import Diagnostic, DiagnosticCode, DiagnosticCollector
from arithlib.parser import ExpressionChain, Parser, parse, tokenize

__version__ = "0.1.0"

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticCollector",
    "ExpressionChain",
    "Parser",
    "parse",
    "tokenize",
]
