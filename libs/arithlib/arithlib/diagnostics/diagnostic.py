"""Diagnostic message representation."""

from __future__ import annotations

from dataclasses import dataclass

from arithlib.diagnostics.codes import DiagnosticCode


@dataclass(frozen=True)
class Diagnostic:
    """A single diagnostic message, anchored at a column of the source line."""

    code: DiagnosticCode
    message: str
    offset: int  # 0-indexed

    def __str__(self) -> str:
        return f"[{self.code}] {self.message} (at position {self.offset})"
