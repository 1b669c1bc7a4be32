"""Diagnostic collector for accumulating messages during parsing."""

from __future__ import annotations

from arithlib.diagnostics.codes import DiagnosticCode
from arithlib.diagnostics.diagnostic import Diagnostic


class DiagnosticCollector:
    """Accumulates diagnostics during a single parse.

    The collector is append-only: diagnostics are kept in discovery order
    and never mutated or removed.
    """

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def __len__(self) -> int:
        return len(self._diagnostics)

    def report(self, code: DiagnosticCode, message: str, offset: int) -> None:
        """Record a diagnostic."""
        self._diagnostics.append(Diagnostic(code, message, offset))

    def has_errors(self) -> bool:
        """Return True if any diagnostics have been recorded."""
        return bool(self._diagnostics)

    def first(self) -> Diagnostic | None:
        """Return the earliest recorded diagnostic, if any."""
        return self._diagnostics[0] if self._diagnostics else None

    def get_all(self) -> list[Diagnostic]:
        """Return a copy of all collected diagnostics."""
        return list(self._diagnostics)

    def codes(self) -> list[DiagnosticCode]:
        """Return the codes of all collected diagnostics, in order."""
        return [d.code for d in self._diagnostics]

    def format_all(self) -> str:
        """Format all diagnostics as a newline-separated string."""
        return "\n".join(str(d) for d in self._diagnostics)
