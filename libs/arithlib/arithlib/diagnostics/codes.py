"""Diagnostic codes for the arithmetic expression front end."""

from __future__ import annotations

from enum import Enum


class DiagnosticCode(Enum):
    """Stable code of a lexical or syntax problem."""

    # Syntax
    MISSING_ADDITIVE_OPERATOR = "E001"
    MISSING_MULTIPLICATIVE_OPERATOR = "E002"
    MISSING_CLOSE_PAREN = "E003"
    UNEXPECTED_FACTOR_TOKEN = "E004"
    TRAILING_INPUT = "E007"

    # Lexical
    INVALID_INTEGER_LITERAL = "E005"
    INVALID_CHARACTER = "E006"

    def __str__(self) -> str:
        return self.value

    @property
    def category(self) -> str:
        """Return ``"lexical"`` or ``"syntax"``."""
        if self in (DiagnosticCode.INVALID_INTEGER_LITERAL, DiagnosticCode.INVALID_CHARACTER):
            return "lexical"
        return "syntax"

    @classmethod
    def from_code(cls, code: str) -> DiagnosticCode | None:
        """Look up a diagnostic code by its short identifier (e.g. ``"E004"``)."""
        for member in cls:
            if member.value == code:
                return member
        return None
