"""Token definitions for the expression lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from arithlib.diagnostics.codes import DiagnosticCode


class TokenKind(Enum):
    """All token types recognized by the lexer."""

    # Operators
    PLUS = auto()  # +
    MINUS = auto()  # -
    STAR = auto()  # *
    SLASH = auto()  # /

    # Delimiters
    LPAREN = auto()  # (
    RPAREN = auto()  # )

    # Literals
    INT_LIT = auto()
    IDENT = auto()

    # Special
    EOF = auto()
    ERROR = auto()  # malformed run, carries a LexicalIssue


@dataclass(frozen=True)
class LexicalIssue:
    """The (code, message) pair embedded in an ERROR token."""

    code: DiagnosticCode
    message: str


@dataclass(frozen=True)
class Token:
    """A single token produced by the lexer."""

    kind: TokenKind
    lexeme: str
    offset: int  # 0-indexed column in the source line
    error: LexicalIssue | None = None

    def __post_init__(self) -> None:
        if (self.kind == TokenKind.ERROR) != (self.error is not None):
            raise ValueError(
                f"{self.kind.name} token {self.lexeme!r}: error info must be set exactly on ERROR tokens"
            )

    def __str__(self) -> str:
        return f"{self.kind.name}({self.lexeme!r})"
