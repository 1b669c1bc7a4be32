"""Parse tree node types.

Every node kind is its own frozen dataclass.  A parse always returns an
:class:`ExpressionChain`, even when recovery was needed: positions where no
valid factor could be read hold :class:`ErrorToken` or :class:`ErrorFactor`
placeholders.
"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass
from typing import Union

__all__ = [
    "Node",
    # Factors
    "Identifier",
    "IntegerLiteral",
    "Parenthesized",
    "ErrorToken",
    "ErrorFactor",
    "FactorNode",
    # Chains
    "BinaryOperand",
    "TermChain",
    "ExpressionChain",
]


class Node(ABC):
    """Base type for tree nodes. All concrete subclasses are frozen dataclasses."""


# ---------------------------------------------------------------------------
# Factors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Identifier(Node):
    """Identifier reference: ``x``, ``_tmp1``."""

    name: str
    offset: int


@dataclass(frozen=True)
class IntegerLiteral(Node):
    """Integer literal, kept as its source text: ``42``, ``007``."""

    value: str
    offset: int


@dataclass(frozen=True)
class Parenthesized(Node):
    """Parenthesized expression: ``(expr)``. *offset* is the ``(``."""

    inner: ExpressionChain
    offset: int


@dataclass(frozen=True)
class ErrorToken(Node):
    """Placeholder for a lexical error token met where a factor was expected."""

    lexeme: str
    offset: int


@dataclass(frozen=True)
class ErrorFactor(Node):
    """Placeholder for a factor that could not be parsed."""

    offset: int


FactorNode = Union[Identifier, IntegerLiteral, Parenthesized, ErrorToken, ErrorFactor]


# ---------------------------------------------------------------------------
# Chains
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BinaryOperand(Node):
    """Operator-tagged right operand of a chain: ``+ term`` or ``* factor``."""

    op: str
    right: TermChain | FactorNode


@dataclass(frozen=True)
class TermChain(Node):
    """``factor { ('*' | '/') factor }``.

    *rest* holds :class:`BinaryOperand` nodes; factors recovered after a
    missing operator are appended bare.
    """

    first: FactorNode
    rest: tuple[BinaryOperand | FactorNode, ...] = ()


@dataclass(frozen=True)
class ExpressionChain(Node):
    """``term { ('+' | '-') term }``.

    *rest* holds :class:`BinaryOperand` nodes; terms recovered after a
    missing operator are appended bare.
    """

    first: TermChain
    rest: tuple[BinaryOperand | TermChain, ...] = ()
