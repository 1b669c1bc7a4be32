"""Rendering of parse trees and diagnostic reports."""

from __future__ import annotations

from collections.abc import Iterable

from arithlib.diagnostics.diagnostic import Diagnostic
from arithlib.parser.ast_nodes import (
    BinaryOperand,
    ErrorFactor,
    ErrorToken,
    ExpressionChain,
    Identifier,
    IntegerLiteral,
    Node,
    Parenthesized,
    TermChain,
)


def node_label(node: Node) -> str:
    """Return the one-line label of *node*."""
    if isinstance(node, ExpressionChain):
        return "EXPR"
    elif isinstance(node, TermChain):
        return "TERM"
    elif isinstance(node, BinaryOperand):
        return f"BINOP {node.op}"
    elif isinstance(node, Identifier):
        return f"IDENT({node.name})"
    elif isinstance(node, IntegerLiteral):
        return f"INT({node.value})"
    elif isinstance(node, Parenthesized):
        return "PAREN_EXPR"
    elif isinstance(node, ErrorToken):
        return "ERROR_TOKEN"
    elif isinstance(node, ErrorFactor):
        return "ERROR_FACTOR"
    else:
        raise TypeError(f"Cannot label node type: {type(node).__name__}")


def node_children(node: Node) -> tuple[Node, ...]:
    """Return the children of *node*, in source order."""
    if isinstance(node, (ExpressionChain, TermChain)):
        return (node.first, *node.rest)
    elif isinstance(node, BinaryOperand):
        return (node.right,)
    elif isinstance(node, Parenthesized):
        return (node.inner,)
    elif isinstance(node, (Identifier, IntegerLiteral, ErrorToken, ErrorFactor)):
        return ()
    else:
        raise TypeError(f"Cannot walk node type: {type(node).__name__}")


def format_tree(node: Node, indent: str = "  ") -> list[str]:
    """Render *node* pre-order, one label per line, indented by depth."""
    lines: list[str] = []
    stack: list[tuple[Node, int]] = [(node, 0)]
    while stack:
        current, depth = stack.pop()
        lines.append(f"{indent * depth}{node_label(current)}")
        for child in reversed(node_children(current)):
            stack.append((child, depth + 1))
    return lines


def format_diagnostics(source: str, diagnostics: Iterable[Diagnostic]) -> list[str]:
    """Render the diagnostic report for one line.

    Each diagnostic is listed in discovery order, followed by the raw line
    and a caret under the offset of the first diagnostic only.
    """
    diagnostics = list(diagnostics)
    if not diagnostics:
        return []
    lines = [f"- {d}" for d in diagnostics]
    lines.append(source)
    lines.append(" " * diagnostics[0].offset + "^")
    return lines
