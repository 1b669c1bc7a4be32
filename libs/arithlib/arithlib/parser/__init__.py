"""Parser subpackage (Layer 1 -- depends on diagnostics)."""

from arithlib.parser.ast_nodes import (
    BinaryOperand,
    ErrorFactor,
    ErrorToken,
    ExpressionChain,
    FactorNode,
    Identifier,
    IntegerLiteral,
    Node,
    Parenthesized,
    TermChain,
)
from arithlib.parser.lexer import Lexer, tokenize
from arithlib.parser.parser import Parser, parse
from arithlib.parser.tokens import LexicalIssue, Token, TokenKind

__all__ = [
    "TokenKind",
    "Token",
    "LexicalIssue",
    "Lexer",
    "tokenize",
    "Node",
    "Identifier",
    "IntegerLiteral",
    "Parenthesized",
    "ErrorToken",
    "ErrorFactor",
    "FactorNode",
    "BinaryOperand",
    "TermChain",
    "ExpressionChain",
    "Parser",
    "parse",
]
