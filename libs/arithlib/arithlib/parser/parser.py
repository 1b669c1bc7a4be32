"""Recursive-descent parser for single-line arithmetic expressions.

Grammar::

    expr   := term { ('+' | '-') term }
    term   := factor { ('*' | '/') factor }
    factor := IDENT | INT_LITERAL | '(' expr ')'

The parser never stops at the first problem.  Each violation is recorded in
the :class:`DiagnosticCollector` and recovered from in place (panic mode), so
one call always yields a complete tree plus every diagnostic for the line.
"""

from __future__ import annotations

import logging

from arithlib.diagnostics.codes import DiagnosticCode
from arithlib.diagnostics.collector import DiagnosticCollector
from arithlib.parser.ast_nodes import (
    BinaryOperand,
    ErrorFactor,
    ErrorToken,
    ExpressionChain,
    FactorNode,
    Identifier,
    IntegerLiteral,
    Parenthesized,
    TermChain,
)
from arithlib.parser.lexer import Lexer
from arithlib.parser.tokens import Token, TokenKind

logger = logging.getLogger(__name__)

_ADDITIVE_OPS: frozenset[TokenKind] = frozenset({TokenKind.PLUS, TokenKind.MINUS})
_MULTIPLICATIVE_OPS: frozenset[TokenKind] = frozenset({TokenKind.STAR, TokenKind.SLASH})

# Tokens that can begin a factor (lexical error tokens excluded).
_FACTOR_START: frozenset[TokenKind] = frozenset(
    {TokenKind.IDENT, TokenKind.INT_LIT, TokenKind.LPAREN}
)

# Where recovery from an unexpected factor token stops (EOF always stops it).
_FACTOR_SYNC: frozenset[TokenKind] = _ADDITIVE_OPS | _MULTIPLICATIVE_OPS | {TokenKind.RPAREN}


class Parser:
    """Recursive-descent parser with panic-mode error recovery."""

    def __init__(
        self,
        tokens: list[Token],
        diagnostics: DiagnosticCollector | None = None,
    ) -> None:
        self._tokens = tokens
        self._diag = diagnostics if diagnostics is not None else DiagnosticCollector()
        self._pos = 0
        self._paren_depth = 0

    @property
    def diagnostics(self) -> DiagnosticCollector:
        return self._diag

    # ------------------------------------------------------------------
    # Token stream helpers
    # ------------------------------------------------------------------

    def _peek(self) -> Token:
        """Return the current token without consuming it."""
        return self._tokens[self._pos]

    def _at_end(self) -> bool:
        return self._peek().kind == TokenKind.EOF

    def _advance(self) -> Token:
        """Consume and return the current token. EOF is never consumed."""
        tok = self._tokens[self._pos]
        if tok.kind != TokenKind.EOF:
            self._pos += 1
        return tok

    def _check(self, kind: TokenKind) -> bool:
        """Return True if the current token is *kind*."""
        return self._peek().kind == kind

    def _match(self, kinds: frozenset[TokenKind]) -> Token | None:
        """If the current token is one of *kinds*, consume and return it."""
        if self._peek().kind in kinds:
            return self._advance()
        return None

    def _synchronize(self, kinds: frozenset[TokenKind]) -> None:
        """Skip tokens until one of *kinds* or EOF (panic-mode recovery)."""
        while not self._at_end() and self._peek().kind not in kinds:
            self._advance()

    def _trace(self, message: str) -> None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s | next=%s", message, self._peek())

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def parse(self) -> ExpressionChain:
        """Parse the whole token stream as one expression."""
        root = self.parse_expression()

        if not self._at_end():
            tok = self._peek()
            self._diag.report(
                DiagnosticCode.TRAILING_INPUT,
                f"Extra tokens after end of expression (unexpected '{tok.lexeme}')",
                tok.offset,
            )
        return root

    # ------------------------------------------------------------------
    # Grammar rules
    # ------------------------------------------------------------------

    def parse_expression(self) -> ExpressionChain:
        """``expr := term { ('+' | '-') term }``."""
        self._trace("enter expr")
        first = self.parse_term()
        rest: list[BinaryOperand | TermChain] = []

        while True:
            op = self._match(_ADDITIVE_OPS)
            if op is not None:
                rest.append(BinaryOperand(op=op.lexeme, right=self.parse_term()))
                continue

            # Juxtaposed operand: report, then take it as an implicit operand.
            tok = self._peek()
            if tok.kind not in _FACTOR_START:
                break
            self._diag.report(
                DiagnosticCode.MISSING_ADDITIVE_OPERATOR,
                f"Missing '+' or '-' between terms before '{tok.lexeme}'",
                tok.offset,
            )
            rest.append(self.parse_term())

        self._trace("exit expr")
        return ExpressionChain(first=first, rest=tuple(rest))

    def parse_term(self) -> TermChain:
        """``term := factor { ('*' | '/') factor }``."""
        self._trace("enter term")
        first = self.parse_factor()
        rest: list[BinaryOperand | FactorNode] = []

        while True:
            op = self._match(_MULTIPLICATIVE_OPS)
            if op is not None:
                rest.append(BinaryOperand(op=op.lexeme, right=self.parse_factor()))
                continue

            # A lone factor leaves a juxtaposed operand to the additive level.
            tok = self._peek()
            if not rest or tok.kind not in _FACTOR_START:
                break
            self._diag.report(
                DiagnosticCode.MISSING_MULTIPLICATIVE_OPERATOR,
                f"Missing '*' or '/' between factors before '{tok.lexeme}'",
                tok.offset,
            )
            rest.append(self.parse_factor())

        self._trace("exit term")
        return TermChain(first=first, rest=tuple(rest))

    def parse_factor(self) -> FactorNode:
        """``factor := IDENT | INT_LITERAL | '(' expr ')'``."""
        self._trace("enter factor")
        tok = self._peek()

        if tok.kind == TokenKind.ERROR:
            assert tok.error is not None
            self._advance()
            self._diag.report(tok.error.code, tok.error.message, tok.offset)
            return ErrorToken(lexeme=tok.lexeme, offset=tok.offset)

        if tok.kind == TokenKind.IDENT:
            self._advance()
            return Identifier(name=tok.lexeme, offset=tok.offset)

        if tok.kind == TokenKind.INT_LIT:
            self._advance()
            return IntegerLiteral(value=tok.lexeme, offset=tok.offset)

        if tok.kind == TokenKind.LPAREN:
            return self._parse_parenthesized()

        found = "end of input" if tok.kind == TokenKind.EOF else f"'{tok.lexeme}'"
        self._diag.report(
            DiagnosticCode.UNEXPECTED_FACTOR_TOKEN,
            f"Expected identifier, integer literal, or '(' but found {found}",
            tok.offset,
        )
        # A ')' only synchronizes while some '(' is still open.
        sync = _FACTOR_SYNC if self._paren_depth else _FACTOR_SYNC - {TokenKind.RPAREN}
        self._synchronize(sync)
        return ErrorFactor(offset=tok.offset)

    def _parse_parenthesized(self) -> Parenthesized:
        open_tok = self._advance()
        self._paren_depth += 1
        inner = self.parse_expression()
        self._paren_depth -= 1

        if not self._check(TokenKind.RPAREN):
            self._diag.report(
                DiagnosticCode.MISSING_CLOSE_PAREN,
                "Missing ')' to match '('",
                open_tok.offset,
            )
            self._synchronize(frozenset({TokenKind.RPAREN}))
        if self._check(TokenKind.RPAREN):
            self._advance()
        return Parenthesized(inner=inner, offset=open_tok.offset)


# ------------------------------------------------------------------
# Convenience function
# ------------------------------------------------------------------


def parse(source: str) -> tuple[ExpressionChain, DiagnosticCollector]:
    """Lex and parse one line of source with fresh state.

    Returns:
        A ``(tree, diagnostics)`` tuple.
    """
    diag = DiagnosticCollector()
    tokens = Lexer(source).tokenize()
    tree = Parser(tokens, diag).parse()
    return tree, diag
