"""Lexer (tokenizer) for single-line arithmetic expressions."""

from __future__ import annotations

from arithlib.diagnostics.codes import DiagnosticCode
from arithlib.parser.tokens import LexicalIssue, Token, TokenKind


class Lexer:
    """Tokenize one line of source into a flat token stream.

    The lexer never fails: malformed runs are folded into ``ERROR`` tokens
    carrying a :class:`LexicalIssue`, which the parser turns into
    diagnostics.  The stream always ends with exactly one ``EOF`` token
    whose offset is the length of the line.
    """

    # Single-character tokens that need no lookahead.
    _SINGLE_CHAR: dict[str, TokenKind] = {
        "+": TokenKind.PLUS,
        "-": TokenKind.MINUS,
        "*": TokenKind.STAR,
        "/": TokenKind.SLASH,
        "(": TokenKind.LPAREN,
        ")": TokenKind.RPAREN,
    }

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0

    # ------------------------------------------------------------------
    # Helper methods
    # ------------------------------------------------------------------

    def _peek(self) -> str:
        """Return the current character, or '' at end of input."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _advance(self) -> str:
        """Consume and return the current character."""
        ch = self._source[self._pos]
        self._pos += 1
        return ch

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    # ------------------------------------------------------------------
    # Scanning helpers
    # ------------------------------------------------------------------

    def _scan_number(self, begin: int) -> Token:
        """Scan an integer literal. First digit already consumed.

        Letters and underscores inside the run are swallowed too, and
        turn the whole run into a single E005 error token.
        """
        invalid = False
        while not self._at_end():
            ch = self._peek()
            if ch.isdecimal():
                self._advance()
            elif ch.isalpha() or ch == "_":  # 23b2, 4int
                self._advance()
                invalid = True
            else:
                break

        lexeme = self._source[begin : self._pos]
        if invalid:
            issue = LexicalIssue(
                DiagnosticCode.INVALID_INTEGER_LITERAL,
                f"Invalid integer literal (digits mixed with letters): {lexeme}",
            )
            return Token(TokenKind.ERROR, lexeme, begin, issue)
        return Token(TokenKind.INT_LIT, lexeme, begin)

    def _scan_identifier(self, begin: int) -> Token:
        """Scan an identifier. First char already consumed."""
        while not self._at_end():
            ch = self._peek()
            if not (ch.isalpha() or ch.isdecimal() or ch == "_"):
                break
            self._advance()
        return Token(TokenKind.IDENT, self._source[begin : self._pos], begin)

    # ------------------------------------------------------------------
    # Main entry point
    # ------------------------------------------------------------------

    def tokenize(self) -> list[Token]:
        """Tokenize the entire line. Returns list ending with an EOF token."""
        tokens: list[Token] = []

        while not self._at_end():
            ch = self._peek()
            begin = self._pos

            # --- Whitespace ---
            if ch.isspace():
                self._advance()
                continue

            # --- Number literal (valid or not) ---
            if ch.isdecimal():
                self._advance()
                tokens.append(self._scan_number(begin))
                continue

            # --- Identifier ---
            if ch.isalpha() or ch == "_":
                self._advance()
                tokens.append(self._scan_identifier(begin))
                continue

            # --- Single-character tokens ---
            self._advance()
            if ch in self._SINGLE_CHAR:
                tokens.append(Token(self._SINGLE_CHAR[ch], ch, begin))
                continue

            # --- Unknown character ---
            issue = LexicalIssue(DiagnosticCode.INVALID_CHARACTER, f"Invalid character: {ch!r}")
            tokens.append(Token(TokenKind.ERROR, ch, begin, issue))

        tokens.append(Token(TokenKind.EOF, "", self._pos))
        return tokens


def tokenize(source: str) -> list[Token]:
    """Tokenize *source* with a fresh :class:`Lexer`."""
    return Lexer(source).tokenize()
