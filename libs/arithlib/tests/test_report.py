"""Tests for tree and diagnostic rendering."""

from __future__ import annotations

import pytest

from arithlib.diagnostics import Diagnostic, DiagnosticCode
from arithlib.parser.ast_nodes import ErrorFactor, ErrorToken, Node
from arithlib.parser.parser import parse
from arithlib.report import format_diagnostics, format_tree, node_children, node_label


class TestFormatTree:
    def test_single_identifier(self) -> None:
        tree, _ = parse("x")
        assert format_tree(tree) == [
            "EXPR",
            "  TERM",
            "    IDENT(x)",
        ]

    def test_precedence_tree(self) -> None:
        tree, _ = parse("a+b*c")
        assert format_tree(tree) == [
            "EXPR",
            "  TERM",
            "    IDENT(a)",
            "  BINOP +",
            "    TERM",
            "      IDENT(b)",
            "      BINOP *",
            "        IDENT(c)",
        ]

    def test_parenthesized(self) -> None:
        tree, _ = parse("(1-x)/2")
        assert format_tree(tree) == [
            "EXPR",
            "  TERM",
            "    PAREN_EXPR",
            "      EXPR",
            "        TERM",
            "          INT(1)",
            "        BINOP -",
            "          TERM",
            "            IDENT(x)",
            "    BINOP /",
            "      INT(2)",
        ]

    def test_implicit_operand_is_a_direct_child(self) -> None:
        tree, _ = parse("a b")
        assert format_tree(tree) == [
            "EXPR",
            "  TERM",
            "    IDENT(a)",
            "  TERM",
            "    IDENT(b)",
        ]

    def test_custom_indent(self) -> None:
        tree, _ = parse("7")
        assert format_tree(tree, indent="\t") == ["EXPR", "\tTERM", "\t\tINT(7)"]

    def test_error_placeholders(self) -> None:
        tree, _ = parse("1x + )")
        labels = [line.strip() for line in format_tree(tree)]
        assert "ERROR_TOKEN" in labels
        assert "ERROR_FACTOR" in labels

    def test_placeholder_labels(self) -> None:
        assert node_label(ErrorToken(lexeme="#", offset=0)) == "ERROR_TOKEN"
        assert node_label(ErrorFactor(offset=0)) == "ERROR_FACTOR"
        assert node_children(ErrorFactor(offset=0)) == ()

    def test_unknown_node_type(self) -> None:
        class Stray(Node):
            pass

        with pytest.raises(TypeError):
            node_label(Stray())
        with pytest.raises(TypeError):
            node_children(Stray())


class TestFormatDiagnostics:
    def test_no_diagnostics(self) -> None:
        assert format_diagnostics("a+b", []) == []

    def test_single_diagnostic(self) -> None:
        _, diag = parse("a b")
        assert format_diagnostics("a b", diag.get_all()) == [
            "- [E001] Missing '+' or '-' between terms before 'b' (at position 2)",
            "a b",
            "  ^",
        ]

    def test_caret_marks_first_diagnostic_only(self) -> None:
        diagnostics = [
            Diagnostic(DiagnosticCode.INVALID_CHARACTER, "Invalid character: '$'", 4),
            Diagnostic(DiagnosticCode.TRAILING_INPUT, "extra", 1),
        ]
        lines = format_diagnostics("x + $ )", diagnostics)
        assert lines[:2] == [
            "- [E006] Invalid character: '$' (at position 4)",
            "- [E007] extra (at position 1)",
        ]
        assert lines[2] == "x + $ )"
        assert lines[3] == "    ^"
        assert len(lines) == 4

    def test_caret_at_offset_zero(self) -> None:
        _, diag = parse(")")
        assert format_diagnostics(")", diag.get_all())[-1] == "^"
