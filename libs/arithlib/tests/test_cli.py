"""Tests for the line-oriented session and command-line entry point."""

from __future__ import annotations

import io

from arithlib.cli import build_arg_parser, main, process_line, run_session
from arithlib.config import SessionOptions


def run(text: str, options: SessionOptions | None = None) -> str:
    out = io.StringIO()
    run_session(io.StringIO(text), out, options)
    return out.getvalue()


class TestRunSession:
    def test_valid_line_prints_tree(self) -> None:
        assert run("a*2\n") == "EXPR\n  TERM\n    IDENT(a)\n    BINOP *\n      INT(2)\n"

    def test_invalid_line_prints_report(self) -> None:
        assert run("(a+b\n") == (
            "- [E003] Missing ')' to match '(' (at position 0)\n"
            "(a+b\n"
            "^\n"
        )

    def test_stops_at_sentinel(self) -> None:
        assert run("x\nEnD\ny\n") == "EXPR\n  TERM\n    IDENT(x)\n"

    def test_sentinel_must_match_whole_line(self) -> None:
        output = run("end x\n")
        assert output.startswith("- [E001]")

    def test_blank_lines_skipped(self) -> None:
        out = io.StringIO()
        count = run_session(io.StringIO("\n   \n7\n\t\n"), out)
        assert count == 1
        assert out.getvalue() == "EXPR\n  TERM\n    INT(7)\n"

    def test_crlf_line_endings(self) -> None:
        assert run("a b\r\nend\r\n").split("\n")[1] == "a b"

    def test_no_tree_option(self) -> None:
        assert run("a+b\n", SessionOptions(show_tree=False)) == ""

    def test_no_tree_still_reports(self) -> None:
        output = run("a+\n", SessionOptions(show_tree=False))
        assert output.startswith("- [E004]")

    def test_each_line_is_independent(self) -> None:
        output = run("a b\nc\n")
        assert output.count("[E001]") == 1
        assert output.endswith("EXPR\n  TERM\n    IDENT(c)\n")


class TestProcessLine:
    def test_multiple_diagnostics_one_caret(self) -> None:
        lines = process_line("1x + # )", SessionOptions())
        assert [line.split("]")[0] for line in lines[:2]] == ["- [E005", "- [E006"]
        assert lines[-2] == "1x + # )"
        assert lines[-1] == "^"


class TestMain:
    def test_arg_parser_defaults(self) -> None:
        args = build_arg_parser().parse_args([])
        assert args.file is None
        assert args.show_tree is True
        assert args.trace is False

    def test_arg_parser_flags(self) -> None:
        args = build_arg_parser().parse_args(["exprs.txt", "--no-tree"])
        assert str(args.file) == "exprs.txt"
        assert args.show_tree is False

    def test_reads_file(self, tmp_path, capsys) -> None:
        source = tmp_path / "exprs.txt"
        source.write_text("a\n#\nend\nb\n")
        assert main([str(source)]) == 0
        out = capsys.readouterr().out
        assert out == (
            "EXPR\n  TERM\n    IDENT(a)\n"
            "- [E006] Invalid character: '#' (at position 0)\n"
            "#\n"
            "^\n"
        )

    def test_missing_file(self, tmp_path, capsys) -> None:
        assert main([str(tmp_path / "nope.txt")]) == 1
        assert "ERROR: File not found" in capsys.readouterr().err

    def test_directory_path(self, tmp_path, capsys) -> None:
        assert main([str(tmp_path)]) == 1
        captured = capsys.readouterr()
        assert captured.err.startswith("ERROR: ")
        assert captured.out == ""

    def test_invalid_utf8(self, tmp_path, capsys) -> None:
        source = tmp_path / "bad.txt"
        source.write_bytes(b"a + \xff\n")
        assert main([str(source)]) == 1
        captured = capsys.readouterr()
        assert "ERROR: Invalid UTF-8" in captured.err
        assert captured.out == ""

    def test_reads_stdin(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("x+1\nend\n"))
        assert main([]) == 0
        assert capsys.readouterr().out.startswith("EXPR\n")
