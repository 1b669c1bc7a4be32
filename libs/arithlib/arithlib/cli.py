"""Line-oriented text interface: one expression per line until ``end``."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from arithlib.config import SessionOptions
from arithlib.parser.parser import parse
from arithlib.report import format_diagnostics, format_tree


def process_line(line: str, options: SessionOptions) -> list[str]:
    """Lex and parse *line* and return the output lines for it."""
    tree, diag = parse(line)
    if diag.has_errors():
        return format_diagnostics(line, diag.get_all())
    if options.show_tree:
        return format_tree(tree, options.indent)
    return []


def run_session(lines: Iterable[str], out: TextIO, options: SessionOptions | None = None) -> int:
    """Process *lines* until the sentinel line or end of stream.

    Returns:
        The number of expressions processed.
    """
    options = options or SessionOptions()
    processed = 0
    for raw in lines:
        line = raw.rstrip("\r\n")
        if options.is_sentinel(line):
            break
        if not line.strip():
            continue
        for text in process_line(line, options):
            out.write(text + "\n")
        processed += 1
    return processed


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arithlib",
        description="Parse arithmetic expressions line by line and report diagnostics.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        type=Path,
        help="Read expressions from FILE instead of standard input",
    )
    parser.add_argument(
        "--no-tree",
        dest="show_tree",
        action="store_false",
        help="Do not print the parse tree of valid lines",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Trace grammar rule entry/exit on standard error",
    )
    return parser


def configure_logging(trace: bool) -> None:
    if trace:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="TRACE: %(message)s")


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    options = SessionOptions(show_tree=args.show_tree, trace=args.trace)
    configure_logging(options.trace)

    if args.file is None:
        run_session(sys.stdin, sys.stdout, options)
        return 0

    try:
        with open(args.file, "r", encoding="utf-8") as f:
            lines = f.read().split("\n")
    except FileNotFoundError:
        print(f"ERROR: File not found: {args.file}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"ERROR: Invalid UTF-8 in {args.file}: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"ERROR: Cannot read {args.file}: {e.strerror}", file=sys.stderr)
        return 1

    run_session(lines, sys.stdout, options)
    return 0


if __name__ == "__main__":
    sys.exit(main())
