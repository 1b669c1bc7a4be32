"""Options for the line-oriented session."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionOptions:
    """Feature flags controlling what a session prints for each line."""

    show_tree: bool = True  # print the parse tree of lines without diagnostics
    trace: bool = False  # emit parser rule entry/exit records on stderr
    sentinel: str = "end"  # compared case-insensitively
    indent: str = "  "  # one unit per tree level

    def is_sentinel(self, line: str) -> bool:
        return line.casefold() == self.sentinel.casefold()
