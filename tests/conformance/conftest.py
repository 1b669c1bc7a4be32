"""Shared fixtures for the expression conformance suites.

Each case table under ``lexical/``, ``syntax/`` and ``valid/`` is run
against every runner listed here.
"""

import pytest
from tests.conformance.runners.parser_runner import ParserRunner


def get_available_runners():
    """Return the runners that can lex, parse and report one input line."""
    runners = [ParserRunner()]
    return runners


@pytest.fixture(params=get_available_runners(), ids=lambda r: r.name)
def runner(request):
    """Run each conformance case once per runner.

    A runner takes one expression line and returns a ``ValidationResult``
    holding the rendered diagnostics or, for valid input, the rendered
    parse tree.  Currently:
    - parser: the arithlib lexer plus the recursive-descent parser
    """
    return request.param
