"""Shared fixtures and utilities for Monkey tests."""

from typing import List, Tuple

import pytest

from monkey import (
    MonkeyASTExpression, MonkeyASTExpressionStatement, MonkeyASTProgram, MonkeyError,
    MonkeyLexer, MonkeyParser, MonkeyTokenType
)


class MonkeyTestHelpers:
    """Helper utilities for Monkey testing."""

    @staticmethod
    def parse(source: str, filename: str = "test.mk") -> Tuple[MonkeyASTProgram, List[MonkeyError]]:
        """Parse source, returning the program and the parser's errors."""
        parser = MonkeyParser(MonkeyLexer(source, filename))
        program = parser.parse_program()
        return program, parser.errors

    @staticmethod
    def parse_ok(source: str) -> MonkeyASTProgram:
        """Parse source and assert it produced no errors."""
        program, errors = MonkeyTestHelpers.parse(source)
        assert not errors, f"Unexpected parser errors for {source!r}: {[str(e) for e in errors]}"
        return program

    @staticmethod
    def parse_expression(source: str) -> MonkeyASTExpression:
        """Parse source that holds a single expression statement and return the expression."""
        program = MonkeyTestHelpers.parse_ok(source)
        assert len(program.statements) == 1, f"Expected one statement, got {len(program.statements)}"
        statement = program.statements[0]
        assert isinstance(statement, MonkeyASTExpressionStatement)
        return statement.expression

    @staticmethod
    def token_types(source: str) -> List[MonkeyTokenType]:
        """Lex source completely and return the token types, EOF included."""
        return [token.type for token in MonkeyLexer(source, "test.mk").tokens()]

    @staticmethod
    def assert_renders(source: str, expected: str) -> None:
        """Assert that source parses cleanly and renders to expected."""
        result = MonkeyTestHelpers.parse_ok(source).render()
        assert result == expected, f"Expected rendering '{expected}', got '{result}'"


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return MonkeyTestHelpers
