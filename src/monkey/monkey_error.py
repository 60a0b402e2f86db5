"""Exception classes for Monkey lexing and parsing errors."""

from typing import Tuple

from monkey.monkey_token import MonkeyTokenType


class MonkeyError(Exception):
    """Base exception for Monkey errors, carrying the source location."""

    def __init__(self, message: str, filename: str = "", line: int = 0, column: int = 0) -> None:
        """
        Initialize a located error.

        Args:
            message: Core error description
            filename: Name of the source being processed
            line: Line number (1-indexed)
            column: Column number (1-indexed)
        """
        self.message = message
        self.filename = filename
        self.line = line
        self.column = column

        super().__init__(f"{filename} line: {line} col: {column} {message}")


class MonkeyLexError(MonkeyError):
    """Errors raised while scanning source into tokens."""


class MonkeyBadVariableNameError(MonkeyLexError):
    """An identifier starts with a digit."""

    def __init__(self, literal: str, filename: str = "", line: int = 0, column: int = 0) -> None:
        self.literal = literal
        super().__init__(
            f"bad variable name: {literal!r} (identifiers cannot start with a digit)",
            filename,
            line,
            column
        )


class MonkeyParseError(MonkeyError):
    """Errors raised while building the AST."""


class MonkeyExpectedTokenError(MonkeyParseError):
    """The next token did not match any of the required kinds."""

    def __init__(
        self,
        expected: Tuple[MonkeyTokenType, ...],
        got: MonkeyTokenType,
        filename: str = "",
        line: int = 0,
        column: int = 0
    ) -> None:
        self.expected = expected
        self.got = got
        wanted = " or ".join(token_type.value for token_type in expected)
        super().__init__(f"expected token: {wanted}, got {got.value}", filename, line, column)


class MonkeyNoPrefixParseFnError(MonkeyParseError):
    """A token cannot begin an expression."""

    def __init__(self, literal: str, filename: str = "", line: int = 0, column: int = 0) -> None:
        self.literal = literal
        super().__init__(self._describe(literal), filename, line, column)

    def _describe(self, literal: str) -> str:
        return f"no prefix parse function for {literal!r}"


class MonkeyIllegalTokenError(MonkeyNoPrefixParseFnError):
    """An ILLEGAL token was found where an expression should start."""

    def _describe(self, literal: str) -> str:
        return f"illegal character {literal!r}"


class MonkeyNoInfixParseFnError(MonkeyParseError):
    """An operator token has no infix handler."""

    def __init__(self, literal: str, filename: str = "", line: int = 0, column: int = 0) -> None:
        self.literal = literal
        super().__init__(f"no infix parse function for {literal!r}", filename, line, column)


class MonkeyIntegerOverflowError(MonkeyParseError):
    """An integer literal does not fit in a signed 64-bit value."""

    def __init__(self, literal: str, filename: str = "", line: int = 0, column: int = 0) -> None:
        self.literal = literal
        super().__init__(f"integer literal {literal} is out of range", filename, line, column)
