"""Streaming lexer for Monkey source with one-token lookahead."""

import logging
from typing import Iterator, TextIO, Tuple

from monkey.monkey_error import MonkeyBadVariableNameError
from monkey.monkey_formatters import print_error
from monkey.monkey_token import (
    DOUBLE_CHAR_TOKENS, SINGLE_CHAR_TOKENS, MonkeyToken, MonkeyTokenType,
    is_alpha_or_underscore, is_digit, is_whitespace, lookup_token_type
)


class MonkeyLexer:
    """
    Produces Monkey tokens one at a time from an immutable source string.

    The lexer only ever looks one character ahead in the source.  Token
    lookahead is provided by `peek_token()`, which runs the normal scanning
    path and then restores the cursor.

    Attributes:
        filename: Name of the source being lexed, used in diagnostics
        line: Line of the last consumed character (1-indexed)
        column: Column of the last consumed character (1-indexed, 0 before
            anything has been consumed)
    """

    def __init__(self, source: str, filename: str = "<input>", diagnostics: TextIO | None = None) -> None:
        """
        Initialize the lexer.

        Args:
            source: The source text to lex
            filename: Name of the source, used in diagnostics
            diagnostics: Optional stream that lexer errors are pretty-printed to
        """
        self._source = source
        # A NUL character ends the input, as end of source does
        nul = source.find("\0")
        self._source_len = nul if nul >= 0 else len(source)
        self._position = 0
        self._ch = ""
        self._diagnostics = diagnostics
        self._last_reported: Tuple[int, int] | None = None
        self._logger = logging.getLogger("MonkeyLexer")

        self.filename = filename
        self.line = 1
        self.column = 0

    def next_token(self) -> MonkeyToken:
        """
        Scan and consume the next token.

        Returns:
            The next token; EOF (with an empty literal) once the source is exhausted

        Raises:
            MonkeyBadVariableNameError: If an identifier starts with a digit
        """
        self._skip_whitespace()
        ch = self._read_char()
        line = self.line
        column = self.column

        if ch == "":
            return MonkeyToken(MonkeyTokenType.EOF, "", line, column)

        token_type = SINGLE_CHAR_TOKENS.get(ch)
        if token_type is not None:
            candidate = ch + self._peek_char()
            double_type = DOUBLE_CHAR_TOKENS.get(candidate)
            if double_type is not None:
                self._read_char()
                return MonkeyToken(double_type, candidate, line, column)

            return MonkeyToken(token_type, ch, line, column)

        if is_digit(ch) or is_alpha_or_underscore(ch):
            literal = self._read_identifier_or_number(line, column)
            return MonkeyToken(lookup_token_type(literal), literal, line, column)

        return MonkeyToken(MonkeyTokenType.ILLEGAL, ch, line, column)

    def peek_token(self) -> MonkeyToken:
        """
        Return the token `next_token()` would return, without consuming it.

        Raises:
            MonkeyBadVariableNameError: If the next token is a bad identifier
        """
        position, ch, line, column = self._position, self._ch, self.line, self.column
        try:
            return self.next_token()

        finally:
            self._position, self._ch, self.line, self.column = position, ch, line, column

    def tokens(self) -> Iterator[MonkeyToken]:
        """Yield tokens until, and including, EOF."""
        while True:
            token = self.next_token()
            yield token
            if token.type == MonkeyTokenType.EOF:
                return

    def _peek_char(self) -> str:
        """Return the next unread character, or an empty string at the end of input."""
        if self._position >= self._source_len:
            return ""

        return self._source[self._position]

    def _read_char(self) -> str:
        """Consume one character, keeping line and column up to date."""
        if self._position >= self._source_len:
            self._ch = ""
            return ""

        if self._ch == "\n":
            self.line += 1
            self.column = 0

        self._ch = self._source[self._position]
        self._position += 1
        self.column += 1
        return self._ch

    def _skip_whitespace(self) -> None:
        while is_whitespace(self._peek_char()):
            self._read_char()

    def _read_identifier_or_number(self, line: int, column: int) -> str:
        """
        Read the rest of an identifier or integer whose first character is already consumed.

        Args:
            line: Line of the first character
            column: Column of the first character

        Returns:
            The full literal

        Raises:
            MonkeyBadVariableNameError: If digits are immediately followed by a letter or underscore
        """
        start = self._position - 1
        if is_digit(self._ch):
            while is_digit(self._peek_char()):
                self._read_char()

            if is_alpha_or_underscore(self._peek_char()):
                # The cursor stays after the digits; the extent is only for the message
                end = self._position
                while end < self._source_len and (
                    is_alpha_or_underscore(self._source[end]) or is_digit(self._source[end])
                ):
                    end += 1

                self._report_bad_variable_name(self._source[start:end], line, column)

        else:
            while is_alpha_or_underscore(self._peek_char()) or is_digit(self._peek_char()):
                self._read_char()

        return self._source[start:self._position]

    def _report_bad_variable_name(self, literal: str, line: int, column: int) -> None:
        error = MonkeyBadVariableNameError(literal, self.filename, line, column)

        # A peek followed by a read reaches the same bad literal twice; report it once
        if self._last_reported != (line, column):
            self._last_reported = (line, column)
            self._logger.warning("Bad variable name %r at %s:%d:%d", literal, self.filename, line, column)
            if self._diagnostics is not None:
                print_error(self.filename, line, column, error, self._diagnostics)

        raise error
