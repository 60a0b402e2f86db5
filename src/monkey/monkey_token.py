"""Token types and token representation for Monkey source."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Final, FrozenSet


class MonkeyTokenType(Enum):
    """Token types for Monkey source."""
    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    # Identifiers and literals
    IDENT = "IDENT"
    INT = "INT"

    # Operators
    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    BANG = "!"
    ASTERISK = "*"
    SLASH = "/"
    LT = "<"
    GT = ">"
    EQ = "=="
    NEQ = "!="
    GTE = ">="
    LTE = "<="
    INCREMENT = "++"
    DECREMENT = "--"

    # Delimiters
    COMMA = ","
    SEMICOLON = ";"
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    # Keywords
    FUNCTION = "FUNCTION"
    LET = "LET"
    RETURN = "RETURN"
    TRUE = "TRUE"
    FALSE = "FALSE"
    IF = "IF"
    ELSE = "ELSE"


@dataclass(frozen=True)
class MonkeyToken:
    """
    Represents a single token in Monkey source.

    Attributes:
        type: The kind of the token
        literal: The exact source text that produced the token (empty for EOF)
        line: Line of the token's first character (1-indexed)
        column: Column of the token's first character (1-indexed)
    """
    type: MonkeyTokenType
    literal: str
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        return f"MonkeyToken({self.type.name}, {self.literal!r}, line={self.line}, col={self.column})"


SINGLE_CHAR_TOKENS: Final[Dict[str, MonkeyTokenType]] = {
    '=': MonkeyTokenType.ASSIGN,
    ';': MonkeyTokenType.SEMICOLON,
    '(': MonkeyTokenType.LPAREN,
    ')': MonkeyTokenType.RPAREN,
    ',': MonkeyTokenType.COMMA,
    '+': MonkeyTokenType.PLUS,
    '-': MonkeyTokenType.MINUS,
    '{': MonkeyTokenType.LBRACE,
    '}': MonkeyTokenType.RBRACE,
    '!': MonkeyTokenType.BANG,
    '*': MonkeyTokenType.ASTERISK,
    '/': MonkeyTokenType.SLASH,
    '<': MonkeyTokenType.LT,
    '>': MonkeyTokenType.GT,
}

# Only reachable when the first character is itself a single-char token
DOUBLE_CHAR_TOKENS: Final[Dict[str, MonkeyTokenType]] = {
    "==": MonkeyTokenType.EQ,
    "!=": MonkeyTokenType.NEQ,
    ">=": MonkeyTokenType.GTE,
    "<=": MonkeyTokenType.LTE,
    "++": MonkeyTokenType.INCREMENT,
    "--": MonkeyTokenType.DECREMENT,
}

KEYWORDS: Final[Dict[str, MonkeyTokenType]] = {
    "fn": MonkeyTokenType.FUNCTION,
    "let": MonkeyTokenType.LET,
    "if": MonkeyTokenType.IF,
    "else": MonkeyTokenType.ELSE,
    "return": MonkeyTokenType.RETURN,
    "true": MonkeyTokenType.TRUE,
    "false": MonkeyTokenType.FALSE,
}

_DIGIT_CHARS: Final[FrozenSet[str]] = frozenset("0123456789")
_ALPHA_UNDERSCORE_CHARS: Final[FrozenSet[str]] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"
)
_WHITESPACE_CHARS: Final[FrozenSet[str]] = frozenset(" \t\r\n")


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII digit."""
    return ch in _DIGIT_CHARS


def is_alpha_or_underscore(ch: str) -> bool:
    """Return True if ch is an ASCII letter or an underscore."""
    return ch in _ALPHA_UNDERSCORE_CHARS


def is_whitespace(ch: str) -> bool:
    """Return True if ch is a space, tab, carriage return or newline."""
    return ch in _WHITESPACE_CHARS


def lookup_token_type(literal: str) -> MonkeyTokenType:
    """
    Classify an identifier-shaped literal.

    Literals that start with a digit and continue with letters never reach
    here; the lexer rejects them as bad variable names.

    Args:
        literal: The literal to classify

    Returns:
        EOF for an empty literal, the keyword type for a reserved word, INT for
        a literal starting with a digit, otherwise IDENT
    """
    if not literal:
        return MonkeyTokenType.EOF

    keyword = KEYWORDS.get(literal)
    if keyword is not None:
        return keyword

    if is_digit(literal[0]):
        return MonkeyTokenType.INT

    return MonkeyTokenType.IDENT
