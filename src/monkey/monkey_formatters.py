"""Functions for formatting Monkey diagnostics, error reports and token dumps."""

import io
import sys
from typing import Final, Iterable, List, TextIO

from monkey.monkey_error import MonkeyError
from monkey.monkey_token import MonkeyToken


MONKEY_FACE: Final[str] = "\n".join([
    "            __,__",
    "   .--.  .-\"     \"-.  .--.",
    "  / .. \\/  .-. .-.  \\/ .. \\",
    " | |  '|  /   Y   \\  |'  | |",
    " | \\   \\  \\ 0 | 0 /  /   / |",
    "  \\ '- ,\\.-\"\"\"\"\"\"\"-./, -' /",
    "   ''-' /_   ^ ^   _\\ '-''",
    "       |  \\._   _./  |",
    "       \\   \\ '~' /   /",
    "        '._ '-=-' _.'",
    "           '-----'",
]) + "\n"

ERROR_BANNER: Final[str] = "Woops! We ran into some monkey business here!"
ERROR_HEADING: Final[str] = " parser errors:"


def format_error(filename: str, line: int, column: int, error: Exception | str) -> str:
    """Format a single diagnostic line.

    Args:
        filename: Name of the source the error came from
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        error: The error, or its message

    Returns:
        The diagnostic text, without a trailing newline
    """
    message = error.message if isinstance(error, MonkeyError) else str(error)
    return f"file: {filename} line: {line} column: {column}, error: {message}"


def print_error(filename: str, line: int, column: int, error: Exception | str, out: TextIO | None = None) -> None:
    """Write a single diagnostic line to out (stdout by default)."""
    sink = out if out is not None else sys.stdout
    sink.write(format_error(filename, line, column, error) + "\n")


def format_parser_errors(errors: List[MonkeyError], show_face: bool = True) -> str:
    """Format the REPL's parser error report.

    Args:
        errors: Errors collected by the parser
        show_face: Whether to include the monkey face art

    Returns:
        The report, one tab-indented line per error
    """
    output = io.StringIO()
    if show_face:
        output.write(MONKEY_FACE)

    output.write(f"{ERROR_BANNER}\n")
    output.write(f"{ERROR_HEADING}\n")
    for error in errors:
        output.write(f"\t{error}\n")

    return output.getvalue()


def format_tokens(tokens: Iterable[MonkeyToken]) -> str:
    """Format tokens one per line as `line:column TYPE 'literal'`."""
    output = io.StringIO()
    for token in tokens:
        output.write(f"{token.line}:{token.column} {token.type.name} {token.literal!r}\n")

    return output.getvalue()
