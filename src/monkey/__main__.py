"""Command-line entry point for the Monkey front-end."""

import argparse
import json
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys
from typing import List

from monkey.monkey_ast_printer import MonkeyASTPrinter
from monkey.monkey_error import MonkeyError
from monkey.monkey_formatters import format_tokens, print_error
from monkey.monkey_lexer import MonkeyLexer
from monkey.monkey_parser import MonkeyParser
from monkey.monkey_repl import MonkeyRepl
from monkey.monkey_settings import MonkeySettings


def setup_logging(level: str, log_file: str | None = None) -> None:
    """
    Configure logging for the command-line tool.

    Args:
        level: Name of the logging level
        log_file: Optional path of a rotating log file; stderr is used otherwise
    """
    handlers: List[logging.Handler] = []
    if log_file:
        handlers.append(RotatingFileHandler(
            log_file,
            maxBytes=1024*1024,  # 1MB
            backupCount=5,
            encoding='utf-8'
        ))

    else:
        handlers.append(logging.StreamHandler(sys.stderr))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )


def parse_source(source: str, filename: str, args: argparse.Namespace) -> int:
    """
    Parse a complete source and print the requested view of it.

    Returns:
        Process exit code
    """
    if args.tokens:
        # The lexer reports its own errors to stderr
        try:
            print(format_tokens(MonkeyLexer(source, filename, sys.stderr).tokens()), end='')

        except MonkeyError:
            return 1

        return 0

    lexer = MonkeyLexer(source, filename)

    parser = MonkeyParser(lexer)
    program = parser.parse_program()
    if parser.errors:
        for error in parser.errors:
            print_error(error.filename, error.line, error.column, error, sys.stderr)

        return 1

    if args.ast:
        print(MonkeyASTPrinter().format(program), end='')
        return 0

    print(program.render())
    return 0


def main(argv: List[str] | None = None) -> int:
    """Main entry point for the Monkey CLI."""
    arg_parser = argparse.ArgumentParser(
        prog='monkey',
        description='Parse Monkey source and print its canonical form',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Start the interactive prompt
  monkey

  # Parse a file and print the canonical rendering
  monkey program.mk

  # Dump the tokens or the syntax tree
  monkey program.mk --tokens
  echo "let x = 1 + 2;" | monkey - --ast
"""
    )
    arg_parser.add_argument(
        'input',
        nargs='?',
        help='Source file (use "-" for stdin); starts the REPL if omitted'
    )
    arg_parser.add_argument(
        '--tokens',
        action='store_true',
        help='Print the token stream instead of parsing'
    )
    arg_parser.add_argument(
        '--ast',
        action='store_true',
        help='Print the syntax tree instead of the rendered program'
    )
    arg_parser.add_argument(
        '--settings',
        help='Path to a JSON settings file'
    )
    arg_parser.add_argument(
        '--log-level',
        help='Logging level (overrides the settings file)'
    )
    arg_parser.add_argument(
        '--log-file',
        help='Write logs to a rotating log file instead of stderr'
    )
    args = arg_parser.parse_args(argv)

    settings = MonkeySettings.create_default()
    if args.settings:
        try:
            settings = MonkeySettings.load(args.settings)

        except (OSError, json.JSONDecodeError) as e:
            print(f"Error: Cannot load settings from {args.settings}: {e}", file=sys.stderr)
            return 1

    setup_logging(args.log_level or settings.log_level, args.log_file)

    if args.input is None:
        MonkeyRepl(settings).run(sys.stdin, sys.stdout)
        return 0

    if args.input == '-':
        return parse_source(sys.stdin.read(), settings.filename, args)

    input_path = Path(args.input)
    if not input_path.is_file():
        print(f"Error: File not found: {args.input}", file=sys.stderr)
        return 1

    return parse_source(input_path.read_text(encoding='utf-8'), args.input, args)


if __name__ == '__main__':
    sys.exit(main())
