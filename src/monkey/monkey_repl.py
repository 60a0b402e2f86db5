"""Interactive read-parse-print loop for Monkey."""

import logging
from typing import TextIO

from monkey.monkey_formatters import format_parser_errors
from monkey.monkey_lexer import MonkeyLexer
from monkey.monkey_parser import MonkeyParser
from monkey.monkey_settings import MonkeySettings


class MonkeyRepl:
    """Reads Monkey source a line at a time and prints the parsed program."""

    def __init__(self, settings: MonkeySettings | None = None) -> None:
        """
        Initialize the REPL.

        Args:
            settings: Settings to use; defaults are used if None
        """
        self._settings = settings if settings is not None else MonkeySettings.create_default()
        self._logger = logging.getLogger("MonkeyRepl")

    def run(self, input_stream: TextIO, output_stream: TextIO) -> None:
        """
        Run until input_stream is exhausted.

        Args:
            input_stream: Where source lines are read from
            output_stream: Where prompts, rendered programs and errors are written
        """
        while True:
            output_stream.write(self._settings.prompt)
            output_stream.flush()

            line = input_stream.readline()
            if not line:
                return

            line = line.rstrip("\r\n")
            if not line.strip():
                continue

            output_stream.write(self.process_line(line))

    def process_line(self, line: str) -> str:
        """
        Parse one line of input.

        Args:
            line: Monkey source

        Returns:
            The rendered program followed by a newline, or the error report
        """
        self._logger.debug("Parsing line: %r", line)

        lexer = MonkeyLexer(line, self._settings.filename)
        parser = MonkeyParser(lexer)
        program = parser.parse_program()

        if parser.errors:
            self._logger.debug("Line produced %d error(s)", len(parser.errors))
            return format_parser_errors(parser.errors, self._settings.show_face)

        return program.render() + "\n"
