"""Monkey language front-end: lexer, Pratt parser and AST."""

# Exceptions
from monkey.monkey_error import (
    MonkeyError, MonkeyLexError, MonkeyBadVariableNameError, MonkeyParseError,
    MonkeyExpectedTokenError, MonkeyNoPrefixParseFnError, MonkeyIllegalTokenError,
    MonkeyNoInfixParseFnError, MonkeyIntegerOverflowError
)

# AST types
from monkey.monkey_ast import (
    MonkeyASTNode, MonkeyASTStatement, MonkeyASTExpression, MonkeyASTProgram,
    MonkeyASTLetStatement, MonkeyASTReturnStatement, MonkeyASTExpressionStatement, MonkeyASTBlockStatement,
    MonkeyASTIdentifier, MonkeyASTInteger, MonkeyASTBoolean, MonkeyASTPrefix, MonkeyASTInfix,
    MonkeyASTIf, MonkeyASTFunction, MonkeyASTCall, MonkeyASTVisitor
)
from monkey.monkey_ast_printer import MonkeyASTPrinter

# Lexing and parsing
from monkey.monkey_token import MonkeyToken, MonkeyTokenType, lookup_token_type
from monkey.monkey_lexer import MonkeyLexer
from monkey.monkey_parser import MonkeyParser, MonkeyPrecedence

# Formatting and the interactive shell
from monkey.monkey_formatters import format_error, print_error, format_parser_errors, format_tokens
from monkey.monkey_repl import MonkeyRepl
from monkey.monkey_settings import MonkeySettings


__all__ = [
    # Exceptions
    "MonkeyError", "MonkeyLexError", "MonkeyBadVariableNameError", "MonkeyParseError",
    "MonkeyExpectedTokenError", "MonkeyNoPrefixParseFnError", "MonkeyIllegalTokenError",
    "MonkeyNoInfixParseFnError", "MonkeyIntegerOverflowError",

    # AST types
    "MonkeyASTNode", "MonkeyASTStatement", "MonkeyASTExpression", "MonkeyASTProgram",
    "MonkeyASTLetStatement", "MonkeyASTReturnStatement", "MonkeyASTExpressionStatement", "MonkeyASTBlockStatement",
    "MonkeyASTIdentifier", "MonkeyASTInteger", "MonkeyASTBoolean", "MonkeyASTPrefix", "MonkeyASTInfix",
    "MonkeyASTIf", "MonkeyASTFunction", "MonkeyASTCall", "MonkeyASTVisitor", "MonkeyASTPrinter",

    # Lexing and parsing
    "MonkeyToken", "MonkeyTokenType", "lookup_token_type", "MonkeyLexer", "MonkeyParser", "MonkeyPrecedence",

    # Formatting and the interactive shell
    "format_error", "print_error", "format_parser_errors", "format_tokens",
    "MonkeyRepl", "MonkeySettings",
]
