"""Pratt parser that builds a Monkey AST from a token stream."""

from enum import IntEnum
import logging
from typing import Callable, Dict, Final, List

from monkey.monkey_ast import (
    MonkeyASTBlockStatement, MonkeyASTBoolean, MonkeyASTCall, MonkeyASTExpression,
    MonkeyASTExpressionStatement, MonkeyASTFunction, MonkeyASTIdentifier, MonkeyASTIf,
    MonkeyASTInfix, MonkeyASTInteger, MonkeyASTLetStatement, MonkeyASTPrefix, MonkeyASTProgram,
    MonkeyASTReturnStatement, MonkeyASTStatement
)
from monkey.monkey_error import (
    MonkeyError, MonkeyExpectedTokenError, MonkeyIllegalTokenError, MonkeyIntegerOverflowError,
    MonkeyLexError, MonkeyNoInfixParseFnError, MonkeyNoPrefixParseFnError
)
from monkey.monkey_lexer import MonkeyLexer
from monkey.monkey_token import MonkeyToken, MonkeyTokenType


class MonkeyPrecedence(IntEnum):
    """Operator binding power, lowest first."""
    LOWEST = 1
    EQUALS = 2          # == !=
    LESSGREATER = 3     # < > <= >=
    SUM = 4             # + -
    PRODUCT = 5         # * /
    PREFIX = 6          # -x !x ++x --x
    CALL = 7            # f(x)


PRECEDENCES: Final[Dict[MonkeyTokenType, MonkeyPrecedence]] = {
    MonkeyTokenType.EQ: MonkeyPrecedence.EQUALS,
    MonkeyTokenType.NEQ: MonkeyPrecedence.EQUALS,
    MonkeyTokenType.LT: MonkeyPrecedence.LESSGREATER,
    MonkeyTokenType.GT: MonkeyPrecedence.LESSGREATER,
    MonkeyTokenType.LTE: MonkeyPrecedence.LESSGREATER,
    MonkeyTokenType.GTE: MonkeyPrecedence.LESSGREATER,
    MonkeyTokenType.PLUS: MonkeyPrecedence.SUM,
    MonkeyTokenType.MINUS: MonkeyPrecedence.SUM,
    MonkeyTokenType.ASTERISK: MonkeyPrecedence.PRODUCT,
    MonkeyTokenType.SLASH: MonkeyPrecedence.PRODUCT,
    MonkeyTokenType.LPAREN: MonkeyPrecedence.CALL,
}

INT64_MAX: Final[int] = 2**63 - 1


def precedence_of(token_type: MonkeyTokenType) -> MonkeyPrecedence:
    """
    Return the binding power of a token type.

    Anything without an entry is LOWEST, which is what stops expression
    parsing at `)`, `,`, `;` and EOF.
    """
    return PRECEDENCES.get(token_type, MonkeyPrecedence.LOWEST)


PrefixParseFn = Callable[[MonkeyToken], MonkeyASTExpression]
InfixParseFn = Callable[[MonkeyASTExpression, MonkeyToken], MonkeyASTExpression]


class MonkeyParser:
    """
    Top-down operator precedence parser for Monkey.

    Pulls tokens from a lexer on demand and builds a program AST.  Parsing
    never stops at the first problem: an error abandons the statement being
    parsed, is recorded in `errors`, and parsing resumes with the next token.

    Attributes:
        errors: Errors encountered while parsing, in the order they occurred
    """

    def __init__(self, lexer: MonkeyLexer) -> None:
        """
        Initialize the parser.

        Args:
            lexer: The lexer to pull tokens from
        """
        self._lexer = lexer
        self._logger = logging.getLogger("MonkeyParser")
        self.errors: List[MonkeyError] = []

        self._prefix_parse_fns: Dict[MonkeyTokenType, PrefixParseFn] = {
            MonkeyTokenType.IDENT: self._parse_identifier,
            MonkeyTokenType.INT: self._parse_integer,
            MonkeyTokenType.TRUE: self._parse_boolean,
            MonkeyTokenType.FALSE: self._parse_boolean,
            MonkeyTokenType.BANG: self._parse_prefix_expression,
            MonkeyTokenType.MINUS: self._parse_prefix_expression,
            MonkeyTokenType.INCREMENT: self._parse_prefix_expression,
            MonkeyTokenType.DECREMENT: self._parse_prefix_expression,
            MonkeyTokenType.LPAREN: self._parse_grouped_expression,
            MonkeyTokenType.IF: self._parse_if_expression,
            MonkeyTokenType.FUNCTION: self._parse_function_literal,
        }

        self._infix_parse_fns: Dict[MonkeyTokenType, InfixParseFn] = {
            MonkeyTokenType.PLUS: self._parse_infix_expression,
            MonkeyTokenType.MINUS: self._parse_infix_expression,
            MonkeyTokenType.ASTERISK: self._parse_infix_expression,
            MonkeyTokenType.SLASH: self._parse_infix_expression,
            MonkeyTokenType.EQ: self._parse_infix_expression,
            MonkeyTokenType.NEQ: self._parse_infix_expression,
            MonkeyTokenType.LT: self._parse_infix_expression,
            MonkeyTokenType.GT: self._parse_infix_expression,
            MonkeyTokenType.LTE: self._parse_infix_expression,
            MonkeyTokenType.GTE: self._parse_infix_expression,
            MonkeyTokenType.LPAREN: self._parse_call_expression,
        }

    def parse_program(self) -> MonkeyASTProgram:
        """
        Parse the whole token stream.

        Returns:
            The program; statements that failed to parse are left out and their
            errors are available in `errors`
        """
        program = MonkeyASTProgram()

        try:
            token = self._lexer.next_token()

        except MonkeyLexError as e:
            self._record_error(e)
            return program

        while token.type != MonkeyTokenType.EOF:
            try:
                program.statements.append(self._parse_statement(token))

            except MonkeyError as e:
                self._record_error(e)

            try:
                token = self._lexer.next_token()

            except MonkeyLexError as e:
                self._record_error(e)
                break

        return program

    def _record_error(self, error: MonkeyError) -> None:
        # A lexer error found by a peek is raised again when the same token is read
        if isinstance(error, MonkeyLexError) and self.errors:
            last = self.errors[-1]
            if type(last) is type(error) and (last.line, last.column) == (error.line, error.column):
                return

        self._logger.debug("Parse error: %s", error)
        self.errors.append(error)

    def _parse_statement(self, token: MonkeyToken) -> MonkeyASTStatement:
        if token.type == MonkeyTokenType.LET:
            return self._parse_let_statement(token)

        if token.type == MonkeyTokenType.RETURN:
            return self._parse_return_statement(token)

        return self._parse_expression_statement(token)

    def _parse_let_statement(self, token: MonkeyToken) -> MonkeyASTLetStatement:
        """Parse `let <ident> = <expression>;`."""
        name_token = self._expect_peek(MonkeyTokenType.IDENT)
        name = MonkeyASTIdentifier(name_token, name_token.literal)

        self._expect_peek(MonkeyTokenType.ASSIGN)

        value = self._parse_expression(self._lexer.next_token(), MonkeyPrecedence.LOWEST)

        self._expect_peek(MonkeyTokenType.SEMICOLON)
        return MonkeyASTLetStatement(token, name, value)

    def _parse_return_statement(self, token: MonkeyToken) -> MonkeyASTReturnStatement:
        """Parse `return <expression>;`."""
        return_value = self._parse_expression(self._lexer.next_token(), MonkeyPrecedence.LOWEST)

        self._expect_peek(MonkeyTokenType.SEMICOLON)
        return MonkeyASTReturnStatement(token, return_value)

    def _parse_expression_statement(self, token: MonkeyToken) -> MonkeyASTExpressionStatement:
        """Parse an expression, consuming a trailing `;` if there is one."""
        expression = self._parse_expression(token, MonkeyPrecedence.LOWEST)

        if self._peek_is(MonkeyTokenType.SEMICOLON):
            self._lexer.next_token()

        return MonkeyASTExpressionStatement(token, expression)

    def _parse_expression(self, token: MonkeyToken, precedence: MonkeyPrecedence) -> MonkeyASTExpression:
        """
        Parse an expression starting at token.

        Operators are folded into the left operand while they bind more tightly
        than precedence.  The comparison is strict, so an operator of equal
        precedence is left for the caller, which makes binary operators
        left-associative.

        Args:
            token: The first token of the expression (already consumed)
            precedence: Binding power of the operator to the left of the expression

        Returns:
            The parsed expression
        """
        prefix = self._prefix_parse_fns.get(token.type)
        if prefix is None:
            if token.type == MonkeyTokenType.ILLEGAL:
                raise MonkeyIllegalTokenError(token.literal, self._lexer.filename, token.line, token.column)

            raise MonkeyNoPrefixParseFnError(token.literal, self._lexer.filename, token.line, token.column)

        left = prefix(token)

        while True:
            peek = self._lexer.peek_token()
            if peek.type in (MonkeyTokenType.SEMICOLON, MonkeyTokenType.EOF):
                break

            if precedence >= precedence_of(peek.type):
                break

            operator = self._lexer.next_token()
            infix = self._infix_parse_fns.get(operator.type)
            if infix is None:
                raise MonkeyNoInfixParseFnError(
                    operator.literal, self._lexer.filename, operator.line, operator.column
                )

            left = infix(left, operator)

        return left

    def _parse_identifier(self, token: MonkeyToken) -> MonkeyASTIdentifier:
        return MonkeyASTIdentifier(token, token.literal)

    def _parse_integer(self, token: MonkeyToken) -> MonkeyASTInteger:
        value = int(token.literal, 10)
        if value > INT64_MAX:
            raise MonkeyIntegerOverflowError(token.literal, self._lexer.filename, token.line, token.column)

        return MonkeyASTInteger(token, value)

    def _parse_boolean(self, token: MonkeyToken) -> MonkeyASTBoolean:
        return MonkeyASTBoolean(token, token.type == MonkeyTokenType.TRUE)

    def _parse_prefix_expression(self, token: MonkeyToken) -> MonkeyASTPrefix:
        right = self._parse_expression(self._lexer.next_token(), MonkeyPrecedence.PREFIX)
        return MonkeyASTPrefix(token, token.literal, right)

    def _parse_grouped_expression(self, token: MonkeyToken) -> MonkeyASTExpression:  # pylint: disable=unused-argument
        expression = self._parse_expression(self._lexer.next_token(), MonkeyPrecedence.LOWEST)
        self._expect_peek(MonkeyTokenType.RPAREN)
        return expression

    def _parse_if_expression(self, token: MonkeyToken) -> MonkeyASTIf:
        """Parse `if (<condition>) { ... }` with an optional `else { ... }`."""
        self._expect_peek(MonkeyTokenType.LPAREN)
        condition = self._parse_expression(self._lexer.next_token(), MonkeyPrecedence.LOWEST)
        self._expect_peek(MonkeyTokenType.RPAREN)

        consequence = self._parse_block_statement(self._expect_peek(MonkeyTokenType.LBRACE))

        alternative = None
        if self._peek_is(MonkeyTokenType.ELSE):
            self._lexer.next_token()
            alternative = self._parse_block_statement(self._expect_peek(MonkeyTokenType.LBRACE))

        return MonkeyASTIf(token, condition, consequence, alternative)

    def _parse_function_literal(self, token: MonkeyToken) -> MonkeyASTFunction:
        """Parse `fn(<identifiers>) { ... }`."""
        self._expect_peek(MonkeyTokenType.LPAREN)
        parameters = self._parse_function_parameters()
        body = self._parse_block_statement(self._expect_peek(MonkeyTokenType.LBRACE))
        return MonkeyASTFunction(token, parameters, body)

    def _parse_function_parameters(self) -> List[MonkeyASTIdentifier]:
        parameters: List[MonkeyASTIdentifier] = []
        while not self._peek_is(MonkeyTokenType.RPAREN):
            param_token = self._expect_peek(MonkeyTokenType.IDENT)
            parameters.append(MonkeyASTIdentifier(param_token, param_token.literal))
            if not self._peek_is(MonkeyTokenType.COMMA):
                break

            self._lexer.next_token()

        self._expect_peek(MonkeyTokenType.RPAREN)
        return parameters

    def _parse_infix_expression(self, left: MonkeyASTExpression, token: MonkeyToken) -> MonkeyASTInfix:
        precedence = precedence_of(token.type)
        right = self._parse_expression(self._lexer.next_token(), precedence)
        return MonkeyASTInfix(token, left, token.literal, right)

    def _parse_call_expression(self, function: MonkeyASTExpression, token: MonkeyToken) -> MonkeyASTCall:
        arguments: List[MonkeyASTExpression] = []
        while not self._peek_is(MonkeyTokenType.RPAREN):
            arguments.append(self._parse_expression(self._lexer.next_token(), MonkeyPrecedence.LOWEST))
            if not self._peek_is(MonkeyTokenType.COMMA):
                break

            self._lexer.next_token()

        self._expect_peek(MonkeyTokenType.RPAREN)
        return MonkeyASTCall(token, function, arguments)

    def _parse_block_statement(self, token: MonkeyToken) -> MonkeyASTBlockStatement:
        """
        Parse the statements of a block whose `{` has been consumed.

        Stops at `}` or EOF, so an unterminated block is reported as a missing
        `}` rather than looping forever.
        """
        block = MonkeyASTBlockStatement(token)
        while True:
            peek = self._lexer.peek_token()
            if peek.type in (MonkeyTokenType.RBRACE, MonkeyTokenType.EOF):
                break

            block.statements.append(self._parse_statement(self._lexer.next_token()))

        self._expect_peek(MonkeyTokenType.RBRACE)
        return block

    def _peek_is(self, token_type: MonkeyTokenType) -> bool:
        return self._lexer.peek_token().type == token_type

    def _assert_peek(self, *expected: MonkeyTokenType) -> MonkeyToken:
        """
        Check the next token is one of the expected kinds, without consuming it.

        Returns:
            The peeked token

        Raises:
            MonkeyExpectedTokenError: If the next token is of another kind
        """
        peek = self._lexer.peek_token()
        if peek.type not in expected:
            raise MonkeyExpectedTokenError(expected, peek.type, self._lexer.filename, peek.line, peek.column)

        return peek

    def _expect_peek(self, *expected: MonkeyTokenType) -> MonkeyToken:
        """Require the next token to be one of the expected kinds and consume it."""
        self._assert_peek(*expected)
        return self._lexer.next_token()
