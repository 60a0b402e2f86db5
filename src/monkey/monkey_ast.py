"""Monkey AST node hierarchy.

Every node keeps the token that introduced it so later stages can report
source locations.  Tokens are excluded from equality: two trees compare equal
when they have the same shape and values, wherever they came from.

`render()` produces canonical Monkey source for a node.  Infix and prefix
expressions are always parenthesised so the associativity chosen by the
parser is visible, and the rendered text parses back to an equal tree.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Sequence

from monkey.monkey_token import MonkeyToken


@dataclass
class MonkeyASTNode(ABC):
    """Abstract base class for all Monkey AST nodes."""
    token: MonkeyToken = field(compare=False, repr=False)

    @abstractmethod
    def render(self) -> str:
        """Render the node as canonical Monkey source."""

    def children(self) -> List['MonkeyASTNode']:
        """Return the node's direct children in source order."""
        return []

    def token_literal(self) -> str:
        """The literal of the token that introduced this node."""
        return self.token.literal

    def accept(self, visitor: 'MonkeyASTVisitor') -> Any:
        """
        Accept a visitor to process this node.

        Args:
            visitor: The visitor to accept

        Returns:
            The result of the visitor's visit method
        """
        return visitor.visit(self)

    def __str__(self) -> str:
        return self.render()


@dataclass
class MonkeyASTStatement(MonkeyASTNode, ABC):
    """Base class for statements."""


@dataclass
class MonkeyASTExpression(MonkeyASTNode, ABC):
    """Base class for expressions."""


def render_statements(statements: Sequence[MonkeyASTStatement]) -> str:
    """
    Render a statement sequence so that it parses back into the same statements.

    Expression statements carry no terminator of their own, so one that is
    followed by another statement gets a `;` to keep the two apart.
    """
    parts = []
    last = len(statements) - 1
    for i, statement in enumerate(statements):
        text = statement.render()
        if isinstance(statement, MonkeyASTExpressionStatement) and i < last:
            text += ";"

        parts.append(text)

    return " ".join(parts)


@dataclass
class MonkeyASTIdentifier(MonkeyASTExpression):
    """A variable or parameter name."""
    value: str

    def render(self) -> str:
        return self.value


@dataclass
class MonkeyASTInteger(MonkeyASTExpression):
    """A signed 64-bit integer literal."""
    value: int

    def render(self) -> str:
        return str(self.value)


@dataclass
class MonkeyASTBoolean(MonkeyASTExpression):
    """A `true` or `false` literal."""
    value: bool

    def render(self) -> str:
        return "true" if self.value else "false"


@dataclass
class MonkeyASTPrefix(MonkeyASTExpression):
    """A prefix operator applied to an operand, e.g. `-x` or `++x`."""
    operator: str
    right: MonkeyASTExpression

    def render(self) -> str:
        return f"({self.operator}{self.right.render()})"

    def children(self) -> List[MonkeyASTNode]:
        return [self.right]


@dataclass
class MonkeyASTInfix(MonkeyASTExpression):
    """A binary operator expression."""
    left: MonkeyASTExpression
    operator: str
    right: MonkeyASTExpression

    def render(self) -> str:
        return f"({self.left.render()} {self.operator} {self.right.render()})"

    def children(self) -> List[MonkeyASTNode]:
        return [self.left, self.right]


@dataclass
class MonkeyASTLetStatement(MonkeyASTStatement):
    """`let <name> = <value>;`"""
    name: MonkeyASTIdentifier
    value: MonkeyASTExpression

    def render(self) -> str:
        return f"let {self.name.render()} = {self.value.render()};"

    def children(self) -> List[MonkeyASTNode]:
        return [self.name, self.value]


@dataclass
class MonkeyASTReturnStatement(MonkeyASTStatement):
    """`return <value>;`"""
    return_value: MonkeyASTExpression

    def render(self) -> str:
        return f"return {self.return_value.render()};"

    def children(self) -> List[MonkeyASTNode]:
        return [self.return_value]


@dataclass
class MonkeyASTExpressionStatement(MonkeyASTStatement):
    """An expression used as a statement; the trailing `;` is optional in source."""
    expression: MonkeyASTExpression

    def render(self) -> str:
        return self.expression.render()

    def children(self) -> List[MonkeyASTNode]:
        return [self.expression]


@dataclass
class MonkeyASTBlockStatement(MonkeyASTStatement):
    """A braced sequence of statements."""
    statements: List[MonkeyASTStatement] = field(default_factory=list)

    def render(self) -> str:
        if not self.statements:
            return "{}"

        return f"{{ {render_statements(self.statements)} }}"

    def children(self) -> List[MonkeyASTNode]:
        return list(self.statements)


@dataclass
class MonkeyASTIf(MonkeyASTExpression):
    """`if (<condition>) { ... }` with an optional `else { ... }`."""
    condition: MonkeyASTExpression
    consequence: MonkeyASTBlockStatement
    alternative: MonkeyASTBlockStatement | None = None

    def render(self) -> str:
        condition = self.condition.render()
        if not isinstance(self.condition, (MonkeyASTInfix, MonkeyASTPrefix)):
            condition = f"({condition})"

        result = f"if {condition} {self.consequence.render()}"
        if self.alternative is not None:
            result += f" else {self.alternative.render()}"

        return result

    def children(self) -> List[MonkeyASTNode]:
        nodes: List[MonkeyASTNode] = [self.condition, self.consequence]
        if self.alternative is not None:
            nodes.append(self.alternative)

        return nodes


@dataclass
class MonkeyASTFunction(MonkeyASTExpression):
    """`fn(<parameters>) { ... }`"""
    parameters: List[MonkeyASTIdentifier]
    body: MonkeyASTBlockStatement

    def render(self) -> str:
        params = ", ".join(param.render() for param in self.parameters)
        return f"fn({params}) {self.body.render()}"

    def children(self) -> List[MonkeyASTNode]:
        return [*self.parameters, self.body]


@dataclass
class MonkeyASTCall(MonkeyASTExpression):
    """`<function>(<arguments>)`"""
    function: MonkeyASTExpression
    arguments: List[MonkeyASTExpression]

    def render(self) -> str:
        args = ", ".join(arg.render() for arg in self.arguments)
        return f"{self.function.render()}({args})"

    def children(self) -> List[MonkeyASTNode]:
        return [self.function, *self.arguments]


@dataclass
class MonkeyASTProgram:
    """Root of a Monkey AST: the top-level statements in source order."""
    statements: List[MonkeyASTStatement] = field(default_factory=list)

    def render(self) -> str:
        """Render the whole program as canonical Monkey source."""
        return render_statements(self.statements)

    def children(self) -> List[MonkeyASTNode]:
        return list(self.statements)

    def token_literal(self) -> str:
        if not self.statements:
            return ""

        return self.statements[0].token_literal()

    def accept(self, visitor: 'MonkeyASTVisitor') -> Any:
        return visitor.visit(self)

    def __str__(self) -> str:
        return self.render()


class MonkeyASTVisitor:
    """
    Base visitor for Monkey AST traversal.

    `visit()` dispatches to `visit_<ClassName>` when the subclass defines it,
    falling back to `generic_visit()`, which visits each child in turn.
    """

    def visit(self, node: MonkeyASTNode | MonkeyASTProgram) -> Any:
        """
        Visit a node and dispatch to the appropriate visit method.

        Args:
            node: The node to visit

        Returns:
            The result of visiting the node
        """
        method_name = f'visit_{node.__class__.__name__}'
        visitor = getattr(self, method_name, self.generic_visit)
        return visitor(node)

    def generic_visit(self, node: MonkeyASTNode | MonkeyASTProgram) -> List[Any]:
        """
        Default visit method for nodes without specific handlers.

        Args:
            node: The node to visit

        Returns:
            A list of results from visiting each child
        """
        results = []
        for child in node.children():
            results.append(self.visit(child))

        return results
