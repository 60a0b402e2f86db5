"""
Visitor that dumps Monkey AST structures as an indented tree for debugging
"""
from typing import Any, List

from monkey.monkey_ast import (
    MonkeyASTBoolean, MonkeyASTIdentifier, MonkeyASTInfix, MonkeyASTInteger, MonkeyASTLetStatement,
    MonkeyASTNode, MonkeyASTPrefix, MonkeyASTProgram, MonkeyASTVisitor
)


class MonkeyASTPrinter(MonkeyASTVisitor):
    """Visitor that renders the AST structure, one node per line."""

    def __init__(self) -> None:
        """Initialize the printer with zero indentation."""
        super().__init__()
        self.indent_level = 0
        self._lines: List[str] = []

    def format(self, node: MonkeyASTNode | MonkeyASTProgram) -> str:
        """
        Format a node and everything below it.

        Args:
            node: The root of the tree to format

        Returns:
            The tree, one line per node, each line newline-terminated
        """
        self.indent_level = 0
        self._lines = []
        self.visit(node)
        return "".join(f"{line}\n" for line in self._lines)

    def _emit(self, node: MonkeyASTNode | MonkeyASTProgram, detail: str = "") -> None:
        label = node.__class__.__name__
        if detail:
            label += f": {detail}"

        if isinstance(node, MonkeyASTNode) and node.token.line:
            label += f" (line {node.token.line}, column {node.token.column})"

        self._lines.append(f"{'  ' * self.indent_level}{label}")

    def _visit_children(self, node: MonkeyASTNode | MonkeyASTProgram) -> List[Any]:
        self.indent_level += 1
        results = super().generic_visit(node)
        self.indent_level -= 1
        return results

    def generic_visit(self, node: MonkeyASTNode | MonkeyASTProgram) -> List[Any]:
        """Emit the node's class name, then its children one level deeper."""
        self._emit(node)
        return self._visit_children(node)

    def visit_MonkeyASTIdentifier(self, node: MonkeyASTIdentifier) -> None:  # pylint: disable=invalid-name
        self._emit(node, node.value)

    def visit_MonkeyASTInteger(self, node: MonkeyASTInteger) -> None:  # pylint: disable=invalid-name
        self._emit(node, str(node.value))

    def visit_MonkeyASTBoolean(self, node: MonkeyASTBoolean) -> None:  # pylint: disable=invalid-name
        self._emit(node, node.render())

    def visit_MonkeyASTPrefix(self, node: MonkeyASTPrefix) -> List[Any]:  # pylint: disable=invalid-name
        self._emit(node, node.operator)
        return self._visit_children(node)

    def visit_MonkeyASTInfix(self, node: MonkeyASTInfix) -> List[Any]:  # pylint: disable=invalid-name
        self._emit(node, node.operator)
        return self._visit_children(node)

    def visit_MonkeyASTLetStatement(self, node: MonkeyASTLetStatement) -> List[Any]:  # pylint: disable=invalid-name
        self._emit(node, node.name.value)
        self.indent_level += 1
        result = self.visit(node.value)
        self.indent_level -= 1
        return [result]
