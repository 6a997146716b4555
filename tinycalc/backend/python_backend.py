"""
Python Backend for TinyCalc.

Renders a TinyCalc tree as a fully parenthesized infix expression in
Python syntax. Every operation gets its own parentheses, so the output
never depends on operator precedence:

    mul 3 sub 2 sum 1 3 4   ->   (3 * (2 - (1 + 3 + 4)))

Purely structural: nothing is evaluated here.

Author: xwest
"""

import logging

from ..parser.ast_nodes import ASTNode, ASTVisitor, NumberNode, OperationNode
from .errors import create_unknown_node_error


logger = logging.getLogger(__name__)


class PythonBackend(ASTVisitor):
    """Generates Python infix source from a TinyCalc AST."""

    def generate(self, node: ASTNode) -> str:
        """
        Render `node` and everything below it.

        Args:
            node: Root of the tree to render

        Returns:
            Python expression source

        Raises:
            CodegenError: If the tree contains something that is not a TinyCalc node
        """
        if not isinstance(node, (NumberNode, OperationNode)):
            raise create_unknown_node_error(node)
        return node.accept(self)

    def visit_number(self, node: NumberNode) -> str:
        return str(node.value)

    def visit_operation(self, node: OperationNode) -> str:
        separator = f" {node.operator.symbol} "
        rendered = separator.join(self.generate(operand) for operand in node.operands)
        return f"({rendered})"


def render(node: ASTNode) -> str:
    """Render `node` as a Python infix expression."""
    source = PythonBackend().generate(node)
    logger.debug("rendered %d nodes into %d characters", node.size(), len(source))
    return source
