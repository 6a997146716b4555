"""
Tree-walking evaluator for TinyCalc.

Evaluates every operand of an operation first, left to right, then folds
the results with the operator's reduction:

    sum   0 + a0 + a1 + ...
    mul   1 * a0 * a1 * ...
    sub   a0 - a1 - a2 - ...     (no seed, left to right)
    div   a0 / a1 / a2 / ...     (no seed, left to right, true division)

A single-operand sub or div yields that operand unchanged. Division uses
Python's `/`, so the result of a div is a float and the evaluator agrees
with the infix rendering produced by the Python code generator. Results
that do not fit a float raise EvaluationError E003 rather than OverflowError.
"""

import logging
from functools import reduce
from typing import List, Union

from ..lexer.tokens import Operator
from ..parser.ast_nodes import ASTNode, ASTVisitor, NumberNode, OperationNode
from .errors import (
    create_division_by_zero_error, create_overflow_error, create_unknown_node_error
)


logger = logging.getLogger(__name__)

Number = Union[int, float]


class Evaluator(ASTVisitor):
    """Computes the numeric value of a TinyCalc tree."""

    def evaluate(self, node: ASTNode) -> Number:
        if not isinstance(node, (NumberNode, OperationNode)):
            raise create_unknown_node_error(node)
        return node.accept(self)

    def visit_number(self, node: NumberNode) -> Number:
        return node.value

    def visit_operation(self, node: OperationNode) -> Number:
        values = [self.evaluate(operand) for operand in node.operands]
        result = self._fold(node, values)
        logger.debug("%s -> %r", node.operator.word, result)
        return result

    def _fold(self, node: OperationNode, values: List[Number]) -> Number:
        operator = node.operator

        try:
            if operator is Operator.SUM:
                return reduce(lambda acc, value: acc + value, values, 0)
            if operator is Operator.MUL:
                return reduce(lambda acc, value: acc * value, values, 1)
            if operator is Operator.SUB:
                return reduce(lambda acc, value: acc - value, values)
            # Operator.DIV
            return reduce(lambda acc, value: acc / value, values)
        except ZeroDivisionError as e:
            raise create_division_by_zero_error(node) from e
        except OverflowError as e:
            # Integers too large for a float meeting true division
            raise create_overflow_error(node) from e


def evaluate(node: ASTNode) -> Number:
    """Evaluate `node` and return its value."""
    return Evaluator().evaluate(node)
