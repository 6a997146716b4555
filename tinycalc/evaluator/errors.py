"""
Error handling for the TinyCalc evaluator.

Author: xwest
"""

from typing import Optional, List

from ..lexer.errors import Diagnostic


class EvaluationError(Exception):
    """
    Exception raised when a tree cannot be evaluated.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        node: Optional[object] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.node = node

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


EVALUATOR_ERROR_CODES = {
    "E001": "Division by zero",
    "E002": "Unknown node kind",
    "E003": "Arithmetic overflow",
}


def create_division_by_zero_error(node: object) -> EvaluationError:
    """Create an error for a division whose divisor evaluated to zero."""
    return EvaluationError(
        message=f"Division by zero in {node}",
        node=node,
        code="E001",
        help_text="Every operand after the first of a division must be non-zero."
    )


def create_unknown_node_error(node: object) -> EvaluationError:
    """Create an error for a value that is not a TinyCalc AST node."""
    return EvaluationError(
        message=f"Cannot evaluate {type(node).__name__}: not a TinyCalc AST node",
        node=node,
        code="E002",
        help_text="Only NumberNode and OperationNode trees produced by the parser can be evaluated."
    )


def create_overflow_error(node: object) -> EvaluationError:
    """Create an error for a result too large to represent as a float."""
    return EvaluationError(
        message=f"Arithmetic overflow in {node}",
        node=node,
        code="E003",
        help_text="Division produces floats; operands and results must fit in a float."
    )
