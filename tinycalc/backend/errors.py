"""
Error handling for TinyCalc code generation backends.

Author: xwest
"""

from typing import Optional

from ..lexer.errors import Diagnostic


class CodegenError(Exception):
    """Exception raised when a tree cannot be rendered."""

    def __init__(self, message: str, node: Optional[object] = None,
                 code: Optional[str] = None, help_text: Optional[str] = None):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            severity="error",
            code=code,
            help_text=help_text
        )
        self.node = node

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


def create_unknown_node_error(node: object) -> CodegenError:
    """Create an error for a value that is not a TinyCalc AST node."""
    return CodegenError(
        message=f"Cannot render {type(node).__name__}: not a TinyCalc AST node",
        node=node,
        code="G001",
        help_text="Only NumberNode and OperationNode trees produced by the parser can be rendered."
    )
