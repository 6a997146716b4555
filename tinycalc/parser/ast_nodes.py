"""
Abstract Syntax Tree node definitions for TinyCalc.

A TinyCalc tree is made of exactly two node kinds: number leaves and
operation nodes owning one or more operands. Nodes are immutable and
compare structurally, so parsing the same tokens twice yields equal trees.
Consumers walk the tree through the visitor interface.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import Any, List, Tuple, Union
from dataclasses import dataclass
from enum import Enum

from ..lexer.tokens import Operator


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""
    NUMBER = "Number"
    OPERATION = "Operation"


class ASTVisitor(ABC):
    """Abstract visitor interface for traversing AST nodes."""

    @abstractmethod
    def visit_number(self, node: 'NumberNode') -> Any:
        """Visit a number leaf."""
        pass

    @abstractmethod
    def visit_operation(self, node: 'OperationNode') -> Any:
        """Visit an operation node."""
        pass


class ASTNode(ABC):
    """Base class for all AST nodes."""

    node_type: ASTNodeType

    @abstractmethod
    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        pass

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes."""
        pass

    def depth(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        return 1 + max((child.depth() for child in self.children()), default=0)

    def size(self) -> int:
        """Total number of nodes in this subtree."""
        return 1 + sum(child.size() for child in self.children())


@dataclass(frozen=True)
class NumberNode(ASTNode):
    """Integer literal."""
    value: int

    node_type = ASTNodeType.NUMBER

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_number(self)

    def children(self) -> List[ASTNode]:
        return []

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class OperationNode(ASTNode):
    """
    Operator applied to an ordered sequence of operands.

    Operands are stored as a tuple and owned by this node alone.
    """
    operator: Operator
    operands: Tuple[ASTNode, ...]

    node_type = ASTNodeType.OPERATION

    def __post_init__(self):
        if not isinstance(self.operands, tuple):
            object.__setattr__(self, "operands", tuple(self.operands))
        if not self.operands:
            raise ValueError(f"{self.operator.word} needs at least one operand")

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_operation(self)

    def children(self) -> List[ASTNode]:
        return list(self.operands)

    def __str__(self) -> str:
        args = ", ".join(str(operand) for operand in self.operands)
        return f"{self.operator.word}({args})"


# Anything the parser can produce
Node = Union[NumberNode, OperationNode]
