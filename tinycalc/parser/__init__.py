"""
TinyCalc Parser Package

Implements a recursive descent parser for TinyCalc prefix programs.
Produces an immutable two-kind AST (numbers and operations).

Key Features:
- Greedy prefix grammar, arity decided by token exhaustion
- Word (sum/sub/div/mul) and symbolic (+ - / *) operator dialects
- Typed errors with token positions and spelling suggestions
- Configurable trailing-token policy and nesting limit

Author: xwest
"""

from .ast_nodes import ASTNode, ASTNodeType, ASTVisitor, NumberNode, OperationNode, Node
from .parser import Parser, ParserConfiguration, Cursor, parse
from .errors import ParseError, ParseWarning, PARSER_ERROR_CODES

__all__ = [
    # Core parser
    "Parser",
    "ParserConfiguration",
    "Cursor",
    "parse",

    # AST nodes
    "ASTNode", "ASTNodeType", "ASTVisitor",
    "NumberNode", "OperationNode", "Node",

    # Error handling
    "ParseError", "ParseWarning", "PARSER_ERROR_CODES",
]
