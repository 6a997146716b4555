"""
TinyCalc Package

A small front end for prefix arithmetic programs such as
`mul 3 sub 2 sum 1 3 4` (or `* 3 - 2 + 1 3 4`). Programs are tokenized,
parsed into an AST and then either evaluated or rendered as a fully
parenthesized Python infix expression.

Architecture:
    tinycalc/
    ├── lexer/           # Whitespace tokenization, operator tables
    ├── parser/          # Recursive descent parsing and AST
    ├── evaluator/       # Tree-walking evaluation
    ├── backend/         # Python infix code generation
    └── interpreter.py   # Text-to-result pipeline

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer, tokenize, Operator, Dialect
from .parser import (
    Parser, ParserConfiguration, parse, NumberNode, OperationNode,
    ParseError, ParseWarning
)
from .evaluator import Evaluator, evaluate, EvaluationError
from .backend import PythonBackend, render, CodegenError
from .interpreter import Interpreter, evaluate_source, render_source

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "ParserConfiguration",
    "Evaluator",
    "PythonBackend",
    "Interpreter",

    # Functional interface
    "tokenize",
    "parse",
    "evaluate",
    "render",
    "evaluate_source",
    "render_source",

    # Data model
    "Operator",
    "Dialect",
    "NumberNode",
    "OperationNode",

    # Errors
    "ParseError",
    "ParseWarning",
    "EvaluationError",
    "CodegenError",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
