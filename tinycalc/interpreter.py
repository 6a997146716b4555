"""
TinyCalc interpreter pipeline.

Feeds the lexer output to the parser and the parser output to either the
evaluator or the Python backend:

    text -> Lexer -> tokens -> Parser -> AST -> Evaluator      -> number
                                              -> PythonBackend -> str

Author: xwest
"""

import logging
from typing import List, Optional

from .lexer import Lexer
from .parser import Parser, ParserConfiguration, ParseWarning, ASTNode
from .evaluator import Evaluator
from .evaluator.evaluator import Number
from .backend import PythonBackend


logger = logging.getLogger(__name__)


class Interpreter:
    """
    Runs TinyCalc programs from source text.

    Every call lexes and parses its input afresh; warnings from the most
    recent parse are kept in `warnings`.
    """

    def __init__(self, config: Optional[ParserConfiguration] = None, filename: str = "<input>"):
        self.config = config or ParserConfiguration()
        self.filename = filename
        self.evaluator = Evaluator()
        self.backend = PythonBackend()
        self.warnings: List[ParseWarning] = []

    def parse(self, source: str) -> ASTNode:
        """Lex and parse `source` into an AST."""
        lexer = Lexer(source, self.filename)
        tokens = lexer.tokenize()

        parser = Parser(tokens, self.config, lexer.locations)
        try:
            return parser.parse()
        finally:
            self.warnings = list(parser.warnings)

    def evaluate(self, source: str) -> Number:
        """Run `source` and return its value."""
        ast = self.parse(source)
        result = self.evaluator.evaluate(ast)
        logger.debug("evaluated %r to %r", source, result)
        return result

    def render(self, source: str) -> str:
        """Translate `source` into a Python infix expression."""
        ast = self.parse(source)
        return self.backend.generate(ast)


def evaluate_source(source: str, config: Optional[ParserConfiguration] = None) -> Number:
    """Evaluate a TinyCalc program given as text."""
    return Interpreter(config).evaluate(source)


def render_source(source: str, config: Optional[ParserConfiguration] = None) -> str:
    """Translate a TinyCalc program given as text into Python infix source."""
    return Interpreter(config).render(source)
