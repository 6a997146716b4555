"""
TinyCalc Recursive Descent Parser

Parses a flat prefix token stream into an AST using the grammar:

    number   := digit+
    operator := sum | sub | div | mul | + | - | / | *
    expr     := number | operator expr+

There are no delimiters: an operator keeps taking expressions until the
input runs out, so `mul 3 sub 2 sum 1 3 4` nests as
`mul(3, sub(2, sum(1, 3, 4)))`. Arity is decided by token exhaustion alone.

Author: xwest
"""

import logging
from typing import List, Optional, Sequence
from dataclasses import dataclass

from ..lexer.tokens import (
    Token, SourceLocation, Dialect, Operator,
    is_number, looks_like_number, lookup_operator
)
from .ast_nodes import ASTNode, NumberNode, OperationNode
from .errors import (
    ParseWarning, create_unexpected_eof_error,
    create_invalid_number_error, create_unknown_operator_error,
    create_missing_operands_error, create_trailing_tokens_error,
    create_invalid_token_error, create_nesting_too_deep_error
)


logger = logging.getLogger(__name__)


@dataclass
class ParserConfiguration:
    """Configuration parameters for the parser"""

    # Operator spellings accepted
    dialect: Dialect = Dialect.ANY

    # Keep the first expression and only warn when tokens are left over
    allow_trailing_tokens: bool = False

    # Maximum number of nested operators
    max_depth: int = 100

    def __post_init__(self):
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")


class Cursor:
    """
    Read position over a token sequence.

    The cursor only ever moves forward; `advance` is the single place the
    position changes.
    """

    def __init__(self, tokens: Sequence[Token]):
        self.tokens = tokens
        self.position = 0

    def at_end(self) -> bool:
        return self.position >= len(self.tokens)

    def peek(self) -> Optional[Token]:
        """Current token, or None once the input is exhausted."""
        if self.at_end():
            return None
        return self.tokens[self.position]

    def advance(self) -> Token:
        """Consume and return the current token."""
        token = self.tokens[self.position]
        self.position += 1
        return token

    def remaining(self) -> int:
        return len(self.tokens) - self.position


class Parser:
    """
    TinyCalc recursive descent parser.

    One parser instance parses one token sequence. Errors are raised as
    soon as they are detected and no partial tree is ever returned.
    """

    def __init__(self, tokens: Sequence[Token],
                 config: Optional[ParserConfiguration] = None,
                 locations: Optional[Sequence[SourceLocation]] = None):
        """
        Initialize parser with a sequence of tokens.

        Args:
            tokens: Tokens from the lexer
            config: Parser configuration, defaults apply when omitted
            locations: Source location of each token, for diagnostics
        """
        self.tokens = tokens
        self.config = config or ParserConfiguration()
        self.locations = locations
        self.warnings: List[ParseWarning] = []
        self._depth = 0

    def parse(self) -> ASTNode:
        """
        Parse the token sequence into a single expression tree.

        Returns:
            Root node of the program

        Raises:
            ParseError: If the tokens do not form exactly one expression
        """
        for position, token in enumerate(self.tokens):
            if not isinstance(token, str):
                raise create_invalid_token_error(token, position)

        self.warnings.clear()
        self._depth = 0
        cursor = Cursor(self.tokens)

        node = self.parse_expr(cursor)

        if not cursor.at_end():
            self._handle_trailing_tokens(cursor)

        logger.debug("parsed %d tokens into %d nodes", cursor.position, node.size())
        return node

    def parse_expr(self, cursor: Cursor) -> ASTNode:
        """expr := number | operator expr+"""
        token = cursor.peek()
        if token is None:
            raise create_unexpected_eof_error(
                "a number or an operator", cursor.position, self._location(cursor.position - 1)
            )

        if looks_like_number(token):
            return self.parse_num(cursor)
        return self.parse_op(cursor)

    def parse_num(self, cursor: Cursor) -> NumberNode:
        """number := digit+"""
        position = cursor.position
        token = cursor.advance()
        if not is_number(token):
            raise create_invalid_number_error(token, position, self._location(position))
        try:
            value = int(token)
        except ValueError as e:
            # Digit strings beyond sys.get_int_max_str_digits()
            raise create_invalid_number_error(
                token, position, self._location(position), reason=f"{len(token)} digits is too long: {e}"
            ) from e
        return NumberNode(value)

    def parse_op(self, cursor: Cursor) -> OperationNode:
        """operator expr+, taking expressions until the input runs out."""
        position = cursor.position
        token = cursor.advance()

        operator = self._classify_operator(token, position)

        if cursor.at_end():
            raise create_missing_operands_error(token, position, self._location(position))

        if self._depth >= self.config.max_depth:
            raise create_nesting_too_deep_error(
                token, position, self.config.max_depth, self._location(position)
            )

        self._depth += 1
        operands = []
        try:
            while not cursor.at_end():
                operands.append(self.parse_expr(cursor))
        finally:
            self._depth -= 1

        return OperationNode(operator, tuple(operands))

    def _classify_operator(self, token: Token, position: int) -> Operator:
        operator = lookup_operator(token, self.config.dialect)
        if operator is None:
            raise create_unknown_operator_error(
                token, position, self.config.dialect, self._location(position)
            )
        return operator

    def _handle_trailing_tokens(self, cursor: Cursor):
        position = cursor.position
        token = cursor.peek()

        if not self.config.allow_trailing_tokens:
            raise create_trailing_tokens_error(
                token, position, cursor.remaining(), self._location(position)
            )

        warning = ParseWarning(
            message=f"Ignoring {cursor.remaining()} token(s) after end of expression",
            position=position,
            token=token,
            location=self._location(position),
            code="P005",
            help_text="Only the first expression of the input is used."
        )
        self.warnings.append(warning)
        logger.warning("ignoring %d trailing token(s) starting at token %d", cursor.remaining(), position)

    def _location(self, position: int) -> Optional[SourceLocation]:
        if self.locations is None or not 0 <= position < len(self.locations):
            return None
        return self.locations[position]


def parse(tokens: Sequence[Token], config: Optional[ParserConfiguration] = None) -> ASTNode:
    """Parse `tokens` into an AST."""
    return Parser(tokens, config).parse()
