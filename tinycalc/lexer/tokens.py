"""
Token definitions for the TinyCalc lexer.

TinyCalc tokens are plain strings: the lexer does not attach a type to
them. Whether a token is a number or an operator is decided later by the
parser, using the patterns and lookup tables defined here.

This module also holds the closed operator set and the two surface
dialects it can be spelled in:

- word dialect:     sum, sub, div, mul
- symbolic dialect: +,   -,   /,   *

Author: xwest
"""

import re
from enum import Enum
from dataclasses import dataclass
from typing import Dict, Optional


# A token is the raw text between spaces. Kept as an alias so signatures
# read like the rest of the pipeline.
Token = str


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents the location of a token in the source text.

    Used for error reporting only; tokens themselves carry no location.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


class Dialect(Enum):
    """Surface spellings accepted for operators."""
    WORD = "word"           # sum sub div mul
    SYMBOLIC = "symbolic"   # + - / *
    ANY = "any"             # either spelling, may be mixed


class Operator(Enum):
    """
    The closed set of TinyCalc operators.

    Each member carries its word spelling as value; the symbolic spelling
    is available through `symbol`.
    """
    SUM = "sum"
    SUB = "sub"
    DIV = "div"
    MUL = "mul"

    @property
    def word(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        return OPERATOR_SYMBOLS[self]

    def __str__(self) -> str:
        return self.value


OPERATOR_SYMBOLS: Dict[Operator, str] = {
    Operator.SUM: "+",
    Operator.SUB: "-",
    Operator.DIV: "/",
    Operator.MUL: "*",
}

# Lookup tables for operator recognition, one per dialect
WORD_OPERATORS: Dict[str, Operator] = {op.word: op for op in Operator}
SYMBOLIC_OPERATORS: Dict[str, Operator] = {sym: op for op, sym in OPERATOR_SYMBOLS.items()}

DIALECT_OPERATORS: Dict[Dialect, Dict[str, Operator]] = {
    Dialect.WORD: WORD_OPERATORS,
    Dialect.SYMBOLIC: SYMBOLIC_OPERATORS,
    Dialect.ANY: {**WORD_OPERATORS, **SYMBOLIC_OPERATORS},
}

# Classification patterns. A token that starts with a digit is treated as
# a number and must then be digits throughout; ASCII only, since
# str.isdigit() also accepts characters int() cannot convert, like '²'.
NUMBER_START_PATTERN = re.compile(r'[0-9]')
NUMBER_PATTERN = re.compile(r'[0-9]+')


def looks_like_number(token: Token) -> bool:
    """Check if the token should be parsed as a number."""
    return NUMBER_START_PATTERN.match(token) is not None


def is_number(token: Token) -> bool:
    """Check if the whole token is a run of decimal digits."""
    return NUMBER_PATTERN.fullmatch(token) is not None


def lookup_operator(token: Token, dialect: Dialect = Dialect.ANY) -> Optional[Operator]:
    """Return the operator spelled by `token` in `dialect`, or None."""
    return DIALECT_OPERATORS[dialect].get(token)
