"""
TinyCalc Lexer Package

Splits program text into whitespace-delimited tokens. Tokens are plain
strings; classification into numbers and operators happens in the parser.

Author: xwest
"""

from .tokens import (
    Token, SourceLocation, Operator, Dialect,
    is_number, looks_like_number, lookup_operator,
)
from .lexer import Lexer, tokenize
from .errors import Diagnostic, ErrorRecovery

__all__ = [
    "Lexer",
    "tokenize",
    "Token",
    "SourceLocation",
    "Operator",
    "Dialect",
    "is_number",
    "looks_like_number",
    "lookup_operator",
    "Diagnostic",
    "ErrorRecovery",
]
