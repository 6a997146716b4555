"""
Error handling for the TinyCalc parser.

Every parse failure is reported as a ParseError carrying a Diagnostic
with the offending token, its position in the token sequence and, when
the caller supplied them, its location in the source text.

Author: xwest
"""

from typing import Optional, List

from ..lexer.tokens import Token, SourceLocation, Dialect, DIALECT_OPERATORS
from ..lexer.errors import Diagnostic, ErrorRecovery


class ParseError(Exception):
    """
    Exception raised when the parser encounters a fatal syntax error.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        token: Optional[Token] = None,
        location: Optional[SourceLocation] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            severity="error",
            code=code,
            position=position,
            location=location,
            help_text=help_text,
            suggestions=suggestions
        )
        self.token = token
        self.position = position

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class ParseWarning:
    """
    Represents a parser warning that doesn't stop parsing.
    """

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        token: Optional[Token] = None,
        location: Optional[SourceLocation] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            severity="warning",
            code=code,
            position=position,
            location=location,
            help_text=help_text
        )
        self.token = token
        self.position = position

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


# Parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Unexpected end of input",
    "P002": "Invalid numeric literal",
    "P003": "Unknown operator",
    "P004": "Operator without operands",
    "P005": "Unconsumed trailing tokens",
    "P006": "Invalid token",
    "P007": "Nesting too deep",
}


# Helper functions for creating common parser errors

def create_unexpected_eof_error(expected: str, position: int,
                                location: Optional[SourceLocation] = None) -> ParseError:
    """Create an error for running out of tokens."""
    return ParseError(
        message=f"Unexpected end of input, expected {expected}",
        position=position,
        location=location,
        code="P001",
        help_text=f"The parser reached the end of the input while expecting {expected}."
    )


def create_invalid_number_error(token: Token, position: int,
                                location: Optional[SourceLocation] = None,
                                reason: Optional[str] = None) -> ParseError:
    """Create an error for a token that starts like a number but is not one."""
    shown = token if len(token) <= 40 else f"{token[:20]}...{token[-10:]}"
    return ParseError(
        message=f"Invalid numeric literal: '{shown}'",
        position=position,
        token=token,
        location=location,
        code="P002",
        help_text=reason or "Numbers are non-negative integers written with the digits 0-9 only.",
        suggestions=["Separate numbers and operators with spaces"]
    )


def create_unknown_operator_error(token: Token, position: int, dialect: Dialect,
                                  location: Optional[SourceLocation] = None) -> ParseError:
    """Create an error for a token that is neither a number nor an operator."""
    suggestions = [
        f"Did you mean '{op}'?"
        for op in ErrorRecovery.suggest_operator_corrections(token, dialect)
    ]
    known = ", ".join(sorted(DIALECT_OPERATORS[dialect]))

    return ParseError(
        message=f"Unknown operator: '{token}'",
        position=position,
        token=token,
        location=location,
        code="P003",
        help_text=f"Operators accepted in the {dialect.value} dialect are: {known}.",
        suggestions=suggestions
    )


def create_missing_operands_error(token: Token, position: int,
                                  location: Optional[SourceLocation] = None) -> ParseError:
    """Create an error for an operator that is the last token of the input."""
    return ParseError(
        message=f"Operator '{token}' has no operands",
        position=position,
        token=token,
        location=location,
        code="P004",
        help_text="Every operator must be followed by at least one expression.",
        suggestions=[f"Add operands after '{token}'"]
    )


def create_trailing_tokens_error(token: Token, position: int, remaining: int,
                                 location: Optional[SourceLocation] = None) -> ParseError:
    """Create an error for tokens left over after the program expression."""
    return ParseError(
        message=f"Unexpected token '{token}' after end of expression ({remaining} left unconsumed)",
        position=position,
        token=token,
        location=location,
        code="P005",
        help_text="A program is a single prefix expression.",
        suggestions=["Wrap the expressions in a common operator, e.g. 'sum 1 2'"]
    )


def create_invalid_token_error(token: object, position: int) -> ParseError:
    """Create an error for a token sequence item that is not a string."""
    return ParseError(
        message=f"Invalid token {token!r}: tokens must be strings",
        position=position,
        code="P006",
        help_text="Pass the output of the lexer to the parser."
    )


def create_nesting_too_deep_error(token: Token, position: int, max_depth: int,
                                  location: Optional[SourceLocation] = None) -> ParseError:
    """Create an error for operator nesting beyond the configured limit."""
    return ParseError(
        message=f"Expression nested deeper than {max_depth} operators",
        position=position,
        token=token,
        location=location,
        code="P007",
        help_text="Raise ParserConfiguration.max_depth to accept deeper programs."
    )
