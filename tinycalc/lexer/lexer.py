"""
TinyCalc Lexer - splits program text into tokens

Deliberately dumb: a token is whatever sits between spaces. Types are
inferred later by the parser from the token text, so there is nothing
here that can fail.

xwest
"""

import logging
from typing import List

from .tokens import Token, SourceLocation


logger = logging.getLogger(__name__)


class Lexer:
    """
    TinyCalc lexical analyzer.

    Splits source text on ASCII spaces, trims each piece and drops the
    empty ones, so runs of spaces collapse. Alongside the tokens it keeps
    the source location of each token for diagnostics.
    """

    def __init__(self, source: str, filename: str = "<input>"):
        """
        Initialize the lexer with source text.

        Args:
            source: Program text
            filename: Name used in diagnostics
        """
        self.source = source
        self.filename = filename
        self.tokens: List[Token] = []
        self.locations: List[SourceLocation] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source text.

        Returns:
            List of tokens, empty for blank input
        """
        self.tokens.clear()
        self.locations.clear()

        offset = 0
        for piece in self.source.split(' '):
            token = piece.strip()
            if token:
                start = offset + piece.index(token)
                self.tokens.append(token)
                self.locations.append(self._location_at(start))
            offset += len(piece) + 1

        logger.debug("lexed %d tokens from %d characters", len(self.tokens), len(self.source))
        return self.tokens

    def _location_at(self, offset: int) -> SourceLocation:
        """Convert a character offset into a line/column location."""
        line = self.source.count('\n', 0, offset) + 1
        line_start = self.source.rfind('\n', 0, offset) + 1
        return SourceLocation(self.filename, line, offset - line_start + 1, offset)


def tokenize(source: str) -> List[Token]:
    """Tokenize `source` without keeping location information."""
    return Lexer(source).tokenize()
