"""
Diagnostics shared by the TinyCalc pipeline.

The lexer itself never fails; this module holds the diagnostic record
that parser, evaluator and code generator errors carry, plus the
spelling-correction helpers used to build helpful messages.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation, Dialect, DIALECT_OPERATORS


@dataclass
class Diagnostic:
    """A single error or warning produced somewhere in the pipeline."""
    message: str
    severity: str  # "error", "warning"
    code: Optional[str] = None
    position: Optional[int] = None  # Token index
    location: Optional[SourceLocation] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"

        if self.location is not None:
            result += f"  --> {self.location} (token {self.position})\n"
        elif self.position is not None:
            result += f"  --> token {self.position}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class ErrorRecovery:
    """Spelling suggestions for tokens the parser could not classify."""

    @staticmethod
    def suggest_operator_corrections(invalid_op: str, dialect: Dialect = Dialect.ANY) -> List[str]:
        """Suggest operators of `dialect` within edit distance 1 of `invalid_op`."""
        candidates = DIALECT_OPERATORS[dialect].keys()

        suggestions = []
        lowered = invalid_op.lower()
        for operator in candidates:
            if lowered == operator or ErrorRecovery._edit_distance(lowered, operator) <= 1:
                suggestions.append(operator)

        return sorted(suggestions, key=lambda op: ErrorRecovery._edit_distance(lowered, op))[:3]

    @staticmethod
    def _edit_distance(s1: str, s2: str) -> int:
        """Calculate Levenshtein distance between two strings."""
        if len(s1) < len(s2):
            return ErrorRecovery._edit_distance(s2, s1)

        if len(s2) == 0:
            return len(s1)

        previous_row = list(range(len(s2) + 1))
        for i, c1 in enumerate(s1):
            current_row = [i + 1]
            for j, c2 in enumerate(s2):
                insertions = previous_row[j + 1] + 1
                deletions = current_row[j] + 1
                substitutions = previous_row[j] + (c1 != c2)
                current_row.append(min(insertions, deletions, substitutions))
            previous_row = current_row

        return previous_row[-1]
