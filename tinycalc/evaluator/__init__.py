"""
TinyCalc Evaluator Package

Tree-walking evaluation of TinyCalc ASTs.

Author: xwest
"""

from .evaluator import Evaluator, evaluate
from .errors import EvaluationError, EVALUATOR_ERROR_CODES

__all__ = [
    "Evaluator",
    "evaluate",
    "EvaluationError",
    "EVALUATOR_ERROR_CODES",
]
