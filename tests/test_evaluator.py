"""
Test suite for the TinyCalc evaluator.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from tinycalc.lexer import tokenize, Operator
from tinycalc.parser import parse, NumberNode, OperationNode
from tinycalc.evaluator import Evaluator, evaluate, EvaluationError


class TestEvaluator(unittest.TestCase):
    """Test cases for tree-walking evaluation."""

    def _run(self, program):
        return evaluate(parse(tokenize(program)))

    def test_number(self):
        self.assertEqual(self._run("7"), 7)

    def test_sum(self):
        self.assertEqual(self._run("sum 1 2 3"), 6)

    def test_mul(self):
        self.assertEqual(self._run("mul 2 3 4"), 24)

    def test_nested_program(self):
        # 3 * (2 - (1 + 3 + 4))
        self.assertEqual(self._run("mul 3 sub 2 sum 1 3 4"), -18)
        self.assertEqual(self._run("* 3 - 2 + 1 3 4"), -18)

    def test_sub_folds_left_to_right(self):
        self.assertEqual(self._run("sub 10 2 3"), 5)
        self.assertEqual(self._run("sub 2 1 3 4"), -6)

    def test_div_folds_left_to_right(self):
        self.assertEqual(self._run("div 10 2"), 5)
        self.assertEqual(self._run("div 100 5 2"), 10)
        self.assertEqual(self._run("div 1 4"), 0.25)

    def test_div_is_true_division(self):
        self.assertIsInstance(self._run("div 10 2"), float)
        self.assertEqual(self._run("div 7 2"), 3.5)

    def test_single_operand(self):
        self.assertEqual(self._run("sub 5"), 5)
        self.assertEqual(self._run("div 5"), 5)
        self.assertEqual(self._run("sum 5"), 5)
        self.assertEqual(self._run("mul 5"), 5)

    def test_integer_results_stay_integers(self):
        result = self._run("sum 1 mul 2 3")
        self.assertEqual(result, 7)
        self.assertIsInstance(result, int)

    def test_large_integers(self):
        self.assertEqual(self._run("mul 99999999999 99999999999"), 99999999999 ** 2)

    def test_division_by_zero(self):
        with self.assertRaises(EvaluationError) as ctx:
            self._run("div 1 0")
        self.assertEqual(ctx.exception.code, "E001")
        self.assertIsInstance(ctx.exception.__cause__, ZeroDivisionError)

    def test_nested_division_by_zero(self):
        with self.assertRaises(EvaluationError) as ctx:
            self._run("sum 1 div 4 sub 2 2")
        self.assertEqual(str(ctx.exception.node), "div(4, sub(2, 2))")

    def test_division_too_large_for_float(self):
        with self.assertRaises(EvaluationError) as ctx:
            self._run("div " + "9" * 400 + " 1")
        self.assertEqual(ctx.exception.code, "E003")
        self.assertIsInstance(ctx.exception.__cause__, OverflowError)

    def test_float_meets_huge_integer(self):
        with self.assertRaises(EvaluationError) as ctx:
            self._run("sum div 1 2 " + "9" * 400)
        self.assertEqual(ctx.exception.code, "E003")
        self.assertEqual(ctx.exception.node.operator, Operator.SUM)

    def test_zero_dividend_is_fine(self):
        self.assertEqual(self._run("div 0 5"), 0)

    def test_unknown_node(self):
        with self.assertRaises(EvaluationError) as ctx:
            Evaluator().evaluate("sum 1 2")
        self.assertEqual(ctx.exception.code, "E002")

    def test_unknown_operand(self):
        node = OperationNode(Operator.SUM, (NumberNode(1), 2))
        with self.assertRaises(EvaluationError):
            evaluate(node)

    def test_deepest_accepted_tree(self):
        program = " ".join(["sum"] * 100 + ["1"])
        self.assertEqual(self._run(program), 1)

    def test_tree_can_be_evaluated_repeatedly(self):
        tree = parse(tokenize("mul 3 sub 2 sum 1 3 4"))
        evaluator = Evaluator()
        self.assertEqual(evaluator.evaluate(tree), evaluator.evaluate(tree))


if __name__ == '__main__':
    unittest.main()
