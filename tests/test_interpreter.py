"""
End-to-end tests for the TinyCalc pipeline.

Tests the full path from program text to value and to Python source.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

import tinycalc
from tinycalc import (
    Interpreter, ParserConfiguration, Dialect, ParseError, EvaluationError,
    evaluate_source, render_source
)


class TestInterpreter(unittest.TestCase):
    """Test the full interpretation pipeline."""

    def setUp(self):
        self.interpreter = Interpreter()

    def test_nested_program(self):
        program = "mul 3 sub 2 sum 1 3 4"
        self.assertEqual(str(self.interpreter.parse(program)), "mul(3, sub(2, sum(1, 3, 4)))")
        self.assertEqual(self.interpreter.evaluate(program), -18)
        self.assertEqual(self.interpreter.render(program), "(3 * (2 - (1 + 3 + 4)))")

    def test_sum(self):
        self.assertEqual(evaluate_source("sum 1 2 3"), 6)
        self.assertEqual(render_source("sum 1 2 3"), "(1 + 2 + 3)")

    def test_division(self):
        self.assertEqual(evaluate_source("div 10 2"), 5)

    def test_number(self):
        self.assertEqual(evaluate_source("7"), 7)
        self.assertEqual(render_source("7"), "7")

    def test_symbolic_program(self):
        self.assertEqual(evaluate_source("- 2 + 1 3 4"), -6)

    def test_empty_program(self):
        with self.assertRaises(ParseError) as ctx:
            self.interpreter.evaluate("")
        self.assertEqual(ctx.exception.code, "P001")

    def test_operator_without_operands(self):
        with self.assertRaises(ParseError) as ctx:
            self.interpreter.evaluate("mul")
        self.assertEqual(ctx.exception.code, "P004")

    def test_errors_carry_source_location(self):
        interpreter = Interpreter(filename="calc.tc")
        with self.assertRaises(ParseError) as ctx:
            interpreter.render("sum 1 2x")
        self.assertEqual(str(ctx.exception.diagnostic.location), "calc.tc:1:7")

    def test_division_by_zero(self):
        with self.assertRaises(EvaluationError):
            evaluate_source("div 4 sub 1 1")

    def test_trailing_tokens(self):
        with self.assertRaises(ParseError):
            evaluate_source("1 2")

        interpreter = Interpreter(ParserConfiguration(allow_trailing_tokens=True))
        with self.assertLogs("tinycalc.parser.parser", level="WARNING"):
            self.assertEqual(interpreter.evaluate("1 2"), 1)
        self.assertEqual(len(interpreter.warnings), 1)

        self.assertEqual(interpreter.evaluate("sum 1 2"), 3)
        self.assertEqual(interpreter.warnings, [])

    def test_dialect_configuration(self):
        interpreter = Interpreter(ParserConfiguration(dialect=Dialect.SYMBOLIC))
        self.assertEqual(interpreter.evaluate("* 2 3"), 6)
        with self.assertRaises(ParseError):
            interpreter.evaluate("mul 2 3")

    def test_package_exports(self):
        tree = tinycalc.parse(tinycalc.tokenize("mul 2 3"))
        self.assertEqual(tinycalc.evaluate(tree), 6)
        self.assertEqual(tinycalc.render(tree), "(2 * 3)")
        self.assertTrue(tinycalc.__version__)


if __name__ == '__main__':
    unittest.main()
