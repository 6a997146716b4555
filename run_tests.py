#!/usr/bin/env python3
"""
Main test runner for TinyCalc tests.

Smoke-tests the pipeline on a few programs, then runs the unittest suite
under tests/.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_pipeline_checks():
    """Run a few programs through lexer, parser, evaluator and backend."""

    print("🚀 TinyCalc Test Suite")
    print("=" * 60)

    try:
        from tinycalc.lexer import Lexer
        from tinycalc.parser import Parser, ParseError
        from tinycalc.evaluator import Evaluator
        from tinycalc.backend import PythonBackend

        print("✅ All modules imported successfully")
        print()

    except ImportError as e:
        print(f"❌ Failed to import tinycalc modules: {e}")
        return False

    evaluator = Evaluator()
    backend = PythonBackend()

    programs = [
        ("mul 3 sub 2 sum 1 3 4", -18),
        ("sum 1 2 3", 6),
        ("div 10 2", 5),
        ("- 2 + 1 3 4", -6),
        ("7", 7),
    ]

    print("Testing simple pipeline...")
    for program, expected in programs:
        print(f"  📝 {program!r}")
        try:
            lexer = Lexer(program)
            tokens = lexer.tokenize()
            ast = Parser(tokens, locations=lexer.locations).parse()
            value = evaluator.evaluate(ast)
            source = backend.generate(ast)
        except Exception as e:
            print(f"     ❌ Pipeline failed: {e}")
            return False

        if value != expected:
            print(f"     ❌ Expected {expected}, got {value}")
            return False
        print(f"     ✅ {ast}  =  {value}  ->  {source}")

    print()
    print("  ❌ Testing error handling...")
    for program in ["", "mul", "sum 1 2x", "1 2"]:
        try:
            Parser(Lexer(program).tokenize()).parse()
        except ParseError as e:
            print(f"     ✅ {program!r} rejected with {e.code}")
        else:
            print(f"     ❌ {program!r} should not parse")
            return False

    print()
    return True


def run_unit_tests():
    """Discover and run everything under tests/."""
    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=1).run(suite)
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_pipeline_checks() and run_unit_tests()
    if success:
        print("🎉 All tests PASSED!")
    sys.exit(0 if success else 1)
