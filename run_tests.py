#!/usr/bin/env python3
"""
Main test runner for brainwalk tests.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_smoke_test():
    """Run the Hello World program through the whole pipeline."""

    print("Testing interpreter pipeline...")
    try:
        from brainwalk.lexer import Lexer
        from brainwalk.parser import Parser
        from brainwalk.runtime import Evaluator, Tape

        with open(os.path.join(project_root, "examples", "hello_world.bf"), encoding="utf-8") as f:
            code = f.read()

        print("  Lexing...")
        tokens = Lexer(code, "hello_world.bf").tokenize()
        print(f"     Generated {len(tokens)} tokens")

        print("  Parsing...")
        program = Parser(tokens).parse()
        print(f"     Generated {len(program)} top-level instructions")

        print("  Evaluating...")
        output = Evaluator(Tape(1024, 512)).execute(program)
        print(f"     Output: {output!r}")

        if output != b"Hello World!\n":
            print("❌ Unexpected output")
            return False

    except ImportError as e:
        print(f"❌ Failed to import brainwalk modules: {e}")
        return False

    print("✅ Interpreter pipeline test PASSED")
    print()
    return True


def run_all_tests():
    """Run all brainwalk tests."""

    print("brainwalk Test Suite")
    print("=" * 60)

    if not run_smoke_test():
        return False

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=2).run(suite)
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
