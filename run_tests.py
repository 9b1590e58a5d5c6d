#!/usr/bin/env python3
"""
Main test runner for the Monkey lexer.

Runs a quick smoke check of the lexer on a sample program, then the unittest
suite under tests/.
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)

SAMPLE_PROGRAM = """
let five = 5;
let ten = 10;
let add = fn(x, y) {
    x + y;
};
let result = add(five, ten);
if (result != 15) {
    return false;
}
"""


def run_smoke_check():
    """Tokenize a sample program and a broken one."""

    print("🚀 Monkey Lexer Test Suite")
    print("=" * 60)

    try:
        from monkey.lexer import Lexer, LexerError, tokenize_string
        print("✅ Lexer modules imported successfully")
        print()
    except ImportError as e:
        print(f"❌ Failed to import lexer modules: {e}")
        return False

    print("Testing sample program...")
    try:
        scanner = Lexer().tokenize(SAMPLE_PROGRAM)
        tokens = list(scanner)
        print(f"     Generated {len(tokens)} tokens over {tokens[-1].line + 1} lines")

        if scanner.has_errors():
            print(f"     ❌ Unexpected illegal input: {scanner.errors[0].diagnostic.message}")
            return False
        print("     ✅ No illegal tokens")
    except Exception as e:
        print(f"❌ Sample program FAILED: {e}")
        import traceback
        traceback.print_exc()
        return False

    print("  ❌ Testing illegal input...")
    try:
        tokenize_string("let x = 5 % 2;")
        print("     ❌ Expected a lexer error but got none")
        return False
    except LexerError as e:
        print(f"     ✅ Caught expected error {e.code} at offset {e.offset}")

    print()
    return True


def run_unit_tests():
    """Discover and run everything under tests/."""
    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=1).run(suite)
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_smoke_check() and run_unit_tests()
    if success:
        print("🎉 All tests PASSED!")
    sys.exit(0 if success else 1)
