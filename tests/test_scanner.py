"""
Test suite for the conslisp character scanner.

Tests cover:
- Lookahead without consumption
- Line/column bookkeeping
- Run-based consumption (take_while / take_until)
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from conslisp.lexer.scanner import Scanner


class TestScanner(unittest.TestCase):
    """Test cases for Scanner primitives."""

    def test_peek_does_not_advance(self):
        scanner = Scanner("ab")
        self.assertEqual(scanner.peek(), "a")
        self.assertEqual(scanner.peek(), "a")
        self.assertEqual(scanner.index, 0)

    def test_next_consumes_until_end(self):
        scanner = Scanner("ab")
        self.assertEqual(scanner.next(), "a")
        self.assertEqual(scanner.next(), "b")
        self.assertIsNone(scanner.next())
        self.assertIsNone(scanner.peek())
        self.assertTrue(scanner.is_empty())
        self.assertFalse(scanner.not_empty())

    def test_length_counts_remaining_characters(self):
        scanner = Scanner("abc")
        scanner.next()
        self.assertEqual(len(scanner), 2)
        self.assertEqual(scanner.len(), 2)

    def test_location_tracks_lines_and_columns(self):
        """Newlines bump the line and reset the column to 1."""
        scanner = Scanner("ab\nc", "f.lisp")
        self.assertEqual((scanner.location.line, scanner.location.column), (1, 1))
        scanner.next()
        scanner.next()
        self.assertEqual((scanner.location.line, scanner.location.column), (1, 3))
        scanner.next()
        location = scanner.location
        self.assertEqual((location.line, location.column), (2, 1))
        self.assertEqual(location.offset, 3)
        self.assertEqual(location.filename, "f.lisp")

    def test_take_only_matching_character(self):
        scanner = Scanner("(x")
        self.assertIsNone(scanner.take(")"))
        self.assertEqual(scanner.take("("), "(")
        self.assertEqual(scanner.peek(), "x")

    def test_take_at_end_of_input(self):
        scanner = Scanner("")
        self.assertIsNone(scanner.take("("))

    def test_take_while_returns_none_for_empty_run(self):
        """An empty match is None, not an empty string."""
        scanner = Scanner("abc")
        self.assertIsNone(scanner.take_while(str.isdigit))
        self.assertEqual(scanner.index, 0)

    def test_take_while_is_greedy(self):
        scanner = Scanner("123abc")
        self.assertEqual(scanner.take_while(str.isdigit), "123")
        self.assertEqual(scanner.peek(), "a")

    def test_take_until(self):
        scanner = Scanner("hello\nworld")
        self.assertEqual(scanner.take_until(lambda c: c == "\n"), "hello")
        self.assertTrue(scanner.next_is("\n"))

    def test_take_until_runs_to_end(self):
        scanner = Scanner("abc")
        self.assertEqual(scanner.take_until(lambda c: c == "\n"), "abc")
        self.assertTrue(scanner.is_empty())

    def test_take_if(self):
        scanner = Scanner("1a")
        self.assertEqual(scanner.take_if(str.isdigit), "1")
        self.assertIsNone(scanner.take_if(str.isdigit))

    def test_lookahead_predicates(self):
        scanner = Scanner("(")
        self.assertTrue(scanner.next_is("("))
        self.assertTrue(scanner.next_is_one_of("()"))
        self.assertFalse(scanner.next_is_one_of("'`"))
        self.assertTrue(scanner.next_matches(lambda c: c == "("))
        scanner.next()
        self.assertFalse(scanner.next_is("("))
        self.assertFalse(scanner.next_is_one_of("()"))
        self.assertFalse(scanner.next_matches(lambda c: True))

    def test_skip(self):
        scanner = Scanner("abcd")
        self.assertIsNone(scanner.skip(0))
        self.assertIsNone(scanner.skip(5))
        self.assertEqual(scanner.index, 0)
        self.assertEqual(scanner.skip(3), "abc")
        self.assertEqual(scanner.peek(), "d")


if __name__ == "__main__":
    unittest.main()
