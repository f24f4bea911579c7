"""
Tests for the conslisp command-line tool.
"""

import io
import os
import sys
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from conslisp.cli import main


class TestCli(unittest.TestCase):
    """Test cases for conslisp.cli.main."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmpdir.cleanup()

    def _write(self, name, content):
        path = os.path.join(self.tmpdir.name, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path

    def _run(self, argv):
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            code = main(argv)
        return code, stdout.getvalue(), stderr.getvalue()

    def test_dumps_tokens(self):
        path = self._write("ok.lisp", "(a 1)")
        code, out, err = self._run([path])
        self.assertEqual(code, 0)
        self.assertEqual(out, (
            f"{path}:\n"
            "1:1 OPEN_PAREN('(')\n"
            "1:2 SYMBOL('a')\n"
            "1:4 NUMBER('1' -> 1.0)\n"
            "1:5 CLOSE_PAREN(')')\n"
        ))
        self.assertEqual(err, "")

    def test_lex_error_exits_one(self):
        path = self._write("bad.lisp", "(a\n(b)")
        code, out, err = self._run([path])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("1 | (a", err)
        self.assertIn("error: unmatched '(' on line 1 column 1", err)

    def test_missing_file_exits_one(self):
        code, out, err = self._run([os.path.join(self.tmpdir.name, "nope.lisp")])
        self.assertEqual(code, 1)
        self.assertIn("cannot read", err)

    def test_usage_error_exits_one(self):
        stderr = io.StringIO()
        with redirect_stderr(stderr), self.assertRaises(SystemExit) as ctx:
            main([])
        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("usage:", stderr.getvalue())

    def test_too_many_arguments(self):
        stderr = io.StringIO()
        with redirect_stderr(stderr), self.assertRaises(SystemExit) as ctx:
            main(["a.lisp", "b.lisp"])
        self.assertEqual(ctx.exception.code, 1)


if __name__ == "__main__":
    unittest.main()
