"""
Command-line token dump for conslisp source files.

Usage:
    conslisp FILE

Prints ``FILE:`` followed by one ``line:column token`` line per token. On a
lexical error the offending source is shown on stderr and the exit status
is 1.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from . import __version__
from .lexer import LexerError, render_diagnostic, tokenize

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _get_log_level() -> int:
    """
    Determine log level from LOGLEVEL environment variable.
    Defaults to WARNING if not set.
    """
    loglevel_env = os.getenv("LOGLEVEL", "").upper()
    if loglevel_env:
        level = getattr(logging, loglevel_env, None)
        if isinstance(level, int):
            return level

    return logging.WARNING


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="conslisp",
        description="Tokenize a conslisp source file and print its tokens",
    )
    parser.add_argument("filename", help="Source file to tokenize")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=_get_log_level(),
        format='%(message)s',
        stream=sys.stderr
    )

    args = build_parser().parse_args(argv)

    try:
        with open(args.filename, 'r', encoding='utf-8') as f:
            source = f.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"conslisp: cannot read {args.filename}: {e}", file=sys.stderr)
        return 1

    try:
        tokens = tokenize(source, args.filename)
    except LexerError as e:
        logger.debug("tokenizing %s failed: %r", args.filename, e)
        sys.stderr.write(render_diagnostic(source, e))
        return 1

    print(f"{args.filename}:")
    for token in tokens:
        print(f"{token.location.position} {token}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
