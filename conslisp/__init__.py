"""
conslisp

A lexer and value model for a small Lisp-like S-expression notation.

Architecture:
    conslisp/
    ├── lexer/           # Scanning, tokenization and lexical diagnostics
    ├── values/          # Cons-cell data model and canonical printing
    └── cli.py           # Token dump command-line tool
"""

__version__ = "0.1.0"

from .lexer import Lexer, Token, TokenType, SourceLocation, LexerError, tokenize
from .values import Value, Nil, cons, display, is_list, is_pair

__all__ = [
    # Lexing
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "LexerError",
    "tokenize",

    # Values
    "Value",
    "Nil",
    "cons",
    "display",
    "is_list",
    "is_pair",

    # Version info
    "__version__",
]
