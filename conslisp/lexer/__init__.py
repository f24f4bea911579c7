"""
conslisp Lexer Package

Implements the scanner and tokenizer for S-expression source text.

Key Features:
- Line/column tracking for every token
- Parenthesis balance checking with precise error locations
- Context-sensitive literals (a digit run is only a number when it ends
  at a delimiter)
- Fail-fast errors with terminal-friendly rendering
"""

from .tokens import Token, TokenType, SourceLocation
from .scanner import Scanner
from .lexer import Lexer, LexerState, tokenize, tokenize_file
from .errors import LexerError, LexErrorKind, Diagnostic, render_diagnostic

__all__ = [
    "Lexer",
    "LexerState",
    "Scanner",
    "Token",
    "TokenType",
    "SourceLocation",
    "LexerError",
    "LexErrorKind",
    "Diagnostic",
    "render_diagnostic",
    "tokenize",
    "tokenize_file",
]
