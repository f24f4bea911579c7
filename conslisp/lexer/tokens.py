"""
Token definitions for the conslisp lexer.

This module defines the token types produced when scanning S-expression
source text:
- Grouping (open and close parentheses)
- Literals (numbers, strings)
- Symbols
- Reader macro characters (quote, quasiquote, unquote)
- The dot used by dotted-pair notation

It also holds the character classes the tokenizer dispatches on.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any


class TokenType(Enum):
    """
    Enumeration of all token types in conslisp.

    The set is closed: the tokenizer never produces anything else.
    """

    # ========================================================================
    # Grouping
    # ========================================================================
    OPEN_PAREN = auto()             # (
    CLOSE_PAREN = auto()            # )

    # ========================================================================
    # Atoms
    # ========================================================================
    NUMBER = auto()                 # 42, 3.14
    SYMBOL = auto()                 # foo, +, list->vector
    STRING = auto()                 # "hello"

    # ========================================================================
    # Reader macro characters
    # ========================================================================
    QUOTE = auto()                  # '
    QUASIQUOTE = auto()             # `
    UNQUOTE = auto()                # ,

    # ========================================================================
    # Punctuation
    # ========================================================================
    DOT = auto()                    # . (dotted pairs)


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source text.

    Lines and columns are 1-indexed; offset is the 0-based character index.
    """
    filename: str
    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"

    @property
    def position(self) -> str:
        """Line and column without the filename, e.g. ``3:14``."""
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    Contains the token type, lexeme (raw text), semantic value and the
    location of the token's first character.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Any                      # float for NUMBER, str for SYMBOL/STRING
    location: SourceLocation

    def __str__(self) -> str:
        if self.value is not None and self.value != self.lexeme:
            return f"{self.type.name}({self.lexeme!r} -> {self.value!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def is_reader_macro(self) -> bool:
        """Check if this token is a quote-style prefix."""
        return self.type in READER_MACROS.values()


# Lookup tables used by the lexer for single-character tokens

READER_MACROS = {
    "'": TokenType.QUOTE,
    "`": TokenType.QUASIQUOTE,
    ",": TokenType.UNQUOTE,
}

PARENS = {
    "(": TokenType.OPEN_PAREN,
    ")": TokenType.CLOSE_PAREN,
}

# Characters that can never appear inside a symbol
RESERVED_CHARS = frozenset("'.,`()\\\"")

COMMENT_START = ";"
STRING_DELIMITER = '"'
DOT = "."


def is_symbolic(char: str) -> bool:
    """Check if a character may appear in a symbol."""
    return char not in RESERVED_CHARS and not char.isspace()


def is_digit(char: str) -> bool:
    return char.isdecimal()


def is_delimiter(char: str) -> bool:
    """Check if a character may directly follow an atom."""
    return char.isspace() or char in PARENS
