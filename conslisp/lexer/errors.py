"""
Error handling for the conslisp lexer.

Every lexical error is fatal: the lexer stops at the first one and reports
it with the location it is attributed to. This module also renders an error
against its source text for terminal output.
"""

from typing import Optional, List
from dataclasses import dataclass
from enum import Enum

from .tokens import SourceLocation


class LexErrorKind(Enum):
    """The kinds of lexical failure."""
    TRAILING_GARBAGE = "trailing garbage"
    EMPTY = "empty program"
    UNKNOWN_CHAR = "unknown character"
    UNMATCHED = "unmatched"


@dataclass
class Diagnostic:
    """A located message about the source text."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer rejects its input.

    Carries the error kind, the offending character where one applies
    (``UNKNOWN_CHAR`` and ``UNMATCHED``) and the location the error is
    attributed to.
    """

    def __init__(
        self,
        kind: LexErrorKind,
        location: SourceLocation,
        char: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.kind = kind
        self.char = char
        self.location = location
        self.code = ERROR_CODES[kind]
        super().__init__(self.message)
        self.diagnostic = Diagnostic(
            message=self.message,
            location=location,
            severity="error",
            code=self.code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def message(self) -> str:
        if self.char is not None:
            return f"{self.kind.value} '{self.char}'"
        return self.kind.value

    def __str__(self) -> str:
        return str(self.diagnostic)

    def __repr__(self) -> str:
        return f"LexerError({self.kind.name}, {self.char!r}, {self.location!r})"


# Error codes for categorization
ERROR_CODES = {
    LexErrorKind.UNKNOWN_CHAR: "L001",
    LexErrorKind.UNMATCHED: "L002",
    LexErrorKind.TRAILING_GARBAGE: "L003",
    LexErrorKind.EMPTY: "L004",
}


# Helper functions for creating common errors
def create_unknown_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character no token can start with."""
    help_text = f"The character '{char}' is only valid inside a string literal."

    return LexerError(LexErrorKind.UNKNOWN_CHAR, location, char=char, help_text=help_text)


def create_unmatched_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for an unbalanced parenthesis or unterminated string."""
    if char == '(':
        help_text = "This group is never closed."
        suggestions = ["Add a closing ')'"]
    elif char == ')':
        help_text = "There is no open group for this ')' to close."
        suggestions = ["Remove the ')'", "Add an opening '(' earlier"]
    else:
        help_text = "String literals must be closed with '\"' on the same line."
        suggestions = ["Add a closing '\"'"]

    return LexerError(
        LexErrorKind.UNMATCHED,
        location,
        char=char,
        help_text=help_text,
        suggestions=suggestions
    )


def create_trailing_garbage_error(lexeme: str, location: SourceLocation) -> LexerError:
    """Create an error for an atom that runs into a non-delimiter."""
    return LexerError(
        LexErrorKind.TRAILING_GARBAGE,
        location,
        help_text=f"'{lexeme}' must be followed by whitespace, a parenthesis or end of input."
    )


def create_empty_program_error(location: SourceLocation) -> LexerError:
    return LexerError(LexErrorKind.EMPTY, location, help_text="The source contains no tokens.")


def render_diagnostic(source: str, error: LexerError, context_lines: int = 3) -> str:
    """
    Render a lexer error against the source it came from.

    Shows up to ``context_lines`` lines before the offending one, each with a
    line-number gutter, a caret under the offending column and a one-line
    summary.

    Args:
        source: The text that was tokenized
        error: The error raised while tokenizing it
        context_lines: How many preceding lines to show

    Returns:
        The rendered report, newline-terminated
    """
    location = error.location
    lines = source.split("\n")
    first = max(1, location.line - context_lines)
    width = len(str(location.line))

    report = []
    for number in range(first, location.line + 1):
        text = lines[number - 1] if number <= len(lines) else ""
        report.append(f"{number:>{width}} | {text}".rstrip())

    gutter = " " * (width + len(" | "))
    report.append(gutter + " " * (location.column - 1) + "^")
    report.append(
        f"error: {error.message} on line {location.line} column {location.column}"
    )

    return "\n".join(report) + "\n"
