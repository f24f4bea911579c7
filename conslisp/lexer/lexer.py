"""
conslisp Lexer - turns S-expression source text into located tokens

Single left-to-right pass with one character of lookahead. The first error
stops the pass; there is no recovery.
"""

import logging
from enum import Enum, auto
from typing import List

from .scanner import Scanner
from .tokens import (
    Token, TokenType, SourceLocation, READER_MACROS, COMMENT_START,
    STRING_DELIMITER, DOT, is_symbolic, is_digit, is_delimiter
)
from .errors import (
    LexerError, create_unknown_character_error, create_unmatched_error,
    create_trailing_garbage_error, create_empty_program_error
)

logger = logging.getLogger(__name__)


class LexerState(Enum):
    """Where the lexer is in its pass. ERROR and DONE are terminal."""
    SCANNING = auto()
    IN_COMMENT = auto()
    IN_STRING = auto()
    IN_NUMBER = auto()
    IN_SYMBOL = auto()
    ERROR = auto()
    DONE = auto()


class Lexer:
    """
    conslisp lexical analyzer.

    Converts source text into a list of tokens, tracking open parentheses so
    that unbalanced groups are reported at the right place.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source text.

        Args:
            source: Source text
            filename: Name of source file for error reporting
        """
        self.source = source
        self.filename = filename
        self.scanner = Scanner(source, filename)
        self.tokens: List[Token] = []
        self.open_parens: List[SourceLocation] = []
        self.state = LexerState.SCANNING

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source text.

        Returns:
            List of tokens in source order

        Raises:
            LexerError: On the first lexical error
        """
        self.scanner = Scanner(self.source, self.filename)
        self.tokens = []
        self.open_parens = []
        self.state = LexerState.SCANNING

        try:
            while self.scanner.not_empty():
                self._next_token()

            if self.open_parens:
                # Point at the outermost group that was never closed
                raise create_unmatched_error('(', self.open_parens[0])

            if not self.tokens:
                raise create_empty_program_error(self.scanner.location)

        except LexerError as e:
            self.state = LexerState.ERROR
            logger.debug("%s: %s at %s", self.filename, e.message, e.location.position)
            raise

        self.state = LexerState.DONE
        logger.debug("%s: produced %d tokens", self.filename, len(self.tokens))
        return self.tokens

    def _next_token(self):
        """Dispatch on the character under the cursor."""
        scanner = self.scanner
        start = scanner.location

        if scanner.next_is(COMMENT_START):
            self._skip_comment()
        elif scanner.next_is('('):
            scanner.next()
            self.open_parens.append(start)
            self._emit(TokenType.OPEN_PAREN, '(', None, start)
        elif scanner.next_is(')'):
            if not self.open_parens:
                raise create_unmatched_error(')', start)
            self.open_parens.pop()
            scanner.next()
            self._emit(TokenType.CLOSE_PAREN, ')', None, start)
        elif scanner.next_matches(is_digit):
            self._tokenize_number(start)
        elif scanner.next_matches(is_symbolic):
            self._tokenize_symbol(start)
        elif scanner.next_is(STRING_DELIMITER):
            self._tokenize_string(start)
        elif scanner.next_is_one_of(''.join(READER_MACROS)):
            char = scanner.next()
            self._emit(READER_MACROS[char], char, None, start)
        elif scanner.next_is(DOT):
            scanner.next()
            self._emit(TokenType.DOT, DOT, None, start)
        elif scanner.next_matches(str.isspace):
            scanner.take_while(str.isspace)
        else:
            raise create_unknown_character_error(scanner.peek(), start)

    def _emit(self, token_type: TokenType, lexeme: str, value, location: SourceLocation):
        self.tokens.append(Token(token_type, lexeme, value, location))

    def _skip_comment(self):
        """Skip a ';' comment up to, not including, the end of the line."""
        self.state = LexerState.IN_COMMENT
        self.scanner.take(COMMENT_START)
        self.scanner.take_until(lambda char: char == '\n')
        self.state = LexerState.SCANNING

    def _tokenize_number(self, start: SourceLocation):
        """
        Tokenize a number: a digit run with an optional '.' and fraction.

        The literal has to end at whitespace, a parenthesis or end of input.
        """
        self.state = LexerState.IN_NUMBER
        scanner = self.scanner
        lexeme = scanner.take_while(is_digit)

        if scanner.take(DOT):
            fraction = scanner.take_while(is_digit)
            if fraction is None:
                raise create_trailing_garbage_error(lexeme + DOT, scanner.location)
            lexeme += DOT + fraction

        self._expect_delimiter(lexeme)
        self._emit(TokenType.NUMBER, lexeme, float(lexeme), start)
        self.state = LexerState.SCANNING

    def _tokenize_symbol(self, start: SourceLocation):
        self.state = LexerState.IN_SYMBOL
        name = self.scanner.take_while(is_symbolic)
        self._expect_delimiter(name)
        self._emit(TokenType.SYMBOL, name, name, start)
        self.state = LexerState.SCANNING

    def _expect_delimiter(self, lexeme: str):
        if self.scanner.not_empty() and not self.scanner.next_matches(is_delimiter):
            raise create_trailing_garbage_error(lexeme, self.scanner.location)

    def _tokenize_string(self, start: SourceLocation):
        """
        Tokenize a string literal.

        No escape sequences and no line breaks; an unterminated string is
        reported at its opening quote.
        """
        self.state = LexerState.IN_STRING
        scanner = self.scanner
        scanner.next()  # Skip opening quote

        text = scanner.take_until(lambda char: char == STRING_DELIMITER or char == '\n') or ""

        if not scanner.take(STRING_DELIMITER):
            raise create_unmatched_error(STRING_DELIMITER, start)

        lexeme = self.source[start.offset:scanner.index]
        self._emit(TokenType.STRING, lexeme, text, start)
        self.state = LexerState.SCANNING


def tokenize(source: str, filename: str = "<string>") -> List[Token]:
    """
    Tokenize a source string.

    Args:
        source: Source text
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(source, filename).tokenize()


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize(source, filepath)
