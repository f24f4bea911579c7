"""
Character scanner for the conslisp lexer.

A cursor over the source text with one character of lookahead. It knows
nothing about the token grammar; the lexer builds on the primitives here.
"""

from typing import Callable, Optional

from .tokens import SourceLocation

Predicate = Callable[[str], bool]


class Scanner:
    """
    Read-only cursor over source text.

    Tracks the absolute index together with the line and column of the
    character under the cursor, updated incrementally as characters are
    consumed.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        self.source = source
        self.filename = filename
        self.cursor = 0
        self.line = 1
        self.column = 1

    @property
    def index(self) -> int:
        return self.cursor

    @property
    def location(self) -> SourceLocation:
        """Location of the character under the cursor."""
        return SourceLocation(self.filename, self.line, self.column, self.cursor)

    def __len__(self) -> int:
        return len(self.source) - self.cursor

    def len(self) -> int:
        """Number of characters left to consume."""
        return len(self)

    def is_empty(self) -> bool:
        return self.cursor >= len(self.source)

    def not_empty(self) -> bool:
        return self.cursor < len(self.source)

    def peek(self) -> Optional[str]:
        """Character under the cursor, or None at end of input."""
        if self.is_empty():
            return None
        return self.source[self.cursor]

    def next(self) -> Optional[str]:
        """Consume one character, updating line/column."""
        if self.is_empty():
            return None

        char = self.source[self.cursor]
        self.cursor += 1

        if char == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return char

    def next_is(self, expected: str) -> bool:
        return self.peek() == expected

    def next_is_one_of(self, chars: str) -> bool:
        char = self.peek()
        return char is not None and char in chars

    def next_matches(self, predicate: Predicate) -> bool:
        char = self.peek()
        return char is not None and predicate(char)

    def take(self, expected: str) -> Optional[str]:
        """Consume the next character only if it equals ``expected``."""
        if self.next_is(expected):
            return self.next()
        return None

    def take_if(self, predicate: Predicate) -> Optional[str]:
        if self.next_matches(predicate):
            return self.next()
        return None

    def take_while(self, predicate: Predicate) -> Optional[str]:
        """
        Consume the longest run of characters satisfying ``predicate``.

        Returns:
            The consumed text, or None if nothing matched (never "")
        """
        start = self.cursor
        while self.next_matches(predicate):
            self.next()

        if self.cursor == start:
            return None
        return self.source[start:self.cursor]

    def take_until(self, predicate: Predicate) -> Optional[str]:
        return self.take_while(lambda char: not predicate(char))

    def skip(self, count: int) -> Optional[str]:
        """Consume exactly ``count`` characters, or nothing if fewer remain."""
        if count == 0 or len(self) < count:
            return None

        start = self.cursor
        for _ in range(count):
            self.next()
        return self.source[start:self.cursor]
