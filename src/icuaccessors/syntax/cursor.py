"""Immutable cursor infrastructure for pattern scanning.

Implements the immutable cursor pattern for zero-`None` scanning.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
"""

from collections.abc import Callable
from dataclasses import dataclass

__all__ = ["Cursor", "ParseResult", "is_pattern_whitespace"]

# ICU Pattern_White_Space (the subset that appears in real resources).
_PATTERN_WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v\u0085\u200e\u200f\u2028\u2029")


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("{n}", 0)
        >>> cursor.current
        '{'
        >>> cursor.advance().current
        'n'
        >>> cursor.current  # Original unchanged (immutability)
        '{'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input. Check is_eof first.
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped to EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def skip_whitespace(self) -> "Cursor":
        """Skip ICU pattern whitespace.

        Example:
            >>> Cursor("  , number", 0).skip_whitespace().current
            ','
        """
        c = self
        while not c.is_eof and c.current in _PATTERN_WHITESPACE:
            c = c.advance()
        return c

    def take_while(self, predicate: Callable[[str], bool]) -> "ParseResult[str]":
        """Consume characters while predicate holds.

        Returns:
            ParseResult with the consumed text and the cursor after it

        Example:
            >>> result = Cursor("abc def", 0).take_while(str.isalpha)
            >>> result.value, result.cursor.pos
            ('abc', 3)
        """
        c = self
        while not c.is_eof and predicate(c.current):
            c = c.advance()
        return ParseResult(self.slice_to(c.pos), c)


def is_pattern_whitespace(ch: str) -> bool:
    """Check if ch is ICU pattern whitespace."""
    return ch in _PATTERN_WHITESPACE


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Scanner result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> result = ParseResult("h", cursor.advance())
        >>> result.value
        'h'
        >>> result.cursor.pos
        1
    """

    value: T
    cursor: Cursor

