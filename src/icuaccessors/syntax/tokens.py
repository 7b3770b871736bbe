"""Argument tokens produced by the pattern tokenizer.

A token records one distinct argument reference in a pattern and the type
inferred for it. Tokens are frozen dataclasses: they compare by value, so
two locales' token tuples can be compared directly.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from icuaccessors.enums import ArgumentType, TokenKind

__all__ = [
    "NamedToken",
    "NumberedToken",
    "Token",
    "token_kind",
]


@dataclass(frozen=True, slots=True)
class NamedToken:
    """Argument referenced by name.

    Example:
        "{detective} has {suspects, plural, ...}" yields
        NamedToken("detective", ANY), NamedToken("suspects", NUMBER)
    """

    name: str
    """Argument name as written in the pattern."""

    type: ArgumentType
    """Type inferred from the argument's sub-format."""

    @property
    def key(self) -> str:
        """Lookup key used at the data-binding boundary."""
        return self.name

    @property
    def kind(self) -> TokenKind:
        """Always TokenKind.NAMED."""
        return TokenKind.NAMED


@dataclass(frozen=True, slots=True)
class NumberedToken:
    """Argument referenced by position.

    Example:
        "{0} and {1, number}" yields NumberedToken(0, ANY), NumberedToken(1, NUMBER)
    """

    index: int
    """Non-negative argument number."""

    type: ArgumentType
    """Type inferred from the argument's sub-format."""

    def __post_init__(self) -> None:
        """Reject negative indices."""
        if self.index < 0:
            msg = f"NumberedToken.index must be >= 0, got {self.index}"
            raise ValueError(msg)

    @property
    def key(self) -> str:
        """Lookup key used at the data-binding boundary (stringified index)."""
        return str(self.index)

    @property
    def kind(self) -> TokenKind:
        """Always TokenKind.NUMBERED."""
        return TokenKind.NUMBERED


type Token = NamedToken | NumberedToken
"""One distinct argument of a pattern."""


def token_kind(tokens: Sequence[Token]) -> TokenKind | None:
    """Reference kind of a token sequence, or None when it has no tokens.

    The tokenizer guarantees a sequence never mixes kinds, so the first
    token decides.
    """
    if not tokens:
        return None
    return tokens[0].kind
