"""ICU message pattern tokenizer.

Scans an ICU MessageFormat pattern and returns the distinct arguments it
references, each with an inferred ArgumentType. The tokenizer determines
shape only; it never formats.

Grammar (simplified from ICU MessagePattern):

    message        = (text | quoted | argument)*
    argument       = "{" ws reference ws ["," ws keyword ws ["," body]] "}"
    reference      = number | name
    body           = plural-style | select-style | choice-style | style-text
    plural-style   = [offset:N] (selector ws "{" message "}")+
    select-style   = (keyword ws "{" message "}")+
    choice-style   = limit ("#" | "<" | "≤") message ("|" limit sep message)*

Quoting (apostrophe mode DOUBLE_OPTIONAL):
    - "''" is a literal apostrophe anywhere
    - "'" followed by "{" or "}" (or "#" inside plural variants, "|" inside
      choice variants) opens a quoted literal that ends at the next lone "'";
      an unterminated quoted literal extends to the end of the pattern
    - any other "'" is a literal apostrophe

Repeated references:
    The first lexical occurrence fixes the token's position. Later
    occurrences refine the type via combine_types(): ANY yields to a stricter
    type and date/time fields merge; any other disagreement is an error.

Thread Safety:
    PatternTokenizer keeps all scan state local to tokenize(); a single
    instance may be shared across threads.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Literal, NoReturn

from icuaccessors.constants import MAX_DEPTH, MAX_PATTERN_LENGTH
from icuaccessors.core.depth_guard import DepthGuard
from icuaccessors.core.identifiers import is_argument_name, is_argument_number
from icuaccessors.diagnostics import (
    ConflictingArgumentTypeError,
    ErrorTemplate,
    MalformedArgumentError,
    MixedReferenceKindsError,
    PatternSyntaxError,
    UnbalancedBracesError,
)
from icuaccessors.enums import ArgumentType, TokenKind

from .cursor import Cursor, ParseResult, is_pattern_whitespace
from .tokens import NamedToken, NumberedToken, Token
from .types import COMPLEX_KEYWORDS, combine_types, infer_argument_type

__all__ = ["PatternTokenizer", "tokenize", "try_tokenize"]

logger = logging.getLogger(__name__)

type _Parent = Literal["top", "plural", "select", "choice"]

_EXPLICIT_VALUE: re.Pattern[str] = re.compile(r"^-?\d+(?:\.\d+)?$")
_OFFSET_PREFIX: str = "offset:"
_CHOICE_SEPARATORS: str = "#<≤"


def _is_selector_char(ch: str) -> bool:
    return ch not in "{}" and not is_pattern_whitespace(ch)


def _is_keyword_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def _is_reference_char(ch: str) -> bool:
    return ch not in ",{}" and not is_pattern_whitespace(ch)


@dataclass(slots=True)
class _ScanState:
    """Mutable per-call scan state (never shared between tokenize() calls)."""

    pattern: str
    guard: DepthGuard
    types: dict[str | int, ArgumentType] = field(default_factory=dict)
    kind: TokenKind | None = None

    def record(self, reference: str | int, arg_type: ArgumentType, pos: int) -> None:
        """Record one occurrence of a reference.

        Raises:
            MixedReferenceKindsError: If the reference kind differs from earlier ones
            ConflictingArgumentTypeError: If the type conflicts with an earlier occurrence
        """
        kind = TokenKind.NUMBERED if isinstance(reference, int) else TokenKind.NAMED
        if self.kind is None:
            self.kind = kind
        elif self.kind is not kind:
            raise MixedReferenceKindsError(
                ErrorTemplate.mixed_reference_kinds(self.pattern, pos, str(reference)),
                pattern=self.pattern,
            )

        existing = self.types.get(reference)
        if existing is None:
            self.types[reference] = arg_type
            return
        combined = combine_types(existing, arg_type)
        if combined is None:
            raise ConflictingArgumentTypeError(
                ErrorTemplate.conflicting_argument_type(
                    self.pattern, pos, str(reference), existing, arg_type
                ),
                pattern=self.pattern,
            )
        self.types[reference] = combined

    def tokens(self) -> tuple[Token, ...]:
        """Tokens in first-occurrence order."""
        return tuple(
            NumberedToken(index=reference, type=arg_type)
            if isinstance(reference, int)
            else NamedToken(name=reference, type=arg_type)
            for reference, arg_type in self.types.items()
        )


class PatternTokenizer:
    """Tokenizer for ICU message patterns.

    Usage:
        >>> tokenizer = PatternTokenizer()
        >>> tokenizer.tokenize("{detective} has {suspects, plural, other {# suspects}}")
        (NamedToken(name='detective', type=<ArgumentType.ANY: 'any'>), \
NamedToken(name='suspects', type=<ArgumentType.NUMBER: 'number'>))

    Attributes:
        max_depth: Maximum sub-message nesting depth
        max_length: Maximum accepted pattern length in characters
    """

    __slots__ = ("max_depth", "max_length")

    def __init__(
        self,
        *,
        max_depth: int = MAX_DEPTH,
        max_length: int = MAX_PATTERN_LENGTH,
    ) -> None:
        """Initialize tokenizer limits.

        Args:
            max_depth: Maximum sub-message nesting depth (default: MAX_DEPTH)
            max_length: Maximum pattern length (default: MAX_PATTERN_LENGTH)
        """
        self.max_depth = max_depth
        self.max_length = max_length

    def tokenize(self, pattern: str) -> tuple[Token, ...]:
        """Tokenize a pattern into its distinct argument tokens.

        Args:
            pattern: ICU message pattern

        Returns:
            Tokens in first-occurrence order; empty for patterns without arguments

        Raises:
            UnbalancedBracesError: Unclosed '{' or stray '}'
            MixedReferenceKindsError: Named and numbered references mixed
            ConflictingArgumentTypeError: Same reference with incompatible types
            MalformedArgumentError: Invalid argument syntax
            NestingDepthExceededError: Sub-messages nested deeper than max_depth
            PatternSyntaxError: Pattern longer than max_length
        """
        if len(pattern) > self.max_length:
            raise PatternSyntaxError(
                ErrorTemplate.pattern_too_long(len(pattern), self.max_length),
                pattern=pattern[:100],
            )
        state = _ScanState(
            pattern=pattern,
            guard=DepthGuard(max_depth=self.max_depth, source=pattern),
        )
        self._scan_message(Cursor(pattern, 0), state, "top")
        return state.tokens()

    # -- message text ----------------------------------------------------------

    def _scan_message(self, cursor: Cursor, state: _ScanState, parent: _Parent) -> Cursor:
        """Scan message text.

        Returns the cursor AT the '}' (or choice '|') that terminates a
        sub-message, or at EOF. At top level a '}' is an error.
        """
        while not cursor.is_eof:
            ch = cursor.current
            if ch == "'":
                cursor = self._skip_apostrophe(cursor, parent)
            elif ch == "{":
                cursor = self._scan_argument(cursor, state)
            elif ch == "}":
                if parent == "top":
                    raise UnbalancedBracesError(
                        ErrorTemplate.unexpected_close_brace(state.pattern, cursor.pos),
                        pattern=state.pattern,
                    )
                return cursor
            elif ch == "|" and parent == "choice":
                return cursor
            else:
                cursor = cursor.advance()
        return cursor

    @staticmethod
    def _skip_apostrophe(cursor: Cursor, parent: _Parent) -> Cursor:
        """Skip an apostrophe and, if it opens one, the whole quoted literal."""
        following = cursor.peek(1)
        if following == "'":
            return cursor.advance(2)

        specials = "{}"
        if parent == "plural":
            specials += "#"
        elif parent == "choice":
            specials += "|"
        if following is None or following not in specials:
            return cursor.advance()

        c = cursor.advance(2)
        while not c.is_eof:
            if c.current == "'":
                if c.peek(1) == "'":
                    c = c.advance(2)
                    continue
                return c.advance()
            c = c.advance()
        return c

    # -- arguments -------------------------------------------------------------

    def _scan_argument(self, cursor: Cursor, state: _ScanState) -> Cursor:
        """Scan one argument starting at its '{'; return cursor past its '}'."""
        open_pos = cursor.pos
        c = cursor.advance().skip_whitespace()
        ref_pos = c.pos
        ref = c.take_while(_is_reference_char)
        c = ref.cursor.skip_whitespace()
        if c.is_eof:
            self._raise_unclosed(state, open_pos)
        if not ref.value:
            self._raise_malformed(state, c.pos, "empty argument reference")
        reference = self._parse_reference(ref.value, ref_pos, state)

        if c.current == "}":
            state.record(reference, ArgumentType.ANY, ref_pos)
            return c.advance()
        if c.current != ",":
            self._raise_malformed(state, c.pos, f"expected ',' or '}}' after '{ref.value}'")

        c = c.advance().skip_whitespace()
        kw = c.take_while(_is_keyword_char)
        keyword = kw.value
        c = kw.cursor.skip_whitespace()
        if c.is_eof:
            self._raise_unclosed(state, open_pos)
        if not keyword:
            self._raise_malformed(state, c.pos, "missing argument type")
        normalized = keyword.lower()

        if c.current == "}":
            if normalized in COMPLEX_KEYWORDS:
                self._raise_malformed(state, c.pos, f"'{keyword}' argument requires variants")
            state.record(reference, infer_argument_type(keyword), ref_pos)
            return c.advance()
        if c.current != ",":
            self._raise_malformed(state, c.pos, f"expected ',' or '}}' after '{keyword}'")
        c = c.advance()

        if normalized in COMPLEX_KEYWORDS:
            # The outer argument precedes anything nested in its variants.
            state.record(reference, infer_argument_type(keyword), ref_pos)
            match normalized:
                case "plural" | "selectordinal":
                    c = self._scan_variants(c, state, open_pos, "plural")
                case "select":
                    c = self._scan_variants(c, state, open_pos, "select")
                case _:
                    c = self._scan_choice(c, state, open_pos)
        else:
            style = self._scan_style(c, state, open_pos)
            state.record(reference, infer_argument_type(keyword, style.value), ref_pos)
            c = style.cursor
        return c.advance()

    def _parse_reference(self, text: str, pos: int, state: _ScanState) -> str | int:
        """Parse an argument reference into a name (str) or number (int)."""
        if text[0].isdigit():
            if is_argument_number(text):
                return int(text)
            self._raise_malformed(state, pos, f"invalid argument number '{text}'")
        if not is_argument_name(text):
            self._raise_malformed(state, pos, f"invalid argument name '{text}'")
        return text

    def _scan_variants(
        self,
        cursor: Cursor,
        state: _ScanState,
        open_pos: int,
        parent: Literal["plural", "select"],
    ) -> Cursor:
        """Scan plural/selectordinal/select variants; return cursor AT the closing '}'."""
        c = cursor
        variant_count = 0
        first = True
        while True:
            c = c.skip_whitespace()
            if c.is_eof:
                self._raise_unclosed(state, open_pos)
            if c.current == "}":
                if variant_count == 0:
                    self._raise_malformed(state, c.pos, "expected at least one variant")
                return c

            selector_pos = c.pos
            selector = c.take_while(_is_selector_char)
            c = selector.cursor
            if not selector.value:
                self._raise_malformed(state, selector_pos, "expected variant selector")

            if parent == "plural" and selector.value.startswith("="):
                if not _EXPLICIT_VALUE.match(selector.value[1:]):
                    self._raise_malformed(
                        state, selector_pos, f"invalid explicit value '{selector.value}'"
                    )
            elif parent == "plural" and first and selector.value.startswith(_OFFSET_PREFIX):
                c = self._scan_offset(selector, state, selector_pos)
                first = False
                continue
            first = False

            c = c.skip_whitespace()
            if c.is_eof:
                self._raise_unclosed(state, open_pos)
            if c.current != "{":
                self._raise_malformed(
                    state, c.pos, f"expected '{{' after selector '{selector.value}'"
                )
            body_pos = c.pos
            with state.guard.at(body_pos):
                c = self._scan_message(c.advance(), state, parent)
            if c.is_eof:
                self._raise_unclosed(state, body_pos)
            c = c.advance()
            variant_count += 1

    def _scan_offset(
        self, selector: ParseResult[str], state: _ScanState, selector_pos: int
    ) -> Cursor:
        """Validate a plural offset ("offset:1" or "offset: 1"); return cursor after it."""
        value = selector.value[len(_OFFSET_PREFIX) :]
        c = selector.cursor
        if not value:
            number = c.skip_whitespace().take_while(_is_selector_char)
            value = number.value
            c = number.cursor
        if not (value.isascii() and value.isdigit()):
            self._raise_malformed(state, selector_pos, f"invalid plural offset '{value}'")
        return c

    def _scan_choice(self, cursor: Cursor, state: _ScanState, open_pos: int) -> Cursor:
        """Scan choice variants; return cursor AT the closing '}'."""
        c = cursor
        variant_count = 0
        while True:
            c = c.skip_whitespace()
            if c.is_eof:
                self._raise_unclosed(state, open_pos)
            if c.current == "}":
                if variant_count == 0:
                    self._raise_malformed(state, c.pos, "expected at least one choice")
                return c

            limit = c.take_while(lambda ch: ch not in _CHOICE_SEPARATORS and ch not in "|{}")
            c = limit.cursor
            if c.is_eof:
                self._raise_unclosed(state, open_pos)
            if not limit.value.strip() or c.current not in _CHOICE_SEPARATORS:
                self._raise_malformed(state, c.pos, "expected choice limit followed by '#' or '<'")

            with state.guard.at(c.pos):
                c = self._scan_message(c.advance(), state, "choice")
            if c.is_eof:
                self._raise_unclosed(state, open_pos)
            variant_count += 1
            if c.current == "|":
                c = c.advance()
            else:
                return c

    def _scan_style(self, cursor: Cursor, state: _ScanState, open_pos: int) -> ParseResult[str]:
        """Scan a simple argument's style text; result cursor is AT the closing '}'.

        Style text may contain quoted literals and balanced braces.
        """
        c = cursor
        nesting = 0
        while not c.is_eof:
            ch = c.current
            if ch == "'":
                c = c.advance()
                while not c.is_eof and c.current != "'":
                    c = c.advance()
                if c.is_eof:
                    break
            elif ch == "{":
                nesting += 1
            elif ch == "}":
                if nesting == 0:
                    return ParseResult(cursor.slice_to(c.pos), c)
                nesting -= 1
            c = c.advance()
        self._raise_unclosed(state, open_pos)

    # -- errors ----------------------------------------------------------------

    @staticmethod
    def _raise_unclosed(state: _ScanState, pos: int) -> NoReturn:
        raise UnbalancedBracesError(
            ErrorTemplate.unclosed_brace(state.pattern, pos),
            pattern=state.pattern,
        )

    @staticmethod
    def _raise_malformed(state: _ScanState, pos: int, detail: str) -> NoReturn:
        raise MalformedArgumentError(
            ErrorTemplate.malformed_argument(state.pattern, pos, detail),
            pattern=state.pattern,
        )


_DEFAULT_TOKENIZER = PatternTokenizer()


def tokenize(pattern: str) -> tuple[Token, ...]:
    """Tokenize an ICU message pattern.

    Convenience function for PatternTokenizer().tokenize().

    Args:
        pattern: ICU message pattern

    Returns:
        Distinct argument tokens in first-occurrence order

    Raises:
        PatternSyntaxError: If the pattern is malformed (see PatternTokenizer.tokenize)

    Example:
        >>> tokenize("Hello, {name}!")
        (NamedToken(name='name', type=<ArgumentType.ANY: 'any'>),)
        >>> tokenize("No arguments here")
        ()
    """
    return _DEFAULT_TOKENIZER.tokenize(pattern)


def try_tokenize(pattern: str) -> tuple[tuple[Token, ...], PatternSyntaxError | None]:
    """Tokenize without raising.

    Returns:
        (tokens, None) on success, ((), error) on failure

    Example:
        >>> tokens, error = try_tokenize("{unclosed")
        >>> tokens, type(error).__name__
        ((), 'UnbalancedBracesError')
    """
    try:
        return tokenize(pattern), None
    except PatternSyntaxError as e:
        logger.debug("Pattern tokenization failed: %s", e)
        return (), e
