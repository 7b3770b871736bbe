"""Hypothesis strategies for generating ICU message patterns.

Strategy Categories:
- Building blocks: argument names, literal text, quoted literals
- Whole patterns: patterns with a known expected token list
- Edge cases: deeply nested plural patterns

Pattern strategies return (pattern, expected) pairs where expected maps each
argument key to the ArgumentType the tokenizer must infer, in first-occurrence
order.
"""

from __future__ import annotations

import string

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from icuaccessors.enums import ArgumentType

# =============================================================================
# Constants
# =============================================================================

# Literal text never containing pattern syntax characters.
SAFE_TEXT_CHARS: str = string.ascii_letters + string.digits + " .,!?-:;"

# Keywords with a fixed type regardless of style (None = bare placeholder).
SIMPLE_KEYWORDS: dict[str | None, ArgumentType] = {
    None: ArgumentType.ANY,
    "number": ArgumentType.NUMBER,
    "spellout": ArgumentType.NUMBER,
    "ordinal": ArgumentType.NUMBER,
    "duration": ArgumentType.DURATION,
    "date": ArgumentType.DATE,
    "time": ArgumentType.TIME,
    "emoji": ArgumentType.ANY,
}

# =============================================================================
# Building blocks
# =============================================================================


def argument_names() -> st.SearchStrategy[str]:
    """Valid argument names: a letter followed by letters, digits or underscores."""
    return st.from_regex(r"[a-z][a-zA-Z0-9_]{0,11}", fullmatch=True)


def literal_text() -> st.SearchStrategy[str]:
    """Text without any pattern syntax characters."""
    return st.text(alphabet=SAFE_TEXT_CHARS, max_size=12)


@composite
def quoted_literals(draw: st.DrawFn) -> str:
    """Quoted literal runs: '{...}' or a doubled apostrophe."""
    inner = draw(st.text(alphabet=SAFE_TEXT_CHARS + "{}#", max_size=8))
    kind = draw(st.sampled_from(["braces", "doubled", "lone"]))
    event(f"quoted={kind}")
    match kind:
        case "braces":
            return f"'{{{inner}}}'"
        case "doubled":
            return draw(literal_text()) + "''"
        case _:
            return "'s"


@composite
def placeholder(draw: st.DrawFn, reference: str) -> tuple[str, ArgumentType]:
    """A simple placeholder for reference with a random keyword."""
    keyword = draw(st.sampled_from(list(SIMPLE_KEYWORDS)))
    if keyword is None:
        return f"{{{reference}}}", ArgumentType.ANY
    spacing = draw(st.sampled_from(["", " "]))
    return f"{{{reference},{spacing}{keyword}}}", SIMPLE_KEYWORDS[keyword]


# =============================================================================
# Whole patterns
# =============================================================================


@composite
def plain_patterns(draw: st.DrawFn) -> str:
    """Patterns with no placeholders (literal text and quoted literals only).

    Parts are joined by a space: a quoted run followed directly by an
    apostrophe would read as an escaped quote and keep the run open.
    """
    parts = draw(st.lists(st.one_of(literal_text(), quoted_literals()), max_size=6))
    return " ".join(parts)


@composite
def named_patterns(draw: st.DrawFn) -> tuple[str, dict[str, ArgumentType]]:
    """Patterns referencing distinct named arguments, each used once."""
    names = draw(st.lists(argument_names(), min_size=1, max_size=5, unique=True))
    expected: dict[str, ArgumentType] = {}
    parts: list[str] = []
    for name in names:
        parts.append(draw(literal_text()))
        text, arg_type = draw(placeholder(name))
        parts.append(text)
        expected[name] = arg_type
    parts.append(draw(literal_text()))
    event(f"named_arguments={len(names)}")
    return "".join(parts), expected


@composite
def numbered_patterns(draw: st.DrawFn) -> tuple[str, dict[str, ArgumentType]]:
    """Patterns referencing distinct numbered arguments in random order."""
    indices = draw(
        st.lists(st.integers(min_value=0, max_value=12), min_size=1, max_size=5, unique=True)
    )
    expected: dict[str, ArgumentType] = {}
    parts: list[str] = []
    for index in indices:
        parts.append(draw(literal_text()))
        text, arg_type = draw(placeholder(str(index)))
        parts.append(text)
        expected[str(index)] = arg_type
    contiguous = sorted(indices) == list(range(len(indices)))
    event(f"numbered_contiguous={contiguous}")
    return "".join(parts), expected


@composite
def nested_plural_patterns(draw: st.DrawFn, max_depth: int = 6) -> tuple[str, int]:
    """Plural arguments nested inside each other's variants.

    Returns:
        (pattern, depth) where depth is the number of nested plurals
    """
    depth = draw(st.integers(min_value=1, max_value=max_depth))
    pattern = "{inner}"
    for level in reversed(range(depth)):
        pattern = f"{{n{level}, plural, one {{#}} other {{{pattern}}}}}"
    event(f"nesting_depth={depth}")
    return pattern, depth
