"""Hypothesis strategies for icu-accessors property-based testing.

Usage:
    from tests.strategies import named_patterns, plain_patterns
    from tests.strategies.patterns import nested_plural_patterns

Event-Emitting Strategies:
    These strategies emit hypothesis.event() calls for coverage statistics:
    - quoted_literals, named_patterns, numbered_patterns, nested_plural_patterns
"""

from .patterns import (
    SAFE_TEXT_CHARS,
    SIMPLE_KEYWORDS,
    argument_names,
    literal_text,
    named_patterns,
    nested_plural_patterns,
    numbered_patterns,
    placeholder,
    plain_patterns,
    quoted_literals,
)

__all__ = [
    "SAFE_TEXT_CHARS",
    "SIMPLE_KEYWORDS",
    "argument_names",
    "literal_text",
    "named_patterns",
    "nested_plural_patterns",
    "numbered_patterns",
    "placeholder",
    "plain_patterns",
    "quoted_literals",
]
