"""Identifier rules for argument references and generated Python names.

Two grammars meet here:

- ICU argument references inside patterns: either an argument number
  (0, 1, 2 ... without leading zeros) or an argument name that contains
  no pattern whitespace and no pattern syntax characters.
- Python identifiers for generated accessors and parameters.

Thread Safety:
    All functions in this module are pure functions with no shared state.

Python 3.13+.
"""

from __future__ import annotations

import keyword
import re

from icuaccessors.constants import (
    MAX_IDENTIFIER_LENGTH,
    NUMBERED_ARGUMENT_PREFIX,
    RESERVED_GENERATED_NAMES,
)

__all__ = [
    "generated_identifier",
    "is_argument_name",
    "is_argument_number",
    "numbered_parameter_name",
    "to_python_identifier",
]

# ICU Pattern_Syntax subset that can appear in message patterns, plus whitespace.
_FORBIDDEN_NAME_CHARS: re.Pattern[str] = re.compile(r"[\s{}'#,|:;<=>?@\[\]\\^`~!\"$%&()*+./]")


def is_argument_number(reference: str) -> bool:
    """Check if a reference is a valid ICU argument number.

    Example:
        >>> is_argument_number("0")
        True
        >>> is_argument_number("12")
        True
        >>> is_argument_number("01")
        False
    """
    if not reference.isascii() or not reference.isdigit():
        return False
    return reference == "0" or not reference.startswith("0")


def is_argument_name(reference: str) -> bool:
    """Check if a reference is a valid ICU argument name.

    Names must not start with a digit and may not contain whitespace or
    pattern syntax characters. Hyphens and non-ASCII letters are allowed.

    Example:
        >>> is_argument_name("detective")
        True
        >>> is_argument_name("first-name")
        True
        >>> is_argument_name("has space")
        False
    """
    if not reference or reference[0].isdigit():
        return False
    return _FORBIDDEN_NAME_CHARS.search(reference) is None


def to_python_identifier(name: str) -> str:
    """Sanitize a resource or argument name into a Python identifier.

    Rules:
        - Every character that cannot appear in an identifier becomes "_"
        - A leading digit gets a "_" prefix
        - Python keywords get a "_" suffix
        - Result is truncated to MAX_IDENTIFIER_LENGTH

    Example:
        >>> to_python_identifier("first-name")
        'first_name'
        >>> to_python_identifier("class")
        'class_'
        >>> to_python_identifier("1st")
        '_1st'
    """
    result = "".join(ch if f"_{ch}".isidentifier() else "_" for ch in name) or "_"
    if not result.isidentifier():
        result = f"_{result}"
    if keyword.iskeyword(result):
        result = f"{result}_"
    return result[:MAX_IDENTIFIER_LENGTH]


def generated_identifier(name: str) -> str:
    """Identifier for a generated accessor or parameter.

    Sanitizes like to_python_identifier, then moves names off the ones the
    generated module binds itself (RESERVED_GENERATED_NAMES) and off dunder
    names, so no accessor or parameter shadows them.

    Example:
        >>> generated_identifier("welcome.title")
        'welcome_title'
        >>> generated_identifier("datetime")
        'datetime_'
        >>> generated_identifier("__all__")
        '__all_'
    """
    result = to_python_identifier(name)
    if result in RESERVED_GENERATED_NAMES:
        return f"{result}_"
    if len(result) > 4 and result.startswith("__") and result.endswith("__"):
        return f"{result.rstrip('_')}_"
    return result


def numbered_parameter_name(index: int) -> str:
    """Parameter name for a numbered argument: 0 -> "arg0"."""
    return f"{NUMBERED_ARGUMENT_PREFIX}{index}"
