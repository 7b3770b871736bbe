"""Argument type inference from ICU sub-format keywords and styles.

The inference table is closed: every keyword maps to one ArgumentType and
unrecognized keywords fall back to ANY instead of failing.

    keyword                              type
    -----------------------------------  ---------------------------------
    (none)                               ANY
    number, spellout, ordinal, choice    NUMBER
    plural, selectordinal                NUMBER
    select                               TEXT
    duration                             DURATION
    date                                 DATE  (refined by skeleton/pattern)
    time                                 TIME  (refined by skeleton/pattern)
    anything else                        ANY

Date and time styles are either predefined (short, medium, long, full), an
ICU skeleton ("::yMMMdjmm"), or an explicit pattern ("yyyy-MM-dd HH:mm").
Skeletons and patterns are classified by the fields they contain so that
e.g. {at, date, ::yMdjmm} becomes DATE_TIME and {at, time, HH:mm Z} becomes
TIME_WITH_OFFSET.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from icuaccessors.enums import ArgumentType

__all__ = [
    "COMPLEX_KEYWORDS",
    "combine_types",
    "infer_argument_type",
    "temporal_type_from_fields",
]

_KEYWORD_TYPES: dict[str, ArgumentType] = {
    "number": ArgumentType.NUMBER,
    "spellout": ArgumentType.NUMBER,
    "ordinal": ArgumentType.NUMBER,
    "choice": ArgumentType.NUMBER,
    "plural": ArgumentType.NUMBER,
    "selectordinal": ArgumentType.NUMBER,
    "select": ArgumentType.TEXT,
    "duration": ArgumentType.DURATION,
    "date": ArgumentType.DATE,
    "time": ArgumentType.TIME,
}

# Keywords whose body is a list of sub-messages rather than a style string.
COMPLEX_KEYWORDS: frozenset[str] = frozenset({"plural", "selectordinal", "select", "choice"})

_PREDEFINED_STYLES: frozenset[str] = frozenset({"short", "medium", "long", "full"})

# ICU date field letters grouped by what they require of the argument value.
_DATE_FIELDS: frozenset[str] = frozenset("GyYuUrQqMLlwWdDFgEec")
_TIME_FIELDS: frozenset[str] = frozenset("abBhHkKjJCmsSA")
_OFFSET_FIELDS: frozenset[str] = frozenset("OXxZ")
_ZONE_FIELDS: frozenset[str] = frozenset("zvV")

# Feature set -> type. A zone id implies an offset.
_TEMPORAL_TYPES: dict[frozenset[str], ArgumentType] = {
    frozenset({"date"}): ArgumentType.DATE,
    frozenset({"time"}): ArgumentType.TIME,
    frozenset({"date", "time"}): ArgumentType.DATE_TIME,
    frozenset({"offset"}): ArgumentType.ZONE_OFFSET,
    frozenset({"time", "offset"}): ArgumentType.TIME_WITH_OFFSET,
    frozenset({"date", "offset"}): ArgumentType.DATE_TIME_WITH_OFFSET,
    frozenset({"date", "time", "offset"}): ArgumentType.DATE_TIME_WITH_OFFSET,
}

_TEMPORAL_FEATURES: dict[ArgumentType, frozenset[str]] = {
    ArgumentType.DATE: frozenset({"date"}),
    ArgumentType.TIME: frozenset({"time"}),
    ArgumentType.DATE_TIME: frozenset({"date", "time"}),
    ArgumentType.ZONE_OFFSET: frozenset({"offset"}),
    ArgumentType.TIME_WITH_OFFSET: frozenset({"time", "offset"}),
    ArgumentType.DATE_TIME_WITH_OFFSET: frozenset({"date", "time", "offset"}),
    ArgumentType.DATE_TIME_WITH_ZONE: frozenset({"date", "time", "zone"}),
}


def _pattern_fields(style: str) -> str:
    """Return the field letters of a date pattern, skipping quoted literals."""
    letters: list[str] = []
    quoted = False
    for ch in style:
        if ch == "'":
            quoted = not quoted
        elif not quoted and ch.isascii() and ch.isalpha():
            letters.append(ch)
    return "".join(letters)


def temporal_type_from_fields(fields: str) -> ArgumentType | None:
    """Classify date/time field letters into a temporal ArgumentType.

    Args:
        fields: Field letters from a skeleton or pattern (e.g., "yMMMdjmm")

    Returns:
        The temporal type, or None if no known field is present

    Example:
        >>> temporal_type_from_fields("yMMMd")
        <ArgumentType.DATE: 'date'>
        >>> temporal_type_from_fields("jmmZ")
        <ArgumentType.TIME_WITH_OFFSET: 'time_with_offset'>
        >>> temporal_type_from_fields("yMdjmmVV")
        <ArgumentType.DATE_TIME_WITH_ZONE: 'date_time_with_zone'>
    """
    features: set[str] = set()
    for ch in fields:
        if ch in _DATE_FIELDS:
            features.add("date")
        elif ch in _TIME_FIELDS:
            features.add("time")
        elif ch in _OFFSET_FIELDS:
            features.add("offset")
        elif ch in _ZONE_FIELDS:
            features.add("zone")
    if not features:
        return None
    if "zone" in features:
        return ArgumentType.DATE_TIME_WITH_ZONE
    return _TEMPORAL_TYPES[frozenset(features)]


def infer_argument_type(keyword: str | None, style: str | None = None) -> ArgumentType:
    """Infer an argument's type from its sub-format keyword and style.

    Args:
        keyword: Sub-format keyword (case-insensitive), or None when absent
        style: Style text following the keyword, or None

    Returns:
        The inferred ArgumentType (ANY for absent or unknown keywords)

    Example:
        >>> infer_argument_type(None)
        <ArgumentType.ANY: 'any'>
        >>> infer_argument_type("plural")
        <ArgumentType.NUMBER: 'number'>
        >>> infer_argument_type("date", "::yMdjmm")
        <ArgumentType.DATE_TIME: 'date_time'>
        >>> infer_argument_type("emoji")
        <ArgumentType.ANY: 'any'>
    """
    if keyword is None:
        return ArgumentType.ANY
    normalized = keyword.lower()
    base = _KEYWORD_TYPES.get(normalized, ArgumentType.ANY)
    if normalized not in ("date", "time") or style is None:
        return base

    style = style.strip()
    if not style or style.lower() in _PREDEFINED_STYLES:
        return base
    if style.startswith("::"):
        refined = temporal_type_from_fields(style[2:])
    else:
        refined = temporal_type_from_fields(_pattern_fields(style))
    return refined if refined is not None else base


def combine_types(first: ArgumentType, second: ArgumentType) -> ArgumentType | None:
    """Combine the types of two occurrences of the same argument.

    Rules:
        - Identical types agree
        - ANY yields to the other (stricter) type
        - Temporal types merge their fields: DATE + TIME -> DATE_TIME
        - Anything else is a conflict

    Returns:
        The combined type, or None if the types conflict

    Example:
        >>> combine_types(ArgumentType.ANY, ArgumentType.NUMBER)
        <ArgumentType.NUMBER: 'number'>
        >>> combine_types(ArgumentType.DATE, ArgumentType.TIME)
        <ArgumentType.DATE_TIME: 'date_time'>
        >>> combine_types(ArgumentType.NUMBER, ArgumentType.TEXT) is None
        True
    """
    if first == second:
        return first
    if first is ArgumentType.ANY:
        return second
    if second is ArgumentType.ANY:
        return first
    first_features = _TEMPORAL_FEATURES.get(first)
    second_features = _TEMPORAL_FEATURES.get(second)
    if first_features is None or second_features is None:
        return None
    union = first_features | second_features
    if "zone" in union:
        return ArgumentType.DATE_TIME_WITH_ZONE
    return _TEMPORAL_TYPES[union]
