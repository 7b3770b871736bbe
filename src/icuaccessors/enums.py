"""Enumerations for icu-accessors type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ArgumentType(StrEnum):
    """Inferred semantic type of a message argument.

    Closed set: every ICU sub-format keyword maps to exactly one member, and
    unknown keywords map to ANY.

    StrEnum provides automatic string conversion: str(ArgumentType.NUMBER) == "number"
    """

    ANY = "any"
    """Un-annotated placeholder: {name}"""

    TEXT = "text"
    """Select argument: {gender, select, ...}"""

    NUMBER = "number"
    """Numeric argument: {n, number}, {n, plural, ...}, {n, selectordinal, ...}"""

    DURATION = "duration"
    """Elapsed time: {elapsed, duration}"""

    DATE = "date"
    """Calendar date: {day, date}"""

    TIME = "time"
    """Wall-clock time: {at, time}"""

    TIME_WITH_OFFSET = "time_with_offset"
    """Wall-clock time with UTC offset: {at, time, ::jmmZ}"""

    DATE_TIME = "date_time"
    """Date and time: {at, date, ::yMdjmm}"""

    DATE_TIME_WITH_OFFSET = "date_time_with_offset"
    """Date and time with UTC offset: {at, date, ::yMdjmmO}"""

    DATE_TIME_WITH_ZONE = "date_time_with_zone"
    """Date and time with zone id: {at, date, ::yMdjmmVV}"""

    ZONE_OFFSET = "zone_offset"
    """Zone offset only: {tz, time, ::ZZZZ}"""

    NOTHING = "nothing"
    """Declared but carries no value; always passed as None."""


class TokenKind(StrEnum):
    """How a pattern references its arguments.

    A pattern uses one kind consistently; patterns without placeholders
    have no kind.
    """

    NAMED = "named"
    """Arguments referenced by identifier: {detective}"""

    NUMBERED = "numbered"
    """Arguments referenced by position: {0}"""


class Visibility(StrEnum):
    """Visibility of a generated accessor."""

    PUBLIC = "public"
    """Exported from the generated module (listed in __all__)."""

    PRIVATE = "private"
    """Generated but not exported."""


class SurfacePolicy(StrEnum):
    """Default visibility policy derived from public-surface declarations.

    Kept explicit so that "no declarations of any kind" (no public.xml, or
    one without entries) and "at least one declaration, even a bare
    <public/>" never collapse into the same empty collection of names.
    """

    NO_DECLARATIONS = "no_declarations"
    """No public declarations of any kind: every resource is public."""

    DECLARED = "declared"
    """At least one declaration exists: only declared strings are public."""


__all__ = [
    "ArgumentType",
    "SurfacePolicy",
    "TokenKind",
    "Visibility",
]
