"""Resource source model: one message as authored in one locale folder.

Components:
    ResourceName - Locale-independent message key
    ResourceFolder - Locale-source origin (default folder or a qualifier)
    StringResource - Raw entry as read from a strings file
    TokenizedResource - Entry after tokenization (tokens or a captured error)

Tokenization failures are captured on TokenizedResource.parsing_error rather
than raised, so one malformed translation never blocks unrelated resources.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import ClassVar

from icuaccessors.constants import DEFAULT_VALUES_DIR
from icuaccessors.core.babel_compat import get_locale_class, get_unknown_locale_error
from icuaccessors.diagnostics import PatternSyntaxError
from icuaccessors.syntax import Token, try_tokenize

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Type aliases
    "ResourceName",
    # Folders
    "ResourceFolder",
    "parse_locale_qualifier",
    # Entries
    "StringResource",
    "TokenizedResource",
    # Operations
    "tokenize_resource",
    "tokenize_resources",
]

logger = logging.getLogger(__name__)

type ResourceName = str
"""Locale-independent message key (e.g., 'detective_has_suspects')."""


def parse_locale_qualifier(qualifier: str) -> str | None:
    """Resolve an Android folder qualifier to a normalized Babel locale identifier.

    Understands the legacy form ("fr", "fr-rCA", "fr-rCA-night") and the
    BCP 47 form ("b+sr+Latn"). Qualifier segments after the language and
    region (density, night mode, API level) are ignored.

    Args:
        qualifier: Folder qualifier without the "values-" prefix

    Returns:
        Locale identifier such as "fr_CA", or None if the qualifier names no
        locale Babel knows

    Example:
        >>> parse_locale_qualifier("fr-rCA")
        'fr_CA'
        >>> parse_locale_qualifier("b+sr+Latn")
        'sr_Latn'
        >>> parse_locale_qualifier("night") is None
        True
    """
    if qualifier.startswith("b+"):
        identifier = "_".join(part for part in qualifier[2:].split("+") if part)
    else:
        segments = qualifier.split("-")
        language = segments[0]
        if not (2 <= len(language) <= 3 and language.isascii() and language.isalpha()):
            return None
        identifier = language.lower()
        if len(segments) > 1 and len(segments[1]) == 3 and segments[1].startswith("r"):
            identifier = f"{identifier}_{segments[1][1:].upper()}"

    locale_class = get_locale_class()
    unknown_locale_error = get_unknown_locale_error()
    try:
        return str(locale_class.parse(identifier))
    except (unknown_locale_error, ValueError) as e:
        logger.debug("Qualifier %r is not a locale: %s", qualifier, e)
        return None


@dataclass(frozen=True, slots=True)
class ResourceFolder:
    """Locale-source origin of a resource entry.

    Grouping key for merge input. Folders compare and hash by qualifier;
    the locale is derived data.

    Attributes:
        qualifier: Folder qualifier ("" for the default folder, e.g. "fr-rCA")
        locale: Babel-normalized locale identifier, or None

    Example:
        >>> ResourceFolder.DEFAULT.directory_name
        'values'
        >>> ResourceFolder("fr-rCA", "fr_CA").directory_name
        'values-fr-rCA'
    """

    qualifier: str = ""
    locale: str | None = field(default=None, compare=False)

    DEFAULT: ClassVar[ResourceFolder]

    @classmethod
    def from_directory_name(cls, directory_name: str) -> ResourceFolder | None:
        """Build a folder from a res/ subdirectory name.

        Returns:
            The folder for "values" or "values-<qualifier>", None for any
            other directory (e.g. "drawable", "layout")
        """
        if directory_name == DEFAULT_VALUES_DIR:
            return cls.DEFAULT
        prefix = f"{DEFAULT_VALUES_DIR}-"
        if not directory_name.startswith(prefix) or len(directory_name) == len(prefix):
            return None
        qualifier = directory_name[len(prefix) :]
        return cls(qualifier=qualifier, locale=parse_locale_qualifier(qualifier))

    @property
    def is_default(self) -> bool:
        """True for the base folder."""
        return not self.qualifier

    @property
    def directory_name(self) -> str:
        """Directory name under res/."""
        if self.is_default:
            return DEFAULT_VALUES_DIR
        return f"{DEFAULT_VALUES_DIR}-{self.qualifier}"

    @property
    def sort_key(self) -> tuple[int, str]:
        """Merge precedence: default folder first, then qualifiers in sorted order."""
        return (0, "") if self.is_default else (1, self.qualifier)

    def __str__(self) -> str:
        return self.directory_name


ResourceFolder.DEFAULT = ResourceFolder()


@dataclass(frozen=True, slots=True)
class StringResource:
    """Raw string entry as authored in one folder.

    Attributes:
        name: Resource name
        text: ICU message pattern
        description: Translator-facing description (e.g. a preceding XML comment)
    """

    name: ResourceName
    text: str
    description: str | None = None


@dataclass(frozen=True, slots=True)
class TokenizedResource:
    """String entry after tokenization.

    Exactly one of tokens/parsing_error is meaningful: when parsing_error is
    set, tokens is empty.

    Attributes:
        name: Resource name
        description: Translator-facing description, or None
        tokens: Distinct argument tokens in first-occurrence order
        parsing_error: Tokenizer failure for this entry, or None
    """

    name: ResourceName
    description: str | None
    tokens: tuple[Token, ...] = ()
    parsing_error: PatternSyntaxError | None = None

    @property
    def is_parsed(self) -> bool:
        """True if the pattern tokenized successfully."""
        return self.parsing_error is None


def tokenize_resource(
    entry: StringResource,
    *,
    folder: ResourceFolder | None = None,
) -> TokenizedResource:
    """Tokenize one raw entry, capturing any pattern error.

    Args:
        entry: Raw string entry
        folder: Folder the entry came from (for logging only)

    Returns:
        TokenizedResource with tokens, or with parsing_error set

    Example:
        >>> resource = tokenize_resource(StringResource("hi", "Hi {name}"))
        >>> [token.key for token in resource.tokens]
        ['name']
    """
    tokens, error = try_tokenize(entry.text)
    if error is not None:
        logger.debug(
            "Resource %r in %s failed to tokenize: %s",
            entry.name,
            folder if folder is not None else "<unknown folder>",
            error,
        )
    return TokenizedResource(
        name=entry.name,
        description=entry.description,
        tokens=tokens,
        parsing_error=error,
    )


def tokenize_resources(
    entries: Iterable[StringResource],
    *,
    folder: ResourceFolder | None = None,
) -> tuple[TokenizedResource, ...]:
    """Tokenize every entry of one folder, preserving input order."""
    return tuple(tokenize_resource(entry, folder=folder) for entry in entries)
