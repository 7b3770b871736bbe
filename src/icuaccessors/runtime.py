"""Runtime value returned by generated accessors.

A FormattedResource pairs a string resource id with the arguments needed to
format it. Looking the id up in a catalog and formatting it is left to the
caller's localization stack.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

__all__ = ["FormattedResource"]


@dataclass(frozen=True, slots=True)
class FormattedResource:
    """A string resource id plus the arguments required to resolve it.

    Arguments are positional (a tuple, for resources whose numbered
    arguments run 0..n-1) or keyed by argument name or stringified index.

    Example:
        >>> resource = FormattedResource(
        ...     id="detective_has_suspects",
        ...     arguments={"detective": "Poirot", "suspects": 3},
        ... )
        >>> resource.is_positional
        False
    """

    id: str
    arguments: tuple[object, ...] | Mapping[str, object]

    @property
    def is_positional(self) -> bool:
        """True if arguments are passed by position."""
        return isinstance(self.arguments, tuple)
