"""Merge configuration.

Provides a single frozen dataclass that encapsulates every knob of a merge
run, so merge_all() and the CLI share one typed object instead of a growing
list of keyword arguments.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from icuaccessors.constants import STRING_RESOURCE_TYPE

__all__ = ["MergeConfig"]


@dataclass(frozen=True, slots=True)
class MergeConfig:
    """Immutable configuration for merging resources across locales.

    All fields have sensible defaults; ``MergeConfig()`` reproduces the
    lenient behavior where merge errors are collected and returned.

    Attributes:
        strict: If True, merge_all() raises MergeFailedError when any
            resource failed to merge (default: False).
        fill_numbered_gaps: If True, numbered arguments with missing indices
            ({0} and {2} without {1}) get NOTHING-typed arguments for the
            gaps, so the emitter can still construct them positionally
            (default: False).
        max_workers: Number of threads merging resources in parallel
            (default: 1, merge sequentially). Output is identical for any value.
        public_resource_type: Public-surface category that confers public
            visibility (default: "string").

    Example:
        >>> config = MergeConfig(strict=True, max_workers=4)
        >>> config.fill_numbered_gaps
        False
    """

    strict: bool = False
    fill_numbered_gaps: bool = False
    max_workers: int = 1
    public_resource_type: str = STRING_RESOURCE_TYPE

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_workers is not positive or
                public_resource_type is empty.
        """
        if self.max_workers <= 0:
            msg = "max_workers must be positive"
            raise ValueError(msg)
        if not self.public_resource_type:
            msg = "public_resource_type must not be empty"
            raise ValueError(msg)
