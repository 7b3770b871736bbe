"""Cross-locale merging of tokenized resources.

Python 3.13+.
"""

from .driver import MergeReport, build_index, merge_all
from .merger import Argument, MergedResource, merge_resources, resolve_public_surface

__all__ = [
    "Argument",
    "MergeReport",
    "MergedResource",
    "build_index",
    "merge_all",
    "merge_resources",
    "resolve_public_surface",
]
