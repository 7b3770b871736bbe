"""Exception hierarchy with structured diagnostics.

All exceptions optionally carry a Diagnostic object for rich error output.

Hierarchy:
    AccessorError
    ├─ PatternSyntaxError
    │  ├─ UnbalancedBracesError
    │  ├─ MixedReferenceKindsError
    │  ├─ ConflictingArgumentTypeError
    │  ├─ MalformedArgumentError
    │  └─ NestingDepthExceededError
    ├─ MergeError
    │  ├─ InconsistentShapeError
    │  └─ ResourceNameCollisionError
    ├─ MergeFailedError
    ├─ PublicSurfaceError
    └─ ResourceLoadError

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = [
    "AccessorError",
    "ConflictingArgumentTypeError",
    "InconsistentShapeError",
    "MalformedArgumentError",
    "MergeError",
    "MergeFailedError",
    "MixedReferenceKindsError",
    "NestingDepthExceededError",
    "PatternSyntaxError",
    "PublicSurfaceError",
    "ResourceLoadError",
    "ResourceNameCollisionError",
    "UnbalancedBracesError",
]


class AccessorError(Exception):
    """Base exception for all icu-accessors errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize AccessorError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class PatternSyntaxError(AccessorError):
    """Malformed ICU message pattern.

    Raised by the tokenizer. The resource model captures it per entry so one
    broken translation never aborts the whole run.

    Attributes:
        pattern: The pattern text that failed to tokenize
    """

    def __init__(self, message: str | Diagnostic, *, pattern: str = "") -> None:
        """Initialize PatternSyntaxError.

        Args:
            message: Error message string OR Diagnostic object
            pattern: The pattern text that failed to tokenize
        """
        super().__init__(message)
        self.pattern = pattern


class UnbalancedBracesError(PatternSyntaxError):
    """A '{' was never closed, or a '}' closed nothing."""


class MixedReferenceKindsError(PatternSyntaxError):
    """Named and numbered references appear in the same pattern.

    Example:
        "{name} has {0} items"
    """


class ConflictingArgumentTypeError(PatternSyntaxError):
    """The same reference appears under sub-formats with incompatible types.

    Example:
        "{n, plural, other {#}} {n, select, other {x}}"
    """


class MalformedArgumentError(PatternSyntaxError):
    """Placeholder content is not a valid argument.

    Covers empty references, invalid identifiers, and complex sub-formats
    without variants.
    """


class NestingDepthExceededError(PatternSyntaxError):
    """Sub-message nesting exceeded MAX_DEPTH."""


class MergeError(AccessorError):
    """A resource could not be reconciled across locale sources.

    Fatal for that resource only; other resources continue to merge.

    Attributes:
        resource_name: Resource that failed to merge
    """

    def __init__(self, message: str | Diagnostic, *, resource_name: str) -> None:
        """Initialize MergeError.

        Args:
            message: Error message string OR Diagnostic object
            resource_name: Resource that failed to merge
        """
        super().__init__(message)
        self.resource_name = resource_name


class InconsistentShapeError(MergeError):
    """Locale sources disagree on the argument shape of a resource.

    Attributes:
        folders: Qualifiers of the reference folder followed by every
            conflicting folder ("" for the default folder)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        resource_name: str,
        folders: Sequence[str],
    ) -> None:
        """Initialize InconsistentShapeError.

        Args:
            message: Error message string OR Diagnostic object
            resource_name: Resource that failed to merge
            folders: Reference folder first, then the conflicting folders
        """
        super().__init__(message, resource_name=resource_name)
        self.folders = tuple(folders)


class ResourceNameCollisionError(MergeError):
    """Two resources sanitize to the same accessor name."""


class MergeFailedError(AccessorError):
    """Raised in strict mode when any resource failed to merge.

    Attributes:
        errors: Every MergeError collected during the run
    """

    def __init__(self, message: str | Diagnostic, *, errors: Sequence[MergeError]) -> None:
        """Initialize MergeFailedError.

        Args:
            message: Error message string OR Diagnostic object
            errors: Every MergeError collected during the run
        """
        super().__init__(message)
        self.errors = tuple(errors)


class PublicSurfaceError(AccessorError):
    """Public-surface declarations could not be parsed.

    Aborts the run: visibility of every resource depends on it.
    """


class ResourceLoadError(AccessorError):
    """A resource file or directory could not be read or parsed.

    Attributes:
        path: Path of the offending file or directory
    """

    def __init__(self, message: str | Diagnostic, *, path: str = "") -> None:
        """Initialize ResourceLoadError.

        Args:
            message: Error message string OR Diagnostic object
            path: Path of the offending file or directory
        """
        super().__init__(message)
        self.path = path
