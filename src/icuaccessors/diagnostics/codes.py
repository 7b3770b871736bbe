"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Pattern syntax errors (tokenizer)
        2000-2999: Merge errors (cross-locale reconciliation)
        3000-3999: Input errors (resource files, public surface)
        4000-4999: Warnings (non-fatal merge outcomes)
    """

    # Pattern syntax errors (1000-1999)
    UNBALANCED_BRACES = 1001
    MIXED_REFERENCE_KINDS = 1002
    CONFLICTING_ARGUMENT_TYPE = 1003
    MALFORMED_ARGUMENT = 1004
    NESTING_DEPTH_EXCEEDED = 1005
    PATTERN_TOO_LONG = 1006

    # Merge errors (2000-2999)
    INCONSISTENT_SHAPE = 2001
    NAME_COLLISION = 2002
    MERGE_FAILED = 2003

    # Input errors (3000-3999)
    PUBLIC_SURFACE_INVALID = 3001
    RESOURCE_FILE_INVALID = 3002
    RESOURCE_DIRECTORY_MISSING = 3003

    # Warnings (4000-4999)
    RESOURCE_DROPPED = 4001
    UNKNOWN_LOCALE_QUALIFIER = 4002


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line/column
                are less than 1 (both are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and build tooling.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location inside the pattern (None for non-syntax errors)
        hint: Suggestion for fixing the error
        resource_name: Resource the diagnostic concerns, when known
        location: File or folder location, when known
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    resource_name: str | None = None
    location: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[UNBALANCED_BRACES]: Unclosed '{' in pattern
              --> line 1, column 7
              = resource: greeting
              = help: Close every '{' with a matching '}' or quote it as '{'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
