"""Diagnostic system for icu-accessors errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    AccessorError,
    ConflictingArgumentTypeError,
    InconsistentShapeError,
    MalformedArgumentError,
    MergeError,
    MergeFailedError,
    MixedReferenceKindsError,
    NestingDepthExceededError,
    PatternSyntaxError,
    PublicSurfaceError,
    ResourceLoadError,
    ResourceNameCollisionError,
    UnbalancedBracesError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "AccessorError",
    "ConflictingArgumentTypeError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InconsistentShapeError",
    "MalformedArgumentError",
    "MergeError",
    "MergeFailedError",
    "MixedReferenceKindsError",
    "NestingDepthExceededError",
    "OutputFormat",
    "PatternSyntaxError",
    "PublicSurfaceError",
    "ResourceLoadError",
    "ResourceNameCollisionError",
    "SourceSpan",
    "UnbalancedBracesError",
]
