"""Shared constants for icu-accessors.

This module provides centralized configuration constants used across the
syntax, resources, merge and codegen packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for nested sub-message scanning
- Input limits: DoS prevention via size constraints
- Resource layout: Directory and file naming for Android-style res/ trees
- Code generation: Header text and naming for emitted modules

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Input limits
    "MAX_PATTERN_LENGTH",
    "MAX_IDENTIFIER_LENGTH",
    "MAX_NUMBERED_GAP_FILL",
    # Resource layout
    "DEFAULT_VALUES_DIR",
    "PUBLIC_RESOURCES_FILE",
    "STRING_RESOURCE_TYPE",
    # Code generation
    "GENERATED_HEADER",
    "NUMBERED_ARGUMENT_PREFIX",
    "RUNTIME_MODULE_ALIAS",
    "RESERVED_GENERATED_NAMES",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting of sub-messages inside plural/select/choice arguments.
# Real-world patterns rarely exceed 3 levels; 100 levels is adversarial input.
MAX_DEPTH: int = 100

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum pattern length in characters (1 MB of text).
MAX_PATTERN_LENGTH: int = 1024 * 1024

# Maximum length of a sanitized accessor or parameter identifier.
MAX_IDENTIFIER_LENGTH: int = 256

# Highest numbered-argument count that gap filling will produce. A stray
# reference such as {3000000} leaves the resource gapped instead.
MAX_NUMBERED_GAP_FILL: int = 256

# ============================================================================
# RESOURCE LAYOUT
# ============================================================================

# Base directory name for default (unqualified) resources: res/values/
DEFAULT_VALUES_DIR: str = "values"

# File holding the public-surface declarations: res/values/public.xml
PUBLIC_RESOURCES_FILE: str = "public.xml"

# Resource category that confers public visibility on string accessors.
STRING_RESOURCE_TYPE: str = "string"

# ============================================================================
# CODE GENERATION
# ============================================================================

GENERATED_HEADER: str = (
    "# This code was generated by icu-accessors.\n"
    "# Do not edit this file directly. Instead, edit the string resources in the source file.\n"
)

# Numbered tokens {0}, {1} become parameters arg0, arg1.
NUMBERED_ARGUMENT_PREFIX: str = "arg"

# Name the generated module binds the runtime module to.
RUNTIME_MODULE_ALIAS: str = "_runtime"

# Module-level names every generated module may bind itself. Accessors and
# parameters with these names get a "_" suffix.
RESERVED_GENERATED_NAMES: frozenset[str] = frozenset(
    {RUNTIME_MODULE_ALIAS, "annotations", "datetime"}
)
