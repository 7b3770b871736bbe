"""icu-accessors - typed Python accessors for ICU message string resources.

Tokenizes ICU MessageFormat patterns declared in per-locale string resource
files, reconciles each message across locales into one type-consistent
definition, and renders the result as a module of typed accessor functions.

Public API:
    tokenize - Tokenize one pattern into typed argument tokens
    merge_resources - Merge one resource across locale folders
    merge_all - Merge every resource (returns MergeReport)
    load_resource_directory - Read an Android-style res/ directory
    write_accessors - Render merged resources as Python source
    MergeConfig - Merge run configuration
    FormattedResource - Value returned by generated accessors

Exceptions:
    AccessorError - Base exception class
    PatternSyntaxError - Malformed message patterns
    MergeError - Per-resource merge failures
    MergeFailedError - Strict-mode aggregate failure

Submodules:
    icuaccessors.syntax - Tokenizer, tokens and type inference
    icuaccessors.resources - Resource models, public surface and reader
    icuaccessors.merge - Merger and merge driver
    icuaccessors.codegen - Accessor module writer
    icuaccessors.diagnostics - Error types, templates and formatting
"""

from .codegen import write_accessors
from .config import MergeConfig
from .diagnostics import AccessorError, MergeError, MergeFailedError, PatternSyntaxError
from .enums import ArgumentType, Visibility
from .merge import Argument, MergedResource, MergeReport, merge_all, merge_resources
from .resources import (
    ResourceFolder,
    StringResource,
    TokenizedResource,
    load_resource_directory,
    tokenize_resource,
)
from .runtime import FormattedResource
from .syntax import NamedToken, NumberedToken, tokenize, try_tokenize

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("icu-accessors")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AccessorError",
    "Argument",
    "ArgumentType",
    "FormattedResource",
    "MergeConfig",
    "MergeError",
    "MergeFailedError",
    "MergeReport",
    "MergedResource",
    "NamedToken",
    "NumberedToken",
    "PatternSyntaxError",
    "ResourceFolder",
    "StringResource",
    "TokenizedResource",
    "Visibility",
    "__version__",
    "load_resource_directory",
    "merge_all",
    "merge_resources",
    "tokenize",
    "tokenize_resource",
    "try_tokenize",
    "write_accessors",
]
