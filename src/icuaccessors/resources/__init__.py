"""Resource models, public-surface declarations and the res/ reader.

Python 3.13+.
"""

from .loading import LoadedResources, load_resource_directory, parse_string_resources
from .model import (
    ResourceFolder,
    ResourceName,
    StringResource,
    TokenizedResource,
    parse_locale_qualifier,
    tokenize_resource,
    tokenize_resources,
)
from .public import (
    EMPTY_DECLARATION,
    EmptyDeclaration,
    NamedPublicResource,
    PublicResource,
    PublicSurface,
    parse_public_surface,
)

__all__ = [
    "EMPTY_DECLARATION",
    "EmptyDeclaration",
    "LoadedResources",
    "NamedPublicResource",
    "PublicResource",
    "PublicSurface",
    "ResourceFolder",
    "ResourceName",
    "StringResource",
    "TokenizedResource",
    "load_resource_directory",
    "parse_locale_qualifier",
    "parse_public_surface",
    "parse_string_resources",
    "tokenize_resource",
    "tokenize_resources",
]
