"""Public-surface model: which resources are intentionally exposed.

The public surface is declared in a public.xml document:

    <resources>
        <public name="detective_has_suspects" type="string" />
        <public />
    </resources>

A named <public> element declares one resource and its category; a bare
<public/> is an empty declaration meaning "the surface is closed; nothing is
public by default".

The default-visibility policy is modelled explicitly (SurfacePolicy) so that
"no declarations at all" (everything public) and "declarations present but
none match" (everything private) can never be confused by an emptiness
check.

Python 3.13+.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from icuaccessors.constants import STRING_RESOURCE_TYPE
from icuaccessors.diagnostics import ErrorTemplate, PublicSurfaceError
from icuaccessors.enums import SurfacePolicy, Visibility

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Declarations
    "NamedPublicResource",
    "EmptyDeclaration",
    "EMPTY_DECLARATION",
    "PublicResource",
    # Policy
    "PublicSurface",
    # Parsing
    "parse_public_surface",
]


@dataclass(frozen=True, slots=True)
class NamedPublicResource:
    """Explicit public declaration of one resource.

    Attributes:
        name: Declared resource name
        type: Declared resource category ("string", "color", ...)
    """

    name: str
    type: str


class EmptyDeclaration(Enum):
    """Sentinel type for a <public/> element without a name."""

    EMPTY_DECLARATION = "empty_declaration"

    def __repr__(self) -> str:
        return "EMPTY_DECLARATION"


EMPTY_DECLARATION = EmptyDeclaration.EMPTY_DECLARATION

type PublicResource = NamedPublicResource | EmptyDeclaration
"""One public-surface declaration."""


@dataclass(frozen=True, slots=True)
class PublicSurface:
    """Resolved default-visibility policy.

    Attributes:
        policy: NO_DECLARATIONS (everything public) or DECLARED
        public_names: Names declared public under the DECLARED policy

    Example:
        >>> surface = PublicSurface.from_declarations(
        ...     [NamedPublicResource("test", "string")]
        ... )
        >>> surface.visibility_of("test"), surface.visibility_of("other")
        (<Visibility.PUBLIC: 'public'>, <Visibility.PRIVATE: 'private'>)
    """

    policy: SurfacePolicy
    public_names: frozenset[str] = frozenset()

    NO_DECLARATIONS: ClassVar[PublicSurface]

    @classmethod
    def from_declarations(
        cls,
        declarations: Iterable[PublicResource] | None,
        *,
        resource_type: str = STRING_RESOURCE_TYPE,
    ) -> PublicSurface:
        """Build the policy from parsed declarations.

        Args:
            declarations: Parsed declarations, or None when no public.xml exists
            resource_type: Category that confers public visibility (default: "string")

        Returns:
            NO_DECLARATIONS if there are no declarations of any kind,
            otherwise DECLARED with the names declared under resource_type
        """
        items = tuple(declarations) if declarations is not None else ()
        if not items:
            return cls.NO_DECLARATIONS
        names = frozenset(
            item.name
            for item in items
            if isinstance(item, NamedPublicResource) and item.type == resource_type
        )
        return cls(policy=SurfacePolicy.DECLARED, public_names=names)

    def visibility_of(self, name: str) -> Visibility:
        """Resolve the visibility of one resource."""
        if self.policy is SurfacePolicy.NO_DECLARATIONS or name in self.public_names:
            return Visibility.PUBLIC
        return Visibility.PRIVATE


PublicSurface.NO_DECLARATIONS = PublicSurface(policy=SurfacePolicy.NO_DECLARATIONS)


def parse_public_surface(source: str) -> tuple[PublicResource, ...]:
    """Parse a public.xml document into declarations in document order.

    Args:
        source: XML text

    Returns:
        One NamedPublicResource per named <public> element and
        EMPTY_DECLARATION per unnamed one

    Raises:
        PublicSurfaceError: If the XML does not parse, or a named element
            has no type

    Example:
        >>> parse_public_surface('<resources><public name="a" type="string"/></resources>')
        (NamedPublicResource(name='a', type='string'),)
    """
    try:
        root = ET.fromstring(source)
    except ET.ParseError as e:
        raise PublicSurfaceError(ErrorTemplate.public_surface_invalid(str(e))) from e

    declarations: list[PublicResource] = []
    for element in root.iter("public"):
        name = element.get("name")
        if not name:
            declarations.append(EMPTY_DECLARATION)
            continue
        resource_type = element.get("type")
        if not resource_type:
            raise PublicSurfaceError(
                ErrorTemplate.public_surface_invalid(f"<public name=\"{name}\"> has no type")
            )
        declarations.append(NamedPublicResource(name=name, type=resource_type))
    return tuple(declarations)
