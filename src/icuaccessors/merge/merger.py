"""Cross-locale merger: one canonical definition per resource name.

For one resource name, the merger takes the TokenizedResource from every
folder that declares it and produces a single MergedResource:

    1. Folder precedence: the default folder first, then qualifiers sorted
    2. Description: first non-empty description in precedence order
    3. Shape: tokens of the first successfully parsed entry; every other
       parsed entry must use the same reference kind, the same references
       and the same type per reference (order may differ between locales)
    4. Visibility: resolved from the public surface
    5. Arguments: declaration order for named tokens, ascending index for
       numbered tokens, with the contiguity flag computed from the indices

Entries with parsing errors are ignored as long as one entry parsed. When
none did, the resource is dropped (None) rather than failing the run.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from icuaccessors.config import MergeConfig
from icuaccessors.constants import MAX_NUMBERED_GAP_FILL
from icuaccessors.core.identifiers import generated_identifier, numbered_parameter_name
from icuaccessors.diagnostics import ErrorTemplate, InconsistentShapeError
from icuaccessors.enums import ArgumentType, TokenKind, Visibility
from icuaccessors.resources.model import ResourceFolder, ResourceName, TokenizedResource
from icuaccessors.resources.public import PublicResource, PublicSurface
from icuaccessors.syntax.tokens import NamedToken, NumberedToken, Token, token_kind

__all__ = [
    "Argument",
    "MergedResource",
    "merge_resources",
    "resolve_public_surface",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Argument:
    """One parameter of a generated accessor.

    Attributes:
        key: Lookup key at the data-binding boundary (the name for named
            tokens, the stringified index for numbered tokens)
        name: Python identifier used as the accessor parameter
        type: Argument type agreed on by every locale
    """

    key: str
    name: str
    type: ArgumentType


@dataclass(frozen=True, slots=True)
class MergedResource:
    """Canonical, type-consistent definition of one resource.

    Attributes:
        name: Resource name
        description: Translator-facing description, or None
        arguments: Accessor parameters in stable order
        visibility: Whether the accessor is exported
        has_contiguous_numbered_tokens: True iff arguments are numbered and
            their indices are exactly 0..n-1 (positional construction)
    """

    name: ResourceName
    description: str | None
    arguments: tuple[Argument, ...]
    visibility: Visibility
    has_contiguous_numbered_tokens: bool

    @property
    def accessor_name(self) -> str:
        """Python identifier of the generated accessor function."""
        return generated_identifier(self.name)


def resolve_public_surface(
    public_resources: PublicSurface | Iterable[PublicResource] | None,
    *,
    resource_type: str,
) -> PublicSurface:
    """Accept either a resolved PublicSurface or raw declarations."""
    if isinstance(public_resources, PublicSurface):
        return public_resources
    return PublicSurface.from_declarations(public_resources, resource_type=resource_type)


def _shape(tokens: Sequence[Token]) -> dict[str, ArgumentType]:
    return {token.key: token.type for token in tokens}


def _shape_difference(reference: Sequence[Token], candidate: Sequence[Token]) -> str | None:
    """Describe how candidate's shape differs from reference, or None if it matches."""
    reference_kind = token_kind(reference)
    candidate_kind = token_kind(candidate)
    if reference and candidate and reference_kind is not candidate_kind:
        return f"uses {candidate_kind} arguments, expected {reference_kind}"

    expected = _shape(reference)
    actual = _shape(candidate)
    problems: list[str] = []
    missing = [key for key in expected if key not in actual]
    unexpected = [key for key in actual if key not in expected]
    if missing:
        problems.append("missing " + ", ".join(f"{{{key}}}" for key in missing))
    if unexpected:
        problems.append("unexpected " + ", ".join(f"{{{key}}}" for key in unexpected))
    problems.extend(
        f"{{{key}}} is {actual[key]}, expected {arg_type}"
        for key, arg_type in expected.items()
        if key in actual and actual[key] != arg_type
    )
    return ", ".join(problems) or None


def _argument_names(tokens: Sequence[NamedToken]) -> list[str]:
    """Sanitized parameter names, suffixed where two names sanitize alike."""
    names: list[str] = []
    taken: set[str] = set()
    for token in tokens:
        base = generated_identifier(token.name)
        candidate = base
        suffix = 2
        while candidate in taken:
            candidate = f"{base}_{suffix}"
            suffix += 1
        taken.add(candidate)
        names.append(candidate)
    return names


def _build_arguments(
    name: ResourceName, tokens: Sequence[Token], *, fill_numbered_gaps: bool
) -> tuple[tuple[Argument, ...], bool]:
    """Order canonical tokens into arguments and compute the contiguity flag.

    Gap filling stops at MAX_NUMBERED_GAP_FILL arguments; beyond it the
    resource stays gapped and is passed by index.
    """
    if token_kind(tokens) is not TokenKind.NUMBERED:
        named = [token for token in tokens if isinstance(token, NamedToken)]
        arguments = tuple(
            Argument(key=token.key, name=parameter, type=token.type)
            for token, parameter in zip(named, _argument_names(named), strict=True)
        )
        return arguments, False

    numbered = sorted(
        (token for token in tokens if isinstance(token, NumberedToken)),
        key=lambda token: token.index,
    )
    contiguous = [token.index for token in numbered] == list(range(len(numbered)))
    if not contiguous and fill_numbered_gaps and numbered[-1].index >= MAX_NUMBERED_GAP_FILL:
        logger.warning(
            "Not filling numbered gaps in %r: {%d} exceeds %d arguments",
            name,
            numbered[-1].index,
            MAX_NUMBERED_GAP_FILL,
        )
    elif not contiguous and fill_numbered_gaps:
        by_index = {token.index: token for token in numbered}
        numbered = [
            by_index.get(index, NumberedToken(index=index, type=ArgumentType.NOTHING))
            for index in range(numbered[-1].index + 1)
        ]
        contiguous = True
    arguments = tuple(
        Argument(key=token.key, name=numbered_parameter_name(token.index), type=token.type)
        for token in numbered
    )
    return arguments, contiguous


def merge_resources(
    name: ResourceName,
    tokenized_resources: Mapping[ResourceFolder, TokenizedResource],
    public_resources: PublicSurface | Iterable[PublicResource] | None,
    *,
    config: MergeConfig | None = None,
) -> MergedResource | None:
    """Merge one resource's per-folder entries into a canonical definition.

    Args:
        name: Resource name
        tokenized_resources: Entry per folder that declares the resource
        public_resources: Resolved PublicSurface, raw declarations, or None
            when no declarations exist
        config: Merge configuration (default: MergeConfig())

    Returns:
        The merged resource, or None if no entry tokenized successfully

    Raises:
        InconsistentShapeError: If parsed entries disagree on argument shape

    Example:
        >>> from icuaccessors.resources import StringResource, tokenize_resource
        >>> entry = tokenize_resource(StringResource("greeting", "Hi {name}"))
        >>> merged = merge_resources("greeting", {ResourceFolder.DEFAULT: entry}, None)
        >>> [argument.name for argument in merged.arguments], merged.visibility
        (['name'], <Visibility.PUBLIC: 'public'>)
    """
    config = config or MergeConfig()
    ordered = sorted(tokenized_resources.items(), key=lambda item: item[0].sort_key)
    parsed = [(folder, entry) for folder, entry in ordered if entry.parsing_error is None]
    if not parsed:
        if ordered:
            logger.warning(
                "Dropping resource %r: pattern unparseable in all %d folder(s)",
                name,
                len(ordered),
            )
        return None

    reference_folder, reference = parsed[0]
    conflicts = [
        (folder, difference)
        for folder, entry in parsed[1:]
        if (difference := _shape_difference(reference.tokens, entry.tokens)) is not None
    ]
    if conflicts:
        raise InconsistentShapeError(
            ErrorTemplate.inconsistent_shape(
                name,
                str(reference_folder),
                [(str(folder), difference) for folder, difference in conflicts],
            ),
            resource_name=name,
            folders=[reference_folder.qualifier, *(folder.qualifier for folder, _ in conflicts)],
        )

    description = next((entry.description for _, entry in ordered if entry.description), None)
    surface = resolve_public_surface(public_resources, resource_type=config.public_resource_type)
    arguments, contiguous = _build_arguments(
        name, reference.tokens, fill_numbered_gaps=config.fill_numbered_gaps
    )
    logger.debug(
        "Merged %r from %d folder(s) (%d parsed), %d argument(s)",
        name,
        len(ordered),
        len(parsed),
        len(arguments),
    )
    return MergedResource(
        name=name,
        description=description,
        arguments=arguments,
        visibility=surface.visibility_of(name),
        has_contiguous_numbered_tokens=contiguous,
    )
