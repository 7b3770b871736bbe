"""Merge driver: merge every resource name across every folder.

Two phases:
    1. Index: group entries into an immutable name -> folder -> entry index
       over the union of names in every folder
    2. Merge: call merge_resources() once per name; merges are independent
       and may fan out over a thread pool

Successful merges and MergeErrors accumulate independently, so one broken
resource never hides the rest. Results are sorted by name regardless of
worker count, which keeps repeated runs byte-identical.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from icuaccessors.config import MergeConfig
from icuaccessors.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    MergeError,
    MergeFailedError,
    ResourceNameCollisionError,
)

from .merger import MergedResource, merge_resources, resolve_public_surface

if TYPE_CHECKING:
    from icuaccessors.resources.model import ResourceFolder, ResourceName, TokenizedResource
    from icuaccessors.resources.public import PublicResource, PublicSurface

__all__ = ["MergeReport", "build_index", "merge_all"]

logger = logging.getLogger(__name__)

type ResourceIndex = Mapping[ResourceName, Mapping[ResourceFolder, TokenizedResource]]


@dataclass(frozen=True, slots=True)
class MergeReport:
    """Outcome of merging every resource.

    Unpacks as ``resources, errors = merge_all(...)``.

    Attributes:
        resources: Merged resources sorted by name
        errors: Per-resource merge failures sorted by resource name
        warnings: Non-fatal diagnostics (dropped resources)
    """

    resources: tuple[MergedResource, ...]
    errors: tuple[MergeError, ...] = ()
    warnings: tuple[Diagnostic, ...] = ()

    def __iter__(self) -> Iterator[tuple[MergedResource, ...] | tuple[MergeError, ...]]:
        yield self.resources
        yield self.errors

    @property
    def ok(self) -> bool:
        """True if no resource failed to merge."""
        return not self.errors


def build_index(
    tokenized_by_folder: Mapping[
        ResourceFolder, Mapping[ResourceName, TokenizedResource] | Iterable[TokenizedResource]
    ],
) -> ResourceIndex:
    """Group entries by name, then by folder, into a read-only index.

    When a folder lists the same name twice, the later entry wins.
    """
    index: dict[ResourceName, dict[ResourceFolder, TokenizedResource]] = {}
    for folder, records in tokenized_by_folder.items():
        entries = records.values() if isinstance(records, Mapping) else records
        for entry in entries:
            index.setdefault(entry.name, {})[folder] = entry
    return MappingProxyType(
        {name: MappingProxyType(folders) for name, folders in index.items()}
    )


@dataclass(frozen=True, slots=True)
class _Outcome:
    name: ResourceName
    resource: MergedResource | None = None
    error: MergeError | None = None
    warning: Diagnostic | None = None


def _merge_one(
    name: ResourceName,
    folders: Mapping[ResourceFolder, TokenizedResource],
    surface: PublicSurface,
    config: MergeConfig,
) -> _Outcome:
    try:
        resource = merge_resources(name, folders, surface, config=config)
    except MergeError as e:
        logger.debug("Resource %r failed to merge: %s", name, e)
        return _Outcome(name=name, error=e)
    if resource is None:
        return _Outcome(name=name, warning=ErrorTemplate.resource_dropped(name, len(folders)))
    return _Outcome(name=name, resource=resource)


def _reject_collisions(
    resources: list[MergedResource],
) -> tuple[list[MergedResource], list[MergeError]]:
    """Drop resources whose accessor name is already taken by an earlier one."""
    owners: dict[str, ResourceName] = {}
    kept: list[MergedResource] = []
    errors: list[MergeError] = []
    for resource in resources:
        accessor = resource.accessor_name
        owner = owners.get(accessor)
        if owner is not None:
            errors.append(
                ResourceNameCollisionError(
                    ErrorTemplate.name_collision(resource.name, owner, accessor),
                    resource_name=resource.name,
                )
            )
            continue
        owners[accessor] = resource.name
        kept.append(resource)
    return kept, errors


def merge_all(
    tokenized_by_folder: Mapping[
        ResourceFolder, Mapping[ResourceName, TokenizedResource] | Iterable[TokenizedResource]
    ],
    public_resources: PublicSurface | Iterable[PublicResource] | None,
    *,
    config: MergeConfig | None = None,
) -> MergeReport:
    """Merge every resource declared in any folder.

    Args:
        tokenized_by_folder: Entries per folder, as a name mapping or a plain
            iterable of TokenizedResource
        public_resources: Resolved PublicSurface, raw declarations, or None
        config: Merge configuration (default: MergeConfig())

    Returns:
        MergeReport with resources and errors sorted by name

    Raises:
        MergeFailedError: If config.strict and any resource failed to merge
    """
    config = config or MergeConfig()
    surface = resolve_public_surface(public_resources, resource_type=config.public_resource_type)
    index = build_index(tokenized_by_folder)
    names = sorted(index)

    if config.max_workers > 1 and len(names) > 1:
        with ThreadPoolExecutor(max_workers=config.max_workers) as executor:
            outcomes = list(
                executor.map(lambda name: _merge_one(name, index[name], surface, config), names)
            )
    else:
        outcomes = [_merge_one(name, index[name], surface, config) for name in names]

    merged = [outcome.resource for outcome in outcomes if outcome.resource is not None]
    errors = [outcome.error for outcome in outcomes if outcome.error is not None]
    warnings = tuple(outcome.warning for outcome in outcomes if outcome.warning is not None)

    resources, collisions = _reject_collisions(merged)
    errors = sorted([*errors, *collisions], key=lambda error: error.resource_name)

    logger.info(
        "Merged %d resource(s) from %d folder(s): %d error(s), %d dropped",
        len(resources),
        len(tokenized_by_folder),
        len(errors),
        len(warnings),
    )

    if config.strict and errors:
        raise MergeFailedError(ErrorTemplate.merge_failed(len(errors)), errors=errors)
    return MergeReport(resources=tuple(resources), errors=tuple(errors), warnings=warnings)
