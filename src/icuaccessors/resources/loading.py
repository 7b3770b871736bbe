"""Resource reader for Android-style res/ directory trees.

Layout:
    res/
        values/strings.xml          default folder
        values/public.xml           public-surface declarations (optional)
        values-fr/strings.xml       qualified folder "fr"
        values-fr-rCA/strings.xml   qualified folder "fr-rCA"

Every *.xml file in a values folder (other than public.xml) is read for
<string name="..."> elements. The element's text content, including the
text of markup children such as <b>, is the pattern. An XML comment directly
preceding a <string> becomes that resource's description:

    <!-- Shown on the case summary screen -->
    <string name="detective_has_suspects">{suspects, plural, ...}</string>

Python 3.13+.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from icuaccessors.constants import PUBLIC_RESOURCES_FILE
from icuaccessors.diagnostics import Diagnostic, ErrorTemplate, ResourceLoadError

from .model import ResourceFolder, StringResource, TokenizedResource, tokenize_resources
from .public import PublicResource, parse_public_surface

__all__ = [
    "LoadedResources",
    "load_resource_directory",
    "parse_string_resources",
]

logger = logging.getLogger(__name__)

_STRING_TAG: str = "string"


@dataclass(frozen=True, slots=True)
class LoadedResources:
    """Everything read from one res/ directory.

    Attributes:
        strings_by_folder: Raw string entries per folder, in file order
        public_resources: Public-surface declarations, or None if no
            public.xml exists
        warnings: Non-fatal diagnostics (unknown locale qualifiers)
    """

    strings_by_folder: Mapping[ResourceFolder, tuple[StringResource, ...]]
    public_resources: tuple[PublicResource, ...] | None = None
    warnings: tuple[Diagnostic, ...] = field(default=())

    def tokenize(self) -> dict[ResourceFolder, tuple[TokenizedResource, ...]]:
        """Tokenize every folder's entries (input shape for merge_all)."""
        return {
            folder: tokenize_resources(entries, folder=folder)
            for folder, entries in self.strings_by_folder.items()
        }


def parse_string_resources(source: str, *, path: str = "") -> tuple[StringResource, ...]:
    """Parse the <string> elements of a strings.xml document.

    Args:
        source: XML text
        path: File path for error messages

    Returns:
        Entries in document order

    Raises:
        ResourceLoadError: If the XML does not parse or a <string> has no name

    Example:
        >>> parse_string_resources(
        ...     '<resources><!-- Greeting --><string name="hi">Hi {name}</string></resources>'
        ... )
        (StringResource(name='hi', text='Hi {name}', description='Greeting'),)
    """
    parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
    try:
        root = ET.fromstring(source, parser=parser)
    except ET.ParseError as e:
        raise ResourceLoadError(
            ErrorTemplate.resource_file_invalid(path, str(e)), path=path
        ) from e

    entries: list[StringResource] = []
    pending_comment: str | None = None
    for element in root:
        if element.tag is ET.Comment:
            pending_comment = (element.text or "").strip() or None
            continue
        if element.tag == _STRING_TAG:
            name = element.get("name")
            if not name:
                raise ResourceLoadError(
                    ErrorTemplate.resource_file_invalid(path, "<string> element has no name"),
                    path=path,
                )
            entries.append(
                StringResource(
                    name=name,
                    text="".join(element.itertext()),
                    description=pending_comment,
                )
            )
        pending_comment = None
    return tuple(entries)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceLoadError(
            ErrorTemplate.resource_file_invalid(str(path), str(e)), path=str(path)
        ) from e


def _load_folder(directory: Path, folder: ResourceFolder) -> tuple[StringResource, ...]:
    """Read every strings file of one folder, rejecting duplicate names."""
    entries: list[StringResource] = []
    seen: dict[str, Path] = {}
    for xml_file in sorted(directory.glob("*.xml")):
        if xml_file.name == PUBLIC_RESOURCES_FILE:
            continue
        for entry in parse_string_resources(_read_text(xml_file), path=str(xml_file)):
            if entry.name in seen:
                detail = f"duplicate string '{entry.name}' (first defined in {seen[entry.name]})"
                raise ResourceLoadError(
                    ErrorTemplate.resource_file_invalid(str(xml_file), detail),
                    path=str(xml_file),
                )
            seen[entry.name] = xml_file
            entries.append(entry)
    logger.debug("Read %d string(s) from %s", len(entries), folder)
    return tuple(entries)


def load_resource_directory(path: str | Path) -> LoadedResources:
    """Read string resources and public declarations from a res/ directory.

    Args:
        path: The res/ directory

    Returns:
        LoadedResources with one entry per values folder that declares strings

    Raises:
        ResourceLoadError: If the directory is missing or a file cannot be parsed
        PublicSurfaceError: If public.xml is malformed
    """
    root = Path(path)
    if not root.is_dir():
        raise ResourceLoadError(
            ErrorTemplate.resource_directory_missing(str(root)), path=str(root)
        )

    strings_by_folder: dict[ResourceFolder, tuple[StringResource, ...]] = {}
    public_resources: list[PublicResource] | None = None
    warnings: list[Diagnostic] = []

    for directory in sorted(p for p in root.iterdir() if p.is_dir()):
        folder = ResourceFolder.from_directory_name(directory.name)
        if folder is None:
            logger.debug("Skipping non-values directory %s", directory.name)
            continue
        if not folder.is_default and folder.locale is None:
            logger.warning("Folder qualifier %r is not a known locale", folder.qualifier)
            warnings.append(ErrorTemplate.unknown_locale_qualifier(folder.qualifier))

        public_file = directory / PUBLIC_RESOURCES_FILE
        if public_file.is_file():
            declarations = parse_public_surface(_read_text(public_file))
            public_resources = [*(public_resources or ()), *declarations]

        entries = _load_folder(directory, folder)
        if entries:
            strings_by_folder[folder] = entries

    return LoadedResources(
        strings_by_folder=strings_by_folder,
        public_resources=tuple(public_resources) if public_resources is not None else None,
        warnings=tuple(warnings),
    )
