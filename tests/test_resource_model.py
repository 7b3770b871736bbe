"""Tests for resources/model.py.

Python 3.13+.
"""

from __future__ import annotations

import logging

import pytest

from icuaccessors.diagnostics import UnbalancedBracesError
from icuaccessors.enums import ArgumentType
from icuaccessors.resources import (
    ResourceFolder,
    StringResource,
    parse_locale_qualifier,
    tokenize_resource,
    tokenize_resources,
)
from icuaccessors.syntax import NamedToken


class TestResourceFolder:
    """Folder identity, precedence and naming."""

    def test_default_folder(self) -> None:
        """The default folder has no qualifier."""
        assert ResourceFolder.DEFAULT.is_default
        assert ResourceFolder.DEFAULT.directory_name == "values"
        assert str(ResourceFolder.DEFAULT) == "values"

    def test_from_directory_name(self) -> None:
        """values-<qualifier> directories become qualified folders."""
        folder = ResourceFolder.from_directory_name("values-fr-rCA")

        assert folder is not None
        assert folder.qualifier == "fr-rCA"
        assert folder.locale == "fr_CA"
        assert folder.directory_name == "values-fr-rCA"

    def test_from_directory_name_default(self) -> None:
        """The values directory is the default folder."""
        assert ResourceFolder.from_directory_name("values") is ResourceFolder.DEFAULT

    @pytest.mark.parametrize("name", ["drawable", "layout-land", "values-", "valuesfr"])
    def test_non_values_directories(self, name: str) -> None:
        """Other res/ directories are not folders."""
        assert ResourceFolder.from_directory_name(name) is None

    def test_equality_ignores_locale(self) -> None:
        """Folders compare and hash by qualifier."""
        assert ResourceFolder("fr", "fr") == ResourceFolder("fr")
        assert len({ResourceFolder("fr", "fr"), ResourceFolder("fr")}) == 1

    def test_sort_key_puts_default_first(self) -> None:
        """Default first, then qualifiers in sorted order."""
        folders = [ResourceFolder("fr"), ResourceFolder.DEFAULT, ResourceFolder("de")]

        ordered = sorted(folders, key=lambda folder: folder.sort_key)

        assert ordered == [ResourceFolder.DEFAULT, ResourceFolder("de"), ResourceFolder("fr")]


class TestParseLocaleQualifier:
    """Android qualifier to Babel locale normalization."""

    @pytest.mark.parametrize(
        ("qualifier", "expected"),
        [
            ("fr", "fr"),
            ("fr-rCA", "fr_CA"),
            ("pt-rBR-night", "pt_BR"),
            ("b+sr+Latn", "sr_Latn"),
        ],
    )
    def test_known_locales(self, qualifier: str, expected: str) -> None:
        """Legacy and BCP 47 qualifiers normalize to Babel identifiers."""
        assert parse_locale_qualifier(qualifier) == expected

    @pytest.mark.parametrize("qualifier", ["night", "v21", "sw600dp", "zz"])
    def test_not_locales(self, qualifier: str) -> None:
        """Non-locale qualifiers and unknown languages resolve to None."""
        assert parse_locale_qualifier(qualifier) is None


class TestTokenizeResource:
    """Tokenizing raw entries."""

    def test_success(self) -> None:
        """Tokens are recorded and no error is set."""
        resource = tokenize_resource(StringResource("hi", "Hi {name}", "Greeting"))

        assert resource.name == "hi"
        assert resource.description == "Greeting"
        assert resource.tokens == (NamedToken("name", ArgumentType.ANY),)
        assert resource.is_parsed

    def test_failure_is_captured(self, caplog: pytest.LogCaptureFixture) -> None:
        """Tokenizer errors are captured on the record and logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="icuaccessors.resources.model"):
            resource = tokenize_resource(
                StringResource("broken", "{oops"), folder=ResourceFolder("fr")
            )

        assert resource.tokens == ()
        assert isinstance(resource.parsing_error, UnbalancedBracesError)
        assert not resource.is_parsed
        assert "values-fr" in caplog.text

    def test_tokenize_resources_keeps_order(self) -> None:
        """One failing entry does not affect the others."""
        entries = [
            StringResource("a", "{x}"),
            StringResource("b", "{broken"),
            StringResource("c", "plain"),
        ]

        resources = tokenize_resources(entries)

        assert [resource.name for resource in resources] == ["a", "b", "c"]
        assert [resource.is_parsed for resource in resources] == [True, False, True]
