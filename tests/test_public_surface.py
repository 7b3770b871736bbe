"""Tests for resources/public.py.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from icuaccessors.diagnostics import DiagnosticCode, PublicSurfaceError
from icuaccessors.enums import SurfacePolicy, Visibility
from icuaccessors.resources import (
    EMPTY_DECLARATION,
    NamedPublicResource,
    PublicSurface,
    parse_public_surface,
)


class TestParsePublicSurface:
    """parse_public_surface() document parsing."""

    def test_named_and_empty_declarations(self) -> None:
        """Named and unnamed <public> elements keep document order."""
        source = """
            <resources>
                <public name="greeting" type="string" />
                <public />
                <public name="brand" type="color" />
            </resources>
        """

        assert parse_public_surface(source) == (
            NamedPublicResource("greeting", "string"),
            EMPTY_DECLARATION,
            NamedPublicResource("brand", "color"),
        )

    def test_no_declarations(self) -> None:
        """An empty <resources> element has no declarations."""
        assert parse_public_surface("<resources/>") == ()

    def test_other_elements_ignored(self) -> None:
        """Only <public> elements are declarations."""
        source = '<resources><string name="x">x</string></resources>'

        assert parse_public_surface(source) == ()

    def test_malformed_xml(self) -> None:
        """Unparseable XML is a hard input error."""
        with pytest.raises(PublicSurfaceError) as exc_info:
            parse_public_surface("<resources><public")

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.PUBLIC_SURFACE_INVALID

    def test_named_without_type(self) -> None:
        """A named declaration without a type is rejected."""
        with pytest.raises(PublicSurfaceError, match="has no type"):
            parse_public_surface('<resources><public name="x"/></resources>')


class TestPublicSurfacePolicy:
    """PublicSurface default-visibility policy."""

    @pytest.mark.parametrize("declarations", [None, (), []])
    def test_no_declarations_is_open(self, declarations: tuple[()] | list[object] | None) -> None:
        """No declarations at all means every resource is public."""
        surface = PublicSurface.from_declarations(declarations)  # type: ignore[arg-type]

        assert surface.policy is SurfacePolicy.NO_DECLARATIONS
        assert surface.visibility_of("anything") is Visibility.PUBLIC

    def test_empty_public_file_is_open(self) -> None:
        """A public.xml without entries behaves like no public.xml at all."""
        surface = PublicSurface.from_declarations(parse_public_surface("<resources/>"))

        assert surface.policy is SurfacePolicy.NO_DECLARATIONS
        assert surface.visibility_of("anything") is Visibility.PUBLIC

    def test_empty_declaration_alone_closes_surface(self) -> None:

        """EMPTY_DECLARATION alone means everything is private."""
        surface = PublicSurface.from_declarations([EMPTY_DECLARATION])

        assert surface.policy is SurfacePolicy.DECLARED
        assert surface.public_names == frozenset()
        assert surface.visibility_of("test") is Visibility.PRIVATE

    def test_declared_string_is_public(self) -> None:
        """Names declared with type "string" are public."""
        surface = PublicSurface.from_declarations([NamedPublicResource("test", "string")])

        assert surface.visibility_of("test") is Visibility.PUBLIC
        assert surface.visibility_of("other") is Visibility.PRIVATE

    def test_other_category_is_private(self) -> None:
        """A declaration with a non-string category confers nothing."""
        surface = PublicSurface.from_declarations([NamedPublicResource("test", "color")])

        assert surface.visibility_of("test") is Visibility.PRIVATE

    def test_custom_resource_type(self) -> None:
        """The category conferring visibility is configurable."""
        surface = PublicSurface.from_declarations(
            [NamedPublicResource("test", "plurals")], resource_type="plurals"
        )

        assert surface.visibility_of("test") is Visibility.PUBLIC

    @given(st.lists(st.from_regex(r"[a-z_]{1,8}", fullmatch=True), min_size=1, unique=True))
    def test_declared_names_are_exactly_public(self, names: list[str]) -> None:
        """Under DECLARED, visibility is membership in the declared names."""
        declared = names[: len(names) // 2 + 1]
        surface = PublicSurface.from_declarations(
            [NamedPublicResource(name, "string") for name in declared]
        )

        for name in names:
            expected = Visibility.PUBLIC if name in declared else Visibility.PRIVATE
            assert surface.visibility_of(name) is expected
