"""Tests for core/identifiers.py.

Python 3.13+.
"""

from __future__ import annotations

import keyword

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from icuaccessors.constants import MAX_IDENTIFIER_LENGTH, RESERVED_GENERATED_NAMES
from icuaccessors.core import (
    generated_identifier,
    is_argument_name,
    is_argument_number,
    numbered_parameter_name,
    to_python_identifier,
)


class TestArgumentNumbers:
    """ICU argument numbers."""

    @pytest.mark.parametrize("reference", ["0", "1", "10", "123"])
    def test_valid(self, reference: str) -> None:
        """Non-negative integers without leading zeros are valid."""
        assert is_argument_number(reference)

    @pytest.mark.parametrize("reference", ["", "01", "-1", "1.5", "١", "x"])
    def test_invalid(self, reference: str) -> None:
        """Leading zeros, signs, decimals and non-ASCII digits are invalid."""
        assert not is_argument_number(reference)

    @given(st.integers(min_value=0, max_value=10**6))
    def test_every_non_negative_integer(self, number: int) -> None:
        """str(n) is always a valid argument number."""
        assert is_argument_number(str(number))


class TestArgumentNames:
    """ICU argument names."""

    @pytest.mark.parametrize("reference", ["name", "first-name", "first_name", "prénom", "x1"])
    def test_valid(self, reference: str) -> None:
        """Identifiers, hyphens and non-ASCII letters are valid."""
        assert is_argument_name(reference)

    @pytest.mark.parametrize("reference", ["", "1st", "has space", "a{b", "a,b", "a'b", "a#b"])
    def test_invalid(self, reference: str) -> None:
        """Leading digits, whitespace and syntax characters are invalid."""
        assert not is_argument_name(reference)


class TestPythonIdentifiers:
    """to_python_identifier() sanitization."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("detective", "detective"),
            ("first-name", "first_name"),
            ("screen.title", "screen_title"),
            ("1st_place", "_1st_place"),
            ("class", "class_"),
            ("None", "None_"),
            ("match", "match"),
            ("", "_"),
        ],
    )
    def test_examples(self, name: str, expected: str) -> None:
        """Invalid characters, leading digits and keywords are fixed up."""
        assert to_python_identifier(name) == expected

    @given(st.text(min_size=1, max_size=40))
    def test_result_is_identifier(self, name: str) -> None:
        """Any input sanitizes to a valid, non-keyword identifier."""
        result = to_python_identifier(name)
        event(f"changed={result != name}")

        assert result.isidentifier()
        assert not keyword.iskeyword(result)

    def test_truncated(self) -> None:
        """Very long names are truncated."""
        assert len(to_python_identifier("a" * (MAX_IDENTIFIER_LENGTH + 10))) == MAX_IDENTIFIER_LENGTH

    def test_numbered_parameter_name(self) -> None:
        """Numbered arguments become argN parameters."""
        assert numbered_parameter_name(0) == "arg0"
        assert numbered_parameter_name(12) == "arg12"


class TestGeneratedIdentifiers:
    """generated_identifier() keeps clear of names generated modules bind."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("welcome.title", "welcome_title"),
            ("datetime", "datetime_"),
            ("_runtime", "_runtime_"),
            ("annotations", "annotations_"),
            ("__all__", "__all_"),
            ("__name__", "__name_"),
            ("FormattedResource", "FormattedResource"),
            ("class", "class_"),
        ],
    )
    def test_examples(self, name: str, expected: str) -> None:
        """Reserved and dunder names get a "_" suffix, others sanitize as usual."""
        assert generated_identifier(name) == expected

    @given(st.text(min_size=1, max_size=40))
    def test_never_reserved(self, name: str) -> None:
        """No input maps onto a reserved or dunder name."""
        result = generated_identifier(name)

        assert result.isidentifier()
        assert not keyword.iskeyword(result)
        assert result not in RESERVED_GENERATED_NAMES
        assert not (len(result) > 4 and result.startswith("__") and result.endswith("__"))
