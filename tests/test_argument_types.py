"""Tests for syntax/types.py and syntax/tokens.py.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from icuaccessors.enums import ArgumentType, TokenKind
from icuaccessors.syntax import (
    NamedToken,
    NumberedToken,
    combine_types,
    infer_argument_type,
    temporal_type_from_fields,
    token_kind,
)

TEMPORAL_TYPES = [
    ArgumentType.DATE,
    ArgumentType.TIME,
    ArgumentType.DATE_TIME,
    ArgumentType.ZONE_OFFSET,
    ArgumentType.TIME_WITH_OFFSET,
    ArgumentType.DATE_TIME_WITH_OFFSET,
    ArgumentType.DATE_TIME_WITH_ZONE,
]


class TestInferArgumentType:
    """infer_argument_type() keyword table."""

    def test_no_keyword_is_any(self) -> None:
        """Bare placeholder is ANY."""
        assert infer_argument_type(None) is ArgumentType.ANY

    def test_unknown_keyword_is_any(self) -> None:
        """Unknown keywords fall back to ANY."""
        assert infer_argument_type("currency_code") is ArgumentType.ANY

    def test_keyword_case_insensitive(self) -> None:
        """Keywords match regardless of case."""
        assert infer_argument_type("SelectOrdinal") is ArgumentType.NUMBER

    def test_style_ignored_for_non_temporal(self) -> None:
        """Style does not change non-temporal types."""
        assert infer_argument_type("number", "::currency/EUR") is ArgumentType.NUMBER

    def test_skeleton_without_known_fields_keeps_base(self) -> None:
        """A style with no recognizable fields keeps DATE/TIME."""
        assert infer_argument_type("date", "::") is ArgumentType.DATE
        assert infer_argument_type("time", "'literal only'") is ArgumentType.TIME

    def test_time_keyword_with_date_skeleton(self) -> None:
        """The skeleton decides, not the keyword."""
        assert infer_argument_type("time", "::yMd") is ArgumentType.DATE


class TestTemporalFields:
    """temporal_type_from_fields() classification."""

    @pytest.mark.parametrize(
        ("fields", "expected"),
        [
            ("yMMMd", ArgumentType.DATE),
            ("EEEE", ArgumentType.DATE),
            ("jmm", ArgumentType.TIME),
            ("Hms", ArgumentType.TIME),
            ("yMdjmm", ArgumentType.DATE_TIME),
            ("jmmZ", ArgumentType.TIME_WITH_OFFSET),
            ("yMdO", ArgumentType.DATE_TIME_WITH_OFFSET),
            ("yMdjmmXXX", ArgumentType.DATE_TIME_WITH_OFFSET),
            ("jmmz", ArgumentType.DATE_TIME_WITH_ZONE),
            ("VV", ArgumentType.DATE_TIME_WITH_ZONE),
            ("ZZZZ", ArgumentType.ZONE_OFFSET),
        ],
    )
    def test_classification(self, fields: str, expected: ArgumentType) -> None:
        """Field letters map to temporal types."""
        assert temporal_type_from_fields(fields) is expected

    def test_no_fields(self) -> None:
        """No known field letters means no temporal type."""
        assert temporal_type_from_fields("") is None
        assert temporal_type_from_fields("-:/") is None


class TestCombineTypes:
    """combine_types() rules."""

    @given(st.sampled_from(list(ArgumentType)))
    def test_identical_types_agree(self, arg_type: ArgumentType) -> None:
        """A type combined with itself is unchanged."""
        assert combine_types(arg_type, arg_type) is arg_type

    @given(st.sampled_from(list(ArgumentType)))
    def test_any_yields(self, arg_type: ArgumentType) -> None:
        """ANY yields to the other type in either order."""
        assert combine_types(ArgumentType.ANY, arg_type) is arg_type
        assert combine_types(arg_type, ArgumentType.ANY) is arg_type

    @given(st.sampled_from(TEMPORAL_TYPES), st.sampled_from(TEMPORAL_TYPES))
    def test_temporal_types_combine_symmetrically(
        self, first: ArgumentType, second: ArgumentType
    ) -> None:
        """Temporal types always combine, independent of order."""
        combined = combine_types(first, second)

        assert combined is not None
        assert combined is combine_types(second, first)

    def test_date_plus_time(self) -> None:
        """DATE + TIME is DATE_TIME."""
        assert combine_types(ArgumentType.DATE, ArgumentType.TIME) is ArgumentType.DATE_TIME

    def test_time_plus_offset(self) -> None:
        """TIME + ZONE_OFFSET is TIME_WITH_OFFSET."""
        combined = combine_types(ArgumentType.TIME, ArgumentType.ZONE_OFFSET)

        assert combined is ArgumentType.TIME_WITH_OFFSET

    @pytest.mark.parametrize(
        ("first", "second"),
        [
            (ArgumentType.NUMBER, ArgumentType.TEXT),
            (ArgumentType.NUMBER, ArgumentType.DATE),
            (ArgumentType.DURATION, ArgumentType.TIME),
            (ArgumentType.NOTHING, ArgumentType.TEXT),
        ],
    )
    def test_conflicts(self, first: ArgumentType, second: ArgumentType) -> None:
        """Unrelated types conflict."""
        assert combine_types(first, second) is None


class TestTokens:
    """Token value types."""

    def test_keys(self) -> None:
        """Named key is the name; numbered key is the stringified index."""
        assert NamedToken("who", ArgumentType.ANY).key == "who"
        assert NumberedToken(3, ArgumentType.ANY).key == "3"

    def test_negative_index_rejected(self) -> None:
        """Numbered tokens require a non-negative index."""
        with pytest.raises(ValueError, match="must be >= 0"):
            NumberedToken(-1, ArgumentType.ANY)

    def test_token_kind(self) -> None:
        """token_kind() reports the kind of the first token, or None."""
        assert token_kind(()) is None
        assert token_kind((NamedToken("a", ArgumentType.ANY),)) is TokenKind.NAMED
        assert token_kind((NumberedToken(0, ArgumentType.ANY),)) is TokenKind.NUMBERED

    def test_tokens_compare_by_value(self) -> None:
        """Frozen tokens are equal when their fields are."""
        assert NamedToken("a", ArgumentType.TEXT) == NamedToken("a", ArgumentType.TEXT)
        assert NamedToken("a", ArgumentType.TEXT) != NamedToken("a", ArgumentType.ANY)
