"""Tests for core/babel_compat.py lazy Babel access.

Python 3.13+.
"""

from __future__ import annotations

import pytest

from icuaccessors.core import babel_compat
from icuaccessors.core.babel_compat import (
    BabelImportError,
    get_locale_class,
    get_unknown_locale_error,
    is_babel_available,
    require_babel,
)


class TestBabelAvailable:
    """Babel is a required dependency, so the accessors resolve."""

    def test_available(self) -> None:
        """is_babel_available() reports the installed package."""
        assert is_babel_available()

    def test_locale_class(self) -> None:
        """get_locale_class() returns babel.Locale."""
        locale_class = get_locale_class()

        assert str(locale_class.parse("fr_CA")) == "fr_CA"

    def test_unknown_locale_error(self) -> None:
        """get_unknown_locale_error() returns the class Locale.parse raises."""
        with pytest.raises(get_unknown_locale_error()):
            get_locale_class().parse("zz")


class TestBabelMissing:
    """Behavior when the availability check fails."""

    def test_require_babel_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """require_babel() names the feature that needed Babel."""
        monkeypatch.setattr(babel_compat, "_check_babel_available", lambda: False)

        with pytest.raises(BabelImportError) as exc_info:
            require_babel("locale qualifiers")

        assert exc_info.value.feature == "locale qualifiers"
        assert "pip install Babel" in str(exc_info.value)
        assert isinstance(exc_info.value, ImportError)
