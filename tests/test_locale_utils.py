"""Tests for locale_utils.py: code sanitization and Babel locale caching.

Python 3.13+.
"""

import pytest
from babel import Locale as BabelLocale
from babel.core import UnknownLocaleError
from hypothesis import given
from hypothesis import strategies as st

from localekit.constants import FORBIDDEN_CODE_CHARS
from localekit.locale_utils import (
    clear_locale_cache,
    get_babel_locale,
    normalize_locale,
    sanitize_code,
)


class TestSanitizeCode:
    """sanitize_code strips path separators and statement terminators."""

    def test_plain_code_unchanged(self) -> None:
        assert sanitize_code("fr_CA") == "fr_CA"

    def test_slashes_removed(self) -> None:
        """Path traversal attempt loses its separators."""
        assert sanitize_code("../../etc/passwd") == "....etcpasswd"

    def test_backslashes_removed(self) -> None:
        assert sanitize_code("..\\..\\en") == "....en"

    def test_semicolon_removed(self) -> None:
        assert sanitize_code("en;rm") == "enrm"

    def test_only_forbidden_characters_becomes_empty(self) -> None:
        assert sanitize_code("/;\\") == ""

    @given(st.text())
    def test_result_never_contains_forbidden_characters(self, code: str) -> None:
        """PROPERTY: no forbidden character survives sanitization."""
        assert not FORBIDDEN_CODE_CHARS & set(sanitize_code(code))

    @given(st.text())
    def test_idempotent(self, code: str) -> None:
        """PROPERTY: sanitizing twice equals sanitizing once."""
        once = sanitize_code(code)
        assert sanitize_code(once) == once


class TestNormalizeLocale:
    """normalize_locale converts BCP-47 hyphens to POSIX underscores."""

    def test_bcp47_to_posix(self) -> None:
        assert normalize_locale("en-US") == "en_US"

    def test_already_normalized(self) -> None:
        assert normalize_locale("fr_CA") == "fr_CA"

    def test_multiple_hyphens(self) -> None:
        assert normalize_locale("zh-Hans-CN") == "zh_Hans_CN"


class TestGetBabelLocale:
    """get_babel_locale parses and caches Babel locales."""

    def test_posix_format(self) -> None:
        locale = get_babel_locale("de_DE")
        assert isinstance(locale, BabelLocale)
        assert locale.language == "de"
        assert locale.territory == "DE"

    def test_bcp47_format(self) -> None:
        locale = get_babel_locale("pt-BR")
        assert locale.language == "pt"
        assert locale.territory == "BR"

    def test_caching(self) -> None:
        """Repeated calls return the same object."""
        assert get_babel_locale("ru") is get_babel_locale("ru")

    def test_unknown_locale_raises(self) -> None:
        with pytest.raises((UnknownLocaleError, ValueError)):
            get_babel_locale("xx_unknown_locale")

    def test_clear_locale_cache(self) -> None:
        get_babel_locale("pl")
        assert get_babel_locale.cache_info().currsize > 0
        clear_locale_cache()
        assert get_babel_locale.cache_info().currsize == 0
