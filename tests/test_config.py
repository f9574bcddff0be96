"""Tests for LocaleConfig.

Python 3.13+.
"""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from localekit import BUNDLED_LOCALES_DIR, LocaleConfig


class TestLocaleConfig:
    """Defaults, validation and environment loading."""

    def test_defaults(self) -> None:
        config = LocaleConfig()
        assert config.default_locale == "en"
        assert config.locales_dir == BUNDLED_LOCALES_DIR

    def test_default_locale_sanitized(self) -> None:
        assert LocaleConfig(default_locale="r/u;").default_locale == "ru"

    @pytest.mark.parametrize("code", ["", "/", ";\\"])
    def test_empty_default_locale_rejected(self, code: str) -> None:
        with pytest.raises(ValueError, match="default_locale"):
            LocaleConfig(default_locale=code)

    def test_locales_dir_coerced_to_path(self) -> None:
        config = LocaleConfig(locales_dir="some/dir")  # type: ignore[arg-type]
        assert config.locales_dir == Path("some/dir")

    def test_frozen(self) -> None:
        config = LocaleConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.default_locale = "ru"  # type: ignore[misc]

    def test_from_env_mapping(self) -> None:
        config = LocaleConfig.from_env(
            {"LOCALEKIT_DEFAULT_LOCALE": "de", "LOCALEKIT_LOCALES_DIR": "/srv/locales"}
        )
        assert config.default_locale == "de"
        assert config.locales_dir == Path("/srv/locales")

    def test_from_env_empty_values_keep_defaults(self) -> None:
        config = LocaleConfig.from_env({"LOCALEKIT_DEFAULT_LOCALE": ""})
        assert config == LocaleConfig()

    def test_from_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOCALEKIT_DEFAULT_LOCALE", "fr")
        monkeypatch.delenv("LOCALEKIT_LOCALES_DIR", raising=False)
        config = LocaleConfig.from_env()
        assert config.default_locale == "fr"
        assert config.locales_dir == BUNDLED_LOCALES_DIR
