"""Locale resolution configuration.

Provides a single frozen dataclass holding the process-wide settings a
LocaleResolver needs: which locale backs every record, and where locale
files live. Passed explicitly instead of living in module globals.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from localekit.constants import (
    BUNDLED_LOCALES_DIR,
    DEFAULT_LOCALE,
    ENV_DEFAULT_LOCALE,
    ENV_LOCALES_DIR,
)
from localekit.locale_utils import sanitize_code

__all__ = ["LocaleConfig"]


@dataclass(frozen=True, slots=True)
class LocaleConfig:
    """Immutable configuration for locale resolution.

    All fields have sensible defaults; ``LocaleConfig()`` resolves against
    the bundled locale files with English as the default locale.

    Attributes:
        default_locale: Code whose include chain is merged underneath every
            resolved record (default: "en"). Sanitized like requested codes.
        locales_dir: Directory of <code>.yml files (default: bundled data).

    Example:
        >>> config = LocaleConfig(default_locale="ru", locales_dir="app/locales")
        >>> resolver = LocaleResolver.from_config(config)
        >>> resolver.default_locale
        'ru'
    """

    default_locale: str = DEFAULT_LOCALE
    locales_dir: Path = BUNDLED_LOCALES_DIR

    def __post_init__(self) -> None:
        """Validate and normalize configuration values.

        Raises:
            ValueError: If default_locale is empty after sanitization.
        """
        default_locale = sanitize_code(self.default_locale)
        if not default_locale:
            msg = "default_locale must be a non-empty locale code"
            raise ValueError(msg)
        object.__setattr__(self, "default_locale", default_locale)
        object.__setattr__(self, "locales_dir", Path(self.locales_dir))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> LocaleConfig:
        """Build configuration from LOCALEKIT_* environment variables.

        Unset or empty variables keep their defaults.

        Args:
            environ: Mapping to read instead of os.environ

        Example:
            >>> LocaleConfig.from_env({"LOCALEKIT_DEFAULT_LOCALE": "de"}).default_locale
            'de'
        """
        env = os.environ if environ is None else environ
        default_locale = env.get(ENV_DEFAULT_LOCALE) or DEFAULT_LOCALE
        locales_dir = env.get(ENV_LOCALES_DIR) or BUNDLED_LOCALES_DIR
        return cls(default_locale=default_locale, locales_dir=Path(locales_dir))
