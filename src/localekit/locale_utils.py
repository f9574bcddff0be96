"""Locale code utilities.

Centralizes locale code handling used throughout the codebase:
sanitization of requested codes before they become lookup keys, and
BCP-47 to POSIX conversion for Babel.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from localekit.constants import FORBIDDEN_CODE_CHARS

if TYPE_CHECKING:
    from babel import Locale as BabelLocale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "normalize_locale",
    "sanitize_code",
]

_STRIP_TABLE = str.maketrans(dict.fromkeys(FORBIDDEN_CODE_CHARS))


def sanitize_code(code: str) -> str:
    """Remove path separators and statement terminators from a locale code.

    Characters are stripped, never rejected: "../en" becomes "..en", which
    simply has no data source. Callers cannot tell a typo from a sanitized
    code.

    Args:
        code: Requested locale code

    Returns:
        Code without "/", "\\" and ";"

    Example:
        >>> sanitize_code("en")
        'en'
        >>> sanitize_code("../../etc/passwd")
        '....etcpasswd'
        >>> sanitize_code("ru;rm")
        'rurm'
    """
    return code.translate(_STRIP_TABLE)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("fr_CA")  # Already normalized
        'fr_CA'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> BabelLocale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result. Plural rule
    selection calls this on every count, so parsing must not repeat.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("ru")
        >>> locale.language
        'ru'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects."""
    get_babel_locale.cache_clear()
