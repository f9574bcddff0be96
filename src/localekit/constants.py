"""Shared constants for localekit.

Constants are grouped by domain:
- Locale codes: default locale and characters stripped from requested codes
- Data files: on-disk naming convention for locale data
- Formatting: typographic characters used by number formatting
- Environment: variable names read by LocaleConfig.from_env()

Python 3.13+. Zero external dependencies.
"""

from pathlib import Path

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale codes
    "DEFAULT_LOCALE",
    "FORBIDDEN_CODE_CHARS",
    # Data files
    "BUNDLED_LOCALES_DIR",
    "LOCALE_FILE_SUFFIX",
    # Formatting
    "TYPOGRAPHIC_MINUS",
    "ASCII_MINUS",
    # Environment
    "ENV_DEFAULT_LOCALE",
    "ENV_LOCALES_DIR",
]

# ============================================================================
# LOCALE CODES
# ============================================================================

# Locale whose data is merged underneath every resolved record.
DEFAULT_LOCALE: str = "en"

# Path separators and statement terminators. Removed from a requested code
# before it is used as a lookup key.
FORBIDDEN_CODE_CHARS: frozenset[str] = frozenset({"/", "\\", ";"})

# ============================================================================
# DATA FILES
# ============================================================================

# Locale data shipped with the package: <code>.yml per locale.
BUNDLED_LOCALES_DIR: Path = Path(__file__).parent / "data"

LOCALE_FILE_SUFFIX: str = ".yml"

# ============================================================================
# FORMATTING
# ============================================================================

TYPOGRAPHIC_MINUS: str = "\u2212"  # U+2212 MINUS SIGN
ASCII_MINUS: str = "-"

# ============================================================================
# ENVIRONMENT
# ============================================================================

ENV_DEFAULT_LOCALE: str = "LOCALEKIT_DEFAULT_LOCALE"
ENV_LOCALES_DIR: str = "LOCALEKIT_LOCALES_DIR"
