"""localekit - data-driven locale metadata and formatting.

Loads per-locale metadata (title, writing direction, number separators,
month and week day names, date formats, sublocales) from YAML files,
merges include chains and the default locale into one immutable record,
and formats numbers, dates and plural categories against that record.

Public API:
    LocaleResolver - Resolves locale codes to merged Locale records
    Locale - Immutable locale record with formatting operations
    UnsupportedLocale - Inert record for codes without data
    LocaleConfig - Default locale and locale directory settings
    PathLocaleLoader - YAML file loader (<dir>/<code>.yml)
    MappingLocaleLoader - In-memory loader
    LocaleRegistry - Per-locale Locale subclasses (plural rule overrides)
    DateFormat, Direction, PluralCategory - StrEnum constants

Exceptions:
    LocaleError - Base exception class
    LocaleDataError - Corrupt locale data
    CyclicIncludeError - Include chain loops
    FormattingError - Record lacks data needed for formatting

Example:
    >>> from localekit import LocaleResolver
    >>> ru = LocaleResolver().resolve("ru")
    >>> ru.format_float(-1234.5)
    '−1 234,5'
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .config import LocaleConfig
from .constants import BUNDLED_LOCALES_DIR
from .diagnostics import CyclicIncludeError, FormattingError, LocaleDataError, LocaleError
from .enums import DateFormat, Direction, PluralCategory
from .loading import LocaleLoader, MappingLocaleLoader, PathLocaleLoader
from .locale import Locale, UnsupportedLocale
from .resolver import LocaleResolver
from .specializations import CldrPluralLocale, LocaleRegistry, create_default_registry

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("localekit")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BUNDLED_LOCALES_DIR",
    "CldrPluralLocale",
    "CyclicIncludeError",
    "DateFormat",
    "Direction",
    "FormattingError",
    "Locale",
    "LocaleConfig",
    "LocaleDataError",
    "LocaleError",
    "LocaleLoader",
    "LocaleRegistry",
    "LocaleResolver",
    "MappingLocaleLoader",
    "PathLocaleLoader",
    "PluralCategory",
    "UnsupportedLocale",
    "__version__",
    "create_default_registry",
]
