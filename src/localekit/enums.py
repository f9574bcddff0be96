"""Enumerations for localekit type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so they compare equal to the raw
values found in locale data files.

Python 3.13+.
"""

from enum import StrEnum


class Direction(StrEnum):
    """Writing direction of a locale.

    StrEnum provides automatic string conversion: str(Direction.LTR) == "ltr"
    """

    LTR = "ltr"
    """Left to right (Latin, Cyrillic, ...)"""

    RTL = "rtl"
    """Right to left (Arabic, Hebrew, ...)"""


class PluralCategory(StrEnum):
    """Plural category selected for a count.

    Member values match CLDR category names, so Babel plural rule results
    convert directly: PluralCategory("few") is PluralCategory.FEW
    """

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


class DateFormat(StrEnum):
    """Named date/time format stored in a locale's ``formats`` section.

    Passing a DateFormat to Locale.strftime() selects the locale pattern;
    passing a plain str uses it as a literal strftime pattern.
    """

    MONTH = "month"
    """Standalone month name only (no pattern substitution)"""

    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"
    SHORT_DATE = "short_date"
    LONG_DATE = "long_date"
    SHORT_DATETIME = "short_datetime"
    LONG_DATETIME = "long_datetime"


__all__ = [
    "DateFormat",
    "Direction",
    "PluralCategory",
]
