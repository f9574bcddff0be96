"""Locale records: immutable views over merged locale data.

Architecture:
    - Locale: record built by LocaleResolver from the deep merge of every
      layer in an include chain (plus the default locale)
    - UnsupportedLocale: inert record for a code without data; every
      operation returns a neutral value instead of raising
    - Number formatting uses the separators stored in the record
    - strftime translates %A/%a/%B/%b/%p into locale text, then hands the
      pattern to the platform strftime for the remaining directives

Locale subclasses override plural_category() for language-specific rules;
see localekit.specializations.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from datetime import date
from decimal import Decimal
from types import MappingProxyType
from typing import Any

from localekit.constants import ASCII_MINUS, TYPOGRAPHIC_MINUS
from localekit.diagnostics import FormattingError
from localekit.enums import DateFormat, Direction, PluralCategory
from localekit.plural_rules import default_plural_category

__all__ = ["Locale", "LocaleData", "UnsupportedLocale", "freeze_data", "translate_pattern"]

logger = logging.getLogger(__name__)

type LocaleData = Mapping[str, Any]
"""Nested locale data (code, title, numbers, months, week, time, formats...)."""

# Digit followed by a positive multiple of three digits up to the end of the run
_GROUP_RE = re.compile(r"(\d)(?=(?:\d{3})+(?!\d))")

# One strftime directive (with optional E/O modifier) or one literal character
_TOKEN_RE = re.compile(r"%[EO]?.|.", re.DOTALL)

_INFINITY = "∞"


def freeze_data(value: Any) -> Any:
    """Return a read-only deep copy of parsed locale data.

    Mappings become MappingProxyType over fresh dicts, lists become tuples.
    Scalars are returned as-is.
    """
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze_data(item) for key, item in value.items()})
    if isinstance(value, list | tuple):
        return tuple(freeze_data(item) for item in value)
    return value


# ============================================================================
# Number helpers
# ============================================================================


def _group_digits(digits: str, delimiter: str) -> str:
    return _GROUP_RE.sub(lambda match: match.group(1) + delimiter, digits)


def _to_decimal(value: int | float | Decimal) -> Decimal:
    # repr() gives the shortest string that round-trips to the same float
    if isinstance(value, Decimal):
        return value
    return Decimal(repr(value))


def _render_float(
    value: int | float | Decimal, delimiter: str, separator: str, minus: str
) -> str:
    """Render value as grouped integer part, separator, fractional digits.

    Fractional digits are those of the shortest round-trip representation in
    fixed-point notation (never exponent notation), at least one digit.
    """
    number = _to_decimal(value)
    if number.is_nan():
        return "NaN"
    if number.is_infinite():
        return f"{minus}{_INFINITY}" if number < 0 else _INFINITY

    integer, _, fraction = format(abs(number), "f").partition(".")
    body = f"{_group_digits(integer, delimiter)}{separator}{fraction or '0'}"
    return f"{minus}{body}" if number < 0 else body


# ============================================================================
# strftime translation
# ============================================================================


def _weekday(instant: date) -> int:
    """Day of week with Sunday as 0, matching week.days ordering."""
    return instant.isoweekday() % 7


def _meridiem(instant: date, data: LocaleData) -> str:
    hour = getattr(instant, "hour", 0)
    return data["time"]["am" if hour < 12 else "pm"]


_DIRECTIVES: dict[str, Callable[[date, LocaleData], str]] = {
    "A": lambda instant, data: data["week"]["days"][_weekday(instant)],
    "a": lambda instant, data: data["week"]["abbrs"][_weekday(instant)],
    "B": lambda instant, data: data["months"]["names"][instant.month - 1],
    "b": lambda instant, data: data["months"]["abbrs"][instant.month - 1],
    "p": _meridiem,
}


def translate_pattern(pattern: str, instant: date, data: LocaleData) -> str:
    """Replace locale-dependent directives in pattern with locale text.

    %A, %a, %B, %b and %p become literal (percent-escaped) text from data.
    Every other directive is kept, minus any E/O modifier, for the platform
    strftime to expand.

    Args:
        pattern: strftime pattern
        instant: Date or datetime the pattern will be applied to
        data: Locale data providing week, months and time sections

    Returns:
        Pattern safe to pass to instant.strftime()

    Raises:
        KeyError, IndexError, TypeError: If data lacks a needed entry

    Example:
        >>> from datetime import date
        >>> data = {"months": {"names": ["janvier"] * 12}}
        >>> translate_pattern("%d %B %Y", date(2024, 1, 5), data)
        '%d janvier %Y'
    """
    parts: list[str] = []
    for token in _TOKEN_RE.findall(pattern):
        if token == "%":
            # Lone percent sign at the end of the pattern
            parts.append("%%")
        elif token.startswith("%"):
            directive = token[-1]
            translate = _DIRECTIVES.get(directive)
            if translate is None:
                parts.append(f"%{directive}")
            else:
                parts.append(str(translate(instant, data)).replace("%", "%%"))
        else:
            parts.append(token)
    return "".join(parts)


# ============================================================================
# Records
# ============================================================================


class Locale:
    """Information about a locale, merged from its data files.

    Instances are built by LocaleResolver.resolve(); the constructor takes
    already-merged data and freezes a private copy of it.

    Equality compares codes only: two records with the same code are equal
    even if they were loaded from different directories.

    Example:
        >>> ru = resolver.resolve("ru")
        >>> ru.title
        'Русский'
        >>> ru.format_integer(-1234567)
        '−1 234 567'
        >>> ru.strftime(date(2024, 3, 8), "%d %B")
        '08 марта'
    """

    __slots__ = ("_data",)

    def __init__(self, data: LocaleData) -> None:
        """Create a record over a frozen copy of data."""
        self._data: LocaleData = freeze_data(data)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def data(self) -> LocaleData:
        """Read-only merged locale data."""
        return self._data

    @property
    def code(self) -> str:
        return self._data.get("code", "")

    @property
    def title(self) -> str:
        return self._data.get("title", "")

    @property
    def direction(self) -> Direction:
        """Writing direction (default: LTR).

        Records built by LocaleResolver always hold a valid direction.

        Raises:
            ValueError: If a directly constructed record holds another value
        """
        return Direction(self._data.get("direction", Direction.LTR))

    @property
    def rtl(self) -> bool:
        return self.direction is Direction.RTL

    @property
    def sublocales(self) -> tuple[str, ...]:
        """Fallback locale codes for translation lookup, most preferred first."""
        return tuple(self._data.get("sublocales", ()))

    @property
    def supported(self) -> bool:
        """False only for UnsupportedLocale."""
        return True

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a top-level key; nested sections come back as read-only mappings."""
        return self._data.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Locale):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)

    def describe(self) -> str:
        """Human readable locale code and title."""
        return f"Locale {self.code} ({self.title})"

    def __repr__(self) -> str:
        return self.describe()

    # ------------------------------------------------------------------
    # Numbers
    # ------------------------------------------------------------------

    def _numbers(self, fallback: str) -> tuple[str, str]:
        numbers = self._data.get("numbers")
        try:
            return numbers["group_delimiter"], numbers["decimal_separator"]
        except (KeyError, TypeError) as e:
            msg = f"Locale '{self.code}' has no number separators"
            raise FormattingError(msg, fallback_value=fallback) from e

    def format_integer(self, integer: int) -> str:
        """Format integer with the locale group delimiter and a real minus sign.

        Args:
            integer: Value to format

        Returns:
            Grouped digits, prefixed with U+2212 when negative

        Raises:
            FormattingError: If the record has no ``numbers`` data

        Example:
            >>> en.format_integer(1234567)
            '1,234,567'
            >>> en.format_integer(-42)
            '−42'
        """
        delimiter, _ = self._numbers(str(integer))
        digits = _group_digits(str(abs(integer)), delimiter)
        return f"{TYPOGRAPHIC_MINUS}{digits}" if integer < 0 else digits

    def format_float(self, value: float | Decimal) -> str:
        """Format float with locale separators and a real minus sign.

        The integer part (truncated toward zero) is grouped as in
        format_integer(). The fractional digits are the shortest
        representation that round-trips to the same float, so 0.1 renders
        as "0.1", 2.0 as "2.0" and 1e-7 as "0.0000001". Decimal values keep
        their own digits. NaN and infinities render as "NaN", "∞", "−∞".

        Raises:
            FormattingError: If the record has no ``numbers`` data

        Example:
            >>> de.format_float(-1234.5)
            '−1.234,5'
        """
        delimiter, separator = self._numbers(str(value))
        return _render_float(value, delimiter, separator, TYPOGRAPHIC_MINUS)

    # ------------------------------------------------------------------
    # Dates
    # ------------------------------------------------------------------

    def strftime(self, instant: date, fmt: str) -> str:
        """Same as instant.strftime(), but with month and week day names translated.

        Args:
            instant: date or datetime
            fmt: DateFormat member selecting a pattern from the locale's
                ``formats`` section (DateFormat.MONTH returns the standalone
                month name), or a literal strftime pattern

        Returns:
            Formatted string

        Raises:
            FormattingError: If the record lacks the format or name data

        Example:
            >>> fr.strftime(date(2024, 7, 14), "%A %d %B")
            'dimanche 14 juillet'
            >>> fr.strftime(date(2024, 7, 14), DateFormat.MONTH)
            'juillet'
        """
        try:
            if isinstance(fmt, DateFormat):
                if fmt is DateFormat.MONTH:
                    return self._data["months"]["standalone"][instant.month - 1]
                fmt = self._data["formats"][fmt.value]
            translated = translate_pattern(fmt, instant, self._data)
        except (KeyError, IndexError, TypeError) as e:
            msg = f"Locale '{self.code}' cannot format {instant!r} with {fmt!r}: missing {e}"
            raise FormattingError(msg, fallback_value=instant.isoformat()) from e
        return instant.strftime(translated)

    # ------------------------------------------------------------------
    # Plurals
    # ------------------------------------------------------------------

    def plural_category(self, n: int | float | Decimal) -> PluralCategory:
        """Return plural category for n items.

        Simple zero/one/other form. Locales with richer rules override this
        in a subclass registered in localekit.specializations.
        """
        return default_plural_category(n)


class UnsupportedLocale(Locale):
    """Locale without data: the requested code has no data source.

    Only the code is known. get("code") returns it; every other key is
    absent. Formatting never raises and produces locale-neutral output:
    plain digits, "." as decimal separator, ASCII minus, and untranslated
    platform strftime for literal patterns. Named formats render as "".
    """

    __slots__ = ()

    def __init__(self, code: str) -> None:
        """Create an inert record for code."""
        super().__init__({"code": code})

    @property
    def supported(self) -> bool:
        return False

    def describe(self) -> str:
        return f"Unsupported locale {self.code}"

    def format_integer(self, integer: int) -> str:
        return str(integer)

    def format_float(self, value: float | Decimal) -> str:
        return _render_float(value, "", ".", ASCII_MINUS)

    def strftime(self, instant: date, fmt: str) -> str:
        if isinstance(fmt, DateFormat):
            logger.debug("No '%s' format for unsupported locale '%s'", fmt, self.code)
            return ""
        return instant.strftime(fmt)
