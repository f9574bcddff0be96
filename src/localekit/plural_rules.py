"""Plural category selection.

Two policies:
    default_plural_category - data-free zero/one/other split used by every
        Locale unless a specialization overrides it
    select_plural_category - CLDR plural rules from Babel, used by the
        specialized locales registered in localekit.specializations

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from decimal import Decimal

from babel.core import UnknownLocaleError

from localekit.enums import PluralCategory
from localekit.locale_utils import get_babel_locale

__all__ = ["default_plural_category", "select_plural_category"]


def default_plural_category(n: int | float | Decimal) -> PluralCategory:
    """Select the plural category for n items without language rules.

    Examples:
        >>> default_plural_category(0)
        <PluralCategory.ZERO: 'zero'>
        >>> default_plural_category(1)
        <PluralCategory.ONE: 'one'>
        >>> default_plural_category(5)
        <PluralCategory.OTHER: 'other'>
    """
    if n == 0:
        return PluralCategory.ZERO
    if n == 1:
        return PluralCategory.ONE
    return PluralCategory.OTHER


def select_plural_category(n: int | float | Decimal, locale: str) -> PluralCategory:
    """Select CLDR plural category for number using Babel's CLDR data.

    Args:
        n: Number to categorize
        locale: Locale code (e.g., "ru", "pl_PL", "ar")

    Returns:
        Plural category: ZERO, ONE, TWO, FEW, MANY or OTHER

    Examples:
        >>> select_plural_category(1, "en")
        <PluralCategory.ONE: 'one'>
        >>> select_plural_category(5, "ru")
        <PluralCategory.MANY: 'many'>
        >>> select_plural_category(2, "ar")
        <PluralCategory.TWO: 'two'>

    Unknown or invalid locale codes fall back to the one/other rule, which is
    the most common pattern across languages.
    """
    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError):
        return PluralCategory.ONE if abs(n) == 1 else PluralCategory.OTHER

    return PluralCategory(locale_obj.plural_form(n))
