"""Hypothesis strategies and shared locale data for localekit tests."""

from tests.strategies.locales import (
    BASE_LOCALE,
    group_delimiters,
    include_chains,
    locale_codes,
    separator_pairs,
)

__all__ = [
    "BASE_LOCALE",
    "group_delimiters",
    "include_chains",
    "locale_codes",
    "separator_pairs",
]
