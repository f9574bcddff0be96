"""localekit exception hierarchy.

A missing locale is not an error (resolution returns UnsupportedLocale).
Errors are reserved for data that exists but cannot be trusted, and for
formatting calls against records lacking the data they need.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

__all__ = [
    "CyclicIncludeError",
    "FormattingError",
    "LocaleDataError",
    "LocaleError",
]


class LocaleError(Exception):
    """Base exception for all localekit errors."""


class LocaleDataError(LocaleError):
    """Locale data source exists but is corrupt.

    Raised for YAML syntax errors and for documents whose root is not a
    mapping. Never replaced by default data: bad locale files must surface.

    Attributes:
        locale_code: Code whose data failed to load
        path: Human-readable location of the data source (may be empty)
    """

    def __init__(self, message: str, *, locale_code: str = "", path: str = "") -> None:
        """Initialize LocaleDataError.

        Args:
            message: Error message
            locale_code: Code whose data failed to load
            path: Human-readable location of the data source
        """
        super().__init__(message)
        self.locale_code = locale_code
        self.path = path


class CyclicIncludeError(LocaleDataError):
    """Include chain references a locale already visited.

    Example:
        en_XX.yml:  include: en_YY
        en_YY.yml:  include: en_XX   <- loops forever without the guard

    Attributes:
        chain: Codes visited in order, ending with the repeated code
    """

    def __init__(self, chain: tuple[str, ...]) -> None:
        """Initialize CyclicIncludeError.

        Args:
            chain: Visited codes, last element is the code seen twice
        """
        super().__init__(
            f"Cyclic include chain: {' -> '.join(chain)}",
            locale_code=chain[0] if chain else "",
        )
        self.chain = chain


class FormattingError(LocaleError):
    """Raised when a record lacks the data a formatting call needs.

    Carries a fallback_value so callers that choose to recover still have
    a usable, locale-neutral rendering of the input.

    Attributes:
        fallback_value: String to use in output when formatting fails
    """

    def __init__(self, message: str, fallback_value: str) -> None:
        """Initialize FormattingError.

        Args:
            message: Error message
            fallback_value: Value to use in output when formatting fails
        """
        super().__init__(message)
        self.fallback_value = fallback_value
