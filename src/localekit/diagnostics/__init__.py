"""Error types for localekit.

Python 3.13+. Zero external dependencies.
"""

from .errors import CyclicIncludeError, FormattingError, LocaleDataError, LocaleError

__all__ = [
    "CyclicIncludeError",
    "FormattingError",
    "LocaleDataError",
    "LocaleError",
]
