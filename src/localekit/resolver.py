"""Locale resolution: from a requested code to a fully merged Locale.

Resolution walks the include chain of the requested code, merging each
layer underneath the data gathered so far, then does the same for the
default locale unless the chain already passed through it. The result is
wrapped in the Locale subclass registered for the requested code.

Resolution is a function of (code, default code, loader, registry): the
resolver keeps no per-call state and every call returns a new record.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from localekit.config import LocaleConfig
from localekit.constants import DEFAULT_LOCALE
from localekit.diagnostics import CyclicIncludeError, LocaleDataError
from localekit.enums import Direction
from localekit.loading import LocaleLoader, PathLocaleLoader
from localekit.locale import Locale, UnsupportedLocale
from localekit.locale_utils import sanitize_code
from localekit.specializations import LocaleRegistry, get_shared_registry

__all__ = ["LocaleResolver", "deep_merge"]

logger = logging.getLogger(__name__)


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Merge override over base, recursing into nested mappings.

    Neither argument is modified. Values from override win; when both sides
    hold a mapping for the same key, the mappings are merged recursively.
    Any other value (including lists) is replaced as a whole.

    Example:
        >>> deep_merge({"numbers": {"group_delimiter": ",", "decimal_separator": "."}},
        ...            {"numbers": {"group_delimiter": " "}})
        {'numbers': {'group_delimiter': ' ', 'decimal_separator': '.'}}
    """
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


class LocaleResolver:
    """Resolves locale codes to Locale records.

    Example:
        >>> resolver = LocaleResolver(PathLocaleLoader("config/locales"))
        >>> resolver.resolve("en_GB").title
        'English (UK)'
        >>> resolver.resolve("tlh")
        Unsupported locale tlh
    """

    __slots__ = ("_default_locale", "_loader", "_registry")

    def __init__(
        self,
        loader: LocaleLoader | None = None,
        *,
        default_locale: str = DEFAULT_LOCALE,
        registry: LocaleRegistry | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            loader: Locale data source (default: bundled YAML files)
            default_locale: Code merged underneath every record
            registry: Specialized Locale subclasses (default: shared registry)
        """
        self._loader: LocaleLoader = loader if loader is not None else PathLocaleLoader()
        self._default_locale = sanitize_code(default_locale)
        self._registry = registry if registry is not None else get_shared_registry()

    @classmethod
    def from_config(
        cls, config: LocaleConfig, *, registry: LocaleRegistry | None = None
    ) -> LocaleResolver:
        """Create a resolver reading YAML files from config.locales_dir."""
        return cls(
            PathLocaleLoader(config.locales_dir),
            default_locale=config.default_locale,
            registry=registry,
        )

    @property
    def default_locale(self) -> str:
        return self._default_locale

    @property
    def loader(self) -> LocaleLoader:
        return self._loader

    @property
    def registry(self) -> LocaleRegistry:
        return self._registry

    def discover(self, code: str) -> bool:
        """Return True if locale data exists for exactly this code (no merging)."""
        return self._loader.exists(code)

    def available(self) -> list[str]:
        """Return all codes with locale data."""
        return self._loader.available()

    def resolve(self, code: str, default_code: str | None = None) -> Locale:
        """Load locale by code, merging its include chain and the default locale.

        Args:
            code: Requested locale code. "/", "\\" and ";" are stripped.
            default_code: Default locale for this call (default: the
                resolver's default_locale)

        Returns:
            Merged Locale (or registered subclass), or UnsupportedLocale if
            no data exists for code

        Raises:
            LocaleDataError: If any layer's data is corrupt, or the merged
                data names an unknown writing direction
            CyclicIncludeError: If an include chain loops
        """
        code = sanitize_code(code)
        default_code = self._default_locale if default_code is None else sanitize_code(default_code)

        if not self.discover(code):
            logger.debug("No locale data for '%s'", code)
            return UnsupportedLocale(code)

        data, visited = self._walk(code)
        if default_code not in visited:
            if not self.discover(default_code):
                logger.warning("Default locale '%s' has no locale data", default_code)
            default_data, _ = self._walk(default_code)
            data = deep_merge(default_data, data)

        self._check_direction(code, data)
        factory = self._registry.get(code, Locale)
        logger.debug("Resolved '%s' via %s as %s", code, " -> ".join(visited), factory.__name__)
        return factory(data)

    def _walk(self, code: str) -> tuple[dict[str, Any], tuple[str, ...]]:
        """Merge the include chain starting at code.

        Returns:
            (merged data, codes visited in order)
        """
        data: dict[str, Any] = {}
        visited: list[str] = []
        current: str | None = code

        while current and self.discover(current):
            if current in visited:
                raise CyclicIncludeError((*visited, current))
            logger.debug("Loading '%s' from %s", current, self._loader.describe_path(current))
            layer = self._loader.load(current)
            layer.setdefault("code", current)
            visited.append(current)
            data = deep_merge(layer, data)

            include = layer.get("include")
            current = sanitize_code(str(include)) if include else None

        return data, tuple(visited)

    def _check_direction(self, code: str, data: Mapping[str, Any]) -> None:
        """Reject merged data whose direction is neither "ltr" nor "rtl"."""
        direction = data.get("direction", Direction.LTR)
        try:
            Direction(direction)
        except (ValueError, TypeError) as e:
            msg = f"Locale '{code}' has unknown direction {direction!r}"
            raise LocaleDataError(
                msg, locale_code=code, path=self._loader.describe_path(code)
            ) from e
