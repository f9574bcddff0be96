"""Per-locale Locale subclasses.

Most locales need only data. Some need behavior the data cannot express,
usually plural rules. LocaleRegistry maps a locale code to the Locale
subclass the resolver instantiates for it.

The registry is consulted only for the requested code, never for codes
reached through ``include``.

Built-in specializations:
    ru, uk, pl, cs - East/West Slavic one/few/many/other rules
    ar - Arabic zero/one/two/few/many/other rules

Python 3.13+. Depends on Babel for CLDR plural rules.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from decimal import Decimal

from localekit.enums import PluralCategory
from localekit.locale import Locale
from localekit.plural_rules import select_plural_category

__all__ = [
    "CldrPluralLocale",
    "LocaleRegistry",
    "create_default_registry",
    "get_shared_registry",
]

logger = logging.getLogger(__name__)

type LocaleFactory = type[Locale]


class CldrPluralLocale(Locale):
    """Locale using CLDR plural rules from Babel.

    Zero keeps its own category, as in the default policy, so messages can
    still say "no items"; every other count follows CLDR for this
    locale's code.

    Example:
        >>> ru = CldrPluralLocale({"code": "ru"})
        >>> [str(ru.plural_category(n)) for n in (0, 1, 3, 5, 21)]
        ['zero', 'one', 'few', 'many', 'one']
    """

    __slots__ = ()

    def plural_category(self, n: int | float | Decimal) -> PluralCategory:
        if n == 0:
            return PluralCategory.ZERO
        return select_plural_category(n, self.code)


class LocaleRegistry:
    """Maps locale codes to Locale subclasses.

    Supports dict-like introspection:
        - get(code, default): Look up a factory
        - __contains__: Check if code is specialized (supports 'in')
        - __iter__ / __len__: Iterate and count specialized codes

    Example:
        >>> registry = LocaleRegistry()
        >>> registry.register("ru", CldrPluralLocale)
        >>> "ru" in registry
        True
        >>> registry.get("en", Locale)
        <class 'localekit.locale.Locale'>
    """

    __slots__ = ("_factories", "_frozen")

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._factories: dict[str, LocaleFactory] = {}
        self._frozen = False

    def register(self, code: str, factory: LocaleFactory) -> None:
        """Use factory to build records requested as code.

        Args:
            code: Locale code exactly as requested (after sanitization)
            factory: Locale subclass taking the merged data

        Raises:
            TypeError: If the registry is frozen or factory is not a Locale subclass
        """
        if self._frozen:
            msg = "Cannot modify frozen LocaleRegistry; use copy() first"
            raise TypeError(msg)
        if not (isinstance(factory, type) and issubclass(factory, Locale)):
            msg = f"Locale factory for '{code}' must be a Locale subclass, got {factory!r}"
            raise TypeError(msg)
        if code in self._factories:
            logger.debug(
                "Replacing %s with %s for '%s'",
                self._factories[code].__name__,
                factory.__name__,
                code,
            )
        self._factories[code] = factory

    def locale_class(self, code: str) -> Callable[[LocaleFactory], LocaleFactory]:
        """Decorator form of register().

        Example:
            >>> @registry.locale_class("kk")
            ... class Kazakh(Locale):
            ...     def plural_category(self, n): ...
        """

        def decorator(factory: LocaleFactory) -> LocaleFactory:
            self.register(code, factory)
            return factory

        return decorator

    def get(self, code: str, default: LocaleFactory = Locale) -> LocaleFactory:
        return self._factories.get(code, default)

    def freeze(self) -> None:
        """Reject further register() calls."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def copy(self) -> LocaleRegistry:
        """Return an unfrozen copy with the same registrations."""
        clone = LocaleRegistry()
        clone._factories = dict(self._factories)
        return clone

    def __contains__(self, code: object) -> bool:
        return code in self._factories

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)

    def __len__(self) -> int:
        return len(self._factories)

    def __repr__(self) -> str:
        return f"LocaleRegistry({sorted(self._factories)!r}, frozen={self._frozen})"


def create_default_registry() -> LocaleRegistry:
    """Create a new, unfrozen registry with the built-in specializations.

    Example:
        >>> registry = create_default_registry()
        >>> registry.register("kk", KazakhLocale)
        >>> resolver = LocaleResolver(loader, registry=registry)
    """
    registry = LocaleRegistry()
    for code in ("ru", "uk", "pl", "cs", "ar"):
        registry.register(code, CldrPluralLocale)
    return registry


# Initialized lazily on first access to avoid import-time side effects.
_SHARED_REGISTRY: LocaleRegistry | None = None


def get_shared_registry() -> LocaleRegistry:
    """Get the shared, frozen registry with built-in specializations.

    Used by LocaleResolver when no registry is passed. Frozen so that one
    resolver cannot change how another resolves locales; call copy() or
    create_default_registry() to customize.
    """
    global _SHARED_REGISTRY  # noqa: PLW0603
    if _SHARED_REGISTRY is None:
        _SHARED_REGISTRY = create_default_registry()
        _SHARED_REGISTRY.freeze()
    return _SHARED_REGISTRY
