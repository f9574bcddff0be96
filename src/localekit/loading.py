"""Locale data loading.

Provides the protocol for locale data sources, a filesystem implementation
reading YAML files with path-traversal protection, and an in-memory
implementation.

Components:
    LocaleLoader - Protocol for locale data sources (structural typing)
    PathLocaleLoader - Disk-based loader: <root_dir>/<code>.yml
    MappingLocaleLoader - In-memory loader over already-parsed data

Python 3.13+. Uses PyYAML for parsing.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

import yaml

from localekit.constants import BUNDLED_LOCALES_DIR, LOCALE_FILE_SUFFIX
from localekit.diagnostics import LocaleDataError

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "LocaleLoader",
    # Concrete loaders
    "PathLocaleLoader",
    "MappingLocaleLoader",
    # Helpers
    "thaw_data",
]

logger = logging.getLogger(__name__)


def thaw_data(value: Any) -> Any:
    """Return a mutable deep copy of locale data.

    Inverse of localekit.locale.freeze_data: any Mapping (including the
    read-only views held by Locale records) becomes a dict, tuples and lists
    become lists. Scalars are returned as-is.
    """
    if isinstance(value, Mapping):
        return {key: thaw_data(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [thaw_data(item) for item in value]
    return value


class LocaleLoader(Protocol):
    """Protocol for locale data sources.

    The resolver depends only on "does data exist for this code" and
    "load and parse the data for this code". load() must return a fresh
    dict the caller may mutate.

    This is a Protocol (structural typing) rather than ABC to allow
    custom loaders (database rows, package resources, HTTP) without
    inheritance.

    Example:
        >>> class JsonLoader:
        ...     def exists(self, code: str) -> bool:
        ...         return Path(f"locales/{code}.json").is_file()
        ...     def load(self, code: str) -> dict[str, Any]:
        ...         return json.loads(Path(f"locales/{code}.json").read_text("utf-8"))
        ...     def available(self) -> list[str]:
        ...         return [p.stem for p in Path("locales").glob("*.json")]
        ...     def describe_path(self, code: str) -> str:
        ...         return f"locales/{code}.json"
        >>> resolver = LocaleResolver(JsonLoader())
    """

    def exists(self, code: str) -> bool:
        """Return True if a data source exists for exactly this code."""

    def load(self, code: str) -> dict[str, Any]:
        """Load and parse locale data for code.

        Raises:
            LocaleDataError: If the data source is corrupt
            FileNotFoundError: If the data source vanished since exists()
        """

    def available(self) -> list[str]:
        """Return every code with a data source."""

    def describe_path(self, code: str) -> str:
        """Return human-readable location of code's data for diagnostics."""


@dataclass(frozen=True, slots=True)
class PathLocaleLoader:
    """File system loader for <root_dir>/<code>.yml locale files.

    Security:
        Codes containing path separators or resolving outside root_dir
        are treated as nonexistent. The resolver already strips separators;
        this loader enforces the same rule for direct callers.

    Example:
        >>> loader = PathLocaleLoader("config/locales")
        >>> loader.exists("en")
        True
        >>> loader.load("en")["title"]
        'English'

    Attributes:
        root_dir: Directory holding the locale files (default: bundled data)
        suffix: File extension, including the dot
    """

    root_dir: Path | str = BUNDLED_LOCALES_DIR
    suffix: str = LOCALE_FILE_SUFFIX
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache the resolved root directory."""
        object.__setattr__(self, "_resolved_root", Path(self.root_dir).resolve())

    def _path_for(self, code: str) -> Path | None:
        """Return the file path for code, or None if code is unsafe."""
        if not code or "/" in code or "\\" in code or "\x00" in code:
            return None
        try:
            path = (self._resolved_root / f"{code}{self.suffix}").resolve()
        except (OSError, ValueError):
            # Name the filesystem rejects, e.g. longer than NAME_MAX
            return None
        try:
            path.relative_to(self._resolved_root)
        except ValueError:
            return None
        return path

    def describe_path(self, code: str) -> str:
        return str(Path(self.root_dir) / f"{code}{self.suffix}")

    def exists(self, code: str) -> bool:
        path = self._path_for(code)
        if path is None:
            return False
        try:
            return path.is_file()
        except (OSError, ValueError):
            return False

    def available(self) -> list[str]:
        if not self._resolved_root.is_dir():
            logger.warning("Locale directory %s does not exist", self._resolved_root)
            return []
        return sorted(path.stem for path in self._resolved_root.glob(f"*{self.suffix}"))

    def load(self, code: str) -> dict[str, Any]:
        """Load and parse <root_dir>/<code>.yml.

        Returns:
            Parsed locale data (empty dict for an empty file)

        Raises:
            FileNotFoundError: If no file exists for code
            LocaleDataError: If the file is not valid YAML or its root is not a mapping
        """
        path = self._path_for(code)
        if path is None:
            msg = f"No locale file for unsafe code '{code}'"
            raise FileNotFoundError(msg)

        try:
            loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            msg = f"Invalid YAML in {path}: {e}"
            raise LocaleDataError(msg, locale_code=code, path=str(path)) from e
        except UnicodeDecodeError as e:
            msg = f"Locale file {path} is not UTF-8: {e}"
            raise LocaleDataError(msg, locale_code=code, path=str(path)) from e

        if loaded is None:
            return {}
        if not isinstance(loaded, dict):
            msg = f"Locale file {path} must contain a mapping, got {type(loaded).__name__}"
            raise LocaleDataError(msg, locale_code=code, path=str(path))
        return loaded


@dataclass(frozen=True, slots=True)
class MappingLocaleLoader:
    """In-memory loader over a mapping of code -> parsed locale data.

    Useful for tests and for applications that keep locale data in a
    database or configuration service. load() returns mutable deep copies, so the
    source mapping is never modified by resolution. Sources may hold
    read-only views, such as the data of an already resolved Locale.

    Example:
        >>> loader = MappingLocaleLoader({"en": {"code": "en", "title": "English"}})
        >>> loader.load("en")
        {'code': 'en', 'title': 'English'}
    """

    sources: Mapping[str, Mapping[str, Any]]

    def describe_path(self, code: str) -> str:
        return f"<memory>/{code}"

    def exists(self, code: str) -> bool:
        return code in self.sources

    def available(self) -> list[str]:
        return sorted(self.sources)

    def load(self, code: str) -> dict[str, Any]:
        try:
            source = self.sources[code]
        except KeyError:
            msg = f"No locale data for '{code}'"
            raise FileNotFoundError(msg) from None
        if not isinstance(source, Mapping):
            msg = f"Locale data for '{code}' must be a mapping, got {type(source).__name__}"
            raise LocaleDataError(msg, locale_code=code, path=self.describe_path(code))
        return thaw_data(source)
