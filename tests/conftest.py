"""Pytest configuration for localekit test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import pytest
import yaml
from hypothesis import Phase, Verbosity, settings

from localekit import LocaleResolver, MappingLocaleLoader
from tests.strategies import BASE_LOCALE

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# LOCALE DATA FIXTURES
# =============================================================================


@pytest.fixture
def bundled_resolver() -> LocaleResolver:
    """Resolver over the locale files shipped with the package."""
    return LocaleResolver()


@pytest.fixture
def memory_resolver() -> Callable[..., LocaleResolver]:
    """Factory for resolvers over in-memory locale data with BASE_LOCALE as default."""

    def build(sources: Mapping[str, Mapping[str, Any]], **kwargs: Any) -> LocaleResolver:
        kwargs.setdefault("default_locale", "base")
        return LocaleResolver(MappingLocaleLoader({"base": BASE_LOCALE, **sources}), **kwargs)

    return build


@pytest.fixture
def locales_dir(tmp_path: Path) -> Callable[[Mapping[str, Any]], Path]:
    """Factory writing <code>.yml files into a temporary directory.

    Values may be mappings (dumped as YAML) or raw strings (written verbatim).
    """
    root = tmp_path / "locales"
    root.mkdir()

    def write(files: Mapping[str, Any]) -> Path:
        for code, content in files.items():
            text = content if isinstance(content, str) else yaml.safe_dump(
                dict(content), allow_unicode=True
            )
            (root / f"{code}.yml").write_text(text, encoding="utf-8")
        return root

    return write
