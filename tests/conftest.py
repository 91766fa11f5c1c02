"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Configuration tests run against the real files in config/settings/, which
are found through the .project_root marker. The project_root fixture makes
that lookup independent of the directory pytest was started from.
"""

from collections.abc import Generator
from pathlib import Path

import pytest

from todonotes.core import logging as logging_module
from todonotes.core.config import get_app_config, get_env_overrides

PROJECT_ROOT = Path(__file__).resolve().parent.parent


# =============================================================================
# Project Root Fixtures
# =============================================================================


@pytest.fixture
def project_root(monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from the repository root and return its path."""
    monkeypatch.chdir(PROJECT_ROOT)
    return PROJECT_ROOT


# =============================================================================
# Cache Fixtures
# =============================================================================


@pytest.fixture
def clear_config_cache() -> Generator[None, None, None]:
    """Clear cached configuration so each test gets a fresh load."""
    get_app_config.cache_clear()
    get_env_overrides.cache_clear()
    logging_module._logging_config = None
    yield
    get_app_config.cache_clear()
    get_env_overrides.cache_clear()
    logging_module._logging_config = None
