"""Shared pytest fixtures for pomkit tests.

This module provides fixtures for:
- Test environment variables with automatic restore
- Mocked Playwright pages for unit tests
- Locator sets and wait policies

Usage:
    @pytest.mark.unit
    def test_something(mock_page, locators):
        page = HomePage(mock_page, locators)
        page.validate_page_loaded()
"""

import os
from collections.abc import Generator
from unittest.mock import MagicMock

import pytest
import structlog
from structlog.contextvars import bound_contextvars

from pomkit.config.logging import configure_logging
from pomkit.config.settings import get_settings
from pomkit.helpers.waiting import WaitPolicy
from pomkit.locators import Locators

# =============================================================================
# Environment Configuration
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> Generator[None, None, None]:
    """Set up test environment variables.

    Loads .env file first, then sets defaults for any missing variables.
    """
    from dotenv import load_dotenv

    original_env = os.environ.copy()

    # Load .env file if it exists (won't override existing env vars)
    load_dotenv()

    os.environ.setdefault("POMKIT_BASE_URL", "http://localhost:3000")
    os.environ.setdefault("POMKIT_DEFAULT_TIMEOUT_MS", "5000")
    os.environ.setdefault("POMKIT_POLL_INTERVAL_MS", "100")

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(scope="session", autouse=True)
def session_logging(setup_test_environment: None) -> Generator[None, None, None]:
    """Configure structlog once, after the test environment is in place."""
    get_settings.cache_clear()
    configure_logging()
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def bind_test_name(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    """Tag every log event emitted during a test with the test's name."""
    with bound_contextvars(test=request.node.name):
        yield


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Drop the cached Settings so each test sees its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Page Object Fixtures
# =============================================================================


@pytest.fixture
def locators() -> Locators:
    """Provide a minimal locator set."""
    return Locators.from_mapping({"header": {"logo_link": "#logo-link"}})


@pytest.fixture
def wait_policy() -> WaitPolicy:
    """Provide a short wait policy for fast failures."""
    return WaitPolicy(timeout_ms=200, poll_interval_ms=10)


@pytest.fixture
def mock_page() -> MagicMock:
    """Mock Playwright page for unit tests.

    ``locator()`` always returns the same mock so clicks can be asserted.
    For a real browser, use pytest-playwright's ``page`` fixture instead.
    """
    mock = MagicMock()
    mock.locator = MagicMock(return_value=MagicMock(name="logo_locator"))
    return mock


@pytest.fixture
def mock_home_page() -> MagicMock:
    """Mock home page object satisfying the validate_page_loaded() contract."""
    mock = MagicMock(name="home_page")
    mock.validate_page_loaded = MagicMock(return_value=None)
    return mock


# =============================================================================
# Markers for Test Selection
# =============================================================================

# Usage:
# pytest -m unit          # Run only unit tests
# pytest -m e2e           # Run only browser tests
