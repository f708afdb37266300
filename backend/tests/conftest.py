"""Shared pytest fixtures for testing infrastructure.

CRITICAL: Environment variables MUST be set before ANY imports.
"""
import os

# Override environment variables BEFORE importing any app code
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["EXTENDED_SIGNALS"] = "false"

# Now import everything else AFTER environment is configured
from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from chart_analyst.core.config import Settings
from chart_analyst.core.config import get_settings
from chart_analyst.services.technical_analysis import PriceBar
from chart_analyst.utils.structured_logging import configure_structured_logging
from tests.utils.mock_data import MockDataGenerator


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Create test settings.

    Returns:
        Settings: Test configuration
    """
    return Settings(
        environment="test",
        log_level="WARNING",
        debug=True,
        extended_signals=False,
    )


@pytest.fixture(scope="session", autouse=True)
def configure_logging(test_settings: Settings):
    """Configure structured logging for tests.

    Args:
        test_settings: Test configuration
    """
    configure_structured_logging(log_level=test_settings.log_level)


@pytest.fixture
def app(test_settings: Settings) -> Generator[FastAPI, None, None]:
    """FastAPI application with the settings dependency overridden.

    Args:
        test_settings: Test configuration

    Yields:
        FastAPI: Test application instance
    """
    from chart_analyst.main import app as main_app

    main_app.dependency_overrides[get_settings] = lambda: test_settings

    yield main_app

    main_app.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create synchronous test client.

    Args:
        app: Test application instance

    Returns:
        TestClient: Synchronous test client
    """
    return TestClient(app)


# Common price series fixtures
@pytest.fixture
def rising_bars() -> list[PriceBar]:
    """60 bars rising by 10 per bar."""
    return MockDataGenerator.rising_bars(60)


@pytest.fixture
def flat_bars() -> list[PriceBar]:
    """60 identical bars at 1000."""
    return MockDataGenerator.flat_bars(60)


@pytest.fixture
def falling_bars() -> list[PriceBar]:
    """60 bars falling by 10 per bar."""
    return MockDataGenerator.falling_bars(60)


@pytest.fixture
def random_bars() -> list[PriceBar]:
    """Seeded 120-bar random walk."""
    return MockDataGenerator.random_walk_bars(120, seed=42)
