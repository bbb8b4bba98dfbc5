"""Pytest configuration and shared fixtures."""

import pytest
import structlog

from form_validation.config import settings as settings_module


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: integration tests (may touch environment or files)")


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Drop cached settings and structlog config between tests."""
    settings_module._settings = None
    yield
    settings_module._settings = None
    structlog.reset_defaults()
