"""Fixtures for infrastructure.logging tests."""

import pytest

from infrastructure.logging.setup import configure_logging
from tests.factories import make_settings


@pytest.fixture
def mock_settings():
    """Settings for a development (prefixed) deployment."""
    return make_settings().model_copy(update={"PREFIX": "dev-", "LOG_LEVEL": "DEBUG"})


@pytest.fixture
def restore_logging():
    """Reconfigure test logging after a test changes the structlog setup."""
    yield
    configure_logging()
