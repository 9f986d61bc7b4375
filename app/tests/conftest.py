import sys
from pathlib import Path
from unittest.mock import MagicMock

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.configuration`) works during pytest collection.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402

from tests.factories import FakeMaxMindClient, make_settings  # noqa: E402


@pytest.fixture
def settings():
    """Settings with en/fr/de supported, en default, header strategy."""
    return make_settings()


@pytest.fixture
def fake_maxmind():
    """Factory building a FakeMaxMindClient that resolves to a country."""
    return FakeMaxMindClient.for_country


@pytest.fixture
def mock_reader():
    """A geoip2 Reader double for a Country database."""
    reader = MagicMock()
    reader.metadata.return_value.database_type = "GeoLite2-Country"
    return reader
