"""Unit tests for the Settings aggregator and load_settings."""

import pytest

from infrastructure.configuration import (
    ConfigurationError,
    GeoLanguageSettings,
    MaxMindSettings,
    Settings,
    load_settings,
)


@pytest.fixture
def geolanguage():
    return GeoLanguageSettings(SUPPORTED_LANGUAGES=["en"], DEFAULT_LANGUAGE="en")


@pytest.mark.unit
class TestSettings:
    def test_sections_passed_explicitly(self, geolanguage):
        maxmind = MaxMindSettings(MAXMIND_DB_PATH="/data/db.mmdb")

        settings = Settings(maxmind=maxmind, geolanguage=geolanguage)

        assert settings.maxmind.MAXMIND_DB_PATH == "/data/db.mmdb"
        assert settings.geolanguage.default_language == "en"

    def test_sections_instantiated_from_environment(self, monkeypatch):
        monkeypatch.setenv("SUPPORTED_LANGUAGES", "en,fr")
        monkeypatch.setenv("DEFAULT_LANGUAGE", "fr")
        monkeypatch.setenv("MAXMIND_DB_PATH", "/env/db.mmdb")

        settings = Settings()

        assert settings.geolanguage.supported_languages == ["en", "fr"]
        assert settings.maxmind.MAXMIND_DB_PATH == "/env/db.mmdb"

    def test_is_production_when_prefix_empty(self, geolanguage):
        settings = Settings(PREFIX="", geolanguage=geolanguage)
        assert settings.is_production is True
        assert settings.environment == "production"

    def test_not_production_with_prefix(self, geolanguage):
        settings = Settings(PREFIX="dev-", geolanguage=geolanguage)
        assert settings.is_production is False
        assert settings.environment == "dev"


@pytest.mark.unit
class TestMaxMindSettings:
    def test_default_path(self, monkeypatch):
        monkeypatch.delenv("MAXMIND_DB_PATH", raising=False)
        settings = MaxMindSettings(_env_file=None)
        assert settings.MAXMIND_DB_PATH == "./geodb/GeoLite2-City.mmdb"

    def test_blank_path_rejected(self):
        with pytest.raises(ValueError, match="MAXMIND_DB_PATH is required"):
            MaxMindSettings(MAXMIND_DB_PATH=" ")


@pytest.mark.unit
class TestLoadSettings:
    def test_returns_settings(self, geolanguage):
        settings = load_settings(geolanguage=geolanguage)
        assert isinstance(settings, Settings)

    def test_wraps_validation_errors(self, monkeypatch):
        monkeypatch.setenv("SUPPORTED_LANGUAGES", "en")
        monkeypatch.setenv("DEFAULT_LANGUAGE", "en")
        monkeypatch.setenv("LANGUAGE_STRATEGY", "query")
        monkeypatch.delenv("LANGUAGE_PARAM", raising=False)

        with pytest.raises(ConfigurationError, match="LANGUAGE_PARAM is required"):
            load_settings()
