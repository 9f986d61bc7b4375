"""Unit tests for GeoLanguageSettings validation and parsing."""

import pytest
from pydantic import ValidationError

from infrastructure.configuration import GeoLanguageSettings, LanguageStrategyKind


def _settings(**values) -> GeoLanguageSettings:
    base = {"SUPPORTED_LANGUAGES": ["en", "fr"], "DEFAULT_LANGUAGE": "en"}
    base.update(values)
    return GeoLanguageSettings(**base)


@pytest.mark.unit
class TestDefaults:
    def test_optional_fields_default(self):
        settings = _settings()

        assert settings.strategy is LanguageStrategyKind.HEADER
        assert settings.language_param == ""
        assert settings.handle_default_language is False
        assert settings.redirect_after_handling is False
        assert settings.language_overrides == {}

    def test_settings_are_frozen(self):
        settings = _settings()

        with pytest.raises(ValidationError):
            settings.default_language = "fr"


@pytest.mark.unit
class TestSupportedLanguages:
    def test_comma_separated_string(self):
        settings = _settings(SUPPORTED_LANGUAGES=" en, fr ,de")
        assert settings.supported_languages == ["en", "fr", "de"]

    def test_json_string(self):
        settings = _settings(SUPPORTED_LANGUAGES='["de", "en"]')
        assert settings.supported_languages == ["de", "en"]

    def test_duplicates_removed_keeping_order(self):
        settings = _settings(SUPPORTED_LANGUAGES=["fr", "en", "fr"])
        assert settings.supported_languages == ["fr", "en"]

    def test_empty_list_rejected(self):
        with pytest.raises(ValidationError, match="at least one language"):
            _settings(SUPPORTED_LANGUAGES=[])

    def test_empty_entry_rejected(self):
        with pytest.raises(ValidationError, match="empty entries"):
            _settings(SUPPORTED_LANGUAGES="en,,fr")

    def test_invalid_json_rejected(self):
        with pytest.raises(ValidationError, match="Invalid SUPPORTED_LANGUAGES JSON"):
            _settings(SUPPORTED_LANGUAGES="[en")

    def test_missing_rejected(self, monkeypatch):
        monkeypatch.delenv("SUPPORTED_LANGUAGES", raising=False)
        with pytest.raises(ValidationError):
            GeoLanguageSettings(DEFAULT_LANGUAGE="en", _env_file=None)

    def test_read_from_environment(self, monkeypatch):
        monkeypatch.setenv("SUPPORTED_LANGUAGES", "en,fr")
        monkeypatch.setenv("DEFAULT_LANGUAGE", "fr")
        monkeypatch.setenv("LANGUAGE_STRATEGY", "path")

        settings = GeoLanguageSettings(_env_file=None)

        assert settings.supported_languages == ["en", "fr"]
        assert settings.default_language == "fr"
        assert settings.strategy is LanguageStrategyKind.PATH


@pytest.mark.unit
class TestDefaultLanguage:
    def test_blank_rejected(self):
        with pytest.raises(ValidationError, match="DEFAULT_LANGUAGE is required"):
            _settings(DEFAULT_LANGUAGE="   ")

    def test_stripped(self):
        assert _settings(DEFAULT_LANGUAGE=" fr ").default_language == "fr"

    def test_unsupported_default_is_allowed(self):
        settings = _settings(DEFAULT_LANGUAGE="es")
        assert settings.default_language == "es"


@pytest.mark.unit
class TestStrategy:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("header", LanguageStrategyKind.HEADER),
            ("PATH", LanguageStrategyKind.PATH),
            (" Query ", LanguageStrategyKind.QUERY),
        ],
    )
    def test_strategy_kinds(self, value, expected):
        settings = _settings(LANGUAGE_STRATEGY=value, LANGUAGE_PARAM="lang")
        assert settings.strategy is expected

    def test_invalid_strategy_rejected(self):
        with pytest.raises(ValidationError):
            _settings(LANGUAGE_STRATEGY="cookie")

    def test_query_requires_param(self):
        with pytest.raises(ValidationError, match="LANGUAGE_PARAM is required"):
            _settings(LANGUAGE_STRATEGY="query")

    def test_query_rejects_blank_param(self):
        with pytest.raises(ValidationError, match="LANGUAGE_PARAM is required"):
            _settings(LANGUAGE_STRATEGY="query", LANGUAGE_PARAM="  ")

    def test_param_not_needed_for_other_strategies(self):
        settings = _settings(LANGUAGE_STRATEGY="path")
        assert settings.language_param == ""


@pytest.mark.unit
class TestOverrides:
    def test_dict_normalized_to_uppercase(self):
        settings = _settings(LANGUAGE_TO_COUNTRIES_OVERRIDE={"fr": ["ca", " be "]})
        assert settings.language_overrides == {"fr": ["CA", "BE"]}

    def test_json_string(self):
        settings = _settings(LANGUAGE_TO_COUNTRIES_OVERRIDE='{"de": ["ch"]}')
        assert settings.language_overrides == {"de": ["CH"]}

    def test_quoted_json_string(self):
        settings = _settings(LANGUAGE_TO_COUNTRIES_OVERRIDE="'{\"de\": [\"CH\"]}'")
        assert settings.language_overrides == {"de": ["CH"]}

    def test_empty_string_is_empty_mapping(self):
        settings = _settings(LANGUAGE_TO_COUNTRIES_OVERRIDE="")
        assert settings.language_overrides == {}

    def test_invalid_json_rejected(self):
        with pytest.raises(ValidationError, match="Invalid LANGUAGE_TO_COUNTRIES_OVERRIDE"):
            _settings(LANGUAGE_TO_COUNTRIES_OVERRIDE="{fr: CA}")

    def test_invalid_type_rejected(self):
        with pytest.raises(ValidationError):
            _settings(LANGUAGE_TO_COUNTRIES_OVERRIDE=42)

    def test_read_from_environment(self, monkeypatch):
        monkeypatch.setenv("SUPPORTED_LANGUAGES", "en,fr")
        monkeypatch.setenv("DEFAULT_LANGUAGE", "en")
        monkeypatch.setenv("LANGUAGE_TO_COUNTRIES_OVERRIDE", '{"fr": ["CA"]}')

        settings = GeoLanguageSettings(_env_file=None)

        assert settings.language_overrides == {"fr": ["CA"]}
