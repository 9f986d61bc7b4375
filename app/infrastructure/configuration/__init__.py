"""Infrastructure configuration module - public API.

This module provides centralized configuration management using Pydantic
BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class
    load_settings: Build Settings, wrapping validation errors
    ConfigurationError: Raised for missing or invalid configuration
    GeoLanguageSettings, LanguageStrategyKind, MaxMindSettings: Sections

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    strategy = settings.geolanguage.strategy
    db_path = settings.maxmind.MAXMIND_DB_PATH
    ```
"""

from infrastructure.configuration.errors import ConfigurationError
from infrastructure.configuration.features import (
    GeoLanguageSettings,
    LanguageStrategyKind,
)
from infrastructure.configuration.integrations import MaxMindSettings
from infrastructure.configuration.settings import Settings, load_settings

__all__ = [
    "ConfigurationError",
    "GeoLanguageSettings",
    "LanguageStrategyKind",
    "MaxMindSettings",
    "Settings",
    "load_settings",
]
