"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.geolanguage import (
    GeoLanguageSettings,
    LanguageStrategyKind,
)

__all__ = [
    "GeoLanguageSettings",
    "LanguageStrategyKind",
]
