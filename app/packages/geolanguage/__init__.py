"""Geo-language package - country based request language selection."""

from packages.geolanguage.middleware import (
    GeoLanguageMiddleware,
    format_client_address,
)
from packages.geolanguage.resolver import LanguageResolver, ResolvedLanguage
from packages.geolanguage.strategies import (
    HeaderStrategy,
    LanguageStrategy,
    PathStrategy,
    QueryStrategy,
    build_strategy,
)
from packages.geolanguage.tables import (
    DEFAULT_COUNTRY_TO_LANGUAGE,
    DEFAULT_LANGUAGE_TO_COUNTRIES,
)

__all__ = [
    "DEFAULT_COUNTRY_TO_LANGUAGE",
    "DEFAULT_LANGUAGE_TO_COUNTRIES",
    "GeoLanguageMiddleware",
    "HeaderStrategy",
    "LanguageResolver",
    "LanguageStrategy",
    "PathStrategy",
    "QueryStrategy",
    "ResolvedLanguage",
    "build_strategy",
    "format_client_address",
]
