"""Country to language resolution.

Resolves a country code to a language using an operator override table
first and the built-in table second, then applies the deployment's
supported languages and default language.
"""

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Sequence

import structlog

from packages.geolanguage.tables import (
    DEFAULT_LANGUAGE_TO_COUNTRIES,
    LanguageTable,
    build_table,
    flatten_table,
    normalize_country,
)

logger = structlog.get_logger().bind(component="geolanguage.resolver")


@dataclass(frozen=True)
class ResolvedLanguage:
    """Language chosen for one request.

    Attributes:
        code: Language code to use.
        is_default: True when ``code`` is the configured default language.
    """

    code: str
    is_default: bool


class LanguageResolver:
    """Maps country codes to language codes.

    Both tables are flattened into a single country -> language dict on
    construction; override entries replace default entries for the same
    country.

    Args:
        overrides: Language -> countries, consulted before ``defaults``.
        defaults: Language -> countries, the built-in table unless given.
    """

    def __init__(
        self,
        overrides: Optional[Mapping[str, Iterable[str]]] = None,
        defaults: Mapping[str, Iterable[str]] = DEFAULT_LANGUAGE_TO_COUNTRIES,
    ):
        self.overrides: LanguageTable = build_table(overrides or {})
        self.defaults: LanguageTable = build_table(defaults)

        lookup = flatten_table(self.defaults)
        lookup.update(flatten_table(overrides or {}))
        self._country_to_language = lookup
        self._known_languages = frozenset(self.overrides) | frozenset(self.defaults)

    def resolve_language(self, country: Optional[str]) -> Optional[str]:
        """Return the language for a country, or None when unresolved.

        Args:
            country: ISO country code in any case, or None for unknown.
        """
        if not country:
            return None
        return self._country_to_language.get(normalize_country(country))

    def is_known_language(self, code: str) -> bool:
        """True if ``code`` is a language of either table."""
        return code in self._known_languages

    def choose(
        self,
        country: Optional[str],
        supported_languages: Sequence[str],
        default_language: str,
    ) -> ResolvedLanguage:
        """Pick the working language for a request.

        Unknown countries, unmapped countries and languages outside
        ``supported_languages`` all fall back to ``default_language``.

        Args:
            country: ISO country code, or None when the location is unknown.
            supported_languages: Languages the deployment accepts.
            default_language: Fallback language.

        Returns:
            ResolvedLanguage with the chosen code.
        """
        language = self.resolve_language(country)
        if language is None:
            logger.debug("language_unresolved", country=country)
            language = default_language
        elif language not in supported_languages:
            logger.debug(
                "language_not_supported", country=country, language=language
            )
            language = default_language

        return ResolvedLanguage(
            code=language, is_default=language == default_language
        )
