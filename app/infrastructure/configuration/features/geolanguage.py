"""Geo-language middleware feature settings."""

import json
from enum import Enum
from typing import Annotated, Any, Optional

import structlog
from pydantic import Field, field_validator, model_validator
from pydantic_settings import NoDecode

from infrastructure.configuration.base import FeatureSettings

logger = structlog.stdlib.get_logger().bind(component="config.geolanguage")


class LanguageStrategyKind(str, Enum):
    """Where the resolved language is read from and written to."""

    HEADER = "header"
    PATH = "path"
    QUERY = "query"


class GeoLanguageSettings(FeatureSettings):
    """Configuration for country based language selection.

    Environment Variables:
        SUPPORTED_LANGUAGES: Languages the deployment accepts, as a JSON list
            or a comma-separated string (e.g. ``en,fr,de``)
        DEFAULT_LANGUAGE: Fallback language when resolution fails
        LANGUAGE_STRATEGY: ``header`` (default), ``path`` or ``query``
        LANGUAGE_PARAM: Query parameter name, required for ``query``
        HANDLE_DEFAULT_LANGUAGE: Also inject the default language (default false)
        REDIRECT_AFTER_HANDLING: Redirect after injecting a language (default false)
        LANGUAGE_TO_COUNTRIES_OVERRIDE: JSON mapping of language to country
            codes, consulted before the built-in table

    Override Configuration (LANGUAGE_TO_COUNTRIES_OVERRIDE):
        Schema:
            {
                "fr": ["CA", "BE"],
                "de": ["CH"]
            }

        Country codes are case-insensitive and stored uppercase. A country
        must not be listed under two languages; when it is, the first
        language listed wins.

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if settings.geolanguage.strategy is LanguageStrategyKind.QUERY:
            param = settings.geolanguage.language_param
        ```
    """

    supported_languages: Annotated[list[str], NoDecode] = Field(
        alias="SUPPORTED_LANGUAGES",
        description="Ordered set of language codes the deployment accepts",
    )
    default_language: str = Field(
        alias="DEFAULT_LANGUAGE",
        description="Language used when resolution fails or is unsupported",
    )
    strategy: LanguageStrategyKind = Field(
        default=LanguageStrategyKind.HEADER,
        alias="LANGUAGE_STRATEGY",
        description="Request representation of the language",
    )
    language_param: str = Field(
        default="",
        alias="LANGUAGE_PARAM",
        description="Query parameter carrying the language (query strategy)",
    )
    handle_default_language: bool = Field(
        default=False,
        alias="HANDLE_DEFAULT_LANGUAGE",
        description="Inject the language even when it equals the default",
    )
    redirect_after_handling: bool = Field(
        default=False,
        alias="REDIRECT_AFTER_HANDLING",
        description="Redirect to the rewritten URL after injecting a language",
    )
    language_overrides: Annotated[dict[str, list[str]], NoDecode] = Field(
        default_factory=dict,
        alias="LANGUAGE_TO_COUNTRIES_OVERRIDE",
        description="Language to country codes, consulted before the built-in table",
    )

    @field_validator("supported_languages", mode="before")
    @classmethod
    def _parse_supported_languages(cls, v: Optional[Any]) -> Any:
        """Parse SUPPORTED_LANGUAGES from a JSON list or comma-separated string."""
        if v is None:
            return []
        if isinstance(v, str):
            s = v.strip()
            if s.startswith("["):
                try:
                    return json.loads(s)
                except (json.JSONDecodeError, ValueError) as e:
                    raise ValueError(
                        f"Invalid SUPPORTED_LANGUAGES JSON: {e} (value: {s[:80]}...)"
                    ) from e
            return s.split(",")
        return v

    @field_validator("supported_languages", mode="after")
    @classmethod
    def _validate_supported_languages(cls, v: list[str]) -> list[str]:
        """Strip entries, drop duplicates while keeping order, require one."""
        languages: list[str] = []
        for lang in v:
            lang = lang.strip()
            if not lang:
                raise ValueError("SUPPORTED_LANGUAGES must not contain empty entries")
            if lang not in languages:
                languages.append(lang)
        if not languages:
            raise ValueError("SUPPORTED_LANGUAGES requires at least one language")
        return languages

    @field_validator("default_language", mode="after")
    @classmethod
    def _validate_default_language(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("DEFAULT_LANGUAGE is required")
        return v

    @field_validator("strategy", mode="before")
    @classmethod
    def _normalize_strategy(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("language_param", mode="after")
    @classmethod
    def _strip_language_param(cls, v: str) -> str:
        return v.strip()

    @field_validator("language_overrides", mode="before")
    @classmethod
    def _parse_overrides(cls, v: Optional[Any]) -> Any:
        """Parse LANGUAGE_TO_COUNTRIES_OVERRIDE from JSON string or dict."""
        if v is None:
            return {}
        if isinstance(v, dict):
            return v
        if isinstance(v, str):
            s = v.strip()
            if (s.startswith("'") and s.endswith("'")) or (
                s.startswith('"') and s.endswith('"')
            ):
                s = s[1:-1]
            try:
                return json.loads(s) if s else {}
            except (json.JSONDecodeError, ValueError) as e:
                raise ValueError(
                    f"Invalid LANGUAGE_TO_COUNTRIES_OVERRIDE JSON: {e} (value: {s[:80]}...)"
                ) from e
        raise ValueError(
            "LANGUAGE_TO_COUNTRIES_OVERRIDE must be a JSON string or a mapping"
        )

    @field_validator("language_overrides", mode="after")
    @classmethod
    def _normalize_overrides(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        """Uppercase country codes and warn about countries listed twice."""
        normalized: dict[str, list[str]] = {}
        seen: dict[str, str] = {}
        for language, countries in v.items():
            codes: list[str] = []
            for country in countries:
                code = country.strip().upper()
                if not code:
                    continue
                if code in seen and seen[code] != language:
                    logger.warning(
                        "override_country_listed_twice",
                        country=code,
                        kept=seen[code],
                        ignored=language,
                    )
                seen.setdefault(code, language)
                if code not in codes:
                    codes.append(code)
            normalized[language.strip()] = codes
        return normalized

    @model_validator(mode="after")
    def _validate_strategy_requirements(self) -> "GeoLanguageSettings":
        """The query strategy needs a parameter name."""
        if self.strategy is LanguageStrategyKind.QUERY and not self.language_param:
            raise ValueError(
                "LANGUAGE_PARAM is required when LANGUAGE_STRATEGY is 'query'"
            )
        if self.default_language not in self.supported_languages:
            logger.warning(
                "default_language_not_supported",
                default_language=self.default_language,
                supported_languages=self.supported_languages,
            )
        return self
