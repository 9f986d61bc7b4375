"""Application configuration settings - main aggregator."""

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.errors import ConfigurationError
from infrastructure.configuration.features import GeoLanguageSettings
from infrastructure.configuration.integrations import MaxMindSettings


class Settings(BaseSettings):
    """Application configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object.
    Settings are organized by concern:

    - **Integrations**: External data sources (MaxMind)
    - **Features**: Feature module configurations (geo-language selection)

    Environment Variables:
        PREFIX: Environment prefix for non-production deployments
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Git commit SHA for deployment tracking
        APP_NAME: Application name attached to log entries

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        db_path = settings.maxmind.MAXMIND_DB_PATH
        languages = settings.geolanguage.supported_languages

        if settings.is_production:
            # Production-specific logic...
        ```
    """

    # Application-level settings
    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"
    APP_NAME: str = "geo-language"

    # Integration settings
    maxmind: MaxMindSettings

    # Feature settings
    geolanguage: GeoLanguageSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    @property
    def environment(self) -> str:
        """Environment name derived from PREFIX."""
        return "production" if self.is_production else self.PREFIX.strip("-_")

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            # Integrations
            "maxmind": MaxMindSettings,
            # Features
            "geolanguage": GeoLanguageSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        frozen=True,
    )


def load_settings(**overrides) -> Settings:
    """Build and validate settings, raising ConfigurationError on failure.

    Args:
        **overrides: Values or settings sections passed to Settings.

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If any section fails validation.
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
