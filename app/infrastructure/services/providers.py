"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.clients.maxmind import MaxMindClient
from infrastructure.configuration import Settings, load_settings


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.

    Raises:
        ConfigurationError: If the environment does not hold a valid configuration.
    """
    return load_settings()


@lru_cache
def get_maxmind_client() -> MaxMindClient:
    """Provider for the MaxMind client opened against the configured database.

    Returns:
        MaxMindClient: Cached client sharing one database reader.

    Raises:
        ConfigurationError: If the database cannot be opened.
    """
    return MaxMindClient(settings=get_settings())
