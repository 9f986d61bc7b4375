"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    MaxMindClientDep,
    SettingsDep,
    get_app_maxmind_client,
    get_app_settings,
)
from infrastructure.services.providers import (
    get_maxmind_client,
    get_settings,
)

__all__ = [
    "MaxMindClientDep",
    "SettingsDep",
    "get_app_maxmind_client",
    "get_app_settings",
    "get_maxmind_client",
    "get_settings",
]
