"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for the instances an application was built
with, so routes share them with the middleware.
"""

from typing import Annotated

from fastapi import Depends, Request

from infrastructure.clients.maxmind import MaxMindClient
from infrastructure.configuration import Settings


def get_app_settings(request: Request) -> Settings:
    """Return the settings the application was built with."""
    return request.app.state.settings


def get_app_maxmind_client(request: Request) -> MaxMindClient:
    """Return the MaxMind client the application was built with."""
    return request.app.state.maxmind


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_app_settings)]

# MaxMind client dependency - the instance shared with the middleware
MaxMindClientDep = Annotated[MaxMindClient, Depends(get_app_maxmind_client)]

__all__ = [
    "SettingsDep",
    "MaxMindClientDep",
    "get_app_settings",
    "get_app_maxmind_client",
]
