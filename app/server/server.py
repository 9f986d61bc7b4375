from typing import TYPE_CHECKING, Optional

from fastapi import FastAPI

from api.router import api_router
from infrastructure.clients.maxmind import MaxMindClient
from infrastructure.logging import get_module_logger
from infrastructure.services import get_maxmind_client, get_settings
from packages.geolanguage import GeoLanguageMiddleware
from server.lifespan import lifespan

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = get_module_logger()


def create_app(
    settings: Optional["Settings"] = None,
    maxmind: Optional[MaxMindClient] = None,
) -> FastAPI:
    """Build the FastAPI application with the geo-language middleware.

    The MaxMind client is opened here so a bad database path fails before
    the application starts serving.

    Args:
        settings: Settings to use; loaded from the environment if omitted.
        maxmind: MaxMind client to share; opened from settings if omitted.

    Raises:
        ConfigurationError: If settings are invalid or the database cannot
            be opened.
    """
    if settings is None:
        settings = get_settings()
        maxmind = maxmind if maxmind is not None else get_maxmind_client()
    elif maxmind is None:
        maxmind = MaxMindClient(settings)

    handler = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    handler.state.settings = settings
    handler.state.maxmind = maxmind

    handler.add_middleware(GeoLanguageMiddleware, settings=settings, maxmind=maxmind)
    handler.include_router(api_router)

    logger.info("application_created", app_name=settings.APP_NAME)
    return handler
