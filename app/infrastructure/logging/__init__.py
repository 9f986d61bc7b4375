"""Structured logging infrastructure.

Centralized logging configuration and utilities using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - bind_request_context(): Context manager for request-scoped logging

Formatters:
    - add_app_info(): Processor to add app name/version
    - add_environment_info(): Processor to add environment name

Example:
    from infrastructure.logging import (
        configure_logging,
        get_module_logger,
        bind_request_context,
    )

    configure_logging(settings=settings)

    logger = get_module_logger()

    with bind_request_context(request_path="/about", client_address="81.2.69.142:50000"):
        logger.info("language_written", language="fr")
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)

from infrastructure.logging.context import (
    bind_request_context,
)

from infrastructure.logging.formatters import (
    add_app_info,
    add_environment_info,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_request_context",
    "add_app_info",
    "add_environment_info",
]
