"""Geo-language middleware.

Resolves the client's country from its address, maps the country to a
language and injects the language into the request through the configured
strategy, optionally redirecting to the rewritten URL.

Per request:

1. Locate: MaxMind lookup of the client address. Malformed addresses and
   database errors end the request with a 500.
2. Resolve: override table, then built-in table; unresolved or unsupported
   languages fall back to the default language.
3. Decide: the default language is left alone unless
   HANDLE_DEFAULT_LANGUAGE is set; a known language already on the request
   is respected; otherwise the strategy writes the language.
4. Redirect after a write that changed the request when
   REDIRECT_AFTER_HANDLING is set, else forward.
"""

from typing import TYPE_CHECKING, Optional

from starlette.datastructures import URL, Address
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse, RedirectResponse, Response

from infrastructure.clients.maxmind import MaxMindClient
from infrastructure.configuration import LanguageStrategyKind
from infrastructure.logging import bind_request_context, get_module_logger
from packages.geolanguage.resolver import LanguageResolver
from packages.geolanguage.strategies import build_strategy

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from infrastructure.configuration import Settings

logger = get_module_logger()

CORRELATION_ID_HEADER = "X-Correlation-ID"


def format_client_address(client: Optional[Address]) -> str:
    """Render the transport-reported client as ``host:port``.

    IPv6 hosts are bracketed. Returns "" when the server reports no client.
    """
    if client is None:
        return ""
    host, port = client.host, client.port
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


class GeoLanguageMiddleware(BaseHTTPMiddleware):
    """Inject a language chosen from the client's country.

    Args:
        app: The ASGI application to wrap.
        settings: Application settings (``geolanguage`` and ``maxmind``).
        maxmind: Optional client; opened from ``settings.maxmind`` if omitted.

    Raises:
        ConfigurationError: If the database cannot be opened or the strategy
            cannot be built.
    """

    def __init__(
        self,
        app,
        settings: "Settings",
        maxmind: Optional[MaxMindClient] = None,
    ):
        super().__init__(app)
        self.config = settings.geolanguage
        self.maxmind = maxmind if maxmind is not None else MaxMindClient(settings)
        self.resolver = LanguageResolver(overrides=self.config.language_overrides)
        self.strategy = build_strategy(self.config)

        if (
            self.config.redirect_after_handling
            and self.config.strategy is LanguageStrategyKind.HEADER
        ):
            # Clients do not resend a header after a redirect
            logger.warning("header_strategy_redirect_enabled")

        logger.info(
            "geolanguage_middleware_initialized",
            strategy=self.config.strategy.value,
            supported_languages=self.config.supported_languages,
            default_language=self.config.default_language,
            overrides=len(self.config.language_overrides),
        )

    async def dispatch(
        self, request: Request, call_next: "Callable[[Request], Awaitable[Response]]"
    ) -> Response:
        remote_address = format_client_address(request.client)
        with bind_request_context(
            correlation_id=request.headers.get(CORRELATION_ID_HEADER),
            request_path=request.url.path,
            request_method=request.method,
            client_address=remote_address,
        ):
            response = self.handle(request, remote_address)
            if response is not None:
                return response
            return await call_next(request)

    def handle(self, request: Request, remote_address: str) -> Optional[Response]:
        """Apply the language policy to ``request``.

        Args:
            request: Incoming request, mutated in place by a write.
            remote_address: Client address as ``host:port``.

        Returns:
            A response that ends the request (error or redirect), or None to
            forward the request to the next handler.
        """
        result = self.maxmind.resolve_country(remote_address)
        if result.is_error:
            logger.error(
                "country_resolution_failed",
                error_code=result.error_code,
                error=result.message,
            )
            return PlainTextResponse("Internal Server Error", status_code=500)

        country = result.data if result.is_success else None
        resolved = self.resolver.choose(
            country,
            self.config.supported_languages,
            self.config.default_language,
        )
        log = logger.bind(country=country, language=resolved.code)

        if resolved.is_default and not self.config.handle_default_language:
            log.debug("default_language_passthrough")
            return None

        current = self.strategy.read_request_language(request)
        if current and self.resolver.is_known_language(current):
            log.debug("request_language_respected", request_language=current)
            return None

        if not self.strategy.write_language(request, resolved.code):
            log.debug("language_already_present", strategy=self.strategy.kind.value)
            return None
        log.info("language_written", strategy=self.strategy.kind.value)

        if self.strategy.redirect_requested():
            url = str(URL(scope=request.scope))
            log.info("redirect_issued", location=url)
            return RedirectResponse(url, status_code=302)

        return None
