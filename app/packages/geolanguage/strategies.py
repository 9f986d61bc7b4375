"""Language strategies.

A strategy reads the language a request already carries and writes a
resolved language into the request, each in its own representation:

- ``HeaderStrategy``: the ``Accept-Language`` header
- ``PathStrategy``: a two-letter first path segment (``/fr/about``)
- ``QueryStrategy``: a configured query parameter (``?lang=fr``)

Writes mutate the ASGI scope in place, so the downstream application and
any redirect URL built from the scope see the rewritten request.
"""

from abc import ABC, abstractmethod

from starlette.datastructures import Headers, MutableHeaders, QueryParams
from starlette.requests import Request

from infrastructure.configuration import (
    ConfigurationError,
    GeoLanguageSettings,
    LanguageStrategyKind,
)

ACCEPT_LANGUAGE = "accept-language"


class LanguageStrategy(ABC):
    """Reads and writes the request language.

    Args:
        redirect: Whether a write should be followed by a redirect.
    """

    kind: LanguageStrategyKind

    def __init__(self, redirect: bool = False):
        self._redirect = redirect

    @abstractmethod
    def read_request_language(self, request: Request) -> str:
        """Return the language the request carries, or "" if none."""

    @abstractmethod
    def write_language(self, request: Request, language: str) -> bool:
        """Write ``language`` into the request.

        Calling this twice with the same language leaves the request as
        after the first call.

        Returns:
            True if the request changed, False if it already carried
            ``language``.
        """

    def redirect_requested(self) -> bool:
        """True if the caller should redirect after a write."""
        return self._redirect


class HeaderStrategy(LanguageStrategy):
    """Carries the language in the ``Accept-Language`` header."""

    kind = LanguageStrategyKind.HEADER

    def read_request_language(self, request: Request) -> str:
        return Headers(scope=request.scope).get(ACCEPT_LANGUAGE, "")

    def write_language(self, request: Request, language: str) -> bool:
        if Headers(scope=request.scope).getlist(ACCEPT_LANGUAGE) == [language]:
            return False
        MutableHeaders(scope=request.scope)[ACCEPT_LANGUAGE] = language
        return True


class PathStrategy(LanguageStrategy):
    """Carries the language as the first path segment.

    Only a two character first segment is read as a language. Writing
    prepends ``/{language}`` and leaves any other existing prefix in place,
    so ``/xx/about`` becomes ``/fr/xx/about``.
    """

    kind = LanguageStrategyKind.PATH

    def read_request_language(self, request: Request) -> str:
        segments = request.scope["path"].split("/")
        if len(segments) > 1 and len(segments[1]) == 2:
            return segments[1]
        return ""

    def write_language(self, request: Request, language: str) -> bool:
        scope = request.scope
        path = scope["path"]
        prefix = f"/{language}"
        if path == prefix or path.startswith(prefix + "/"):
            return False

        scope["path"] = prefix if path == "/" else prefix + path

        raw_path = scope.get("raw_path")
        if raw_path is not None:
            raw_prefix = prefix.encode()
            scope["raw_path"] = raw_prefix if raw_path == b"/" else raw_prefix + raw_path
        return True


class QueryStrategy(LanguageStrategy):
    """Carries the language in a query parameter.

    Args:
        param: Query parameter name.
        redirect: Whether a write should be followed by a redirect.

    Raises:
        ConfigurationError: If ``param`` is empty.
    """

    kind = LanguageStrategyKind.QUERY

    def __init__(self, param: str, redirect: bool = False):
        if not param:
            raise ConfigurationError(
                "LANGUAGE_PARAM is required when LANGUAGE_STRATEGY is 'query'"
            )
        super().__init__(redirect=redirect)
        self.param = param

    def read_request_language(self, request: Request) -> str:
        return QueryParams(request.scope.get("query_string", b"")).get(self.param, "")

    def write_language(self, request: Request, language: str) -> bool:
        scope = request.scope
        current = QueryParams(scope.get("query_string", b"")).multi_items()
        items = []
        written = False
        for key, value in current:
            if key != self.param:
                items.append((key, value))
            elif not written:
                items.append((key, language))
                written = True
        if not written:
            items.append((self.param, language))

        if items == current:
            return False
        scope["query_string"] = str(QueryParams(items)).encode("latin-1")
        return True


def build_strategy(settings: GeoLanguageSettings) -> LanguageStrategy:
    """Create the strategy selected by ``settings.strategy``.

    Args:
        settings: Geo-language settings.

    Returns:
        The configured LanguageStrategy.

    Raises:
        ConfigurationError: For an unknown kind or a query strategy without
            a parameter name.
    """
    redirect = settings.redirect_after_handling
    if settings.strategy is LanguageStrategyKind.HEADER:
        return HeaderStrategy(redirect=redirect)
    if settings.strategy is LanguageStrategyKind.PATH:
        return PathStrategy(redirect=redirect)
    if settings.strategy is LanguageStrategyKind.QUERY:
        return QueryStrategy(param=settings.language_param, redirect=redirect)
    raise ConfigurationError(f"Invalid LANGUAGE_STRATEGY: {settings.strategy}")
