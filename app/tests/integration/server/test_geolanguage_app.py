"""Integration tests for the application with a real MaxMind client.

Requests go through httpx's ASGI transport so the client address seen by the
middleware is a routable IP literal. The geoip2 reader is the only double.
"""

from unittest.mock import MagicMock, Mock

import httpx
import pytest
from geoip2.errors import AddressNotFoundError

from infrastructure.clients.maxmind import MaxMindClient
from server.server import create_app
from tests.factories import make_settings

COUNTRIES = {
    "81.2.69.142": "GB",
    "2.2.2.2": "FR",
    "5.5.5.5": "CA",
}


def _country(ip: str):
    if ip not in COUNTRIES:
        raise AddressNotFoundError(f"{ip} not in database")
    response = Mock()
    response.country.iso_code = COUNTRIES[ip]
    return response


@pytest.fixture
def reader():
    reader = MagicMock()
    reader.metadata.return_value.database_type = "GeoLite2-City"
    reader.city.side_effect = _country
    return reader


def _client(app, host: str) -> httpx.AsyncClient:
    transport = httpx.ASGITransport(app=app, client=(host, 50000))
    return httpx.AsyncClient(transport=transport, base_url="http://testserver")


@pytest.mark.integration
async def test_path_redirect_for_override_country(reader):
    settings = make_settings(
        LANGUAGE_STRATEGY="path",
        REDIRECT_AFTER_HANDLING=True,
        LANGUAGE_TO_COUNTRIES_OVERRIDE='{"fr": ["CA"]}',
    )
    app = create_app(settings=settings, maxmind=MaxMindClient(settings, reader=reader))

    async with _client(app, "5.5.5.5") as client:
        response = await client.get("/about")

    assert response.status_code == 302
    assert response.headers["location"] == "http://testserver/fr/about"
    reader.city.assert_called_once_with("5.5.5.5")


@pytest.mark.integration
async def test_path_rewrite_reaches_routes(reader):
    settings = make_settings(LANGUAGE_STRATEGY="path")
    app = create_app(settings=settings, maxmind=MaxMindClient(settings, reader=reader))

    async with _client(app, "2.2.2.2") as client:
        response = await client.get("/version")

    # Rewritten to /fr/version, which no route serves
    assert response.status_code == 404


@pytest.mark.integration
async def test_default_language_country_passes_through(reader):
    settings = make_settings(LANGUAGE_STRATEGY="query", LANGUAGE_PARAM="lang")
    app = create_app(settings=settings, maxmind=MaxMindClient(settings, reader=reader))

    async with _client(app, "81.2.69.142") as client:
        response = await client.get("/version")

    assert response.status_code == 200


@pytest.mark.integration
async def test_unknown_address_passes_through(reader):
    settings = make_settings(LANGUAGE_STRATEGY="path", REDIRECT_AFTER_HANDLING=True)
    app = create_app(settings=settings, maxmind=MaxMindClient(settings, reader=reader))

    async with _client(app, "10.0.0.1") as client:
        response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["maxmind"]["database_type"] == "GeoLite2-City"


@pytest.mark.integration
async def test_ipv6_client_is_looked_up(reader):
    settings = make_settings()
    app = create_app(settings=settings, maxmind=MaxMindClient(settings, reader=reader))

    async with _client(app, "2001:db8::1") as client:
        response = await client.get("/version")

    assert response.status_code == 200
    reader.city.assert_called_once_with("2001:db8::1")
