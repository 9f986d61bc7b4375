"""Test data factories for deterministic test data generation."""

from tests.factories.geolanguage import (
    FakeMaxMindClient,
    make_request,
    make_settings,
)

__all__ = [
    "FakeMaxMindClient",
    "make_request",
    "make_settings",
]
