"""MaxMind GeoIP2 client for infrastructure layer.

Public API (Package Level):
- MaxMindClient: Country lookups against a GeoIP2 database
- parse_remote_address: Split a transport address into an IP literal
- UNKNOWN_COUNTRY: Sentinel country code for unplaced addresses

Developer Usage (Recommended):
    from infrastructure.services import MaxMindClientDep

    @router.get("/health")
    def health(maxmind: MaxMindClientDep):
        return maxmind.healthcheck().data
"""

from infrastructure.clients.maxmind.client import (
    UNKNOWN_COUNTRY,
    MaxMindClient,
    parse_remote_address,
)

__all__ = [
    "MaxMindClient",
    "UNKNOWN_COUNTRY",
    "parse_remote_address",
]
