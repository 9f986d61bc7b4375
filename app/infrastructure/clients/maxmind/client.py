"""MaxMind GeoIP2 client for country lookups.

Opens the GeoIP2 database once and resolves transport-reported client
addresses to ISO country codes, returning OperationResult values instead of
raising on per-request failures.
"""

import ipaddress
from typing import TYPE_CHECKING, Callable, Optional, Union

import geoip2.database
import structlog
from geoip2.errors import AddressNotFoundError, GeoIP2Error
from maxminddb.errors import InvalidDatabaseError

from infrastructure.configuration.errors import ConfigurationError
from infrastructure.operations import OperationResult

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = structlog.get_logger()

# Country code the database reports for addresses it cannot place
UNKNOWN_COUNTRY = "-"

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def parse_remote_address(remote_address: str) -> IPAddress:
    """Parse a transport-reported address into an IP address.

    Accepts ``host:port``, ``[v6-host]:port`` and bare IPv4/IPv6 literals.

    Args:
        remote_address: Raw client address, possibly with a port suffix.

    Returns:
        The parsed IPv4Address or IPv6Address.

    Raises:
        ValueError: If no valid IP literal can be extracted.
    """
    address = (remote_address or "").strip()
    if not address:
        raise ValueError("empty address")

    if address.startswith("["):
        host, sep, rest = address[1:].partition("]")
        if not sep or (rest and not (rest.startswith(":") and rest[1:].isdigit())):
            raise ValueError(f"malformed bracketed address: {address}")
        return ipaddress.ip_address(host)

    try:
        return ipaddress.ip_address(address)
    except ValueError:
        pass

    host, sep, port = address.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"missing port in address: {address}")
    if ":" in host:
        # IPv6 with a port must be bracketed
        raise ValueError(f"too many colons in address: {address}")
    return ipaddress.ip_address(host)


class MaxMindClient:
    """Client for MaxMind GeoIP2 country lookups.

    The database reader is opened on construction and shared by every
    lookup; the reader supports concurrent reads.

    Args:
        settings: Settings instance with maxmind.MAXMIND_DB_PATH
        reader: Optional already opened reader (tests, custom databases)

    Raises:
        ConfigurationError: If the database cannot be opened.
    """

    def __init__(
        self,
        settings: "Settings",
        reader: Optional[geoip2.database.Reader] = None,
    ) -> None:
        self._db_path = settings.maxmind.MAXMIND_DB_PATH
        self._logger = logger.bind(component="maxmind_client")
        self._reader = reader if reader is not None else self._open(self._db_path)
        self._lookup = self._select_lookup(self._reader)

    def _open(self, db_path: str) -> geoip2.database.Reader:
        try:
            reader = geoip2.database.Reader(db_path)
        except (OSError, InvalidDatabaseError, ValueError) as e:
            self._logger.error("database_open_failed", error=str(e), db_path=db_path)
            raise ConfigurationError(
                f"Failed to open MaxMind database {db_path}: {e}"
            ) from e
        self._logger.info("database_opened", db_path=db_path)
        return reader

    @staticmethod
    def _select_lookup(reader: geoip2.database.Reader) -> Callable:
        """Pick the reader method matching the database edition."""
        database_type = reader.metadata().database_type
        if "City" in database_type:
            return reader.city
        return reader.country

    def resolve_country(self, remote_address: str) -> OperationResult:
        """Resolve a client address to an ISO country code.

        Args:
            remote_address: Raw client address, possibly with a port suffix

        Returns:
            OperationResult with:
            - SUCCESS and the uppercase country code as data
            - NOT_FOUND (UNKNOWN_COUNTRY) when the database has no country
            - PERMANENT_ERROR (INVALID_ADDRESS) when the address is malformed
            - TRANSIENT_ERROR (LOOKUP_FAILURE) when the database read fails
        """
        log = self._logger.bind(remote_address=remote_address)

        try:
            ip = parse_remote_address(remote_address)
        except ValueError as e:
            log.warning("invalid_remote_address", error=str(e))
            return OperationResult.permanent_error(
                message=f"Invalid client address: {remote_address}",
                error_code="INVALID_ADDRESS",
            )

        try:
            response = self._lookup(str(ip))
        except AddressNotFoundError:
            log.debug("ip_not_found")
            return OperationResult.not_found(
                message=f"IP address not found in database: {ip}",
                error_code="UNKNOWN_COUNTRY",
            )
        except (GeoIP2Error, InvalidDatabaseError, OSError, ValueError) as e:
            log.error("geoip2_lookup_error", error=str(e))
            return OperationResult.transient_error(
                message=f"GeoIP2 lookup error: {e}",
                error_code="LOOKUP_FAILURE",
            )
        except Exception as e:
            log.exception("unexpected_lookup_error", error=str(e))
            return OperationResult.transient_error(
                message=f"Unexpected error during geolocation: {e}",
                error_code="LOOKUP_FAILURE",
            )

        country_code = response.country.iso_code
        if not country_code or country_code == UNKNOWN_COUNTRY:
            log.debug("country_unknown")
            return OperationResult.not_found(
                message=f"No country recorded for {ip}",
                error_code="UNKNOWN_COUNTRY",
            )

        country_code = country_code.upper()
        log.debug("country_resolved", country=country_code)
        return OperationResult.success(data=country_code, message="country resolved")

    def healthcheck(self) -> OperationResult:
        """Check that the database answers lookups.

        Returns:
            OperationResult indicating health status
        """
        log = self._logger.bind(operation="healthcheck")

        # Google public DNS
        result = self.resolve_country("8.8.8.8")

        if result.is_error:
            log.error("healthcheck_failed", error=result.message)
            return OperationResult.permanent_error(
                message=f"MaxMind healthcheck failed: {result.message}",
                error_code="HEALTHCHECK_FAILED",
            )

        log.debug("healthcheck_success")
        return OperationResult.success(
            data={
                "status": "healthy",
                "test_ip": "8.8.8.8",
                "database_type": self._reader.metadata().database_type,
            },
            message="MaxMind database is accessible",
        )

    def close(self) -> None:
        """Release the database reader."""
        self._reader.close()
        self._logger.info("database_closed", db_path=self._db_path)
