"""MaxMind integration settings."""

from pydantic import Field, field_validator

from infrastructure.configuration.base import IntegrationSettings


class MaxMindSettings(IntegrationSettings):
    """MaxMind GeoIP database configuration.

    Environment Variables:
        MAXMIND_DB_PATH: Path to a MaxMind GeoIP2/GeoLite2 database file
            (Country or City edition)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        db_path = settings.maxmind.MAXMIND_DB_PATH
        ```
    """

    MAXMIND_DB_PATH: str = Field(
        default="./geodb/GeoLite2-City.mmdb", alias="MAXMIND_DB_PATH"
    )

    @field_validator("MAXMIND_DB_PATH")
    @classmethod
    def _require_db_path(cls, v: str) -> str:
        """Reject an empty database path."""
        if not v or not v.strip():
            raise ValueError("MAXMIND_DB_PATH is required")
        return v.strip()
