"""
GeoIP Service - Country lookups backed by a MaxMind database
"""

import logging

import geoip2.database

logger = logging.getLogger(__name__)


class GeoIPService:
    """
    Country lookup over a local MaxMind GeoIP2/GeoLite2 country database.

    The reader is opened once at startup and shared by all requests.
    """

    def __init__(self, database_path: str):
        self.database_path = database_path
        self._reader = geoip2.database.Reader(database_path)
        logger.info(f"GeoIP database loaded: {database_path}")

    def country(self, ip: str) -> str:
        """
        Look up the ISO country code for an IP address.

        Args:
            ip: IP address string

        Returns:
            ISO 3166-1 alpha-2 code, or an empty string if the database has
            a record without a country

        Raises:
            geoip2.errors.AddressNotFoundError: If the address is not in the database
            ValueError: If the address is malformed
        """
        response = self._reader.country(ip)
        return response.country.iso_code or ''

    def close(self) -> None:
        """Close the underlying database reader."""
        self._reader.close()
