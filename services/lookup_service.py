"""
Lookup Service - Derived attribute resolution (hostname, country)

Lookups are best effort. Failures and timeouts degrade to an empty string
and are never surfaced to the client.
"""

import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor, TimeoutError as FutureTimeoutError
from typing import Callable, Dict, List, Optional

from utils.constants import HOSTNAME_SEPARATOR, KEY_COUNTRY, KEY_HOSTNAME
from utils.exceptions import LookupFailure

logger = logging.getLogger(__name__)

ReverseResolver = Callable[[str], List[str]]
CountryLookup = Callable[[str], str]


class LookupService:
    """
    Service class for resolving derived attributes of a client IP.

    Collaborators are supplied at startup and never change afterwards:
    a reverse resolver (IP -> list of names) and an optional country
    lookup (IP -> ISO code). Both may raise on failure.

    Each collaborator has its own worker pool, so stalled reverse DNS
    queries never delay country lookups.
    """

    def __init__(
        self,
        reverse_resolver: Optional[ReverseResolver] = None,
        country_lookup: Optional[CountryLookup] = None,
        timeout: float = 1.0,
        max_workers: int = 8,
        country_workers: int = 2
    ):
        self.reverse_resolver = reverse_resolver
        self.country_lookup = country_lookup
        self.timeout = timeout
        self._executors = {
            KEY_HOSTNAME: ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix='lookup-dns'),
            KEY_COUNTRY: ThreadPoolExecutor(max_workers=country_workers, thread_name_prefix='lookup-country'),
        }

    def resolve_hostname(self, ip: str) -> str:
        """
        Reverse-resolve an IP and join the names.

        Raises:
            LookupFailure: If no resolver is configured or resolution fails
        """
        if self.reverse_resolver is None:
            raise LookupFailure("reverse DNS is not configured")
        try:
            names = self.reverse_resolver(ip)
        except Exception as e:
            raise LookupFailure(f"reverse DNS failed for {ip}: {str(e)}") from e
        return HOSTNAME_SEPARATOR.join(names or [])

    def resolve_country(self, ip: str) -> str:
        """
        Look up the country code of an IP.

        Raises:
            LookupFailure: If no country lookup is configured or it fails
        """
        if self.country_lookup is None:
            raise LookupFailure("country lookup is not configured")
        try:
            return self.country_lookup(ip) or ''
        except Exception as e:
            raise LookupFailure(f"country lookup failed for {ip}: {str(e)}") from e

    def hostname(self, ip: str) -> str:
        """Hostname for an IP, or an empty string if unknown."""
        return self.lookup(ip, (KEY_HOSTNAME,))[KEY_HOSTNAME]

    def country(self, ip: str) -> str:
        """Country code for an IP, or an empty string if unknown."""
        return self.lookup(ip, (KEY_COUNTRY,))[KEY_COUNTRY]

    def lookup(self, ip: str, keys=(KEY_HOSTNAME, KEY_COUNTRY)) -> Dict[str, str]:
        """
        Resolve derived attributes concurrently against one deadline.

        Args:
            ip: Client IP address string
            keys: Derived keys to resolve

        Returns:
            Mapping of each requested key to its value ('' when unknown)
        """
        resolvers = {
            KEY_HOSTNAME: self.resolve_hostname,
            KEY_COUNTRY: self.resolve_country,
        }
        futures: Dict[str, Future] = {
            key: self._executors[key].submit(resolvers[key], ip) for key in keys
        }

        deadline = time.monotonic() + self.timeout
        results: Dict[str, str] = {}
        for key, future in futures.items():
            remaining = max(0.0, deadline - time.monotonic())
            try:
                results[key] = future.result(timeout=remaining)
            except FutureTimeoutError:
                future.cancel()
                logger.debug(f"Lookup of {key} for {ip} timed out after {self.timeout}s")
                results[key] = ''
            except LookupFailure as e:
                logger.debug(str(e))
                results[key] = ''
        return results

    def shutdown(self) -> None:
        """Stop the worker pools without waiting for in-flight lookups."""
        for executor in self._executors.values():
            executor.shutdown(wait=False, cancel_futures=True)
