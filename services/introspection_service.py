"""
Introspection Service - Builds the key/value view of a request
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from werkzeug.wrappers import Request

from services.lookup_service import LookupService
from utils.constants import (
    DERIVED_KEYS,
    HIDDEN_HEADERS,
    HEADER_COUNTRY,
    HEADER_HOSTNAME,
    HEADER_IP,
    KEY_COUNTRY,
    KEY_HOSTNAME,
    KEY_IP,
    LOOKUP_KEYS
)
from utils.exceptions import UnknownKeyError, UnresolvableIPError
from utils.request_utils import IPAddress, ip_from_request

logger = logging.getLogger(__name__)


class RequestIntrospector:
    """
    Resolves the client IP and exposes request headers plus derived
    attributes under canonical (lowercase) keys.

    Derived attributes are only resolved when a caller asks for them.
    """

    def __init__(self, lookup_service: LookupService, trusted_header: Optional[str] = None):
        self.lookup_service = lookup_service
        self.trusted_header = trusted_header or None

    def client_ip(self, req: Request) -> IPAddress:
        """
        Resolve the client IP.

        Raises:
            UnresolvableIPError: If the request carries no valid IP
        """
        try:
            return ip_from_request(req, self.trusted_header)
        except UnresolvableIPError:
            logger.info(f"No valid IP in request (remote address: {req.remote_addr!r})")
            raise

    def lookup(self, req: Request, key: str) -> str:
        """
        Look up one value from the request view.

        Only the derived attribute being asked for is resolved.

        Args:
            req: Request object
            key: Key to look up, case-insensitive

        Returns:
            The value, possibly empty

        Raises:
            UnresolvableIPError: If the client IP cannot be resolved
            UnknownKeyError: If the key is neither derived nor a request header
        """
        key = key.lower()
        derived_keys = (key,) if key in LOOKUP_KEYS else ()
        view = self.request_view(req, derived_keys)
        if key not in view:
            raise UnknownKeyError(key)
        return view[key]

    def request_view(self, req: Request, derived_keys=LOOKUP_KEYS) -> Dict[str, str]:
        """
        Build the request view with canonical keys.

        Args:
            req: Request object
            derived_keys: Looked-up attributes to include besides the IP

        Returns:
            Mapping of lowercase header names and derived keys to values
        """
        ip = str(self.client_ip(req))
        view = {name.lower(): value for name, value in _exposed_headers(req)}
        view[KEY_IP] = ip
        if derived_keys:
            view.update(self.lookup_service.lookup(ip, derived_keys))
        return view

    def all_values(self, req: Request) -> Dict[str, List[str]]:
        """
        Build the header-style view used by "all" responses.

        Header names keep their received case; every value is a list of
        strings. Derived attributes replace any client-sent header of the
        same name.

        Returns:
            Mapping of header names to value lists
        """
        ip = str(self.client_ip(req))
        values: Dict[str, List[str]] = {}
        for name, value in _exposed_headers(req):
            values.setdefault(name, []).append(value)

        derived = self.lookup_service.lookup(ip)
        values[HEADER_IP] = [ip]
        values[HEADER_HOSTNAME] = [derived[KEY_HOSTNAME]]
        values[HEADER_COUNTRY] = [derived[KEY_COUNTRY]]
        return values


def _exposed_headers(req: Request) -> Iterator[Tuple[str, str]]:
    """Request headers that belong in the view: no Host, no derived names."""
    for name, value in req.headers.items():
        lowered = name.lower()
        if lowered in HIDDEN_HEADERS or lowered in DERIVED_KEYS:
            continue
        yield name, value
