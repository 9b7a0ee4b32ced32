"""
Resolver Service - Reverse DNS lookups
"""

import socket
from typing import List


def reverse_lookup(ip: str) -> List[str]:
    """
    Resolve the names registered for an IP address.

    Args:
        ip: IP address string

    Returns:
        Primary hostname followed by any aliases

    Raises:
        OSError: If the address has no PTR record or resolution fails
    """
    hostname, aliases, _ = socket.gethostbyaddr(ip)
    return [hostname] + [alias for alias in aliases if alias != hostname]
