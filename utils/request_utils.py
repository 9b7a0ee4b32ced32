"""
Request Utilities - Client IP extraction helpers
"""

import ipaddress
from typing import Optional, Union

from werkzeug.wrappers import Request

from utils.exceptions import UnresolvableIPError

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def split_host_port(address: str) -> str:
    """
    Strip an optional port suffix from a remote address.

    Accepts ``host``, ``host:port``, ``[v6]:port``, ``[v6]`` and bare IPv6
    addresses.

    Args:
        address: Remote address as reported by the server

    Returns:
        Host part of the address
    """
    address = address.strip()
    if address.startswith('['):
        end = address.find(']')
        if end != -1:
            return address[1:end]
        return address
    # More than one colon and no brackets: a bare IPv6 address
    if address.count(':') == 1:
        host, _, port = address.partition(':')
        if port.isdigit():
            return host
    return address


def parse_ip(value: Optional[str]) -> Optional[IPAddress]:
    """
    Parse a string as an IP address.

    IPv4-mapped IPv6 addresses are returned as their IPv4 form.

    Returns:
        The parsed address, or None if the value is not an IP
    """
    if not value:
        return None
    try:
        ip = ipaddress.ip_address(value.strip())
    except ValueError:
        return None
    if isinstance(ip, ipaddress.IPv6Address) and ip.ipv4_mapped is not None:
        return ip.ipv4_mapped
    return ip


def ip_from_request(req: Request, trusted_header: Optional[str] = 'X-Real-IP') -> IPAddress:
    """
    Resolve the client IP of a request.

    The trusted header wins when it holds a valid IP. Otherwise the remote
    address (minus any port) is used.

    Args:
        req: Werkzeug/Flask request object
        trusted_header: Header to accept as authoritative, or None to ignore
            forwarding headers entirely

    Returns:
        Client IP address

    Raises:
        UnresolvableIPError: If neither source yields a valid IP
    """
    if trusted_header:
        ip = parse_ip(req.headers.get(trusted_header))
        if ip is not None:
            return ip

    remote_addr = req.remote_addr
    if remote_addr:
        ip = parse_ip(split_host_port(remote_addr))
        if ip is not None:
            return ip

    raise UnresolvableIPError()
