"""
Local/remote classification of advertised endpoints.
"""

from __future__ import annotations

import ipaddress
import logging
import socket
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeout
from typing import List, Optional, Union
from urllib.parse import urlsplit

from nodestarter.core.errors import URLParseError

logger = logging.getLogger(__name__)

LOCALHOST = "localhost"
DEFAULT_RESOLVE_TIMEOUT = 2.0

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def parse_request_uri(url: str) -> str:
    """Validate an absolute request URI and return its hostname."""
    try:
        parts = urlsplit(url)
        # accessing .port validates it
        parts.port
    except ValueError as exc:
        raise URLParseError(message=f"parse {url!r}: {exc}", context={"url": url}) from exc
    if not parts.scheme or not parts.netloc or not parts.hostname:
        raise URLParseError(message=f"parse {url!r}: invalid URI for request", context={"url": url})
    return parts.hostname


def is_local_url(url: str, *, resolve: bool = False, timeout: float = DEFAULT_RESOLVE_TIMEOUT) -> bool:
    """
    Whether ``url`` points at this host.

    Only ``localhost`` and loopback IP literals are local unless ``resolve`` is
    set, in which case other hostnames are resolved (bounded by ``timeout``)
    and count as local when every resolved address is loopback.

    Raises:
        URLParseError: ``url`` is not an absolute URI with a host.
    """
    hostname = parse_request_uri(url)
    return is_local_host(hostname, resolve=resolve, timeout=timeout)


def is_local_host(host: str, *, resolve: bool = False, timeout: float = DEFAULT_RESOLVE_TIMEOUT) -> bool:
    host = host.strip("[]").lower()
    if host == LOCALHOST:
        return True

    ip = _parse_ip(host)
    if ip is not None:
        return _is_loopback(ip)

    if not resolve:
        return False

    addresses = resolve_host(host, timeout=timeout)
    return bool(addresses) and all(_is_loopback(ip) for ip in addresses)


def resolve_host(host: str, *, timeout: float = DEFAULT_RESOLVE_TIMEOUT) -> List[IPAddress]:
    """Resolve ``host``; returns an empty list on failure or timeout."""
    executor = ThreadPoolExecutor(max_workers=1)
    future = executor.submit(socket.getaddrinfo, host, None)
    try:
        infos = future.result(timeout=timeout)
    except FutureTimeout:
        logger.warning("Resolving %s timed out after %.1fs; treating as non-local", host, timeout)
        return []
    except (OSError, UnicodeError) as exc:
        logger.warning("Resolving %s failed: %s; treating as non-local", host, exc)
        return []
    finally:
        # a hung lookup is abandoned, not joined
        executor.shutdown(wait=False)

    addresses = []
    for info in infos:
        ip = _parse_ip(str(info[4][0]))
        if ip is not None:
            addresses.append(ip)
    return addresses


def _parse_ip(host: str) -> Optional[IPAddress]:
    try:
        return ipaddress.ip_address(host)
    except ValueError:
        return None


def _is_loopback(ip: IPAddress) -> bool:
    if isinstance(ip, ipaddress.IPv6Address) and ip.ipv4_mapped is not None:
        return ip.ipv4_mapped.is_loopback
    return ip.is_loopback
