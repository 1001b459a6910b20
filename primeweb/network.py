"""Working out the client address of an HTTP request."""

from __future__ import annotations

import ipaddress
from typing import Any, Mapping, Optional


def _split_host(hostport: str) -> str:
    """Return the host of ``host:port`` or ``[host]:port``; raise ValueError if malformed."""
    host, sep, port = hostport.rpartition(":")
    if not sep:
        raise ValueError(f"address {hostport}: missing port in address")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    elif ":" in host:
        raise ValueError(f"address {hostport}: too many colons in address")
    if any(c in part for c in "[]" for part in (host, port)):
        raise ValueError(f"address {hostport}: unexpected bracket in address")
    return host


def _is_ip(text: str) -> bool:
    try:
        ipaddress.ip_address(text)
    except ValueError:
        return False
    return "%" not in text


def _forwarded_for(headers: Optional[Mapping[str, Any]]) -> str:
    for key, value in (headers or {}).items():
        if key.lower() == "x-forwarded-for":
            if isinstance(value, str):
                return value
            return str(value[0]) if value else ""
    return ""


def get_ip(remote_addr: str, headers: Optional[Mapping[str, Any]] = None) -> str:
    """Return the client address, preferring an X-Forwarded-For header.

    Raises ValueError when ``remote_addr`` is not a valid ``ip:port`` pair.
    """
    host = _split_host(remote_addr)
    if not _is_ip(host):
        raise ValueError(f"the user ip:{remote_addr} is not in the format of ip:port")
    return _forwarded_for(headers) or host or "forward"


def resolve_client_ip(
    remote_addr: str, headers: Optional[Mapping[str, Any]] = None
) -> str:
    """Return the client address, falling back to the raw host or ``unknown``."""
    try:
        return get_ip(remote_addr, headers)
    except ValueError:
        try:
            host = _split_host(remote_addr)
        except ValueError:
            host = ""
        return host or "unknown"