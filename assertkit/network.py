"""IP address and CIDR prefix validation."""

from __future__ import annotations

import ipaddress
import re

__all__ = ["is_cidr", "is_cidrv4", "is_cidrv6", "is_ip", "is_ipv4", "is_ipv6"]

_PrefixAddress = ipaddress.IPv4Address | ipaddress.IPv6Address

_PREFIX_LENGTH = re.compile(r"[0-9]+", re.ASCII)


def _parse_ip(text: object) -> _PrefixAddress | None:
    """Parse an address without zone; return ``None`` when invalid."""
    if not isinstance(text, str) or "%" in text:
        return None
    try:
        return ipaddress.ip_address(text)
    except ValueError:
        return None


def _is_v4_form(address: _PrefixAddress) -> bool:
    """True for IPv4 addresses and IPv4-mapped IPv6 addresses."""
    if isinstance(address, ipaddress.IPv4Address):
        return True
    return address.ipv4_mapped is not None


def _parse_cidr(prefix: object) -> _PrefixAddress | None:
    """Parse ``address/length``; return the address or ``None`` when invalid."""
    if not isinstance(prefix, str):
        return None
    address_text, slash, length_text = prefix.partition("/")
    if not slash:
        return None
    address = _parse_ip(address_text)
    if address is None:
        return None
    if not _PREFIX_LENGTH.fullmatch(length_text):
        return None
    if int(length_text) > address.max_prefixlen:
        return None
    return address


def is_cidr(prefix: object) -> bool:
    """Return whether ``prefix`` is valid CIDR notation (IPv4 or IPv6)."""
    return _parse_cidr(prefix) is not None


def is_cidrv4(prefix: object) -> bool:
    """Return whether ``prefix`` is valid IPv4 CIDR notation."""
    address = _parse_cidr(prefix)
    return address is not None and _is_v4_form(address)


def is_cidrv6(prefix: object) -> bool:
    """Return whether ``prefix`` is valid IPv6 CIDR notation."""
    address = _parse_cidr(prefix)
    return address is not None and not _is_v4_form(address)


def is_ip(ip_address: object) -> bool:
    """Return whether ``ip_address`` is a valid IPv4 or IPv6 address."""
    return _parse_ip(ip_address) is not None


def is_ipv4(ip_address: object) -> bool:
    """Return whether ``ip_address`` is a valid IPv4 address."""
    address = _parse_ip(ip_address)
    return address is not None and _is_v4_form(address)


def is_ipv6(ip_address: object) -> bool:
    """Return whether ``ip_address`` is a valid IPv6 address."""
    address = _parse_ip(ip_address)
    return address is not None and not _is_v4_form(address)