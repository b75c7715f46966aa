"""
IP literal validation.

The IPv6 validator is intentionally simplified: it counts groups around a
single ``::`` and checks group syntax, but does not verify that the
compression actually stands in for at least one zero group.
"""

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DECIMAL_PATTERN = re.compile(r"[0-9]+")
_HEX_GROUP = re.compile(r"[0-9a-fA-F]{1,4}")


@dataclass(frozen=True)
class ParsedAddress:
    """A textual address with its detected version and IPv4 integer form."""
    text: str
    version: int | None
    integer: int | None = None

    @property
    def is_valid(self) -> bool:
        return self.version is not None


def octets(ip: str) -> list[int] | None:
    """Split a dotted-quad into its four octet values, or None if invalid."""
    if not isinstance(ip, str):
        return None

    parts = ip.split(".")
    if len(parts) != 4:
        return None

    values = []
    for part in parts:
        # Leading zeros ("001") are accepted and read as decimal
        if not DECIMAL_PATTERN.fullmatch(part):
            return None
        if len(part.lstrip("0")) > 3:
            return None
        value = int(part, 10)
        if value > 255:
            return None
        values.append(value)
    return values


def pack_octets(values: list[int]) -> int:
    """Big-endian packing of four octets into one unsigned 32-bit value."""
    o0, o1, o2, o3 = values
    return o0 * 256 ** 3 + o1 * 256 ** 2 + o2 * 256 + o3


def is_valid_ipv4(ip: str) -> bool:
    """Check for exactly four dot-separated decimal octets in [0, 255]."""
    return octets(ip) is not None


def is_valid_ipv6(ip: str) -> bool:
    """Check an IPv6 literal (simplified, see module docstring)."""
    if not isinstance(ip, str):
        return False

    if "::" in ip:
        halves = ip.split("::")
        if len(halves) > 2:
            return False
        left = [g for g in halves[0].split(":") if g]
        right = [g for g in halves[1].split(":") if g]
        if len(left) + len(right) > 8:
            return False
    elif len(ip.split(":")) != 8:
        return False

    for group in ip.split(":"):
        if not group:
            continue
        if "." in group:
            # Embedded IPv4 tail, e.g. ::ffff:192.0.2.1
            if not is_valid_ipv4(group):
                return False
        elif not _HEX_GROUP.fullmatch(group):
            return False
    return True


def get_ip_version(ip: str) -> int | None:
    """Return 4 or 6 for a valid literal, None otherwise."""
    if is_valid_ipv4(ip):
        return 4
    if is_valid_ipv6(ip):
        return 6
    return None


def parse_address(ip: str) -> ParsedAddress:
    """Validate an address and attach its numeric form when it is IPv4."""
    version = get_ip_version(ip)
    if version is None:
        logger.debug(f"Rejected address literal: {ip!r}")
        return ParsedAddress(text=ip, version=None)

    if version == 4:
        return ParsedAddress(text=ip, version=4, integer=pack_octets(octets(ip)))

    return ParsedAddress(text=ip, version=6)
