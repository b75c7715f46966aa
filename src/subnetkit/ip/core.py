"""
Core IP classification and CIDR functionality.
"""

import logging
from dataclasses import dataclass
from typing import Iterator

from netaddr import IPAddress

from subnetkit.ip.codec import (
    IPV4_MAX,
    integer_to_ip,
    ip_to_binary,
    ip_to_hex,
    prefix_to_mask,
)
from subnetkit.ip.parser import DECIMAL_PATTERN, octets, parse_address
from subnetkit.ip.ranges import (
    is_link_local_ipv6,
    is_loopback_ipv4,
    is_loopback_ipv6,
    is_multicast_ipv4,
    is_multicast_ipv6,
    is_private_ipv4,
    is_private_ipv6,
    is_reserved_ipv4,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddressClassification:
    """Classification of a single IP address."""
    ip: str
    is_valid: bool
    version: int | None
    is_private: bool = False
    is_public: bool = False
    is_reserved: bool = False
    is_loopback: bool = False
    is_multicast: bool = False
    is_link_local: bool = False
    binary: str | None = None
    hex: str | None = None
    integer: int | None = None


@dataclass(frozen=True)
class CIDRBlock:
    """Boundaries of an IPv4 CIDR block."""
    network: str = ""
    subnet_mask: str = ""
    broadcast: str = ""
    first_host: str = ""
    last_host: str = ""
    host_count: int = 0
    prefix_length: int = 0
    is_valid: bool = False
    error: str | None = None


@dataclass(frozen=True)
class SubnetInfo:
    """Information about a subnet."""
    network_address: str
    subnet_mask: str
    prefix_length: int
    wildcard_mask: str
    first_host: str
    last_host: str
    broadcast_address: str
    total_hosts: int
    usable_hosts: int
    network_class: str
    cidr: str


def analyze_ip(ip: str) -> AddressClassification:
    """Classify an IP address. Invalid input yields an all-false record."""
    parsed = parse_address(ip)

    if parsed.version is None:
        return AddressClassification(ip=ip, is_valid=False, version=None)

    if parsed.version == 4:
        is_private = is_private_ipv4(ip)
        is_loopback = is_loopback_ipv4(ip)
        is_multicast = is_multicast_ipv4(ip)
        is_reserved = is_reserved_ipv4(ip)

        return AddressClassification(
            ip=ip,
            is_valid=True,
            version=4,
            is_private=is_private,
            is_public=not (is_private or is_reserved or is_loopback),
            is_reserved=is_reserved,
            is_loopback=is_loopback,
            is_multicast=is_multicast,
            binary=ip_to_binary(ip),
            hex=ip_to_hex(ip),
            integer=parsed.integer,
        )

    is_link_local = is_link_local_ipv6(ip)
    is_loopback = is_loopback_ipv6(ip)
    is_multicast = is_multicast_ipv6(ip)
    is_private = is_private_ipv6(ip)

    return AddressClassification(
        ip=ip,
        is_valid=True,
        version=6,
        is_private=is_private,
        is_public=not (is_private or is_loopback or is_multicast),
        is_loopback=is_loopback,
        is_multicast=is_multicast,
        is_link_local=is_link_local,
        hex=ip.replace(":", ""),
    )


def _invalid_cidr(cidr: str, error: str) -> CIDRBlock:
    logger.debug(f"Rejected CIDR {cidr!r}: {error}")
    return CIDRBlock(is_valid=False, error=error)


def parse_cidr(cidr: str) -> CIDRBlock:
    """Compute network, broadcast and host range for ``a.b.c.d/n``.

    Malformed input never raises; the returned block has ``is_valid`` False,
    an ``error`` message and empty/zero fields.
    """
    if not isinstance(cidr, str):
        return _invalid_cidr(cidr, "Invalid CIDR format")

    parts = cidr.split("/")
    if len(parts) != 2:
        return _invalid_cidr(cidr, "Invalid CIDR format")

    address, prefix = parts
    if not address or not prefix:
        return _invalid_cidr(cidr, "Invalid CIDR format: missing IP or prefix")

    parsed = parse_address(address)
    if parsed.version != 4:
        return _invalid_cidr(cidr, "Invalid IP address")

    if not DECIMAL_PATTERN.fullmatch(prefix):
        return _invalid_cidr(cidr, "Invalid prefix length")

    # Over-long digit strings never reach int()
    if len(prefix.lstrip("0")) > 2 or int(prefix, 10) > 32:
        return _invalid_cidr(cidr, "Prefix length must be between 0 and 32")

    prefix_length = int(prefix, 10)

    mask = prefix_to_mask(prefix_length)
    network = parsed.integer & mask
    broadcast = network | (~mask & IPV4_MAX)

    # /31 and /32 get the same formula; only the count is clamped
    first_host = network + 1
    last_host = broadcast - 1

    return CIDRBlock(
        network=integer_to_ip(network),
        subnet_mask=integer_to_ip(mask),
        broadcast=integer_to_ip(broadcast),
        first_host=integer_to_ip(first_host),
        last_host=integer_to_ip(last_host),
        host_count=max(0, last_host - first_host + 1),
        prefix_length=prefix_length,
        is_valid=True,
    )


def network_class(ip: str) -> str:
    """Legacy classful network class from the first octet."""
    values = octets(ip)
    if values is None:
        return "Unknown"

    first = values[0]
    if 1 <= first <= 126:
        return "A"
    if 128 <= first <= 191:
        return "B"
    if 192 <= first <= 223:
        return "C"
    if 224 <= first <= 239:
        return "D (Multicast)"
    if 240 <= first <= 255:
        return "E (Reserved)"
    return "Unknown"


def _mask_to_prefix(mask: str | int) -> int:
    """Resolve a prefix length from ``24``, ``"24"``, ``"/24"`` or ``"255.255.255.0"``."""
    if isinstance(mask, bool):
        raise ValueError(f"Invalid subnet mask: {mask!r}")

    if isinstance(mask, int):
        bits = mask
    elif isinstance(mask, str) and "." in mask:
        values = octets(mask)
        if values is None:
            raise ValueError(f"Invalid subnet mask: {mask}")
        netmask = IPAddress(".".join(str(v) for v in values), 4)
        if not netmask.is_netmask():
            raise ValueError(f"Subnet mask {mask} is not contiguous")
        return netmask.netmask_bits()
    elif isinstance(mask, str):
        text = mask[1:] if mask.startswith("/") else mask
        if not DECIMAL_PATTERN.fullmatch(text):
            raise ValueError(f"Invalid CIDR notation: {mask}")
        if len(text.lstrip("0")) > 2:
            raise ValueError("Prefix length must be between 0 and 32")
        bits = int(text, 10)
    else:
        raise ValueError(f"Invalid subnet mask: {mask!r}")

    if not 0 <= bits <= 32:
        raise ValueError(f"Prefix length /{bits} must be between 0 and 32")
    return bits


def _subnet_info(network: int, prefix_length: int, address: str) -> SubnetInfo:
    mask = prefix_to_mask(prefix_length)
    wildcard = ~mask & IPV4_MAX
    broadcast = network | wildcard
    total_hosts = 2 ** (32 - prefix_length)

    return SubnetInfo(
        network_address=integer_to_ip(network),
        subnet_mask=integer_to_ip(mask),
        prefix_length=prefix_length,
        wildcard_mask=integer_to_ip(wildcard),
        first_host=integer_to_ip(network + 1),
        last_host=integer_to_ip(broadcast - 1),
        broadcast_address=integer_to_ip(broadcast),
        total_hosts=total_hosts,
        usable_hosts=max(0, total_hosts - 2),
        network_class=network_class(address),
        cidr=f"{integer_to_ip(network)}/{prefix_length}",
    )


class SubnetCalculator:
    """Calculator for subnet operations."""

    @staticmethod
    def calculate(address: str, mask: str | int) -> SubnetInfo:
        """Calculate subnet information from an address and a prefix or dotted mask."""
        parsed = parse_address(address)
        if parsed.version != 4:
            raise ValueError(f"Invalid IP address: {address}")

        prefix_length = _mask_to_prefix(mask)
        network = parsed.integer & prefix_to_mask(prefix_length)
        return _subnet_info(network, prefix_length, address)

    @staticmethod
    def split(network_address: str, prefix_length: int, new_prefix: int) -> Iterator[SubnetInfo]:
        """Split a network into ``2 ** (new_prefix - prefix_length)`` smaller subnets."""
        parsed = parse_address(network_address)
        if parsed.version != 4:
            raise ValueError(f"Invalid network address: {network_address}")
        if not 0 <= prefix_length <= 32 or not 0 <= new_prefix <= 32:
            raise ValueError("Prefix lengths must be between 0 and 32")
        if new_prefix <= prefix_length:
            raise ValueError(f"New prefix /{new_prefix} must be larger than current /{prefix_length}")

        return SubnetCalculator._iter_subnets(
            parsed.integer & prefix_to_mask(prefix_length),
            prefix_length,
            new_prefix,
        )

    @staticmethod
    def _iter_subnets(network: int, prefix_length: int, new_prefix: int) -> Iterator[SubnetInfo]:
        size = 2 ** (32 - new_prefix)
        for index in range(2 ** (new_prefix - prefix_length)):
            subnet = network + index * size
            yield _subnet_info(subnet, new_prefix, integer_to_ip(subnet))

    @staticmethod
    def mask_for_prefix(bits: int) -> str:
        """Subnet mask for a prefix length, e.g. 24 -> 255.255.255.0."""
        if isinstance(bits, bool) or not isinstance(bits, int) or not 0 <= bits <= 32:
            raise ValueError("CIDR bits must be between 0 and 32")
        return integer_to_ip(prefix_to_mask(bits))

    @staticmethod
    def wildcard_for_prefix(bits: int) -> str:
        """Wildcard (inverse) mask for a prefix length, e.g. 24 -> 0.0.0.255."""
        if isinstance(bits, bool) or not isinstance(bits, int) or not 0 <= bits <= 32:
            raise ValueError("CIDR bits must be between 0 and 32")
        return integer_to_ip(~prefix_to_mask(bits) & IPV4_MAX)

    @staticmethod
    def contains(address: str, network_address: str, prefix_length: int) -> bool:
        """Check if an address falls inside ``network_address/prefix_length``."""
        ip = parse_address(address)
        net = parse_address(network_address)
        if ip.version != 4 or net.version != 4:
            return False
        if isinstance(prefix_length, bool) or not isinstance(prefix_length, int):
            return False
        if not 0 <= prefix_length <= 32:
            return False

        mask = prefix_to_mask(prefix_length)
        return ip.integer & mask == net.integer & mask


def calculate_subnet(address: str, mask: str | int) -> SubnetInfo:
    """Calculate subnet information from an address and a prefix or dotted mask."""
    return SubnetCalculator.calculate(address, mask)


def split_subnet(network_address: str, prefix_length: int, new_prefix: int) -> Iterator[SubnetInfo]:
    """Split a network into smaller subnets."""
    return SubnetCalculator.split(network_address, prefix_length, new_prefix)


def subnet_mask_for_prefix(bits: int) -> str:
    """Get the dotted subnet mask for a prefix length."""
    return SubnetCalculator.mask_for_prefix(bits)


def wildcard_mask_for_prefix(bits: int) -> str:
    """Get the dotted wildcard mask for a prefix length."""
    return SubnetCalculator.wildcard_for_prefix(bits)


def is_ip_in_subnet(address: str, network_address: str, prefix_length: int) -> bool:
    """Check if an address is in a subnet; False for any invalid input."""
    return SubnetCalculator.contains(address, network_address, prefix_length)
