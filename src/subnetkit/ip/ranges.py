"""
Well-known address ranges and membership tests.
"""

from netaddr import IPNetwork

from subnetkit.ip.codec import ip_to_integer
from subnetkit.ip.parser import octets


# RFC 1918 - Address Allocation for Private Internets
PRIVATE_RANGES_V4 = (
    IPNetwork("10.0.0.0/8"),
    IPNetwork("172.16.0.0/12"),
    IPNetwork("192.168.0.0/16"),
)

RESERVED_RANGES_V4 = (
    IPNetwork("0.0.0.0/8"),        # "This" network
    IPNetwork("127.0.0.0/8"),      # Loopback
    IPNetwork("224.0.0.0/4"),      # Multicast
    IPNetwork("240.0.0.0/4"),      # Reserved for Future Use, incl. limited broadcast
)

LOOPBACK_FIRST_OCTET = 127
MULTICAST_FIRST_OCTETS = range(224, 240)

# Prefix tests, matched against the lowercased literal
IPV6_LINK_LOCAL_PREFIX = "fe80:"
IPV6_MULTICAST_PREFIX = "ff"
IPV6_UNIQUE_LOCAL_PREFIXES = ("fc00:", "fd00:")
IPV6_LOOPBACK = ("::1", "0:0:0:0:0:0:0:1")


def in_ranges(value: int, ranges: tuple[IPNetwork, ...]) -> bool:
    """Closed-interval containment of an integer address in any range."""
    return any(net.first <= value <= net.last for net in ranges)


def is_private_ipv4(ip: str) -> bool:
    """Check if an IPv4 address is in RFC 1918 private space."""
    value = ip_to_integer(ip)
    return value is not None and in_ranges(value, PRIVATE_RANGES_V4)


def is_reserved_ipv4(ip: str) -> bool:
    """Check if an IPv4 address is in a reserved range (incl. loopback and multicast)."""
    value = ip_to_integer(ip)
    return value is not None and in_ranges(value, RESERVED_RANGES_V4)


def is_loopback_ipv4(ip: str) -> bool:
    values = octets(ip)
    return values is not None and values[0] == LOOPBACK_FIRST_OCTET


def is_multicast_ipv4(ip: str) -> bool:
    values = octets(ip)
    return values is not None and values[0] in MULTICAST_FIRST_OCTETS


def is_link_local_ipv6(ip: str) -> bool:
    return ip.lower().startswith(IPV6_LINK_LOCAL_PREFIX)


def is_loopback_ipv6(ip: str) -> bool:
    return ip.lower() in IPV6_LOOPBACK


def is_multicast_ipv6(ip: str) -> bool:
    return ip.lower().startswith(IPV6_MULTICAST_PREFIX)


def is_private_ipv6(ip: str) -> bool:
    """Link-local or unique local (fc00::/fd00:: prefixes)."""
    return is_link_local_ipv6(ip) or ip.lower().startswith(IPV6_UNIQUE_LOCAL_PREFIXES)
