"""
IP/CIDR Tools Module

Provides IP address validation and classification, representation
conversions, and IPv4 subnet calculations.
"""

from subnetkit.ip.parser import (
    ParsedAddress,
    is_valid_ipv4,
    is_valid_ipv6,
    get_ip_version,
    parse_address,
)
from subnetkit.ip.codec import (
    ip_to_integer,
    integer_to_ip,
    ip_to_binary,
    ip_to_hex,
)
from subnetkit.ip.core import (
    AddressClassification,
    CIDRBlock,
    SubnetInfo,
    SubnetCalculator,
    analyze_ip,
    parse_cidr,
    calculate_subnet,
    split_subnet,
    subnet_mask_for_prefix,
    wildcard_mask_for_prefix,
    is_ip_in_subnet,
    network_class,
)

__all__ = [
    "ParsedAddress",
    "is_valid_ipv4",
    "is_valid_ipv6",
    "get_ip_version",
    "parse_address",
    "ip_to_integer",
    "integer_to_ip",
    "ip_to_binary",
    "ip_to_hex",
    "AddressClassification",
    "CIDRBlock",
    "SubnetInfo",
    "SubnetCalculator",
    "analyze_ip",
    "parse_cidr",
    "calculate_subnet",
    "split_subnet",
    "subnet_mask_for_prefix",
    "wildcard_mask_for_prefix",
    "is_ip_in_subnet",
    "network_class",
]
