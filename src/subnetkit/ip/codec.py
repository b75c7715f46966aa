"""
IPv4 representation conversions.

All integers are plain Python ints, so there is no signed 32-bit overflow to
guard against; results are kept in [0, 2**32) explicitly where it matters.
"""

from subnetkit.ip.parser import octets, pack_octets

IPV4_MAX = 0xFFFFFFFF


def ip_to_integer(ip: str) -> int | None:
    """Pack a dotted-quad big-endian into an unsigned 32-bit integer."""
    values = octets(ip)
    if values is None:
        return None
    return pack_octets(values)


def integer_to_ip(num: int) -> str:
    """Unpack an integer into a dotted-quad.

    Floor division and modulo wrap values outside [0, 2**32) around, so
    ``-1`` renders as ``255.255.255.255`` and ``2**32`` as ``0.0.0.0``.
    """
    return ".".join(str((num // 256 ** shift) % 256) for shift in (3, 2, 1, 0))


def ip_to_binary(ip: str) -> str | None:
    """Render each octet as 8 zero-padded bits, e.g. ``11000000.10101000.00000001.00000001``."""
    values = octets(ip)
    if values is None:
        return None
    return ".".join(format(v, "08b") for v in values)


def ip_to_hex(ip: str) -> str | None:
    """Render each octet as 2 hex digits, e.g. ``c0:a8:01:01``."""
    values = octets(ip)
    if values is None:
        return None
    return ":".join(format(v, "02x") for v in values)


def prefix_to_mask(prefix: int) -> int:
    """Mask integer with the top ``prefix`` bits set (0 for /0)."""
    if prefix == 0:
        return 0
    return (IPV4_MAX << (32 - prefix)) & IPV4_MAX
