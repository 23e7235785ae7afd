"""
IPv4 text helpers and 32-bit arithmetic.

The shape check is loose: it accepts any one to three digit
group, so "999.999.999.999" is considered IPv4-shaped. ``ipv4_to_int`` does not
bounds-check groups either; values above 255 fold into the higher octets and
the result is truncated to unsigned 32 bits.
"""

import re

IPV4_PATTERN = re.compile(r"(?:[0-9]{1,3}\.){3}[0-9]{1,3}")
PREFIX_PATTERN = re.compile(r"[0-9]{1,3}\.[0-9]{1,3}")

UINT32_MASK = 0xFFFFFFFF
PREFIX_MASK = 0xFFFF0000  # /16
HOST_MASK = 0x0000FFFF


def is_ipv6(ip: str) -> bool:
    """Anything containing a colon is treated as IPv6."""
    return ":" in ip


def is_ipv4(ip: str) -> bool:
    """Check the dotted-quad shape (four groups of 1-3 ASCII digits)."""
    return IPV4_PATTERN.fullmatch(ip) is not None


def is_prefix(prefix: str) -> bool:
    """Check the two-group prefix shape, e.g. "203.226"."""
    return PREFIX_PATTERN.fullmatch(prefix) is not None


def octets_in_range(ip: str) -> bool:
    """True if every dotted group is within 0-255."""
    return all(int(octet) <= 255 for octet in ip.split("."))


def ipv4_to_int(ip: str) -> int:
    """
    Convert dotted IPv4 text to an unsigned 32-bit integer.

    Args:
        ip: Dotted address (or partial address such as a prefix)

    Returns:
        Accumulated value, shifted a byte per group and masked to 32 bits
    """
    acc = 0
    for octet in ip.split("."):
        acc = (acc << 8) + int(octet)
    return acc & UINT32_MASK


def prefix_to_int(prefix: str) -> int:
    """Network value of a two-octet prefix, i.e. the value of "a.b.0.0"."""
    return (ipv4_to_int(prefix) << 16) & UINT32_MASK


def leading_octets(ip: str, count: int = 2) -> str:
    """Return the first ``count`` dotted groups joined by "."."""
    return ".".join(ip.split(".")[:count])
