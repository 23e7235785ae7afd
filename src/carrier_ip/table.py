"""Static carrier prefix and range tables."""

from dataclasses import dataclass, field
from typing import Optional

from .carriers import Carrier
from .ipv4 import HOST_MASK, PREFIX_MASK, is_prefix, octets_in_range, prefix_to_int


def _validate_prefix(prefix: str) -> None:
    if not is_prefix(prefix) or not octets_in_range(prefix):
        raise ValueError(f"Invalid two-octet IPv4 prefix: {prefix!r}")


@dataclass(frozen=True)
class PrefixEntry:
    """A two-octet IPv4 prefix owned by one carrier."""

    prefix: str
    carrier: Optional[Carrier] = None
    value: int = field(init=False, repr=False)
    mask: int = field(init=False, repr=False, default=PREFIX_MASK)

    def __post_init__(self):
        _validate_prefix(self.prefix)
        object.__setattr__(self, "value", prefix_to_int(self.prefix))

    def matches_text(self, head: str) -> bool:
        """Match the first two dotted groups of an address, textually."""
        return head == self.prefix

    def matches_value(self, ip_value: int) -> bool:
        """Match a 32-bit address value under the /16 mask."""
        return (ip_value & self.mask) == self.value


@dataclass(frozen=True)
class RangeEntry:
    """
    Inclusive span of two-octet prefixes.

    Covers ``start.0.0`` through ``end.255.255``.
    """

    start: str
    end: str
    carrier: Optional[Carrier] = None
    first: int = field(init=False, repr=False)
    last: int = field(init=False, repr=False)

    def __post_init__(self):
        _validate_prefix(self.start)
        _validate_prefix(self.end)

        first = prefix_to_int(self.start)
        last = prefix_to_int(self.end) | HOST_MASK
        if first > last:
            raise ValueError(f"Range start {self.start} is above range end {self.end}")

        object.__setattr__(self, "first", first)
        object.__setattr__(self, "last", last)

    @property
    def key(self) -> str:
        return f"{self.start}-{self.end}"

    @property
    def label(self) -> str:
        return f"{self.start} ~ {self.end}"

    def contains(self, ip_value: int) -> bool:
        return self.first <= ip_value <= self.last


@dataclass(frozen=True)
class IPv6PrefixEntry:
    """Literal textual IPv6 prefix, matched case-insensitively."""

    prefix: str
    carrier: Optional[Carrier] = None

    def __post_init__(self):
        if not self.prefix:
            raise ValueError("IPv6 prefix cannot be empty")

    def matches(self, ip: str) -> bool:
        return ip.lower().startswith(self.prefix.lower())


@dataclass(frozen=True)
class CarrierTable:
    """
    Immutable membership and attribution table.

    Each sequence is ordered by match priority; the first matching entry wins.
    Entries without a carrier still count as mobile, but are reported with a
    fallback label.
    """

    single_prefixes: tuple[PrefixEntry, ...] = ()
    ipv4_ranges: tuple[RangeEntry, ...] = ()
    ipv6_prefixes: tuple[IPv6PrefixEntry, ...] = ()

    def __post_init__(self):
        # Accept any iterable, store tuples
        object.__setattr__(self, "single_prefixes", tuple(self.single_prefixes))
        object.__setattr__(self, "ipv4_ranges", tuple(self.ipv4_ranges))
        object.__setattr__(self, "ipv6_prefixes", tuple(self.ipv6_prefixes))

    def summary(self) -> dict:
        """Entry counts per section."""
        return {
            "single_prefixes": len(self.single_prefixes),
            "ipv4_ranges": len(self.ipv4_ranges),
            "ipv6_prefixes": len(self.ipv6_prefixes),
        }


DEFAULT_TABLE = CarrierTable(
    single_prefixes=(
        PrefixEntry("203.226", Carrier.SK_TELECOM),
        PrefixEntry("211.234", Carrier.SK_TELECOM),  # 5G
        PrefixEntry("39.7", Carrier.KT),
        PrefixEntry("110.70", Carrier.KT),
        PrefixEntry("175.223", Carrier.KT),
        PrefixEntry("211.246", Carrier.KT),
        PrefixEntry("118.235", Carrier.KT),  # 4G, 5G
        PrefixEntry("211.36", Carrier.LG_U_PLUS),  # 4G
        PrefixEntry("211.235", Carrier.SK_TELECOM),  # 5G
        PrefixEntry("106.101", Carrier.LG_U_PLUS),  # 5G
        PrefixEntry("106.102", Carrier.LG_U_PLUS),  # 4G
        PrefixEntry("125.188", Carrier.LG_U_PLUS),  # 4G
        PrefixEntry("117.111", Carrier.LG_U_PLUS),  # 4G
    ),
    ipv4_ranges=(
        RangeEntry("27.160", "27.183", Carrier.SK_TELECOM),  # 4G
        RangeEntry("223.32", "223.63", Carrier.SK_TELECOM),  # 4G, 5G, roaming
        RangeEntry("42.35", "42.36", Carrier.SK_TELECOM),  # roaming
    ),
    ipv6_prefixes=(
        IPv6PrefixEntry("2001:2d8:", Carrier.SK_TELECOM),  # 4G, 5G
        IPv6PrefixEntry("2001:e60:31", Carrier.KT),  # 4G, must precede 2001:e60:
        IPv6PrefixEntry("2001:e60:", Carrier.KT),  # 5G
        IPv6PrefixEntry("2001:4430:", Carrier.LG_U_PLUS),  # 5G
    ),
)
