"""Mobile carrier IP classification."""

import logging
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Optional

from src.config import get_settings

from .carriers import FALLBACK_IPV6, FALLBACK_RANGE, FALLBACK_UNKNOWN
from .ipv4 import ipv4_to_int, is_ipv4, is_ipv6, leading_octets, octets_in_range
from .table import DEFAULT_TABLE, CarrierTable, PrefixEntry, RangeEntry

logger = logging.getLogger(__name__)


class IPVersion(Enum):
    """IP protocol version of a classified address."""

    IPV4 = "IPv4"
    IPV6 = "IPv6"


class MatchType(Enum):
    """Which table section produced the attribution."""

    SINGLE_PREFIX = "single_prefix"
    RANGE = "range"
    IPV6_PREFIX = "ipv6_prefix"
    NONE = "none"


@dataclass
class CarrierInfo:
    """Carrier attribution for a mobile carrier IP."""

    is_mobile: bool
    carrier: str
    ip_version: IPVersion
    matched_prefix_or_range: Optional[str] = None
    match_type: MatchType = MatchType.NONE

    def to_dict(self) -> dict[str, Any]:
        """
        Render with the public wire keys.

        Prefix matches are reported under ``ipPrefix``, range matches under
        ``ipRange``; fallback results carry neither.
        """
        data: dict[str, Any] = {
            "isMobile": self.is_mobile,
            "carrier": self.carrier,
            "ipVersion": self.ip_version.value,
        }
        if self.match_type == MatchType.RANGE:
            data["ipRange"] = self.matched_prefix_or_range
        elif self.match_type in (MatchType.SINGLE_PREFIX, MatchType.IPV6_PREFIX):
            data["ipPrefix"] = self.matched_prefix_or_range
        return data


class CarrierClassifier:
    """Classifies IP addresses against a static carrier table."""

    def __init__(self, table: CarrierTable = DEFAULT_TABLE, strict_octets: bool = False):
        """
        Initialize classifier.

        Args:
            table: Carrier table to match against
            strict_octets: Reject dotted groups above 255 instead of letting
                them overflow into higher octets, and match single prefixes
                by value rather than by text
        """
        self.table = table
        self.strict_octets = strict_octets

    def is_mobile_carrier_ip(self, ip: Any) -> bool:
        """
        Check whether an address belongs to a mobile carrier network.

        Args:
            ip: Address text; anything else is simply not a carrier IP

        Returns:
            True if the address matches any prefix or range in the table
        """
        if not ip or not isinstance(ip, str):
            return False

        if is_ipv6(ip):
            return any(entry.matches(ip) for entry in self.table.ipv6_prefixes)

        if not self._is_valid_ipv4(ip):
            logger.debug(f"Not an IPv4 address: {ip!r}")
            return False

        if self._match_single_prefix(ip, attributed_only=False) is not None:
            return True

        return self._match_range(ip) is not None

    def get_carrier_info(self, ip: Any) -> Optional[CarrierInfo]:
        """
        Look up carrier attribution for an address.

        Args:
            ip: Address text

        Returns:
            CarrierInfo for mobile carrier IPs, None otherwise
        """
        if not self.is_mobile_carrier_ip(ip):
            return None

        if is_ipv6(ip):
            return self._ipv6_info(ip)

        entry = self._match_single_prefix(ip, attributed_only=True)
        if entry is not None:
            logger.debug(f"{ip} matched prefix {entry.prefix}")
            return CarrierInfo(
                is_mobile=True,
                carrier=entry.carrier.value,
                ip_version=IPVersion.IPV4,
                matched_prefix_or_range=entry.prefix,
                match_type=MatchType.SINGLE_PREFIX,
            )

        ip_range = self._match_range(ip)
        if ip_range is not None:
            logger.debug(f"{ip} matched range {ip_range.key}")
            carrier = ip_range.carrier.value if ip_range.carrier else FALLBACK_RANGE
            return CarrierInfo(
                is_mobile=True,
                carrier=carrier,
                ip_version=IPVersion.IPV4,
                matched_prefix_or_range=ip_range.label,
                match_type=MatchType.RANGE,
            )

        logger.debug(f"{ip} is mobile but has no carrier attribution")
        return CarrierInfo(
            is_mobile=True,
            carrier=FALLBACK_UNKNOWN,
            ip_version=IPVersion.IPV4,
        )

    def _ipv6_info(self, ip: str) -> CarrierInfo:
        for entry in self.table.ipv6_prefixes:
            if entry.carrier is not None and entry.matches(ip):
                return CarrierInfo(
                    is_mobile=True,
                    carrier=entry.carrier.value,
                    ip_version=IPVersion.IPV6,
                    matched_prefix_or_range=entry.prefix,
                    match_type=MatchType.IPV6_PREFIX,
                )

        return CarrierInfo(
            is_mobile=True,
            carrier=FALLBACK_IPV6,
            ip_version=IPVersion.IPV6,
        )

    def _is_valid_ipv4(self, ip: str) -> bool:
        if not is_ipv4(ip):
            return False
        if self.strict_octets and not octets_in_range(ip):
            return False
        return True

    def _match_single_prefix(self, ip: str, attributed_only: bool) -> Optional[PrefixEntry]:
        """First single prefix entry covering the address."""
        if self.strict_octets:
            ip_value = ipv4_to_int(ip)
            matches = (entry for entry in self.table.single_prefixes if entry.matches_value(ip_value))
        else:
            head = leading_octets(ip)
            matches = (entry for entry in self.table.single_prefixes if entry.matches_text(head))

        for entry in matches:
            if attributed_only and entry.carrier is None:
                continue
            return entry
        return None

    def _match_range(self, ip: str) -> Optional[RangeEntry]:
        """First range containing the address."""
        ip_value = ipv4_to_int(ip)
        for ip_range in self.table.ipv4_ranges:
            if ip_range.contains(ip_value):
                return ip_range
        return None


@lru_cache
def get_default_classifier() -> CarrierClassifier:
    """Get cached classifier over the default table."""
    settings = get_settings()
    classifier = CarrierClassifier(
        table=DEFAULT_TABLE,
        strict_octets=settings.classifier.strict_octets,
    )
    logger.info(
        f"Loaded carrier table: {DEFAULT_TABLE.summary()} "
        f"(strict_octets={classifier.strict_octets})"
    )
    return classifier


def is_mobile_carrier_ip(ip: Any) -> bool:
    """Check an address against the default carrier table."""
    return get_default_classifier().is_mobile_carrier_ip(ip)


def get_mobile_carrier_info(ip: Any) -> Optional[CarrierInfo]:
    """Look up carrier attribution against the default carrier table."""
    return get_default_classifier().get_carrier_info(ip)
