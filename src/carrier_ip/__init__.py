"""Mobile carrier IP classification module."""

from .carriers import Carrier
from .table import CarrierTable, PrefixEntry, RangeEntry, IPv6PrefixEntry, DEFAULT_TABLE
from .classifier import (
    CarrierClassifier,
    CarrierInfo,
    IPVersion,
    MatchType,
    get_default_classifier,
    get_mobile_carrier_info,
    is_mobile_carrier_ip,
)

__all__ = [
    "Carrier",
    "CarrierTable",
    "PrefixEntry",
    "RangeEntry",
    "IPv6PrefixEntry",
    "DEFAULT_TABLE",
    "CarrierClassifier",
    "CarrierInfo",
    "IPVersion",
    "MatchType",
    "get_default_classifier",
    "get_mobile_carrier_info",
    "is_mobile_carrier_ip",
]
