"""Mobile carrier names and fallback labels."""

from enum import Enum


class Carrier(Enum):
    """Korean mobile network operators."""

    SK_TELECOM = "SK Telecom"
    KT = "KT"
    LG_U_PLUS = "LG U+"


# Labels used when a matched entry carries no carrier attribution
FALLBACK_IPV6 = "Mobile Carrier (IPv6)"
FALLBACK_RANGE = "Mobile Carrier (Range)"
FALLBACK_UNKNOWN = "Mobile Carrier (Unknown)"
