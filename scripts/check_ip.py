#!/usr/bin/env python3
"""Classify IP addresses against the mobile carrier table."""

import argparse
import json
import logging

from src.carrier_ip import CarrierClassifier, DEFAULT_TABLE
from src.config import get_settings

settings = get_settings()
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


def check_addresses(ips: list[str], strict_octets: bool) -> list[dict]:
    """Classify each address and collect printable results."""
    classifier = CarrierClassifier(table=DEFAULT_TABLE, strict_octets=strict_octets)

    results = []
    for ip in ips:
        info = classifier.get_carrier_info(ip)
        results.append(
            {
                "ip": ip,
                "is_mobile": info is not None,
                "carrier_info": info.to_dict() if info else None,
            }
        )
    return results


def main():
    parser = argparse.ArgumentParser(description="Check whether IPs belong to mobile carriers")
    parser.add_argument("ips", nargs="+", help="IPv4 or IPv6 addresses")
    parser.add_argument(
        "--strict-octets",
        action="store_true",
        default=settings.classifier.strict_octets,
        help="Reject IPv4 groups above 255",
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")

    args = parser.parse_args()

    results = check_addresses(args.ips, strict_octets=args.strict_octets)
    logger.info(f"{sum(r['is_mobile'] for r in results)}/{len(results)} addresses are mobile")

    if args.json:
        print(json.dumps(results, indent=2, ensure_ascii=False))
        return

    for result in results:
        print(f"{result['ip']}: mobile={result['is_mobile']} info={result['carrier_info']}")


if __name__ == "__main__":
    main()
