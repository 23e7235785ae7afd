"""Carrier lookup API endpoints."""

import logging
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field, field_validator

from src.api import dependencies
from src.carrier_ip import MatchType
from src.config import get_settings

logger = logging.getLogger(__name__)
router = APIRouter()


class CarrierLookupResponse(BaseModel):
    """Response model for a single address lookup."""

    ip: str
    is_mobile: bool
    carrier: Optional[str] = None
    ip_version: Optional[str] = None
    ip_prefix: Optional[str] = None
    ip_range: Optional[str] = None


class BatchLookupRequest(BaseModel):
    """Request model for batch lookup."""

    ips: list[str] = Field(..., min_length=1)

    @field_validator("ips")
    @classmethod
    def check_batch_size(cls, ips: list[str]) -> list[str]:
        max_batch_size = get_settings().classifier.max_batch_size
        if len(ips) > max_batch_size:
            raise ValueError(f"Batch of {len(ips)} exceeds limit of {max_batch_size}")
        return ips


class BatchLookupResponse(BaseModel):
    """Response model for batch lookup."""

    results: list[CarrierLookupResponse]
    mobile_count: int


def _lookup(ip: str) -> CarrierLookupResponse:
    """Classify one address into a response record."""
    info = dependencies.get_classifier().get_carrier_info(ip)

    if info is None:
        return CarrierLookupResponse(ip=ip, is_mobile=False)

    return CarrierLookupResponse(
        ip=ip,
        is_mobile=info.is_mobile,
        carrier=info.carrier,
        ip_version=info.ip_version.value,
        ip_prefix=(
            info.matched_prefix_or_range
            if info.match_type in (MatchType.SINGLE_PREFIX, MatchType.IPV6_PREFIX)
            else None
        ),
        ip_range=info.matched_prefix_or_range if info.match_type == MatchType.RANGE else None,
    )


@router.post("/batch", response_model=BatchLookupResponse)
async def lookup_batch(request: BatchLookupRequest):
    """
    Classify several addresses in one call.

    Addresses that are not mobile carrier IPs (including malformed ones) are
    returned with ``is_mobile`` false rather than failing the request.
    """
    results = [_lookup(ip) for ip in request.ips]
    mobile_count = sum(1 for result in results if result.is_mobile)
    logger.debug(f"Batch lookup: {mobile_count}/{len(results)} mobile")

    return BatchLookupResponse(results=results, mobile_count=mobile_count)


@router.get("/{ip}", response_model=CarrierLookupResponse)
async def lookup_ip(ip: str):
    """
    Classify an address as a mobile carrier IP.

    Returns carrier attribution when the address belongs to a known mobile
    carrier block; otherwise ``is_mobile`` is false and the other fields are null.
    """
    return _lookup(ip)
