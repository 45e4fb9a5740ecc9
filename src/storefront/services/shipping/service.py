"""Shipping quote resolution from a customer position."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ...config import settings
from ...models.domain import GeoPoint
from ..geolocation import GeolocationClient, GeolocationError
from ..geospatial import distance_between
from .fees import calculate_shipping_fee

logger = logging.getLogger(__name__)

LOCATION_UNSUPPORTED_WARNING = "Location services are not available. Using default shipping rate."
LOCATION_FAILED_WARNING = "Could not get your location. Using default shipping rate."


@dataclass(slots=True)
class ShippingQuote:
    fee: int
    distance_km: float | None = None
    position: GeoPoint | None = None
    warning: str | None = None

    @property
    def free_delivery(self) -> bool:
        return self.distance_km is not None and self.fee == 0

    @property
    def is_fallback(self) -> bool:
        return self.distance_km is None


def store_location() -> GeoPoint:
    latitude, longitude = settings.shop_location
    return GeoPoint(latitude=latitude, longitude=longitude)


def quote_for_position(position: GeoPoint, store: GeoPoint | None = None) -> ShippingQuote:
    distance_km = distance_between(position, store or store_location())
    return ShippingQuote(fee=calculate_shipping_fee(distance_km), distance_km=distance_km, position=position)


def fallback_quote(warning: str, default_fee: int | None = None) -> ShippingQuote:
    fee = settings.default_shipping_fee if default_fee is None else default_fee
    return ShippingQuote(fee=fee, warning=warning)


def resolve_shipping_quote(
    position: GeoPoint | None = None,
    location_error: str | None = None,
    locator: GeolocationClient | None = None,
    client_ip: str | None = None,
    store: GeoPoint | None = None,
) -> ShippingQuote:
    """Quote delivery for a customer, never failing on location problems.

    A position forwarded by the browser wins. A browser-reported failure or a
    failed lookup falls back to the default fee with a warning, as does the
    absence of any location source. One lookup at most, no retry.
    """
    if position is not None:
        return quote_for_position(position, store)

    if location_error:
        logger.warning(f"Client reported location error: {location_error}")
        return fallback_quote(LOCATION_FAILED_WARNING)

    if locator is None:
        return fallback_quote(LOCATION_UNSUPPORTED_WARNING)

    try:
        fix = locator.current_position(client_ip)
    except GeolocationError as exc:
        logger.warning(f"Location lookup failed, using default shipping rate: {exc}")
        return fallback_quote(LOCATION_FAILED_WARNING)
    return quote_for_position(fix, store)
