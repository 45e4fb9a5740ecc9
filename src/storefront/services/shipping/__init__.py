"""Delivery fee calculation."""

from .fees import calculate_shipping_fee
from .service import (
    LOCATION_FAILED_WARNING,
    LOCATION_UNSUPPORTED_WARNING,
    ShippingQuote,
    quote_for_position,
    resolve_shipping_quote,
    store_location,
)

__all__ = [
    "calculate_shipping_fee",
    "ShippingQuote",
    "quote_for_position",
    "resolve_shipping_quote",
    "store_location",
    "LOCATION_FAILED_WARNING",
    "LOCATION_UNSUPPORTED_WARNING",
]
