"""Service request helpers."""

from .validation import (
    ADDITIONAL_REQUEST_OPTIONS,
    DEVICE_BRANDS,
    DEVICE_TYPES,
    to_record,
    validate_service_request,
)

__all__ = [
    "ADDITIONAL_REQUEST_OPTIONS",
    "DEVICE_BRANDS",
    "DEVICE_TYPES",
    "to_record",
    "validate_service_request",
]
