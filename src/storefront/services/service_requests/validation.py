"""Service request catalogue and step-by-step validation."""

from __future__ import annotations

from datetime import date

from ...schemas.service_requests import ServiceRequestCreate

DEVICE_TYPES: dict[str, list[str]] = {
    "Airconditioner": ["Window", "Split-type", "Cassette", "Portable"],
    "Appliance": ["Refrigerator", "Washing Machine", "Microwave", "Oven"],
    "Computer": ["Desktop", "Laptop", "All-in-One"],
    "Flatscreen TV": ["LED", "OLED", "QLED", "Plasma", "LCD"],
}

DEVICE_BRANDS: dict[str, list[str]] = {
    "Airconditioner": ["Daikin", "Carrier", "Panasonic", "LG", "Samsung"],
    "Appliance": ["Daikin", "LG", "Samsung", "Whirlpool", "Panasonic"],
    "Computer": ["Acer", "Asus", "Dell", "HP", "Lenovo"],
    "Flatscreen TV": ["Sony", "Samsung", "LG", "TCL", "Panasonic"],
}

ADDITIONAL_REQUEST_OPTIONS: list[str] = [
    "Long ladder needed for unit located above 10ft/3m (+Php 350)",
    "Free on re-charge may be needed (additional charge applies)",
]

INITIAL_STATUS = "pending"


def validate_service_request(payload: ServiceRequestCreate, today: date | None = None) -> None:
    """Raise ValueError with the first missing or invalid field, in form-step order."""
    today = today or date.today()

    if not payload.product.strip():
        raise ValueError("Please select a device/equipment")

    if not (payload.service_city.strip() and payload.service_barangay.strip() and payload.property_type.strip()):
        raise ValueError("Please complete all location and property fields")

    if not payload.unit_detail.strip():
        raise ValueError("Please select a unit detail")
    if not payload.device_type.strip():
        raise ValueError("Please select an appliance type")
    known_types = DEVICE_TYPES.get(payload.product)
    if known_types is not None and payload.device_type not in known_types:
        raise ValueError(f"Unknown appliance type '{payload.device_type}' for {payload.product}")
    if not payload.may_need_repair:
        raise ValueError("Please select if the unit may need repair")

    if payload.requested_date is None:
        raise ValueError("Please select a date for the service")
    if payload.requested_date < today:
        raise ValueError("Requested date cannot be in the past")

    unknown = [item for item in payload.additional_requests if item not in ADDITIONAL_REQUEST_OPTIONS]
    if unknown:
        raise ValueError(f"Unknown additional request: {unknown[0]}")


def to_record(payload: ServiceRequestCreate) -> dict:
    record = payload.model_dump(exclude={"user_id"})
    record["user"] = payload.user_id
    record["requested_date"] = payload.requested_date.isoformat() if payload.requested_date else None
    record["status"] = INITIAL_STATUS
    return record
