from datetime import date

import pytest

from storefront.schemas.service_requests import ServiceRequestCreate
from storefront.services.service_requests import to_record, validate_service_request

TODAY = date(2024, 6, 1)


def _request(**overrides) -> ServiceRequestCreate:
    values = {
        "user_id": "U1",
        "product": "Airconditioner",
        "service_city": "General Santos",
        "service_barangay": "Lagao",
        "property_type": "Residential",
        "unit_detail": "1.5HP",
        "device_type": "Split-type",
        "brand": "Daikin",
        "may_need_repair": "yes",
        "requested_date": date(2024, 6, 3),
    }
    values.update(overrides)
    return ServiceRequestCreate(**values)


def test_complete_request_passes_validation():
    validate_service_request(_request(), today=TODAY)


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"product": ""}, "device/equipment"),
        ({"service_barangay": ""}, "location and property"),
        ({"property_type": " "}, "location and property"),
        ({"unit_detail": ""}, "unit detail"),
        ({"device_type": ""}, "appliance type"),
        ({"device_type": "Laptop"}, "Unknown appliance type"),
        ({"may_need_repair": ""}, "may need repair"),
        ({"requested_date": None}, "select a date"),
        ({"requested_date": date(2024, 5, 31)}, "in the past"),
        ({"additional_requests": ["Free pizza"]}, "additional request"),
    ],
)
def test_first_failing_step_is_reported(overrides, message):
    with pytest.raises(ValueError, match=message):
        validate_service_request(_request(**overrides), today=TODAY)


def test_unknown_product_accepts_any_device_type():
    validate_service_request(_request(product="Water Heater", device_type="Tankless"), today=TODAY)


def test_record_starts_pending_with_owner():
    record = to_record(_request())

    assert record["user"] == "U1"
    assert record["status"] == "pending"
    assert record["requested_date"] == "2024-06-03"
    assert "user_id" not in record
