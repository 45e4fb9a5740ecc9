import math
from dataclasses import dataclass

import pytest

from storefront.models.payment import PaymentMethod
from storefront.schemas.checkout import CheckoutRequest, NewAddressModel, PositionModel
from storefront.services.checkout import compose_checkout, compute_subtotal, place_order, summarize
from storefront.services.shipping import ShippingQuote, calculate_shipping_fee

SHOP = (6.1145877, 125.1802737)


@dataclass
class Line:
    unit_price: float
    quantity: int


def _quote_at(distance_km: float):
    return lambda: ShippingQuote(fee=calculate_shipping_fee(distance_km), distance_km=distance_km)


def _position_km_north(km: float) -> PositionModel:
    return PositionModel(latitude=SHOP[0] + math.degrees(km / 6371.0), longitude=SHOP[1])


def test_subtotal_sums_price_times_quantity():
    assert compute_subtotal([Line(1000, 2), Line(250.5, 2)]) == pytest.approx(2501.0)
    assert compute_subtotal([]) == 0.0


def test_cash_on_delivery_within_ten_km():
    summary = compose_checkout([Line(1000, 1)], PaymentMethod.CASH_ON_DELIVERY, _quote_at(7.0))

    assert summary.subtotal == 1000
    assert summary.shipping == 500
    assert summary.total == 1500
    assert summary.order_payload() == {"paymentMethod": "cash_on_delivery", "shipping": 500, "total": 1500}


def test_cash_on_delivery_beyond_fifteen_km():
    summary = compose_checkout([Line(1250, 2)], PaymentMethod.CASH_ON_DELIVERY, _quote_at(22.0))

    assert summary.shipping == 2000
    assert summary.total == 4500


@pytest.mark.parametrize("distance_km", [0.0, 7.0, 22.0, 500.0])
def test_in_store_never_charges_shipping(distance_km):
    called = []

    def quote():
        called.append(True)
        return _quote_at(distance_km)()

    summary = compose_checkout([Line(1000, 1)], PaymentMethod.IN_STORE, quote)

    assert summary.shipping == 0
    assert summary.total == 1000
    assert not called


def test_fallback_warning_is_carried_into_summary():
    summary = compose_checkout(
        [Line(300, 1)],
        PaymentMethod.CASH_ON_DELIVERY,
        lambda: ShippingQuote(fee=500, warning="Could not get your location. Using default shipping rate."),
    )

    assert summary.total == 800
    assert summary.distance_km is None
    assert summary.warning


def _add_cart_rows(backend, user_id="U1"):
    first = backend.add("user_cart", {"user": user_id, "product": "P1", "quantity": 1})
    second = backend.add("user_cart", {"user": user_id, "product": "P2", "quantity": 2})
    return first["id"], second["id"]


def test_summarize_uses_selected_cart_rows(backend):
    first, _ = _add_cart_rows(backend)
    payload = CheckoutRequest(
        user_id="U1",
        cart_item_ids=[first],
        payment_method=PaymentMethod.CASH_ON_DELIVERY,
        position=_position_km_north(7.0),
    )

    summary = summarize(backend, payload)

    assert summary.item_count == 1
    assert summary.subtotal == 1000
    assert summary.shipping == 500
    assert summary.total == 1500


def test_summarize_ignores_other_users_rows(backend):
    foreign = backend.add("user_cart", {"user": "U2", "product": "P1", "quantity": 1})
    payload = CheckoutRequest(user_id="U1", cart_item_ids=[foreign["id"]], payment_method=PaymentMethod.IN_STORE)

    with pytest.raises(ValueError, match="No products selected"):
        summarize(backend, payload)


def test_online_payment_is_rejected(backend):
    first, _ = _add_cart_rows(backend)
    payload = CheckoutRequest(user_id="U1", cart_item_ids=[first], payment_method=PaymentMethod.ONLINE_PAYMENT)

    with pytest.raises(ValueError, match="Online payment"):
        summarize(backend, payload)


def test_place_order_cash_on_delivery_creates_pending_order(backend):
    first, second = _add_cart_rows(backend)
    address = backend.add("delivery_information", {"user": "U1", "name": "Ana", "address": "Lagao"})
    payload = CheckoutRequest(
        user_id="U1",
        cart_item_ids=[first, second],
        payment_method=PaymentMethod.CASH_ON_DELIVERY,
        address_id=address["id"],
        position=_position_km_north(22.0),
    )

    order, summary = place_order(backend, payload)

    assert summary.subtotal == 2500
    assert summary.shipping == 2000
    assert summary.total == 4500
    assert order.status == "Pending"
    assert order.mode_of_payment == "Cash On Delivery"
    assert order.address_id == address["id"]
    assert order.delivery_fee == 2000
    assert sorted(order.products) == ["P1", "P2"]
    assert backend.tables["user_cart"] == []


def test_place_order_without_location_charges_default_fee(backend):
    first, _ = _add_cart_rows(backend)
    address = backend.add("delivery_information", {"user": "U1", "name": "Ana"})
    payload = CheckoutRequest(
        user_id="U1",
        cart_item_ids=[first],
        payment_method=PaymentMethod.CASH_ON_DELIVERY,
        address_id=address["id"],
        location_error="Timeout expired",
    )

    order, summary = place_order(backend, payload)

    assert summary.shipping == 500
    assert order.total == 1500


def test_place_order_requires_address_for_delivery(backend):
    first, _ = _add_cart_rows(backend)
    payload = CheckoutRequest(user_id="U1", cart_item_ids=[first], payment_method=PaymentMethod.CASH_ON_DELIVERY)

    with pytest.raises(ValueError, match="delivery address"):
        place_order(backend, payload)
    assert "user_order" not in backend.tables


def test_place_order_creates_new_address(backend):
    first, _ = _add_cart_rows(backend)
    payload = CheckoutRequest(
        user_id="U1",
        cart_item_ids=[first],
        payment_method=PaymentMethod.CASH_ON_DELIVERY,
        new_address=NewAddressModel(
            name="Ana",
            phone="09171234567",
            street_address="123 Pioneer Ave",
            barangay="Lagao",
            city="General Santos",
            province="South Cotabato",
        ),
        position=_position_km_north(1.0),
    )

    order, summary = place_order(backend, payload)

    saved = backend.tables["delivery_information"]
    assert len(saved) == 1
    assert saved[0]["address"] == "123 Pioneer Ave, Brgy. Lagao, General Santos, South Cotabato"
    assert order.address_id == saved[0]["id"]
    assert summary.shipping == 0


def test_place_order_rejects_unknown_address(backend):
    first, _ = _add_cart_rows(backend)
    payload = CheckoutRequest(
        user_id="U1",
        cart_item_ids=[first],
        payment_method=PaymentMethod.CASH_ON_DELIVERY,
        address_id="missing",
    )

    with pytest.raises(LookupError):
        place_order(backend, payload)


def test_place_order_in_store_has_no_address_or_fee(backend):
    first, second = _add_cart_rows(backend)
    payload = CheckoutRequest(user_id="U1", cart_item_ids=[second], payment_method=PaymentMethod.IN_STORE)

    order, summary = place_order(backend, payload)

    assert order.mode_of_payment == "On-Store"
    assert order.address_id is None
    assert summary.shipping == 0
    assert summary.total == 1500
    assert [row["id"] for row in backend.tables["user_cart"]] == [first]


def test_place_order_keeps_order_when_cart_cleanup_fails(backend, monkeypatch):
    from storefront.services.checkout import service

    def failing_remove(*args, **kwargs):
        raise RuntimeError("connection reset")

    monkeypatch.setattr(service, "remove_cart_items", failing_remove)
    first, _ = _add_cart_rows(backend)
    payload = CheckoutRequest(user_id="U1", cart_item_ids=[first], payment_method=PaymentMethod.IN_STORE)

    order, summary = place_order(backend, payload)

    assert order.status == "Pending"
    assert len(backend.tables["user_order"]) == 1
    assert first in [row["id"] for row in backend.tables["user_cart"]]
    assert summary.total == 1000


def test_place_order_removes_new_address_when_order_insert_fails(backend, monkeypatch):
    from storefront.services.checkout import service

    def failing_create(*args, **kwargs):
        raise RuntimeError("insert failed")

    monkeypatch.setattr(service, "create_order", failing_create)
    first, _ = _add_cart_rows(backend)
    payload = CheckoutRequest(
        user_id="U1",
        cart_item_ids=[first],
        payment_method=PaymentMethod.CASH_ON_DELIVERY,
        new_address=NewAddressModel(name="Ana", phone="09171234567", address="Lagao, General Santos"),
        position=_position_km_north(1.0),
    )

    with pytest.raises(RuntimeError, match="insert failed"):
        place_order(backend, payload)
    assert backend.tables["delivery_information"] == []
    assert len(backend.tables["user_cart"]) == 2
