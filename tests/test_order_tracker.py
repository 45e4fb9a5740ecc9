import pytest

from storefront.models.domain import Order
from storefront.services.orders import OrderStatus, track_order


def _order(status: str | None, mode_of_payment: str = "Cash On Delivery") -> Order:
    return Order(
        order_id="O1",
        user_id="U1",
        status=status,
        mode_of_payment=mode_of_payment,
        products=["P1"],
        address_id=None,
        delivery_fee=0,
        total=1000,
        created=None,
    )


def test_delivery_flow_for_cash_on_delivery():
    tracker = track_order(_order("packing"))

    assert tracker.flow == "delivery"
    assert [step.status for step in tracker.steps] == [
        OrderStatus.PENDING,
        OrderStatus.APPROVED,
        OrderStatus.PACKING,
        OrderStatus.READY_FOR_DELIVERY,
        OrderStatus.ON_THE_WAY,
        OrderStatus.COMPLETED,
    ]
    assert tracker.current_index == 2
    assert [step.state for step in tracker.steps] == [
        "completed",
        "completed",
        "active",
        "upcoming",
        "upcoming",
        "upcoming",
    ]


def test_pickup_flow_for_in_store_orders():
    tracker = track_order(_order("ready_for_pickup", mode_of_payment="On-Store"))

    assert tracker.flow == "pickup"
    assert tracker.current_status is OrderStatus.READY_FOR_PICKUP
    assert tracker.current_index == 3
    assert len(tracker.steps) == 5


def test_declined_order_is_always_second_step():
    tracker = track_order(_order("Declined", mode_of_payment="On-Store"))

    assert tracker.declined
    assert [step.status for step in tracker.steps] == [OrderStatus.PENDING, OrderStatus.DECLINED]
    assert tracker.current_index == 1
    assert tracker.steps[1].label == "Order Declined"


@pytest.mark.parametrize("status", [None, "", "refunded", "ready_for_pickup"])
def test_status_outside_flow_falls_back_to_first_step(status):
    tracker = track_order(_order(status))

    assert tracker.flow == "delivery"
    assert tracker.current_index == 0
    assert tracker.steps[0].state == "active"


def test_completed_order_has_no_upcoming_steps():
    tracker = track_order(_order("completed"))

    assert tracker.current_index == len(tracker.steps) - 1
    assert all(step.state != "upcoming" for step in tracker.steps)
