"""Read-only order progress display.

Each payment path has a fixed, ordered sequence of statuses. The tracker only
locates the order's current status within its sequence; it never moves an
order between statuses.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal

from ...models.domain import Order
from ...models.payment import PaymentMethod


class OrderStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    PACKING = "packing"
    READY_FOR_PICKUP = "ready_for_pickup"
    READY_FOR_DELIVERY = "ready_for_delivery"
    ON_THE_WAY = "on_the_way"
    COMPLETED = "completed"
    DECLINED = "Declined"


STATUS_DETAILS: dict[OrderStatus, tuple[str, str]] = {
    OrderStatus.PENDING: ("Order Pending", "Your order is being reviewed"),
    OrderStatus.APPROVED: ("Order Approved", "Your payment has been confirmed"),
    OrderStatus.PACKING: ("Packing", "Your items are being packed"),
    OrderStatus.READY_FOR_PICKUP: ("Ready for Pickup", "Your order is ready at our store"),
    OrderStatus.READY_FOR_DELIVERY: ("Ready for Delivery", "Your order is prepared for delivery"),
    OrderStatus.ON_THE_WAY: ("On The Way", "Your order is on the way to you"),
    OrderStatus.COMPLETED: ("Completed", "Your order has been delivered"),
    OrderStatus.DECLINED: ("Order Declined", "Your order could not be processed"),
}

DECLINED_FLOW: tuple[OrderStatus, ...] = (OrderStatus.PENDING, OrderStatus.DECLINED)
DELIVERY_FLOW: tuple[OrderStatus, ...] = (
    OrderStatus.PENDING,
    OrderStatus.APPROVED,
    OrderStatus.PACKING,
    OrderStatus.READY_FOR_DELIVERY,
    OrderStatus.ON_THE_WAY,
    OrderStatus.COMPLETED,
)
PICKUP_FLOW: tuple[OrderStatus, ...] = (
    OrderStatus.PENDING,
    OrderStatus.APPROVED,
    OrderStatus.PACKING,
    OrderStatus.READY_FOR_PICKUP,
    OrderStatus.COMPLETED,
)

StepState = Literal["completed", "active", "upcoming"]


@dataclass(slots=True)
class TrackerStep:
    status: OrderStatus
    label: str
    description: str
    state: StepState


@dataclass(slots=True)
class OrderTracker:
    order_id: str
    flow: Literal["declined", "delivery", "pickup"]
    current_index: int
    steps: list[TrackerStep]

    @property
    def current_status(self) -> OrderStatus:
        return self.steps[self.current_index].status

    @property
    def declined(self) -> bool:
        return self.flow == "declined"


def parse_status(value: str | None) -> OrderStatus | None:
    try:
        return OrderStatus(value) if value else None
    except ValueError:
        return None


def select_flow(status: OrderStatus | None, mode_of_payment: str) -> tuple[str, tuple[OrderStatus, ...]]:
    if status is OrderStatus.DECLINED:
        return "declined", DECLINED_FLOW
    if mode_of_payment == PaymentMethod.CASH_ON_DELIVERY.stored_label:
        return "delivery", DELIVERY_FLOW
    return "pickup", PICKUP_FLOW


def current_index(flow: tuple[OrderStatus, ...], status: OrderStatus | None) -> int:
    """Position of ``status`` in ``flow``; statuses outside the flow map to the first step."""
    if status is None or status not in flow:
        return 0
    return flow.index(status)


def _state(index: int, current: int) -> StepState:
    if index < current:
        return "completed"
    if index == current:
        return "active"
    return "upcoming"


def track_order(order: Order) -> OrderTracker:
    status = parse_status(order.status)
    flow_name, flow = select_flow(status, order.mode_of_payment)
    index = current_index(flow, status)
    steps = [
        TrackerStep(
            status=step,
            label=STATUS_DETAILS[step][0],
            description=STATUS_DETAILS[step][1],
            state=_state(position, index),
        )
        for position, step in enumerate(flow)
    ]
    return OrderTracker(order_id=order.order_id, flow=flow_name, current_index=index, steps=steps)
