"""Checkout summary arithmetic."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Protocol

from ..shipping.service import ShippingQuote
from ...models.payment import PaymentMethod


class PricedLine(Protocol):
    unit_price: float
    quantity: int


@dataclass(slots=True)
class CheckoutSummary:
    payment_method: PaymentMethod
    item_count: int
    subtotal: float
    shipping: int
    total: float
    distance_km: float | None = None
    warning: str | None = None

    def order_payload(self) -> dict:
        """Fields handed to order creation."""
        return {
            "paymentMethod": self.payment_method.value,
            "shipping": self.shipping,
            "total": self.total,
        }


def compute_subtotal(items: Iterable[PricedLine]) -> float:
    return sum((item.unit_price * item.quantity for item in items), 0.0)


def compose_checkout(
    items: Iterable[PricedLine],
    payment_method: PaymentMethod,
    quote_shipping: Callable[[], ShippingQuote],
) -> CheckoutSummary:
    """Combine selected lines and shipping into a checkout total.

    ``quote_shipping`` is only invoked for cash-on-delivery; every other
    payment method ships for free.
    """
    lines = list(items)
    subtotal = compute_subtotal(lines)

    shipping = 0
    distance_km = None
    warning = None
    if payment_method is PaymentMethod.CASH_ON_DELIVERY:
        quote = quote_shipping()
        shipping = quote.fee
        distance_km = quote.distance_km
        warning = quote.warning

    return CheckoutSummary(
        payment_method=payment_method,
        item_count=len(lines),
        subtotal=subtotal,
        shipping=shipping,
        total=subtotal + shipping,
        distance_km=distance_km,
        warning=warning,
    )
