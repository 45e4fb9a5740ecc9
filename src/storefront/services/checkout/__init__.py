"""Checkout composition and order placement."""

from .composer import CheckoutSummary, compose_checkout, compute_subtotal
from ...models.payment import PAYMENT_OPTIONS, PaymentMethod
from .service import place_order, summarize, summary_to_response

__all__ = [
    "CheckoutSummary",
    "compose_checkout",
    "compute_subtotal",
    "PaymentMethod",
    "PAYMENT_OPTIONS",
    "place_order",
    "summarize",
    "summary_to_response",
]
