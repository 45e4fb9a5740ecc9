"""Payment methods offered at checkout."""

from __future__ import annotations

from enum import Enum


class PaymentMethod(str, Enum):
    ONLINE_PAYMENT = "online_payment"
    CASH_ON_DELIVERY = "cash_on_delivery"
    IN_STORE = "in_store"

    @property
    def stored_label(self) -> str:
        """Value written to the order's ``mode_of_payment`` column."""
        return _STORED_LABELS[self]

    @property
    def enabled(self) -> bool:
        return self is not PaymentMethod.ONLINE_PAYMENT

    @property
    def requires_delivery(self) -> bool:
        return self is PaymentMethod.CASH_ON_DELIVERY


_STORED_LABELS = {
    PaymentMethod.ONLINE_PAYMENT: "Online Payment",
    PaymentMethod.CASH_ON_DELIVERY: "Cash On Delivery",
    PaymentMethod.IN_STORE: "On-Store",
}

PAYMENT_OPTIONS = (
    {
        "id": PaymentMethod.ONLINE_PAYMENT.value,
        "label": "Online Payment",
        "description": "Pay securely online (Coming soon)",
        "enabled": PaymentMethod.ONLINE_PAYMENT.enabled,
        "badge": "Coming Soon",
    },
    {
        "id": PaymentMethod.CASH_ON_DELIVERY.value,
        "label": "Cash on Delivery",
        "description": "Pay when your order arrives",
        "enabled": PaymentMethod.CASH_ON_DELIVERY.enabled,
        "badge": None,
    },
    {
        "id": PaymentMethod.IN_STORE.value,
        "label": "In-Store Purchase",
        "description": "Pay at our physical store",
        "enabled": PaymentMethod.IN_STORE.enabled,
        "badge": None,
    },
)
