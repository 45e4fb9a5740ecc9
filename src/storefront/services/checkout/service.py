"""Checkout orchestration: select cart lines, quote shipping, create the order."""

from __future__ import annotations

import logging

from supabase import Client

from ...data.addresses_repository import create_address, delete_address, get_address
from ...data.cart_repository import get_cart_items, remove_cart_items
from ...data.orders_repository import create_order
from ...models.domain import CartItem, GeoPoint, Order
from ...schemas.checkout import CheckoutRequest, CheckoutSummaryResponse
from ..geolocation import GeolocationClient
from ..shipping import resolve_shipping_quote
from .composer import CheckoutSummary, compose_checkout

logger = logging.getLogger(__name__)

INITIAL_ORDER_STATUS = "Pending"


def _position(payload: CheckoutRequest) -> GeoPoint | None:
    if payload.position is None:
        return None
    return GeoPoint(latitude=payload.position.latitude, longitude=payload.position.longitude)


def _compose(
    items: list[CartItem],
    payload: CheckoutRequest,
    locator: GeolocationClient | None,
    client_ip: str | None,
) -> CheckoutSummary:
    return compose_checkout(
        items,
        payload.payment_method,
        lambda: resolve_shipping_quote(
            position=_position(payload),
            location_error=payload.location_error,
            locator=locator,
            client_ip=client_ip,
        ),
    )


def _selected_items(client: Client, payload: CheckoutRequest) -> list[CartItem]:
    if not payload.payment_method.enabled:
        raise ValueError("Online payment is not available yet.")
    items = get_cart_items(client, payload.user_id, payload.cart_item_ids)
    if not items:
        raise ValueError("No products selected")
    return items


def summarize(
    client: Client,
    payload: CheckoutRequest,
    locator: GeolocationClient | None = None,
    client_ip: str | None = None,
) -> CheckoutSummary:
    return _compose(_selected_items(client, payload), payload, locator, client_ip)


def _resolve_address(client: Client, payload: CheckoutRequest) -> tuple[str | None, bool]:
    """Return the delivery address id and whether it was created for this checkout."""
    if not payload.payment_method.requires_delivery:
        return None, False
    if payload.new_address is not None:
        return create_address(client, payload.user_id, payload.new_address.model_dump()).address_id, True
    return get_address(client, payload.address_id, user_id=payload.user_id).address_id, False


def place_order(
    client: Client,
    payload: CheckoutRequest,
    locator: GeolocationClient | None = None,
    client_ip: str | None = None,
) -> tuple[Order, CheckoutSummary]:
    """Create a Pending order from the selected cart lines and remove them from the cart.

    An address created for this checkout is deleted again when the order insert
    fails. Once the order exists, a failed cart cleanup is logged and the order
    is still returned.
    """
    if payload.payment_method.requires_delivery and not (payload.address_id or payload.new_address):
        raise ValueError("Please select or add a delivery address")

    items = _selected_items(client, payload)
    summary = _compose(items, payload, locator, client_ip)
    address_id, address_created = _resolve_address(client, payload)

    try:
        order = create_order(
            client,
            {
                "user": payload.user_id,
                "status": INITIAL_ORDER_STATUS,
                "products": [item.product_id for item in items],
                "mode_of_payment": payload.payment_method.stored_label,
                "address": address_id,
                "delivery_fee": summary.shipping,
                "total": summary.total,
            },
        )
    except Exception:
        if address_created:
            delete_address(client, address_id, payload.user_id)
            logger.info(f"Removed address {address_id} after failed order for user {payload.user_id}")
        raise

    try:
        remove_cart_items(client, payload.user_id, [item.cart_item_id for item in items])
    except Exception as e:
        logger.warning(f"Order {order.order_id} created but cart cleanup failed for user {payload.user_id}: {e}")
    return order, summary


def summary_to_response(summary: CheckoutSummary) -> CheckoutSummaryResponse:
    return CheckoutSummaryResponse(
        payment_method=summary.payment_method,
        item_count=summary.item_count,
        subtotal=summary.subtotal,
        shipping=summary.shipping,
        total=summary.total,
        distance_km=round(summary.distance_km, 2) if summary.distance_km is not None else None,
        free_delivery=summary.distance_km is not None and summary.shipping == 0,
        warning=summary.warning,
    )
