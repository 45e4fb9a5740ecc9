"""Order persistence helpers for the user_order table."""

from __future__ import annotations

import logging
from typing import Optional

from supabase import Client

from ..db.supabase import ORDERS_TABLE
from ..models.domain import Order

logger = logging.getLogger(__name__)


def _to_order(row: dict) -> Order:
    total = row.get("total")
    return Order(
        order_id=str(row["id"]),
        user_id=str(row.get("user") or ""),
        status=row.get("status") or "Pending",
        mode_of_payment=row.get("mode_of_payment") or "",
        products=[str(pid) for pid in row.get("products") or []],
        address_id=row.get("address"),
        delivery_fee=float(row.get("delivery_fee") or 0),
        total=float(total) if total is not None else None,
        created=row.get("created"),
    )


def create_order(client: Client, record: dict) -> Order:
    response = client.table(ORDERS_TABLE).insert(record).execute()
    if not response.data:
        raise RuntimeError("Order creation returned no record.")
    order = _to_order(response.data[0])
    logger.info(f"Created order {order.order_id} for user {order.user_id} ({order.mode_of_payment})")
    return order


def list_orders(client: Client, user_id: str) -> list[Order]:
    response = (
        client.table(ORDERS_TABLE).select("*").eq("user", user_id).order("created", desc=True).execute()
    )
    return [_to_order(row) for row in response.data or []]


def get_order(client: Client, order_id: str, user_id: Optional[str] = None) -> Order:
    query = client.table(ORDERS_TABLE).select("*").eq("id", order_id)
    if user_id:
        query = query.eq("user", user_id)
    response = query.limit(1).execute()
    if not response.data:
        raise LookupError(f"Order '{order_id}' not found.")
    return _to_order(response.data[0])
