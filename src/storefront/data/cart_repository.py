"""Cart persistence helpers for the user_cart table."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from supabase import Client

from ..db.supabase import CART_TABLE
from ..models.domain import CartItem
from .products_repository import get_pricing, get_products_by_ids, price_from_pricing

logger = logging.getLogger(__name__)


def _require_user_id(user_id: str) -> str:
    if not user_id or not isinstance(user_id, str) or not user_id.strip():
        raise ValueError("Invalid user ID provided")
    return user_id.strip()


def _require_quantity(quantity: int) -> int:
    if quantity < 1:
        raise ValueError("Quantity must be at least 1")
    return quantity


def _enrich(client: Client, rows: Sequence[dict]) -> list[CartItem]:
    product_ids = [str(row["product"]) for row in rows]
    products = get_products_by_ids(client, product_ids)
    pricing = get_pricing(client, product_ids)

    items: list[CartItem] = []
    for row in rows:
        product_id = str(row["product"])
        product = products.get(product_id, {})
        items.append(
            CartItem(
                cart_item_id=str(row["id"]),
                user_id=str(row["user"]),
                product_id=product_id,
                product_name=product.get("product_name"),
                quantity=int(row.get("quantity") or 0),
                unit_price=price_from_pricing(pricing.get(product_id)),
            )
        )
    return items


def list_cart_items(client: Client, user_id: str) -> list[CartItem]:
    user_id = _require_user_id(user_id)
    response = client.table(CART_TABLE).select("*").eq("user", user_id).order("created").execute()
    rows = response.data or []
    logger.debug(f"Retrieved {len(rows)} cart items for user {user_id}")
    return _enrich(client, rows)


def get_cart_items(client: Client, user_id: str, cart_item_ids: Iterable[str]) -> list[CartItem]:
    """Return the user's cart rows among ``cart_item_ids``; foreign ids are ignored."""
    user_id = _require_user_id(user_id)
    ids = list(dict.fromkeys(cart_item_ids))
    if not ids:
        return []
    response = (
        client.table(CART_TABLE).select("*").eq("user", user_id).in_("id", ids).order("created").execute()
    )
    return _enrich(client, response.data or [])


def add_to_cart(client: Client, user_id: str, product_id: str, quantity: int = 1) -> dict:
    """Add a product, merging into an existing row for the same product."""
    user_id = _require_user_id(user_id)
    _require_quantity(quantity)
    if product_id not in get_products_by_ids(client, [product_id]):
        raise LookupError(f"Product '{product_id}' not found.")

    existing = (
        client.table(CART_TABLE).select("*").eq("user", user_id).eq("product", product_id).limit(1).execute()
    )
    if existing.data:
        row = existing.data[0]
        return update_cart_item_quantity(client, user_id, str(row["id"]), int(row.get("quantity") or 0) + quantity)

    response = (
        client.table(CART_TABLE)
        .insert({"user": user_id, "product": product_id, "quantity": quantity})
        .execute()
    )
    created = response.data[0]
    logger.info(f"Added product {product_id} to cart of user {user_id} (qty {quantity})")
    return created


def update_cart_item_quantity(client: Client, user_id: str, cart_item_id: str, quantity: int) -> dict:
    user_id = _require_user_id(user_id)
    _require_quantity(quantity)
    response = (
        client.table(CART_TABLE)
        .update({"quantity": quantity})
        .eq("id", cart_item_id)
        .eq("user", user_id)
        .execute()
    )
    if not response.data:
        raise LookupError(f"Cart item '{cart_item_id}' not found.")
    return response.data[0]


def remove_cart_items(client: Client, user_id: str, cart_item_ids: Iterable[str]) -> int:
    user_id = _require_user_id(user_id)
    ids = list(dict.fromkeys(cart_item_ids))
    if not ids:
        return 0
    response = client.table(CART_TABLE).delete().eq("user", user_id).in_("id", ids).execute()
    removed = len(response.data or [])
    logger.info(f"Removed {removed} cart item(s) for user {user_id}")
    return removed


def clear_cart(client: Client, user_id: str) -> int:
    user_id = _require_user_id(user_id)
    response = client.table(CART_TABLE).delete().eq("user", user_id).execute()
    return len(response.data or [])


def cart_summary(items: Sequence[CartItem]) -> dict:
    """Distinct lines, total quantity and total cost of already loaded cart items."""
    return {
        "item_count": len(items),
        "total_items": sum(item.quantity for item in items),
        "total_cost": sum(item.line_total for item in items),
    }
