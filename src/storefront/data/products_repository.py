"""Product catalogue reads backed by Supabase tables."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from supabase import Client

from ..db.supabase import (
    PRODUCT_PRICING_TABLE,
    PRODUCT_SPECIFICATIONS_TABLE,
    PRODUCT_STOCKS_TABLE,
    PRODUCT_WARRANTY_TABLE,
    PRODUCTS_TABLE,
)
from ..models.domain import Product

logger = logging.getLogger(__name__)


def price_from_pricing(pricing: Optional[dict]) -> float:
    """Effective unit price: final price when set, otherwise base price."""
    if not pricing:
        return 0.0
    value = pricing.get("final_price") or pricing.get("base_price") or 0
    return float(value)


def _rows_by_product(client: Client, table: str, product_ids: Iterable[str]) -> dict[str, dict]:
    ids = sorted({pid for pid in product_ids if pid})
    if not ids:
        return {}
    response = client.table(table).select("*").in_("product_id", ids).execute()
    rows: dict[str, dict] = {}
    for row in response.data or []:
        # first related row wins, matching a one-to-one relation
        rows.setdefault(str(row.get("product_id")), row)
    return rows


def get_pricing(client: Client, product_ids: Iterable[str]) -> dict[str, dict]:
    return _rows_by_product(client, PRODUCT_PRICING_TABLE, product_ids)


def _to_product(row: dict, related: dict[str, dict[str, dict]]) -> Product:
    product_id = str(row["id"])
    pricing = related.get("pricing", {}).get(product_id)
    return Product(
        product_id=product_id,
        name=(row.get("product_name") or "").strip(),
        category=(row.get("category") or "").strip() or None,
        description=row.get("description"),
        price=price_from_pricing(pricing) if pricing else None,
        pricing=pricing,
        stock=related.get("stock", {}).get(product_id),
        warranty=related.get("warranty", {}).get(product_id),
        specifications=related.get("specifications", {}).get(product_id),
        raw=row,
    )


def _load_related(client: Client, product_ids: list[str]) -> dict[str, dict[str, dict]]:
    return {
        "pricing": _rows_by_product(client, PRODUCT_PRICING_TABLE, product_ids),
        "stock": _rows_by_product(client, PRODUCT_STOCKS_TABLE, product_ids),
        "warranty": _rows_by_product(client, PRODUCT_WARRANTY_TABLE, product_ids),
        "specifications": _rows_by_product(client, PRODUCT_SPECIFICATIONS_TABLE, product_ids),
    }


def list_products(
    client: Client,
    page: int = 1,
    per_page: int = 50,
    search: Optional[str] = None,
    category: Optional[str] = None,
) -> tuple[list[Product], int]:
    """Return one page of products with related rows and the total match count."""
    if page < 1 or per_page < 1:
        raise ValueError("page and per_page must be >= 1")

    query = client.table(PRODUCTS_TABLE).select("*", count="exact")
    if search and search.strip():
        query = query.ilike("product_name", f"%{search.strip()}%")
    if category:
        query = query.eq("category", category)

    start = (page - 1) * per_page
    response = query.order("product_name").range(start, start + per_page - 1).execute()
    rows = response.data or []
    total = response.count if response.count is not None else len(rows)

    related = _load_related(client, [str(row["id"]) for row in rows])
    logger.debug(f"Retrieved {len(rows)} products of {total} total (page {page})")
    return [_to_product(row, related) for row in rows], total


def get_product(client: Client, product_id: str) -> Product:
    response = client.table(PRODUCTS_TABLE).select("*").eq("id", product_id).limit(1).execute()
    if not response.data:
        raise LookupError(f"Product '{product_id}' not found.")
    row = response.data[0]
    return _to_product(row, _load_related(client, [str(row["id"])]))


def get_products_by_ids(client: Client, product_ids: Iterable[str]) -> dict[str, dict]:
    ids = sorted(set(product_ids))
    if not ids:
        return {}
    response = client.table(PRODUCTS_TABLE).select("*").in_("id", ids).execute()
    return {str(row["id"]): row for row in response.data or []}


def list_categories(client: Client) -> list[str]:
    """Distinct non-empty product categories, in first-seen order."""
    response = client.table(PRODUCTS_TABLE).select("category").execute()
    categories = [row.get("category") for row in response.data or []]
    return list(dict.fromkeys(cat for cat in categories if cat))
