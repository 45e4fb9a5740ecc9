"""Supabase client construction for the storefront backend."""

from __future__ import annotations

import logging
from functools import lru_cache

from supabase import Client, create_client

from ..config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


@lru_cache()
def _create_client(url: str, key: str) -> Client:
    return create_client(url, key)


def create_backend_client(config: Settings | None = None) -> Client | None:
    """Build a Supabase client for the given settings.

    Returns:
        Supabase Client instance if configured, None otherwise.
        Note: This does not test the connection - actual queries may fail with network errors.
    """
    config = config or default_settings
    if not config.supabase_url or not config.supabase_key:
        logger.warning("Supabase credentials not configured (missing URL or key)")
        return None

    try:
        return _create_client(config.supabase_url, config.supabase_key)
    except Exception as e:
        logger.error(f"Failed to create Supabase client: {e}")
        return None


# Table names used by the storefront
PRODUCTS_TABLE = "products"
PRODUCT_PRICING_TABLE = "product_pricing"
PRODUCT_STOCKS_TABLE = "product_stocks"
PRODUCT_WARRANTY_TABLE = "product_warranty"
PRODUCT_SPECIFICATIONS_TABLE = "product_specifications"
CART_TABLE = "user_cart"
ORDERS_TABLE = "user_order"
ADDRESSES_TABLE = "delivery_information"
SERVICE_REQUESTS_TABLE = "service_request"
