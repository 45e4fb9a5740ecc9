"""Health endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, status
from supabase import Client

from ...db.supabase import PRODUCTS_TABLE
from ..deps import get_optional_backend_client

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/database", status_code=status.HTTP_200_OK)
def check_database(client: Optional[Client] = Depends(get_optional_backend_client)) -> dict:
    """Check backend configuration and connectivity."""
    if not client:
        return {
            "configured": False,
            "message": "Supabase not configured. Set STOREFRONT_SUPABASE_URL and STOREFRONT_SUPABASE_KEY environment variables.",
        }

    try:
        response = client.table(PRODUCTS_TABLE).select("id", count="exact").limit(1).execute()
        return {
            "configured": True,
            "connected": True,
            "products_count": response.count,
            "message": "Database connected.",
        }
    except Exception as exc:
        return {
            "configured": True,
            "connected": False,
            "error": str(exc),
            "message": f"Database connection error: {exc}",
        }
