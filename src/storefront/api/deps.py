"""Request-scoped collaborators injected into route handlers."""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, HTTPException, status
from supabase import Client

from ..db.supabase import create_backend_client
from ..services.geolocation import GeolocationClient, build_geolocation_client


def get_optional_backend_client() -> Optional[Client]:
    """Backend client, or None when Supabase credentials are not configured."""
    return create_backend_client()


def get_backend_client(client: Optional[Client] = Depends(get_optional_backend_client)) -> Client:
    if client is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Backend not configured. Set STOREFRONT_SUPABASE_URL and STOREFRONT_SUPABASE_KEY environment variables.",
        )
    return client


def get_geolocation_client() -> GeolocationClient | None:
    return build_geolocation_client()
