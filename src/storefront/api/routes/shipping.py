"""Shipping quote endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status

from ...models.domain import GeoPoint
from ...schemas.checkout import ShippingQuoteRequest, ShippingQuoteResponse
from ...services.geolocation import GeolocationClient
from ...services.shipping import resolve_shipping_quote
from ..deps import get_geolocation_client

router = APIRouter(prefix="/shipping", tags=["shipping"])


@router.post("/quote", response_model=ShippingQuoteResponse, status_code=status.HTTP_200_OK)
def quote(
    payload: ShippingQuoteRequest,
    request: Request,
    locator: GeolocationClient | None = Depends(get_geolocation_client),
) -> ShippingQuoteResponse:
    position = (
        GeoPoint(latitude=payload.position.latitude, longitude=payload.position.longitude)
        if payload.position
        else None
    )
    result = resolve_shipping_quote(
        position=position,
        location_error=payload.location_error,
        locator=locator,
        client_ip=request.client.host if request.client else None,
    )
    return ShippingQuoteResponse(
        fee=result.fee,
        distance_km=round(result.distance_km, 2) if result.distance_km is not None else None,
        free_delivery=result.free_delivery,
        warning=result.warning,
    )
