"""Checkout endpoints."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status
from supabase import Client

from ...models.payment import PAYMENT_OPTIONS
from ...schemas.checkout import (
    CheckoutRequest,
    CheckoutSummaryResponse,
    PaymentOptionModel,
    PlaceOrderResponse,
)
from ...services.checkout import place_order, summarize, summary_to_response
from ...services.geolocation import GeolocationClient
from ..deps import get_backend_client, get_geolocation_client

router = APIRouter(prefix="/checkout", tags=["checkout"])
logger = logging.getLogger(__name__)


def _client_ip(request: Request) -> str | None:
    return request.client.host if request.client else None


@router.get("/payment-methods", response_model=List[PaymentOptionModel], status_code=status.HTTP_200_OK)
def payment_methods() -> List[PaymentOptionModel]:
    return [PaymentOptionModel(**option) for option in PAYMENT_OPTIONS]


@router.post("/summary", response_model=CheckoutSummaryResponse, status_code=status.HTTP_200_OK)
def checkout_summary(
    payload: CheckoutRequest,
    request: Request,
    client: Client = Depends(get_backend_client),
    locator: GeolocationClient | None = Depends(get_geolocation_client),
) -> CheckoutSummaryResponse:
    try:
        summary = summarize(client, payload, locator=locator, client_ip=_client_ip(request))
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return summary_to_response(summary)


@router.post("", response_model=PlaceOrderResponse, status_code=status.HTTP_201_CREATED)
def checkout(
    payload: CheckoutRequest,
    request: Request,
    client: Client = Depends(get_backend_client),
    locator: GeolocationClient | None = Depends(get_geolocation_client),
) -> PlaceOrderResponse:
    try:
        order, summary = place_order(client, payload, locator=locator, client_ip=_client_ip(request))
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception(f"Error creating order: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create order: {str(exc)}",
        ) from exc

    return PlaceOrderResponse(
        order_id=order.order_id,
        status=order.status,
        address_id=order.address_id,
        summary=summary_to_response(summary),
    )
