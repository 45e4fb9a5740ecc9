"""Order history and tracking endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from supabase import Client

from ...data.orders_repository import get_order, list_orders
from ...models.domain import Order
from ...schemas.orders import OrderModel, OrderTrackerResponse, TrackerStepModel
from ...services.orders import track_order
from ..deps import get_backend_client

router = APIRouter(prefix="/orders", tags=["orders"])


def _to_model(order: Order) -> OrderModel:
    return OrderModel(
        id=order.order_id,
        status=order.status,
        mode_of_payment=order.mode_of_payment,
        products=order.products,
        address_id=order.address_id,
        delivery_fee=order.delivery_fee,
        total=order.total,
        created=order.created,
    )


def _load(client: Client, order_id: str, user_id: str | None) -> Order:
    try:
        return get_order(client, order_id, user_id=user_id)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.get("", response_model=List[OrderModel], status_code=status.HTTP_200_OK)
def get_orders(
    user_id: str = Query(..., description="Owner of the orders"),
    client: Client = Depends(get_backend_client),
) -> List[OrderModel]:
    return [_to_model(order) for order in list_orders(client, user_id)]


@router.get("/{order_id}", response_model=OrderModel, status_code=status.HTTP_200_OK)
def get_order_detail(
    order_id: str,
    user_id: str | None = Query(default=None, description="Restrict lookup to this user's orders"),
    client: Client = Depends(get_backend_client),
) -> OrderModel:
    return _to_model(_load(client, order_id, user_id))


@router.get("/{order_id}/tracker", response_model=OrderTrackerResponse, status_code=status.HTTP_200_OK)
def get_order_tracker(
    order_id: str,
    user_id: str | None = Query(default=None, description="Restrict lookup to this user's orders"),
    client: Client = Depends(get_backend_client),
) -> OrderTrackerResponse:
    tracker = track_order(_load(client, order_id, user_id))
    return OrderTrackerResponse(
        order_id=tracker.order_id,
        flow=tracker.flow,
        current_status=tracker.current_status.value,
        current_index=tracker.current_index,
        steps=[
            TrackerStepModel(
                status=step.status.value,
                label=step.label,
                description=step.description,
                state=step.state,
            )
            for step in tracker.steps
        ],
    )
