"""Cart endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from supabase import Client

from ...data.cart_repository import (
    add_to_cart,
    cart_summary,
    clear_cart,
    list_cart_items,
    remove_cart_items,
    update_cart_item_quantity,
)
from ...schemas.catalogue import (
    AddToCartRequest,
    CartItemModel,
    CartResponse,
    RemoveCartItemsRequest,
    UpdateCartItemRequest,
)
from ..deps import get_backend_client

router = APIRouter(prefix="/cart", tags=["cart"])
logger = logging.getLogger(__name__)


@router.get("", response_model=CartResponse, status_code=status.HTTP_200_OK)
def get_cart(
    user_id: str = Query(..., description="Owner of the cart"),
    client: Client = Depends(get_backend_client),
) -> CartResponse:
    try:
        items = list_cart_items(client, user_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return CartResponse(
        items=[
            CartItemModel(
                id=item.cart_item_id,
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=item.quantity,
                unit_price=item.unit_price,
                line_total=item.line_total,
            )
            for item in items
        ],
        **cart_summary(items),
    )


@router.post("/items", status_code=status.HTTP_201_CREATED)
def add_item(payload: AddToCartRequest, client: Client = Depends(get_backend_client)) -> dict:
    try:
        return add_to_cart(client, payload.user_id, payload.product_id, payload.quantity)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.patch("/items/{cart_item_id}", status_code=status.HTTP_200_OK)
def update_item(
    cart_item_id: str,
    payload: UpdateCartItemRequest,
    client: Client = Depends(get_backend_client),
) -> dict:
    try:
        return update_cart_item_quantity(client, payload.user_id, cart_item_id, payload.quantity)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.post("/remove", status_code=status.HTTP_200_OK)
def remove_items(payload: RemoveCartItemsRequest, client: Client = Depends(get_backend_client)) -> dict:
    try:
        removed = remove_cart_items(client, payload.user_id, payload.cart_item_ids)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return {"success": True, "removed": removed}


@router.delete("", status_code=status.HTTP_200_OK)
def clear(
    user_id: str = Query(..., description="Owner of the cart"),
    client: Client = Depends(get_backend_client),
) -> dict:
    try:
        removed = clear_cart(client, user_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    logger.info(f"Cleared {removed} cart item(s) for user {user_id}")
    return {"success": True, "removed": removed}
