"""Delivery address endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from supabase import Client

from ...config import settings
from ...data.addresses_repository import create_address, delete_address, list_addresses
from ...models.domain import Address
from ...schemas.catalogue import AddressModel
from ...schemas.checkout import NewAddressModel
from ..deps import get_backend_client

router = APIRouter(prefix="/addresses", tags=["addresses"])


def _to_model(address: Address) -> AddressModel:
    return AddressModel(
        id=address.address_id,
        name=address.name,
        phone=address.phone,
        address=address.address,
        city=address.city,
        zip_code=address.zip_code,
        additional_notes=address.additional_notes,
    )


@router.get("", response_model=List[AddressModel], status_code=status.HTTP_200_OK)
def get_addresses(
    user_id: str = Query(..., description="Owner of the addresses"),
    client: Client = Depends(get_backend_client),
) -> List[AddressModel]:
    return [_to_model(address) for address in list_addresses(client, user_id, limit=settings.address_list_limit)]


@router.post("", response_model=AddressModel, status_code=status.HTTP_201_CREATED)
def add_address(
    payload: NewAddressModel,
    user_id: str = Query(..., description="Owner of the address"),
    client: Client = Depends(get_backend_client),
) -> AddressModel:
    return _to_model(create_address(client, user_id, payload.model_dump()))


@router.delete("/{address_id}", status_code=status.HTTP_200_OK)
def remove_address(
    address_id: str,
    user_id: str = Query(..., description="Owner of the address"),
    client: Client = Depends(get_backend_client),
) -> dict:
    if not delete_address(client, address_id, user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Address '{address_id}' not found.")
    return {"success": True}
