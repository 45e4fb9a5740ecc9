"""Delivery address persistence helpers."""

from __future__ import annotations

import logging
from typing import Optional

from supabase import Client

from ..db.supabase import ADDRESSES_TABLE
from ..models.domain import Address

logger = logging.getLogger(__name__)


def build_full_address(
    street_address: Optional[str] = None,
    barangay: Optional[str] = None,
    city: Optional[str] = None,
    province: Optional[str] = None,
    region: Optional[str] = None,
) -> str:
    """Join address parts, skipping blanks: ``street, Brgy. X, city, province, region``."""
    parts = [
        street_address,
        f"Brgy. {barangay}" if barangay else None,
        city,
        province,
        region,
    ]
    return ", ".join(part.strip() for part in parts if part and part.strip())


def _to_address(row: dict) -> Address:
    return Address(
        address_id=str(row["id"]),
        user_id=str(row.get("user") or ""),
        name=row.get("name"),
        phone=row.get("phone"),
        address=row.get("address"),
        city=row.get("city"),
        zip_code=row.get("zip_code"),
        additional_notes=row.get("additional_notes"),
    )


def list_addresses(client: Client, user_id: str, limit: int = 50) -> list[Address]:
    response = (
        client.table(ADDRESSES_TABLE)
        .select("*")
        .eq("user", user_id)
        .order("created", desc=True)
        .limit(limit)
        .execute()
    )
    return [_to_address(row) for row in response.data or []]


def get_address(client: Client, address_id: str, user_id: Optional[str] = None) -> Address:
    query = client.table(ADDRESSES_TABLE).select("*").eq("id", address_id)
    if user_id:
        query = query.eq("user", user_id)
    response = query.limit(1).execute()
    if not response.data:
        raise LookupError(f"Address '{address_id}' not found.")
    return _to_address(response.data[0])


def create_address(client: Client, user_id: str, payload: dict) -> Address:
    record = {
        "user": user_id,
        "name": payload.get("name"),
        "phone": payload.get("phone"),
        "address": payload.get("address")
        or build_full_address(
            payload.get("street_address"),
            payload.get("barangay"),
            payload.get("city"),
            payload.get("province"),
            payload.get("region"),
        ),
        "city": payload.get("city"),
        "zip_code": payload.get("zip_code"),
        "additional_notes": payload.get("additional_notes") or "",
    }
    response = client.table(ADDRESSES_TABLE).insert(record).execute()
    address = _to_address(response.data[0])
    logger.info(f"Created address {address.address_id} for user {user_id}")
    return address


def delete_address(client: Client, address_id: str, user_id: str) -> bool:
    response = client.table(ADDRESSES_TABLE).delete().eq("id", address_id).eq("user", user_id).execute()
    return bool(response.data)
