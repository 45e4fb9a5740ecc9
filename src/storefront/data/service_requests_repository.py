"""Service request persistence helpers."""

from __future__ import annotations

import logging

from supabase import Client

from ..db.supabase import SERVICE_REQUESTS_TABLE

logger = logging.getLogger(__name__)


def create_service_request(client: Client, record: dict) -> dict:
    response = client.table(SERVICE_REQUESTS_TABLE).insert(record).execute()
    created = response.data[0]
    logger.info(f"Created service request {created.get('id')} for user {record.get('user')}")
    return created


def list_service_requests(client: Client, user_id: str, limit: int = 50) -> list[dict]:
    response = (
        client.table(SERVICE_REQUESTS_TABLE)
        .select("*")
        .eq("user", user_id)
        .order("created", desc=True)
        .limit(limit)
        .execute()
    )
    return list(response.data or [])
