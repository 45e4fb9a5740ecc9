"""Service request endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from supabase import Client

from ...config import settings
from ...data.service_requests_repository import create_service_request, list_service_requests
from ...schemas.service_requests import (
    ServiceCatalogueResponse,
    ServiceRequestCreate,
    ServiceRequestModel,
)
from ...services.service_requests import (
    ADDITIONAL_REQUEST_OPTIONS,
    DEVICE_BRANDS,
    DEVICE_TYPES,
    to_record,
    validate_service_request,
)
from ..deps import get_backend_client

router = APIRouter(prefix="/service-requests", tags=["service-requests"])


def _to_model(row: dict) -> ServiceRequestModel:
    return ServiceRequestModel(
        id=str(row["id"]),
        product=row.get("product") or "",
        service_city=row.get("service_city"),
        service_barangay=row.get("service_barangay"),
        property_type=row.get("property_type"),
        unit_detail=row.get("unit_detail"),
        device_type=row.get("device_type"),
        brand=row.get("brand"),
        may_need_repair=row.get("may_need_repair"),
        problem=row.get("problem"),
        requested_date=row.get("requested_date"),
        remarks=row.get("remarks"),
        status=row.get("status") or "pending",
        units=int(row.get("units") or 1),
        additional_requests=list(row.get("additional_requests") or []),
        created=row.get("created"),
    )


@router.get("/catalogue", response_model=ServiceCatalogueResponse, status_code=status.HTTP_200_OK)
def get_catalogue() -> ServiceCatalogueResponse:
    return ServiceCatalogueResponse(
        device_types=DEVICE_TYPES,
        brands=DEVICE_BRANDS,
        additional_requests=ADDITIONAL_REQUEST_OPTIONS,
    )


@router.get("", response_model=List[ServiceRequestModel], status_code=status.HTTP_200_OK)
def get_service_requests(
    user_id: str = Query(..., description="Owner of the requests"),
    client: Client = Depends(get_backend_client),
) -> List[ServiceRequestModel]:
    rows = list_service_requests(client, user_id, limit=settings.service_request_list_limit)
    return [_to_model(row) for row in rows]


@router.post("", response_model=ServiceRequestModel, status_code=status.HTTP_201_CREATED)
def submit_service_request(
    payload: ServiceRequestCreate,
    client: Client = Depends(get_backend_client),
) -> ServiceRequestModel:
    try:
        validate_service_request(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _to_model(create_service_request(client, to_record(payload)))
