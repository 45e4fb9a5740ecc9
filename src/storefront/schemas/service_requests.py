"""Service request schemas."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field


class ServiceRequestCreate(BaseModel):
    user_id: str
    product: str = Field("", description="Equipment category, e.g. 'Airconditioner'.")
    service_city: str = ""
    service_barangay: str = ""
    property_type: str = ""
    unit_detail: str = ""
    device_type: str = ""
    brand: str = ""
    may_need_repair: str = ""
    problem: str = ""
    requested_date: Optional[date] = None
    remarks: str = ""
    units: int = Field(default=1, ge=1)
    additional_requests: List[str] = Field(default_factory=list)


class ServiceRequestModel(BaseModel):
    id: str
    product: str
    service_city: str | None = None
    service_barangay: str | None = None
    property_type: str | None = None
    unit_detail: str | None = None
    device_type: str | None = None
    brand: str | None = None
    may_need_repair: str | None = None
    problem: str | None = None
    requested_date: str | None = None
    remarks: str | None = None
    status: str
    units: int = 1
    additional_requests: List[str] = Field(default_factory=list)
    created: str | None = None


class ServiceCatalogueResponse(BaseModel):
    device_types: dict[str, list[str]]
    brands: dict[str, list[str]]
    additional_requests: list[str]
