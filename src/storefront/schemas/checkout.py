"""Checkout and shipping request/response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from ..models.payment import PaymentMethod


class PositionModel(BaseModel):
    latitude: float
    longitude: float


class LocationInput(BaseModel):
    position: Optional[PositionModel] = Field(
        default=None, description="Position fix obtained by the browser, if any."
    )
    location_error: Optional[str] = Field(
        default=None, description="Error reported by the browser when the fix failed or was denied."
    )


class ShippingQuoteRequest(LocationInput):
    pass


class ShippingQuoteResponse(BaseModel):
    fee: int
    distance_km: Optional[float] = None
    free_delivery: bool = False
    warning: Optional[str] = None


class NewAddressModel(BaseModel):
    name: str
    phone: str
    address: Optional[str] = Field(default=None, description="Full address; built from parts when omitted.")
    street_address: Optional[str] = None
    barangay: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    region: Optional[str] = None
    zip_code: Optional[str] = None
    additional_notes: Optional[str] = None


class CheckoutRequest(LocationInput):
    user_id: str
    cart_item_ids: List[str] = Field(default_factory=list, description="Selected cart rows.")
    payment_method: PaymentMethod = PaymentMethod.CASH_ON_DELIVERY
    address_id: Optional[str] = None
    new_address: Optional[NewAddressModel] = None


class CheckoutSummaryResponse(BaseModel):
    payment_method: PaymentMethod
    item_count: int
    subtotal: float
    shipping: int
    total: float
    distance_km: Optional[float] = None
    free_delivery: bool = False
    warning: Optional[str] = None


class PlaceOrderResponse(BaseModel):
    order_id: str
    status: str
    address_id: Optional[str] = None
    summary: CheckoutSummaryResponse


class PaymentOptionModel(BaseModel):
    id: PaymentMethod
    label: str
    description: str
    enabled: bool
    badge: Optional[str] = None
