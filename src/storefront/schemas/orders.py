"""Order and tracker schemas."""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel


class OrderModel(BaseModel):
    id: str
    status: str
    mode_of_payment: str
    products: List[str]
    address_id: str | None = None
    delivery_fee: float
    total: float | None = None
    created: str | None = None


class TrackerStepModel(BaseModel):
    status: str
    label: str
    description: str
    state: Literal["completed", "active", "upcoming"]


class OrderTrackerResponse(BaseModel):
    order_id: str
    flow: Literal["declined", "delivery", "pickup"]
    current_status: str
    current_index: int
    steps: List[TrackerStepModel]
