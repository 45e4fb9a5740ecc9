"""Product, cart and address schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class ProductModel(BaseModel):
    id: str
    name: str
    category: str | None = None
    description: str | None = None
    price: float | None = None
    pricing: dict | None = None
    stock: dict | None = None
    warranty: dict | None = None
    specifications: dict | None = None


class ProductListResponse(BaseModel):
    items: List[ProductModel]
    page: int
    page_size: int
    total: int
    has_next_page: bool


class CategoryModel(BaseModel):
    id: int
    name: str


class CartItemModel(BaseModel):
    id: str
    product_id: str
    product_name: str | None = None
    quantity: int
    unit_price: float
    line_total: float


class CartResponse(BaseModel):
    items: List[CartItemModel]
    item_count: int
    total_items: int
    total_cost: float


class AddToCartRequest(BaseModel):
    user_id: str
    product_id: str
    quantity: int = Field(default=1, ge=1)


class UpdateCartItemRequest(BaseModel):
    user_id: str
    quantity: int = Field(..., ge=1)


class RemoveCartItemsRequest(BaseModel):
    user_id: str
    cart_item_ids: List[str]


class AddressModel(BaseModel):
    id: str
    name: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    zip_code: Optional[str] = None
    additional_notes: Optional[str] = None
