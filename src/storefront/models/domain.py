"""Domain models for storefront records."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(slots=True, frozen=True)
class GeoPoint:
    """Coordinate pair in decimal degrees (WGS84). Ranges are not validated."""

    latitude: float
    longitude: float


@dataclass(slots=True)
class Product:
    """Catalogue product joined with its pricing, stock and warranty rows."""

    product_id: str
    name: str
    category: Optional[str]
    description: Optional[str]
    price: Optional[float]
    pricing: Optional[dict] = None
    stock: Optional[dict] = None
    warranty: Optional[dict] = None
    specifications: Optional[dict] = None
    raw: dict = field(default_factory=dict)


@dataclass(slots=True)
class CartItem:
    """A cart row enriched with the product name and unit price."""

    cart_item_id: str
    user_id: str
    product_id: str
    product_name: Optional[str]
    quantity: int
    unit_price: float

    @property
    def line_total(self) -> float:
        return self.unit_price * self.quantity


@dataclass(slots=True)
class Address:
    """Delivery information saved by a customer."""

    address_id: str
    user_id: str
    name: Optional[str]
    phone: Optional[str]
    address: Optional[str]
    city: Optional[str]
    zip_code: Optional[str]
    additional_notes: Optional[str]


@dataclass(slots=True)
class Order:
    """Order record as stored in the backend."""

    order_id: str
    user_id: str
    status: str
    mode_of_payment: str
    products: list[str]
    address_id: Optional[str]
    delivery_fee: float
    total: Optional[float]
    created: Optional[str]
