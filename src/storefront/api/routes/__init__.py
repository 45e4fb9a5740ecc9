"""Route group exports."""

from . import addresses, cart, checkout, health, orders, products, service_requests, shipping

__all__ = [
    "addresses",
    "cart",
    "checkout",
    "health",
    "orders",
    "products",
    "service_requests",
    "shipping",
]
