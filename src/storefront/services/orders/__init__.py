"""Order tracking helpers."""

from .tracker import OrderStatus, OrderTracker, TrackerStep, track_order

__all__ = ["OrderStatus", "OrderTracker", "TrackerStep", "track_order"]
