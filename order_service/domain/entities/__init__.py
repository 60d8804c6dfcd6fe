"""Domain entities package."""

from order_service.domain.entities.order import Item, Order

__all__ = ["Item", "Order"]
