"""Domain enums package."""

from order_service.domain.enums.order_status import OrderStatus

__all__ = ["OrderStatus"]
