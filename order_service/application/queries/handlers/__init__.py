"""Order query handlers."""

from order_service.application.queries.handlers.get_order_handler import (
    GetOrderHandler,
)

__all__ = ["GetOrderHandler"]
