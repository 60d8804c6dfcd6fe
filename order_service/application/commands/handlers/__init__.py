"""Order command handlers."""

from order_service.application.commands.handlers.create_order_handler import (
    CreateOrderHandler,
)
from order_service.application.commands.handlers.update_order_status_handler import (
    UpdateOrderStatusHandler,
)

__all__ = ["CreateOrderHandler", "UpdateOrderStatusHandler"]
