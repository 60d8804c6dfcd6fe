"""Order commands (CQRS write side)."""

from order_service.application.commands.order_commands import (
    CreateOrder,
    UpdateOrderStatus,
)

__all__ = ["CreateOrder", "UpdateOrderStatus"]
