"""Order commands.

Commands represent the caller's intent to change order state.

Architecture:
    - Commands are immutable value objects representing user intent
    - Handlers validate, persist and return Result types
    - Commands carry raw caller input; validation happens in the handler
"""

from dataclasses import dataclass

from order_service.domain.entities.order import Item


@dataclass(frozen=True, kw_only=True)
class CreateOrder:
    """Command to place a new order.

    Attributes:
        user_id: Owner of the order (must not be empty).
        items: Line items in submission order (must not be empty).
    """

    user_id: str
    items: tuple[Item, ...]


@dataclass(frozen=True, kw_only=True)
class UpdateOrderStatus:
    """Command to set the status of an existing order.

    Attributes:
        order_id: Order to update (must not be empty).
        status: Raw status string; must name an OrderStatus member.
    """

    order_id: str
    status: str
