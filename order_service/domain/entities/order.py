"""Order domain entity.

Represents a purchase order and the line items it was placed with.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal

from order_service.domain.enums.order_status import OrderStatus


@dataclass(frozen=True, kw_only=True)
class Item:
    """Order line item.

    Attributes:
        product_id: Opaque product identifier.
        quantity: Units ordered (must be > 0 on an accepted order).
        price: Unit price (must be >= 0; zero is allowed for promotions).
    """

    product_id: str
    quantity: int
    price: Decimal

    @property
    def line_total(self) -> Decimal:
        """Quantity multiplied by unit price."""
        return self.quantity * self.price


@dataclass(frozen=True, kw_only=True)
class Order:
    """Purchase order entity.

    Orders are created once by the CreateOrder use case, which assigns the
    id, computes total_amount and stamps created_at. After that only the
    status changes, and only through the UpdateOrderStatus use case.

    **Invariants**:
    - items is never empty
    - total_amount equals the sum of item line totals as computed at creation
      (items never change, so it is never recomputed)
    - status is always an OrderStatus member

    Attributes:
        id: Unique order identifier (UUIDv7 string).
        user_id: Caller-supplied owner identifier.
        items: Line items in the order they were submitted.
        total_amount: Sum of quantity * price over items.
        status: Current lifecycle status.
        created_at: Creation timestamp (UTC).

    Example:
        >>> order = Order(
        ...     id=str(uuid7()),
        ...     user_id="u1",
        ...     items=(Item(product_id="p1", quantity=2, price=Decimal("10.0")),),
        ...     total_amount=Decimal("20.0"),
        ...     status=OrderStatus.PENDING,
        ...     created_at=datetime.now(UTC),
        ... )
        >>> paid = order.with_status(OrderStatus.PAID)
    """

    id: str
    user_id: str
    items: tuple[Item, ...]
    total_amount: Decimal
    status: OrderStatus
    created_at: datetime

    def with_status(self, status: OrderStatus) -> "Order":
        """Return a copy of this order carrying a different status.

        Args:
            status: New lifecycle status.

        Returns:
            New Order with every other field unchanged.
        """
        return replace(self, status=status)
