"""Order domain events.

Events:
1. OrderCreated - Order persisted; published to external subscribers on the
   "order.created" channel.

Delivery is best-effort: a lost OrderCreated never invalidates the order it
describes.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any

from order_service.domain.entities.order import Order
from order_service.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class OrderCreated(DomainEvent):
    """Emitted after an order has been durably stored.

    Attributes:
        order_id: Identifier of the new order.
        user_id: Owner of the order.
        total_amount: Order total as computed at creation.
        created_at: Order creation timestamp.
    """

    order_id: str
    user_id: str
    total_amount: Decimal
    created_at: datetime

    @classmethod
    def from_order(cls, order: Order) -> "OrderCreated":
        """Build the event from a persisted order.

        Args:
            order: Order returned by the store.

        Returns:
            OrderCreated carrying the order's public summary.
        """
        return cls(
            order_id=order.id,
            user_id=order.user_id,
            total_amount=order.total_amount,
            created_at=order.created_at,
        )

    def to_message(self) -> dict[str, Any]:
        """Serialize to the outbound wire payload.

        Returns:
            Dict with order_id, user_id, total_amount (JSON number) and
            created_at (ISO-8601 string).
        """
        return {
            "order_id": self.order_id,
            "user_id": self.user_id,
            "total_amount": float(self.total_amount),
            "created_at": self.created_at.isoformat(),
        }
