"""Order request and response schemas.

Pydantic schemas for order API endpoints. Includes:
- Request schemas (client → API)
- Response schemas (API → client)
- Entity-to-schema conversion methods

Request schemas check JSON shape only. Order rules (non-empty user id,
positive quantity, non-negative price, known status) are enforced by the use
cases so that every rule violation reports the same way.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from order_service.domain.entities.order import Item, Order


# =============================================================================
# Request Schemas
# =============================================================================


class ItemRequest(BaseModel):
    """Line item as submitted by the client."""

    product_id: str = Field(..., description="Product identifier", examples=["p1"])
    quantity: int = Field(..., description="Units ordered (> 0)", examples=[2])
    price: Decimal = Field(..., description="Unit price (>= 0)", examples=["10.0"])

    def to_entity(self) -> Item:
        return Item(product_id=self.product_id, quantity=self.quantity, price=self.price)


class CreateOrderRequest(BaseModel):
    """Request to place an order.

    Attributes:
        user_id: Owner of the order.
        items: Line items, in order.
    """

    user_id: str = Field(..., description="User identifier", examples=["u1"])
    items: list[ItemRequest] = Field(..., description="Line items (at least one)")


class UpdateOrderStatusRequest(BaseModel):
    """Request to change an order's status."""

    status: str = Field(
        ...,
        description="New status",
        examples=["PENDING", "PAID", "CANCELLED", "FAILED"],
    )


# =============================================================================
# Response Schemas
# =============================================================================


class ItemResponse(BaseModel):
    """Line item in an order response."""

    product_id: str = Field(..., description="Product identifier")
    quantity: int = Field(..., description="Units ordered")
    price: Decimal = Field(..., description="Unit price")

    @classmethod
    def from_entity(cls, item: Item) -> "ItemResponse":
        return cls(product_id=item.product_id, quantity=item.quantity, price=item.price)


class OrderResponse(BaseModel):
    """Order response.

    Attributes:
        id: Order identifier.
        user_id: Owner of the order.
        items: Line items, in submission order.
        total_amount: Sum of quantity * price.
        status: PENDING, PAID, CANCELLED or FAILED.
        created_at: Creation timestamp (UTC).
    """

    id: str = Field(..., description="Order identifier")
    user_id: str = Field(..., description="User identifier")
    items: list[ItemResponse] = Field(..., description="Line items")
    total_amount: Decimal = Field(..., description="Order total")
    status: str = Field(..., description="Order status", examples=["PENDING"])
    created_at: datetime = Field(..., description="Creation timestamp (UTC)")

    @classmethod
    def from_entity(cls, order: Order) -> "OrderResponse":
        """Convert domain entity to response schema.

        Args:
            order: Order from a use case.

        Returns:
            OrderResponse for API response.
        """
        return cls(
            id=order.id,
            user_id=order.user_id,
            items=[ItemResponse.from_entity(item) for item in order.items],
            total_amount=order.total_amount,
            status=order.status.value,
            created_at=order.created_at,
        )


class OrderEnvelope(BaseModel):
    """Single-order response body: ``{"order": {...}}``."""

    order: OrderResponse
