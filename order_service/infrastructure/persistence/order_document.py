"""Order <-> stored document mapping.

One document per order. Every field is stored as a string so the document
fits a Redis hash:

    id            "0190f0c2-..."
    user_id       "u1"
    items         '[{"product_id": "p1", "quantity": 2, "price": "10.0"}]'
    total_amount  "25.0"
    status        "PENDING"
    created_at    "2026-10-18T09:30:00.123456+00:00"

Decimals are written as strings to keep them exact across round trips.
"""

import json
from datetime import datetime
from decimal import Decimal

from order_service.domain.entities.order import Item, Order
from order_service.domain.enums.order_status import OrderStatus


def to_document(order: Order) -> dict[str, str]:
    """Convert an Order entity to its stored document.

    Args:
        order: Order entity.

    Returns:
        Flat mapping of field name to string value.
    """
    items = [
        {
            "product_id": item.product_id,
            "quantity": item.quantity,
            "price": str(item.price),
        }
        for item in order.items
    ]
    return {
        "id": order.id,
        "user_id": order.user_id,
        "items": json.dumps(items),
        "total_amount": str(order.total_amount),
        "status": order.status.value,
        "created_at": order.created_at.isoformat(),
    }


def from_document(document: dict[str, str]) -> Order:
    """Convert a stored document back to an Order entity.

    Args:
        document: Mapping as produced by to_document().

    Returns:
        Order entity.

    Raises:
        KeyError: Required field missing.
        ValueError: Field cannot be decoded (bad JSON, status, date).
        decimal.InvalidOperation: Price or total is not a decimal.
    """
    items = tuple(
        Item(
            product_id=raw["product_id"],
            quantity=int(raw["quantity"]),
            price=Decimal(raw["price"]),
        )
        for raw in json.loads(document["items"])
    )
    return Order(
        id=document["id"],
        user_id=document["user_id"],
        items=items,
        total_amount=Decimal(document["total_amount"]),
        status=OrderStatus(document["status"]),
        created_at=datetime.fromisoformat(document["created_at"]),
    )
