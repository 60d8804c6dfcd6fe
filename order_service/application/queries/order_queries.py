"""Order queries.

Architecture:
- Queries are immutable (frozen dataclasses)
- NO business logic in queries (just data transfer)
- NO side effects in their handlers
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetOrder:
    """Query to retrieve a single order by ID.

    Attributes:
        order_id: Order identifier (must not be empty).

    Example:
        >>> result = await handler.handle(GetOrder(order_id=order_id))
    """

    order_id: str
