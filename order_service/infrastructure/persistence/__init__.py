"""Order store adapters.

Usage:
    from order_service.infrastructure.persistence import (
        InMemoryOrderRepository,
        RedisOrderRepository,
    )
"""

from order_service.infrastructure.persistence.memory_order_repository import (
    InMemoryOrderRepository,
)
from order_service.infrastructure.persistence.redis_order_repository import (
    RedisOrderRepository,
)

__all__ = ["InMemoryOrderRepository", "RedisOrderRepository"]
