"""Repository dependency factory.

Container owns the store selection (STORE_BACKEND):
    - 'redis': RedisOrderRepository (document store, default)
    - 'memory': InMemoryOrderRepository (single process, nothing persisted)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from order_service.core.config import get_settings
from order_service.core.container.infrastructure import get_logger, get_store_redis

if TYPE_CHECKING:
    from order_service.domain.protocols.order_repository import OrderRepository


@lru_cache()
def get_order_repository() -> "OrderRepository":
    """Get order repository singleton (app-scoped).

    Returns:
        Repository implementing OrderRepository.

    Raises:
        ValueError: If STORE_BACKEND is unsupported.
    """
    settings = get_settings()

    if settings.store_backend == "redis":
        from order_service.infrastructure.persistence import RedisOrderRepository

        return RedisOrderRepository(
            redis_client=get_store_redis(),
            logger=get_logger(),
            namespace=settings.store_namespace,
        )
    elif settings.store_backend == "memory":
        from order_service.infrastructure.persistence import InMemoryOrderRepository

        return InMemoryOrderRepository()
    else:
        raise ValueError(
            f"Unsupported STORE_BACKEND: {settings.store_backend}. "
            "Supported: 'redis', 'memory'"
        )
