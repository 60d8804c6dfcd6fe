"""Order notifier adapters.

Usage:
    from order_service.infrastructure.events import NoOpOrderNotifier, RedisOrderNotifier
"""

from order_service.infrastructure.events.noop_order_notifier import NoOpOrderNotifier
from order_service.infrastructure.events.redis_order_notifier import (
    ORDER_CREATED_CHANNEL,
    RedisOrderNotifier,
)

__all__ = ["NoOpOrderNotifier", "ORDER_CREATED_CHANNEL", "RedisOrderNotifier"]
