"""Order notifier protocol (port) for order.created notifications.

Implementations:
    - NoOpOrderNotifier: infrastructure/events/noop_order_notifier.py
      (no bus configured; always succeeds, does nothing)
    - RedisOrderNotifier: infrastructure/events/redis_order_notifier.py
      (Redis pub/sub, bounded publish retries)

The notifier call is awaited by whoever invokes it. Running it off the
request path is the caller's job (see OrderNotificationDispatcher).
"""

from typing import Protocol

from order_service.core.errors import DomainError
from order_service.core.result import Result
from order_service.domain.entities.order import Order


class OrderNotifierProtocol(Protocol):
    """Protocol for publishing order.created facts to external subscribers.

    Key Requirements:
        1. **Best-effort**: failures are reported as Failure(NotificationError),
           never raised, and never undo the order they describe.
        2. **Own retry policy**: an implementation may retry a publish a
           bounded number of times before giving up.
        3. **Substitutable**: a no-op variant is valid; callers cannot tell
           the variants apart beyond the returned Result.
    """

    async def publish_order_created(self, order: Order) -> Result[None, DomainError]:
        """Publish an order.created event for a persisted order.

        Args:
            order: Order that has been durably stored.

        Returns:
            Success(None): Event handed to the bus (or nothing to do).
            Failure(NotificationError): Publishing failed after retries.
        """
        ...

    async def aclose(self) -> None:
        """Release bus connections. Safe to call more than once."""
        ...
