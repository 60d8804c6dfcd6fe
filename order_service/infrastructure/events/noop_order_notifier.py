"""No-op order notifier.

Used when no notification bus is configured (NOTIFICATION_BUS_URL unset) or
the bus could not be reached at startup.
"""

from order_service.core.errors import DomainError
from order_service.core.result import Result, Success
from order_service.domain.entities.order import Order


class NoOpOrderNotifier:
    """OrderNotifierProtocol implementation that publishes nothing.

    Always returns Success(None); has no observable side effects.
    """

    async def publish_order_created(self, order: Order) -> Result[None, DomainError]:
        return Success(value=None)

    async def aclose(self) -> None:
        return None
