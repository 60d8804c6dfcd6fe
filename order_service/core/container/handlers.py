"""Order handler dependency factories.

Handler instances for the three order use cases. Handlers are cheap and
stateless, so a new one is built per request around the app-scoped store,
dispatcher and logger.
"""

from typing import TYPE_CHECKING

from order_service.core.container.events import get_notification_dispatcher
from order_service.core.container.infrastructure import get_logger
from order_service.core.container.repositories import get_order_repository

if TYPE_CHECKING:
    from order_service.application.commands.handlers import (
        CreateOrderHandler,
        UpdateOrderStatusHandler,
    )
    from order_service.application.queries.handlers import GetOrderHandler


async def get_create_order_handler() -> "CreateOrderHandler":
    """Get CreateOrder command handler (request-scoped).

    Creates handler with:
    - OrderRepository (app-scoped)
    - OrderNotificationDispatcher (app-scoped)
    - Logger (app-scoped)
    """
    from order_service.application.commands.handlers import CreateOrderHandler

    return CreateOrderHandler(
        order_repo=get_order_repository(),
        dispatcher=get_notification_dispatcher(),
        logger=get_logger(),
    )


async def get_get_order_handler() -> "GetOrderHandler":
    """Get GetOrder query handler (request-scoped)."""
    from order_service.application.queries.handlers import GetOrderHandler

    return GetOrderHandler(order_repo=get_order_repository())


async def get_update_order_status_handler() -> "UpdateOrderStatusHandler":
    """Get UpdateOrderStatus command handler (request-scoped)."""
    from order_service.application.commands.handlers import UpdateOrderStatusHandler

    return UpdateOrderStatusHandler(
        order_repo=get_order_repository(),
        logger=get_logger(),
    )
