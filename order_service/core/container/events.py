"""Order notification dependency factories.

The notifier is chosen once at startup by ``init_order_notifier()``:
    - NOTIFICATION_BUS_URL unset: NoOpOrderNotifier
    - bus reachable within the connect retries: RedisOrderNotifier
    - bus unreachable: NoOpOrderNotifier (logged; the service still starts)

MUST be awaited during FastAPI lifespan startup. Until then (or if it never
runs, as in handler tests) ``get_order_notifier()`` hands out the no-op
variant.
"""

from typing import TYPE_CHECKING

from order_service.core.config import get_settings
from order_service.core.container.infrastructure import get_logger
from order_service.core.result import Failure

if TYPE_CHECKING:
    from order_service.application.services.notification_dispatcher import (
        OrderNotificationDispatcher,
    )
    from order_service.domain.protocols.order_notifier_protocol import (
        OrderNotifierProtocol,
    )


# ============================================================================
# Application-Scoped Singletons (initialized at startup)
# ============================================================================

_notifier: "OrderNotifierProtocol | None" = None
_dispatcher: "OrderNotificationDispatcher | None" = None


async def init_order_notifier() -> "OrderNotifierProtocol":
    """Select and connect the order notifier at application startup.

    Returns:
        The notifier every later order.created delivery will use.

    Raises:
        RuntimeError: If the notifier is already initialized.
    """
    global _notifier, _dispatcher

    if _notifier is not None:
        raise RuntimeError("Order notifier already initialized")

    from order_service.infrastructure.events import NoOpOrderNotifier

    settings = get_settings()
    logger = get_logger()

    if not settings.notifications_enabled:
        logger.info("order_notifications_disabled", reason="no_bus_url")
        _notifier = NoOpOrderNotifier()
    else:
        from redis.asyncio import Redis

        from order_service.infrastructure.events import RedisOrderNotifier

        notifier = RedisOrderNotifier(
            redis_client=Redis.from_url(
                settings.notification_bus_url,
                socket_connect_timeout=5,
                socket_timeout=5,
            ),
            logger=logger,
            channel=settings.notification_channel,
            publish_attempts=settings.notification_publish_attempts,
            publish_retry_delay_seconds=settings.notification_publish_retry_delay_seconds,
        )
        result = await notifier.connect(
            attempts=settings.notification_connect_attempts,
            retry_delay_seconds=settings.notification_connect_retry_delay_seconds,
        )
        if isinstance(result, Failure):
            logger.warning(
                "order_notifications_disabled",
                reason="bus_unreachable",
                error_message=result.error.message,
            )
            await notifier.aclose()
            _notifier = NoOpOrderNotifier()
        else:
            _notifier = notifier

    # Dispatcher built before startup wraps the no-op notifier
    if _dispatcher is not None:
        await _dispatcher.aclose()
    _dispatcher = None
    return _notifier


def get_order_notifier() -> "OrderNotifierProtocol":
    """Get the order notifier chosen at startup (no-op before startup)."""
    if _notifier is None:
        from order_service.infrastructure.events import NoOpOrderNotifier

        return NoOpOrderNotifier()
    return _notifier


def get_notification_dispatcher() -> "OrderNotificationDispatcher":
    """Get the detached notification dispatcher singleton (app-scoped).

    Created on first use around whichever notifier is current.

    Returns:
        OrderNotificationDispatcher bounded by NOTIFICATION_TIMEOUT_SECONDS
        and NOTIFICATION_MAX_IN_FLIGHT.
    """
    global _dispatcher

    if _dispatcher is None:
        from order_service.application.services.notification_dispatcher import (
            OrderNotificationDispatcher,
        )

        settings = get_settings()
        _dispatcher = OrderNotificationDispatcher(
            notifier=get_order_notifier(),
            logger=get_logger(),
            timeout_seconds=settings.notification_timeout_seconds,
            max_in_flight=settings.notification_max_in_flight,
        )
    return _dispatcher


async def shutdown_order_notifications() -> None:
    """Drain the dispatcher, close the notifier and reset both singletons."""
    global _notifier, _dispatcher

    if _dispatcher is not None:
        await _dispatcher.aclose()
    if _notifier is not None:
        await _notifier.aclose()
    _notifier = None
    _dispatcher = None
