"""Detached delivery of order.created notifications.

The CreateOrder use case must return as soon as the order is stored, whatever
the notification bus is doing. This dispatcher takes the persisted order and
runs the notifier on its own asyncio task:

- ``dispatch()`` is synchronous and never awaits, so it adds no suspension
  point to the caller.
- Every delivery runs under ``asyncio.timeout`` (retries included).
- At most ``max_in_flight`` deliveries run at once; further orders are
  dropped and logged instead of queued without bound.
- Delivery tasks are not children of the caller's task, so cancelling the
  request does not cancel the notification.
- Notifier failures and exceptions are logged here and go no further.

Usage:
    dispatcher = OrderNotificationDispatcher(notifier=notifier, logger=logger)
    dispatcher.dispatch(order)      # returns immediately
    ...
    await dispatcher.aclose()       # on shutdown
"""

import asyncio

from order_service.core.result import Failure
from order_service.domain.entities.order import Order
from order_service.domain.protocols.logger_protocol import LoggerProtocol
from order_service.domain.protocols.order_notifier_protocol import (
    OrderNotifierProtocol,
)


class OrderNotificationDispatcher:
    """Bounded, fail-open runner for OrderNotifierProtocol.publish_order_created.

    Thread Safety:
        - Single event loop only (tasks are tracked in a plain set)

    Attributes:
        _notifier: Notifier variant (no-op, Redis, test double).
        _logger: Structured logger.
        _timeout: Lifetime bound of one delivery (seconds).
        _max_in_flight: Concurrent delivery cap.
        _tasks: Deliveries currently running.
    """

    def __init__(
        self,
        notifier: OrderNotifierProtocol,
        logger: LoggerProtocol,
        *,
        timeout_seconds: float = 10.0,
        max_in_flight: int = 100,
    ) -> None:
        """Initialize dispatcher.

        Args:
            notifier: Notifier to run for each dispatched order.
            logger: Logger for dropped, failed and timed-out deliveries.
            timeout_seconds: Lifetime bound of one delivery.
            max_in_flight: Maximum deliveries running at once.
        """
        self._notifier = notifier
        self._logger = logger
        self._timeout = timeout_seconds
        self._max_in_flight = max(1, max_in_flight)
        self._tasks: set[asyncio.Task[None]] = set()
        self._closed = False

    @property
    def in_flight(self) -> int:
        """Number of deliveries currently running."""
        return len(self._tasks)

    def dispatch(self, order: Order) -> bool:
        """Schedule an order.created notification without waiting for it.

        Must be called from code running on the event loop.

        Args:
            order: Persisted order.

        Returns:
            True if a delivery task was started, False if it was dropped
            (dispatcher saturated or closed).
        """
        if self._closed:
            self._logger.warning(
                "order_notification_dropped",
                order_id=order.id,
                reason="dispatcher_closed",
            )
            return False

        if len(self._tasks) >= self._max_in_flight:
            self._logger.warning(
                "order_notification_dropped",
                order_id=order.id,
                reason="max_in_flight_reached",
                max_in_flight=self._max_in_flight,
            )
            return False

        task = asyncio.create_task(
            self._deliver(order),
            name=f"order-created-notification-{order.id}",
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return True

    async def drain(self, timeout: float | None = None) -> bool:
        """Wait for in-flight deliveries to finish.

        Args:
            timeout: Maximum seconds to wait (None waits indefinitely).

        Returns:
            True if nothing is left in flight.
        """
        if not self._tasks:
            return True
        _, pending = await asyncio.wait(set(self._tasks), timeout=timeout)
        return not pending

    async def aclose(self, timeout: float | None = None) -> None:
        """Stop accepting orders, drain, then cancel whatever is left.

        Args:
            timeout: Seconds to wait for in-flight deliveries. Defaults to
                the per-delivery timeout.
        """
        self._closed = True
        drained = await self.drain(self._timeout if timeout is None else timeout)
        if drained:
            return

        leftover = list(self._tasks)
        self._logger.warning(
            "order_notifications_cancelled_on_shutdown",
            count=len(leftover),
        )
        for task in leftover:
            task.cancel()
        await asyncio.gather(*leftover, return_exceptions=True)

    async def _deliver(self, order: Order) -> None:
        try:
            async with asyncio.timeout(self._timeout):
                result = await self._notifier.publish_order_created(order)
        except TimeoutError:
            self._logger.warning(
                "order_notification_timed_out",
                order_id=order.id,
                timeout_seconds=self._timeout,
            )
            return
        except Exception as e:
            # Fail-open: a misbehaving notifier must not surface anywhere else
            self._logger.error(
                "order_notification_crashed",
                error=e,
                order_id=order.id,
            )
            return

        if isinstance(result, Failure):
            self._logger.warning(
                "order_notification_failed",
                order_id=order.id,
                error_code=result.error.code.value,
                error_message=result.error.message,
            )
            return

        self._logger.debug("order_notification_delivered", order_id=order.id)
