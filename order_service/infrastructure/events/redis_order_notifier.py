"""Redis pub/sub order notifier implementing OrderNotifierProtocol.

Publishes order.created events as JSON on a Redis pub/sub channel. No
acknowledgment is awaited beyond Redis accepting the PUBLISH command; with no
subscribers the message is simply discarded by Redis.

Architecture:
    - Implements OrderNotifierProtocol without inheritance (structural typing)
    - Bounded retries with fixed delay for connect (startup) and publish
    - Errors returned as Failure(NotificationError), never raised

Wire format (channel "order.created"):
    {"order_id": "...", "user_id": "...", "total_amount": 25.0,
     "created_at": "2026-10-18T09:30:00.123456+00:00"}
"""

import asyncio
import json

from redis.asyncio import Redis
from redis.exceptions import RedisError

from order_service.core.enums import ErrorCode
from order_service.core.errors import DomainError
from order_service.core.result import Failure, Result, Success
from order_service.domain.entities.order import Order
from order_service.domain.events.order_events import OrderCreated
from order_service.domain.protocols.logger_protocol import LoggerProtocol
from order_service.infrastructure.enums import InfrastructureErrorCode
from order_service.infrastructure.errors import NotificationError

ORDER_CREATED_CHANNEL = "order.created"


class RedisOrderNotifier:
    """Redis implementation of OrderNotifierProtocol.

    Note: Does NOT inherit from OrderNotifierProtocol (uses structural typing).

    Attributes:
        _redis: Async Redis client instance.
        _logger: Structured logger.
        _channel: Pub/sub channel name.
        _publish_attempts: Attempts per event before giving up.
        _publish_retry_delay: Fixed delay between attempts (seconds).
    """

    def __init__(
        self,
        redis_client: Redis,
        logger: LoggerProtocol,
        *,
        channel: str = ORDER_CREATED_CHANNEL,
        publish_attempts: int = 3,
        publish_retry_delay_seconds: float = 1.0,
    ) -> None:
        """Initialize Redis order notifier.

        Args:
            redis_client: Async Redis client instance.
            logger: Structured logger.
            channel: Pub/sub channel for order.created events.
            publish_attempts: Attempts per event (at least 1).
            publish_retry_delay_seconds: Fixed delay between attempts.
        """
        self._redis = redis_client
        self._logger = logger
        self._channel = channel
        self._publish_attempts = max(1, publish_attempts)
        self._publish_retry_delay = publish_retry_delay_seconds

    @property
    def channel(self) -> str:
        return self._channel

    async def connect(
        self,
        attempts: int = 3,
        retry_delay_seconds: float = 2.0,
    ) -> Result[None, DomainError]:
        """Verify the bus is reachable, retrying a bounded number of times.

        Called once at startup. Each attempt is a PING.

        Args:
            attempts: Connection attempts (at least 1).
            retry_delay_seconds: Fixed delay between attempts.

        Returns:
            Success(None) once a PING succeeds, otherwise
            Failure(NotificationError) carrying the last error.
        """
        attempts = max(1, attempts)
        last_error: Exception | None = None

        for attempt in range(1, attempts + 1):
            try:
                await self._redis.ping()
            except RedisError as e:
                last_error = e
                self._logger.warning(
                    "notification_bus_connect_attempt_failed",
                    attempt=attempt,
                    max_attempts=attempts,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                if attempt < attempts:
                    await asyncio.sleep(retry_delay_seconds)
                continue

            self._logger.info("notification_bus_connected", channel=self._channel)
            return Success(value=None)

        return Failure(
            error=NotificationError(
                code=ErrorCode.ORDER_NOTIFICATION_FAILED,
                infrastructure_code=InfrastructureErrorCode.NOTIFICATION_CONNECTION_FAILED,
                message="Failed to connect to notification bus after retries",
                channel=self._channel,
                details={"attempts": attempts, "error": str(last_error)},
            )
        )

    async def publish_order_created(self, order: Order) -> Result[None, DomainError]:
        """Publish an order.created event, retrying with a fixed delay.

        Args:
            order: Persisted order.

        Returns:
            Success(None) once Redis accepts the PUBLISH, otherwise
            Failure(NotificationError) after the last attempt.
        """
        payload = json.dumps(OrderCreated.from_order(order).to_message())
        last_error: Exception | None = None

        for attempt in range(1, self._publish_attempts + 1):
            try:
                receivers = await self._redis.publish(self._channel, payload)
            except RedisError as e:
                last_error = e
                self._logger.warning(
                    "order_created_publish_attempt_failed",
                    order_id=order.id,
                    attempt=attempt,
                    max_attempts=self._publish_attempts,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                if attempt < self._publish_attempts:
                    await asyncio.sleep(self._publish_retry_delay)
                continue

            self._logger.info(
                "order_created_published",
                order_id=order.id,
                channel=self._channel,
                receivers=receivers,
            )
            return Success(value=None)

        return Failure(
            error=NotificationError(
                code=ErrorCode.ORDER_NOTIFICATION_FAILED,
                infrastructure_code=InfrastructureErrorCode.NOTIFICATION_PUBLISH_FAILED,
                message=f"Failed to publish order.created for order '{order.id}'",
                channel=self._channel,
                details={
                    "order_id": order.id,
                    "attempts": self._publish_attempts,
                    "error": str(last_error),
                },
            )
        )

    async def aclose(self) -> None:
        """Close the underlying Redis connection pool."""
        await self._redis.aclose()
        self._logger.info("notification_bus_closed", channel=self._channel)
