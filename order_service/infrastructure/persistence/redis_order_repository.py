"""Redis document store implementing OrderRepository.

Each order is one Redis hash under ``<namespace>:order:<id>`` (see
order_document.py for the field layout). The key itself is the unique index
on id.

Architecture:
- Implements OrderRepository without inheritance (structural typing)
- Maps Redis exceptions to StoreError
- Returns Result types for all operations
- Mutations run as Lua scripts so they are atomic inside Redis

Usage:
    from redis.asyncio import Redis

    client = Redis.from_url("redis://localhost:6379/0", decode_responses=True)
    repo = RedisOrderRepository(redis_client=client, namespace="orderdb", logger=logger)
    result = await repo.get_by_id(order_id)
"""

from decimal import InvalidOperation

from redis.asyncio import Redis
from redis.exceptions import RedisError

from order_service.core.enums import ErrorCode
from order_service.core.errors import ConflictError, DomainError, NotFoundError
from order_service.core.result import Failure, Result, Success
from order_service.domain.entities.order import Order
from order_service.domain.enums.order_status import OrderStatus
from order_service.domain.errors import OrderError
from order_service.domain.protocols.logger_protocol import LoggerProtocol
from order_service.infrastructure.enums import InfrastructureErrorCode
from order_service.infrastructure.errors import StoreError
from order_service.infrastructure.persistence.order_document import (
    from_document,
    to_document,
)

# KEYS[1]: order key
# ARGV: flattened field/value pairs of the order document
# Returns: 1 if inserted, 0 if the key already exists
CREATE_ORDER_LUA = """
if redis.call("EXISTS", KEYS[1]) == 1 then
    return 0
end
redis.call("HSET", KEYS[1], unpack(ARGV))
return 1
"""

# KEYS[1]: order key
# ARGV[1]: new status
# Returns: -1 if the order does not exist, 0 if status already equal, 1 if changed
UPDATE_STATUS_LUA = """
if redis.call("EXISTS", KEYS[1]) == 0 then
    return -1
end
if redis.call("HGET", KEYS[1], "status") == ARGV[1] then
    return 0
end
redis.call("HSET", KEYS[1], "status", ARGV[1])
return 1
"""


class RedisOrderRepository:
    """Redis implementation of OrderRepository.

    Note: Does NOT inherit from OrderRepository (uses structural typing).

    Thread Safety:
        - Safe for concurrent use across requests and workers
        - create and update_status are single Lua scripts (atomic in Redis)
        - No shared mutable state in this class

    Attributes:
        _redis: Async Redis client instance.
        _namespace: Key prefix (the logical database name).
        _logger: Structured logger.
    """

    def __init__(
        self,
        redis_client: Redis,
        logger: LoggerProtocol,
        namespace: str = "orderdb",
    ) -> None:
        """Initialize Redis order repository.

        Args:
            redis_client: Async Redis client instance.
            logger: Structured logger.
            namespace: Key prefix for order documents.
        """
        self._redis = redis_client
        self._logger = logger
        self._namespace = namespace
        self._create_script = redis_client.register_script(CREATE_ORDER_LUA)
        self._update_status_script = redis_client.register_script(UPDATE_STATUS_LUA)

    def order_key(self, order_id: str) -> str:
        """Build the Redis key for an order document."""
        return f"{self._namespace}:order:{order_id}"

    async def create(self, order: Order) -> Result[None, DomainError]:
        """Insert a new order document.

        Args:
            order: Fully populated order.

        Returns:
            Success(None), Failure(ConflictError) or Failure(StoreError).
        """
        document = to_document(order)
        args = [part for pair in document.items() for part in pair]

        try:
            inserted = await self._create_script(
                keys=[self.order_key(order.id)], args=args
            )
        except RedisError as e:
            return Failure(
                error=_store_error(
                    InfrastructureErrorCode.STORE_CREATE_ERROR,
                    f"Failed to insert order '{order.id}'",
                    order.id,
                    e,
                )
            )

        if int(inserted) == 0:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.ORDER_ALREADY_EXISTS,
                    message=OrderError.ORDER_ALREADY_EXISTS,
                    resource_type="Order",
                    conflicting_field="id",
                    details={"order_id": order.id},
                )
            )

        return Success(value=None)

    async def get_by_id(self, order_id: str) -> Result[Order, DomainError]:
        """Fetch an order document.

        Args:
            order_id: Order identifier.

        Returns:
            Success(Order), Failure(NotFoundError) or Failure(StoreError).
        """
        try:
            raw = await self._redis.hgetall(self.order_key(order_id))
        except RedisError as e:
            return Failure(
                error=_store_error(
                    InfrastructureErrorCode.STORE_GET_ERROR,
                    f"Failed to find order '{order_id}'",
                    order_id,
                    e,
                )
            )

        if not raw:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.ORDER_NOT_FOUND,
                    message=OrderError.ORDER_NOT_FOUND,
                    resource_type="Order",
                    resource_id=order_id,
                )
            )

        document = {_decode(k): _decode(v) for k, v in raw.items()}
        try:
            return Success(value=from_document(document))
        except (KeyError, ValueError, TypeError, InvalidOperation) as e:
            return Failure(
                error=_store_error(
                    InfrastructureErrorCode.STORE_DATA_ERROR,
                    f"Stored order '{order_id}' could not be decoded",
                    order_id,
                    e,
                )
            )

    async def update_status(
        self,
        order_id: str,
        status: OrderStatus,
    ) -> Result[None, DomainError]:
        """Set the status field of an existing order document.

        Args:
            order_id: Order identifier.
            status: New status (not validated here).

        Returns:
            Success(None), Failure(NotFoundError) or Failure(StoreError).
        """
        try:
            outcome = int(
                await self._update_status_script(
                    keys=[self.order_key(order_id)], args=[status.value]
                )
            )
        except RedisError as e:
            return Failure(
                error=_store_error(
                    InfrastructureErrorCode.STORE_UPDATE_ERROR,
                    f"Failed to update order '{order_id}'",
                    order_id,
                    e,
                )
            )

        if outcome == -1:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.ORDER_NOT_FOUND,
                    message=OrderError.ORDER_NOT_FOUND,
                    resource_type="Order",
                    resource_id=order_id,
                )
            )

        if outcome == 0:
            self._logger.info(
                "order_status_unchanged",
                order_id=order_id,
                status=status.value,
            )
        else:
            self._logger.info(
                "order_status_updated",
                order_id=order_id,
                new_status=status.value,
            )
        return Success(value=None)


def _decode(value: bytes | str) -> str:
    return value.decode("utf-8") if isinstance(value, bytes) else value


def _store_error(
    infrastructure_code: InfrastructureErrorCode,
    message: str,
    order_id: str,
    error: Exception,
) -> StoreError:
    return StoreError(
        code=ErrorCode.ORDER_STORE_FAILED,
        infrastructure_code=infrastructure_code,
        message=message,
        details={
            "order_id": order_id,
            "error": str(error),
            "error_type": type(error).__name__,
        },
    )
