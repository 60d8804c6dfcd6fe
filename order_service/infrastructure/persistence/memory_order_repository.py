"""In-memory order repository.

Process-local order store used by tests and by STORE_BACKEND=memory.
Implements OrderRepository without inheritance (structural typing).
"""

import asyncio

from order_service.core.enums import ErrorCode
from order_service.core.errors import ConflictError, DomainError, NotFoundError
from order_service.core.result import Failure, Result, Success
from order_service.domain.entities.order import Order
from order_service.domain.enums.order_status import OrderStatus
from order_service.domain.errors import OrderError


class InMemoryOrderRepository:
    """Dictionary-backed OrderRepository.

    Each instance owns its own dictionary and lock; nothing is shared between
    instances.

    Thread Safety:
        - Safe for concurrent asyncio tasks on one event loop (asyncio.Lock)
        - NOT thread-safe across event loops

    Orders are frozen dataclasses, so the stored object can be handed out
    directly; status changes replace the stored object.
    """

    def __init__(self) -> None:
        self._orders: dict[str, Order] = {}
        self._lock = asyncio.Lock()

    async def create(self, order: Order) -> Result[None, DomainError]:
        async with self._lock:
            if order.id in self._orders:
                return Failure(
                    error=ConflictError(
                        code=ErrorCode.ORDER_ALREADY_EXISTS,
                        message=OrderError.ORDER_ALREADY_EXISTS,
                        resource_type="Order",
                        conflicting_field="id",
                        details={"order_id": order.id},
                    )
                )
            self._orders[order.id] = order
        return Success(value=None)

    async def get_by_id(self, order_id: str) -> Result[Order, DomainError]:
        async with self._lock:
            order = self._orders.get(order_id)
        if order is None:
            return Failure(error=_not_found(order_id))
        return Success(value=order)

    async def update_status(
        self,
        order_id: str,
        status: OrderStatus,
    ) -> Result[None, DomainError]:
        async with self._lock:
            order = self._orders.get(order_id)
            if order is None:
                return Failure(error=_not_found(order_id))
            if order.status != status:
                self._orders[order_id] = order.with_status(status)
        return Success(value=None)

    def __len__(self) -> int:
        return len(self._orders)


def _not_found(order_id: str) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.ORDER_NOT_FOUND,
        message=OrderError.ORDER_NOT_FOUND,
        resource_type="Order",
        resource_id=order_id,
    )
