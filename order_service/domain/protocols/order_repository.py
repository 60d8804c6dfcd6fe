"""Order repository protocol.

Defines the interface for order persistence operations.
"""

from typing import Protocol

from order_service.core.errors import DomainError
from order_service.core.result import Result
from order_service.domain.entities.order import Order
from order_service.domain.enums.order_status import OrderStatus


class OrderRepository(Protocol):
    """Protocol for order persistence operations.

    Infrastructure layer provides concrete implementations (Redis document
    store, in-memory).

    **Design Principles**:
    - Keyed by order id; one document per order
    - All operations return Result types (no exceptions for expected outcomes)
    - No delete method (orders are retained indefinitely)
    - Status is the only field that can change after create

    **Implementation Notes**:
    - Failure(ConflictError) from create when the id already exists
      (create is NOT idempotent; callers must supply fresh ids)
    - Failure(NotFoundError) from get_by_id/update_status for unknown ids
    - Failure(StoreError) for any backend malfunction
    - Each mutation is applied atomically, so asyncio cancellation never
      leaves a partially written order
    - Concurrent calls against the same id must not corrupt state; the
      repository is the only place where per-order mutual exclusion happens
    """

    async def create(self, order: Order) -> Result[None, DomainError]:
        """Insert a new order.

        Args:
            order: Fully populated order (id already assigned).

        Returns:
            Success(None): Order stored.
            Failure(ConflictError): An order with this id already exists.
            Failure(StoreError): Backend failure.
        """
        ...

    async def get_by_id(self, order_id: str) -> Result[Order, DomainError]:
        """Fetch an order verbatim as stored.

        Args:
            order_id: Order identifier.

        Returns:
            Success(Order): Stored order.
            Failure(NotFoundError): No order with this id.
            Failure(StoreError): Backend failure.
        """
        ...

    async def update_status(
        self,
        order_id: str,
        status: OrderStatus,
    ) -> Result[None, DomainError]:
        """Set the stored status of an existing order.

        Does not validate the status value (the use case does). Setting the
        current status again succeeds as a no-op.

        Args:
            order_id: Order identifier.
            status: New status.

        Returns:
            Success(None): Status stored.
            Failure(NotFoundError): No order with this id.
            Failure(StoreError): Backend failure.
        """
        ...
