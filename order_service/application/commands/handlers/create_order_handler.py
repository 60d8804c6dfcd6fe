"""CreateOrder command handler.

Validates the submitted order, stores it, and hands the stored order to the
notification dispatcher.

Architecture:
- Application layer handler (orchestrates business logic)
- Imports only from domain layer and application services
- Uses Result types for error handling

Flow:
    1. user_id non-empty          -> INVALID_USER_ID
    2. items non-empty            -> EMPTY_ITEMS
    3. each item, in order        -> INVALID_ITEM (first bad index only)
    4. total = sum(quantity * price), left to right, exact
                                  -> INVALID_ITEM (amount not representable)
    5. id = uuid7, status = PENDING, created_at = now (UTC)
    6. store.create               -> ConflictError / StoreError pass through
    7. dispatch order.created     (detached; outcome never returned)
    8. return Order
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from order_service.application.commands.order_commands import CreateOrder
from order_service.application.services.notification_dispatcher import (
    OrderNotificationDispatcher,
)
from order_service.core.errors import DomainError
from order_service.core.result import Failure, Result, Success
from order_service.domain.entities.order import Order
from order_service.domain.enums.order_status import OrderStatus
from order_service.domain.protocols.logger_protocol import LoggerProtocol
from order_service.domain.protocols.order_repository import OrderRepository
from order_service.domain.validators import (
    calculate_total,
    validate_items,
    validate_user_id,
)


class CreateOrderHandler:
    """Handler for CreateOrder command.

    Stateless apart from its injected collaborators; one instance may serve
    any number of concurrent requests.

    Dependencies (injected via constructor):
        - OrderRepository: For persistence
        - OrderNotificationDispatcher: For detached order.created delivery
        - LoggerProtocol: For structured logging
    """

    def __init__(
        self,
        order_repo: OrderRepository,
        dispatcher: OrderNotificationDispatcher,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            order_repo: Order repository.
            dispatcher: Runs the notifier off the request path.
            logger: Structured logger.
        """
        self._order_repo = order_repo
        self._dispatcher = dispatcher
        self._logger = logger

    async def handle(self, cmd: CreateOrder) -> Result[Order, DomainError]:
        """Handle CreateOrder command.

        Args:
            cmd: CreateOrder command with user_id and items.

        Returns:
            Success(Order): Order stored (status PENDING).
            Failure(ValidationError | InvalidItemError): Bad input; the store
                is not called.
            Failure(ConflictError | StoreError): Passed through from the store.

        Side Effects:
            - Inserts the order into the store (on valid input)
            - Schedules an order.created notification (on successful insert)
        """
        user_result = validate_user_id(cmd.user_id)
        if isinstance(user_result, Failure):
            return user_result

        items_result = validate_items(cmd.items)
        if isinstance(items_result, Failure):
            return items_result

        total_result = calculate_total(cmd.items)
        if isinstance(total_result, Failure):
            return total_result

        order = Order(
            id=str(uuid7()),
            user_id=cmd.user_id,
            items=tuple(cmd.items),
            total_amount=total_result.value,
            status=OrderStatus.PENDING,
            created_at=datetime.now(UTC),
        )

        create_result = await self._order_repo.create(order)
        if isinstance(create_result, Failure):
            self._logger.warning(
                "order_create_failed",
                order_id=order.id,
                user_id=order.user_id,
                error_code=create_result.error.code.value,
            )
            return create_result

        # No await past this point: once stored, the order is returned.
        self._dispatcher.dispatch(order)

        self._logger.info(
            "order_created",
            order_id=order.id,
            user_id=order.user_id,
            item_count=len(order.items),
            total_amount=str(order.total_amount),
        )
        return Success(value=order)
