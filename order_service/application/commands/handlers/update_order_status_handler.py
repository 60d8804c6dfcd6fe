"""UpdateOrderStatus command handler.

Sets the status of an existing order. Any valid status may be set from any
current status, including the status the order already has.

Architecture:
- Application layer handler (orchestrates business logic)
- Uses Result types for error handling
"""

from order_service.application.commands.order_commands import UpdateOrderStatus
from order_service.core.errors import DomainError
from order_service.core.result import Failure, Result, Success
from order_service.domain.entities.order import Order
from order_service.domain.protocols.logger_protocol import LoggerProtocol
from order_service.domain.protocols.order_repository import OrderRepository
from order_service.domain.validators import validate_order_id, validate_status


class UpdateOrderStatusHandler:
    """Handler for UpdateOrderStatus command.

    Dependencies (injected via constructor):
        - OrderRepository: For lookup and persistence
        - LoggerProtocol: For structured logging
    """

    def __init__(self, order_repo: OrderRepository, logger: LoggerProtocol) -> None:
        self._order_repo = order_repo
        self._logger = logger

    async def handle(self, cmd: UpdateOrderStatus) -> Result[Order, DomainError]:
        """Handle UpdateOrderStatus command.

        Args:
            cmd: UpdateOrderStatus command with order_id and raw status.

        Returns:
            Success(Order): The fetched order with status replaced by the new
                value (not re-read from the store).
            Failure(ValidationError): Empty order_id or unknown status; the
                store is not called.
            Failure(NotFoundError | StoreError): From the lookup (no update is
                attempted) or from the update itself (NotFound there means
                the order vanished between the two calls).
        """
        id_result = validate_order_id(cmd.order_id)
        if isinstance(id_result, Failure):
            return id_result

        status_result = validate_status(cmd.status)
        if isinstance(status_result, Failure):
            return status_result
        new_status = status_result.value

        fetch_result = await self._order_repo.get_by_id(cmd.order_id)
        if isinstance(fetch_result, Failure):
            return fetch_result
        order = fetch_result.value

        update_result = await self._order_repo.update_status(cmd.order_id, new_status)
        if isinstance(update_result, Failure):
            return update_result

        self._logger.info(
            "order_status_changed",
            order_id=order.id,
            previous_status=order.status.value,
            new_status=new_status.value,
        )
        return Success(value=order.with_status(new_status))
