"""GetOrder query handler.

Architecture:
- Application layer handler (orchestrates data retrieval)
- Returns Result[Order, DomainError] (explicit error handling)
- NO side effects
"""

from order_service.application.queries.order_queries import GetOrder
from order_service.core.errors import DomainError
from order_service.core.result import Failure, Result
from order_service.domain.entities.order import Order
from order_service.domain.protocols.order_repository import OrderRepository
from order_service.domain.validators import validate_order_id


class GetOrderHandler:
    """Handler for GetOrder query.

    Dependencies (injected via constructor):
        - OrderRepository: For order retrieval
    """

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    async def handle(self, query: GetOrder) -> Result[Order, DomainError]:
        """Handle GetOrder query.

        Args:
            query: GetOrder query with order_id.

        Returns:
            Success(Order): Order as stored.
            Failure(ValidationError): order_id is empty.
            Failure(NotFoundError | StoreError): Passed through from the store.
        """
        id_result = validate_order_id(query.order_id)
        if isinstance(id_result, Failure):
            return id_result

        return await self._order_repo.get_by_id(query.order_id)
