"""Unit tests for UpdateOrderStatusHandler.

Tests cover:
- Status change returned and persisted
- Any-to-any transitions (including to the same status)
- Validation failures leave the store untouched
- NotFound from lookup skips the update
- Store failures pass through
"""

from unittest.mock import AsyncMock

import pytest

from order_service.application.commands.handlers import UpdateOrderStatusHandler
from order_service.application.commands.order_commands import UpdateOrderStatus
from order_service.core.enums import ErrorCode
from order_service.core.errors import NotFoundError
from order_service.core.result import Failure, Success
from order_service.domain.enums.order_status import OrderStatus
from order_service.infrastructure.enums import InfrastructureErrorCode
from order_service.infrastructure.errors import StoreError
from order_service.infrastructure.persistence import InMemoryOrderRepository
from tests.conftest import make_order


@pytest.fixture
def repo() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def handler(repo, logger) -> UpdateOrderStatusHandler:
    return UpdateOrderStatusHandler(order_repo=repo, logger=logger)


class TestUpdateOrderStatusSuccess:
    async def test_pending_to_paid_then_visible(self, handler, repo):
        order = make_order()
        await repo.create(order)

        result = await handler.handle(UpdateOrderStatus(order_id=order.id, status="PAID"))

        assert isinstance(result, Success)
        assert result.value == order.with_status(OrderStatus.PAID)
        stored = await repo.get_by_id(order.id)
        assert stored.value.status == OrderStatus.PAID

    async def test_other_fields_unchanged(self, handler, repo):
        order = make_order()
        await repo.create(order)

        await handler.handle(UpdateOrderStatus(order_id=order.id, status="CANCELLED"))

        stored = (await repo.get_by_id(order.id)).value
        assert stored.items == order.items
        assert stored.total_amount == order.total_amount
        assert stored.created_at == order.created_at
        assert stored.user_id == order.user_id

    async def test_same_status_is_success(self, handler, repo):
        order = make_order()
        await repo.create(order)

        result = await handler.handle(
            UpdateOrderStatus(order_id=order.id, status="PENDING")
        )

        assert isinstance(result, Success)
        assert result.value.status == OrderStatus.PENDING

    @pytest.mark.parametrize(
        ("start", "target"),
        [
            (OrderStatus.CANCELLED, "PENDING"),
            (OrderStatus.FAILED, "PAID"),
            (OrderStatus.PAID, "FAILED"),
        ],
    )
    async def test_any_status_reachable_from_any_status(
        self, handler, repo, start, target
    ):
        order = make_order(status=start)
        await repo.create(order)

        result = await handler.handle(UpdateOrderStatus(order_id=order.id, status=target))

        assert result.value.status == OrderStatus(target)


class TestUpdateOrderStatusFailures:
    async def test_unknown_status_leaves_order_unchanged(self, handler, repo):
        order = make_order()
        await repo.create(order)

        result = await handler.handle(
            UpdateOrderStatus(order_id=order.id, status="SHIPPED")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_STATUS
        assert (await repo.get_by_id(order.id)).value.status == OrderStatus.PENDING

    async def test_validation_does_not_touch_store(self, logger):
        repo = AsyncMock()
        handler = UpdateOrderStatusHandler(order_repo=repo, logger=logger)

        empty_id = await handler.handle(UpdateOrderStatus(order_id="", status="PAID"))
        bad_status = await handler.handle(UpdateOrderStatus(order_id="o1", status="x"))

        assert empty_id.error.code == ErrorCode.INVALID_ORDER_ID
        assert bad_status.error.code == ErrorCode.INVALID_STATUS
        repo.get_by_id.assert_not_called()
        repo.update_status.assert_not_called()

    async def test_missing_order_is_not_found(self, logger):
        repo = AsyncMock()
        repo.get_by_id.return_value = Failure(
            error=NotFoundError(
                code=ErrorCode.ORDER_NOT_FOUND,
                message="Order not found",
                resource_type="Order",
                resource_id="nope",
            )
        )
        handler = UpdateOrderStatusHandler(order_repo=repo, logger=logger)

        result = await handler.handle(UpdateOrderStatus(order_id="nope", status="PAID"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        repo.update_status.assert_not_called()

    async def test_update_store_failure_passes_through(self, logger):
        order = make_order()
        repo = AsyncMock()
        repo.get_by_id.return_value = Success(value=order)
        repo.update_status.return_value = Failure(
            error=StoreError(
                code=ErrorCode.ORDER_STORE_FAILED,
                infrastructure_code=InfrastructureErrorCode.STORE_UPDATE_ERROR,
                message="store down",
            )
        )
        handler = UpdateOrderStatusHandler(order_repo=repo, logger=logger)

        result = await handler.handle(UpdateOrderStatus(order_id=order.id, status="PAID"))

        assert isinstance(result.error, StoreError)
        repo.update_status.assert_awaited_once_with(order.id, OrderStatus.PAID)
