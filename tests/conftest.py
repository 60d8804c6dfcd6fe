"""Pytest configuration and shared test doubles.

This configuration provides:
1. Auto asyncio marking for coroutine tests
2. Order and item builders
3. Notifier test doubles (recording, failing, blocking)
4. A quiet logger double
"""

import asyncio
import inspect
from datetime import UTC, datetime
from decimal import Decimal
from unittest.mock import Mock

import pytest
from uuid_extensions import uuid7

from order_service.core.enums import ErrorCode
from order_service.core.result import Failure, Success
from order_service.domain.entities.order import Item, Order
from order_service.domain.enums.order_status import OrderStatus
from order_service.domain.protocols.logger_protocol import LoggerProtocol
from order_service.infrastructure.enums import InfrastructureErrorCode
from order_service.infrastructure.errors import NotificationError


# Configure pytest-asyncio
pytest_plugins = ("pytest_asyncio",)


# ============================================================================
# Builders
# ============================================================================


def make_item(
    product_id: str = "p1",
    quantity: int = 1,
    price: str | Decimal = "10.0",
) -> Item:
    """Helper to create an Item with Decimal price."""
    return Item(product_id=product_id, quantity=quantity, price=Decimal(price))


def make_order(
    *,
    order_id: str | None = None,
    user_id: str = "u1",
    items: tuple[Item, ...] | None = None,
    status: OrderStatus = OrderStatus.PENDING,
    created_at: datetime | None = None,
) -> Order:
    """Helper to create a consistent Order (total computed from items)."""
    items = items if items is not None else (make_item("p1", 2, "10.0"),)
    return Order(
        id=order_id or str(uuid7()),
        user_id=user_id,
        items=items,
        total_amount=sum((item.line_total for item in items), Decimal("0")),
        status=status,
        created_at=created_at or datetime.now(UTC),
    )


# ============================================================================
# Notifier Test Doubles
# ============================================================================


class RecordingNotifier:
    """Notifier that records every order it is asked to publish."""

    def __init__(self) -> None:
        self.published: list[Order] = []
        self.published_event = asyncio.Event()
        self.closed = False

    async def publish_order_created(self, order: Order):
        self.published.append(order)
        self.published_event.set()
        return Success(value=None)

    async def aclose(self) -> None:
        self.closed = True


class FailingNotifier:
    """Notifier whose publish always fails (bus down after retries)."""

    def __init__(self) -> None:
        self.attempts = 0

    async def publish_order_created(self, order: Order):
        self.attempts += 1
        return Failure(
            error=NotificationError(
                code=ErrorCode.ORDER_NOTIFICATION_FAILED,
                infrastructure_code=InfrastructureErrorCode.NOTIFICATION_PUBLISH_FAILED,
                message="bus unavailable",
                channel="order.created",
            )
        )

    async def aclose(self) -> None:
        return None


class BlockingNotifier:
    """Notifier whose publish never completes until released."""

    def __init__(self) -> None:
        self.started = 0
        self.release = asyncio.Event()

    async def publish_order_created(self, order: Order):
        self.started += 1
        await self.release.wait()
        return Success(value=None)

    async def aclose(self) -> None:
        return None


class RaisingNotifier:
    """Notifier that raises instead of returning a Result."""

    async def publish_order_created(self, order: Order):
        raise RuntimeError("notifier exploded")

    async def aclose(self) -> None:
        return None


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def logger() -> Mock:
    """Logger double that accepts every LoggerProtocol call."""
    return Mock(spec=LoggerProtocol)


@pytest.fixture
def order() -> Order:
    return make_order()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with test doubles")
    config.addinivalue_line(
        "markers", "integration: Integration tests against fakeredis"
    )
    config.addinivalue_line("markers", "api: HTTP tests through TestClient")
    config.addinivalue_line("markers", "asyncio: Async test that requires event loop")


# Test execution configuration
def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)
