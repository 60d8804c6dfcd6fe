"""API tests for order endpoints.

Tests the complete HTTP request/response cycle for order management:
- POST  /api/v1/orders                    (create order)
- GET   /api/v1/orders/{order_id}         (get order)
- PATCH /api/v1/orders/{order_id}/status  (update status)

Architecture:
- Uses FastAPI TestClient with real app + dependency overrides
- Real handlers over an InMemoryOrderRepository
- Mock handlers where a specific failure must be forced
- Checks RFC 9457 error responses
"""

import asyncio
from decimal import Decimal
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from order_service.application.commands.handlers import (
    CreateOrderHandler,
    UpdateOrderStatusHandler,
)
from order_service.application.queries.handlers import GetOrderHandler
from order_service.application.services import OrderNotificationDispatcher
from order_service.core.config import settings
from order_service.core.container import (
    get_create_order_handler,
    get_get_order_handler,
    get_update_order_status_handler,
)
from order_service.core.enums import ErrorCode
from order_service.core.result import Failure
from order_service.infrastructure.enums import InfrastructureErrorCode
from order_service.infrastructure.errors import StoreError
from order_service.infrastructure.persistence import InMemoryOrderRepository
from order_service.main import app
from tests.conftest import FailingNotifier, RecordingNotifier

pytestmark = pytest.mark.api


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def repo() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def client(repo, notifier, logger):
    """TestClient with handlers wired to an in-memory store."""
    dispatcher = OrderNotificationDispatcher(notifier=notifier, logger=logger)
    app.dependency_overrides[get_create_order_handler] = lambda: CreateOrderHandler(
        order_repo=repo, dispatcher=dispatcher, logger=logger
    )
    app.dependency_overrides[get_get_order_handler] = lambda: GetOrderHandler(
        order_repo=repo
    )
    app.dependency_overrides[get_update_order_status_handler] = (
        lambda: UpdateOrderStatusHandler(order_repo=repo, logger=logger)
    )
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _create(client: TestClient, **overrides):
    body = {
        "user_id": "u1",
        "items": [
            {"product_id": "p1", "quantity": 2, "price": "10.0"},
            {"product_id": "p2", "quantity": 1, "price": "5.0"},
        ],
    } | overrides
    return client.post("/api/v1/orders", json=body)


def _store_failure() -> Failure:
    return Failure(
        error=StoreError(
            code=ErrorCode.ORDER_STORE_FAILED,
            infrastructure_code=InfrastructureErrorCode.STORE_GET_ERROR,
            message="Failed to find order 'o-1'",
            details={"error": "Connection refused"},
        )
    )


# =============================================================================
# POST /api/v1/orders
# =============================================================================


class TestCreateOrder:
    def test_create_returns_201_with_order(self, client):
        response = _create(client)

        assert response.status_code == 201
        order = response.json()["order"]
        assert order["id"]
        assert order["user_id"] == "u1"
        assert order["status"] == "PENDING"
        assert Decimal(order["total_amount"]) == Decimal("25.0")
        assert [item["product_id"] for item in order["items"]] == ["p1", "p2"]
        assert order["created_at"]

    def test_numeric_prices_accepted(self, client):
        response = _create(
            client, items=[{"product_id": "p1", "quantity": 3, "price": 1.5}]
        )

        assert response.status_code == 201
        assert Decimal(response.json()["order"]["total_amount"]) == Decimal("4.5")

    def test_invalid_item_is_400_with_index(self, client, repo):
        response = _create(
            client, items=[{"product_id": "p1", "quantity": 0, "price": "10.0"}]
        )

        assert response.status_code == 400
        problem = response.json()
        assert problem["title"] == "Validation Failed"
        assert problem["detail"] == "Item 0 has invalid quantity"
        assert problem["errors"][0]["field"] == "items"
        assert problem["errors"][0]["code"] == "invalid_item"
        assert problem["errors"][0]["details"] == {"index": "0"}
        assert len(repo) == 0

    def test_overflowing_total_is_400_with_index(self, client, repo, notifier):
        response = _create(
            client,
            items=[
                {"product_id": "p1", "quantity": 1, "price": "10.0"},
                {"product_id": "p2", "quantity": 2, "price": "9E+999999"},
            ],
        )

        assert response.status_code == 400
        problem = response.json()
        assert problem["detail"] == "Item 1 amount cannot be represented exactly"
        assert problem["errors"][0]["details"] == {"index": "1"}
        assert len(repo) == 0
        assert notifier.published == []

    def test_empty_items_is_400(self, client):
        response = _create(client, items=[])

        assert response.status_code == 400
        assert response.json()["errors"][0]["code"] == "empty_items"
        assert "details" not in response.json()["errors"][0]

    def test_empty_user_id_is_400(self, client):
        response = _create(client, user_id="")

        assert response.status_code == 400
        assert response.json()["errors"][0]["code"] == "invalid_user_id"

    def test_malformed_body_is_422(self, client):
        response = client.post("/api/v1/orders", json={"user_id": "u1", "items": "x"})

        assert response.status_code == 422
        assert response.json()["title"] == "Validation Failed"

    def test_notifier_failure_does_not_affect_response(self, repo, logger):
        dispatcher = OrderNotificationDispatcher(notifier=FailingNotifier(), logger=logger)
        app.dependency_overrides[get_create_order_handler] = lambda: CreateOrderHandler(
            order_repo=repo, dispatcher=dispatcher, logger=logger
        )
        try:
            with TestClient(app) as client:
                response = _create(client)
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 201
        assert len(repo) == 1

    def test_store_failure_is_500_without_internals(self):
        handler = AsyncMock()
        handler.handle.return_value = _store_failure()
        app.dependency_overrides[get_create_order_handler] = lambda: handler
        try:
            with TestClient(app) as client:
                response = _create(client)
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        problem = response.json()
        assert problem["detail"] == "Order store is unavailable"
        assert "Connection refused" not in response.text


# =============================================================================
# GET /api/v1/orders/{order_id}
# =============================================================================


class TestGetOrder:
    def test_get_created_order(self, client):
        created = _create(client).json()["order"]

        response = client.get(f"/api/v1/orders/{created['id']}")

        assert response.status_code == 200
        assert response.json()["order"] == created

    def test_unknown_order_is_404(self, client):
        response = client.get("/api/v1/orders/does-not-exist")

        assert response.status_code == 404
        problem = response.json()
        assert problem["title"] == "Resource Not Found"
        assert problem["instance"] == "/api/v1/orders/does-not-exist"

    def test_store_failure_is_500(self):
        handler = AsyncMock()
        handler.handle.return_value = _store_failure()
        app.dependency_overrides[get_get_order_handler] = lambda: handler
        try:
            with TestClient(app) as client:
                response = client.get("/api/v1/orders/o-1")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json()["title"] == "Query Failed"


# =============================================================================
# PATCH /api/v1/orders/{order_id}/status
# =============================================================================


class TestUpdateOrderStatus:
    def test_pending_to_paid_then_get_sees_paid(self, client):
        created = _create(client).json()["order"]

        response = client.patch(
            f"/api/v1/orders/{created['id']}/status", json={"status": "PAID"}
        )

        assert response.status_code == 200
        assert response.json()["order"] == created | {"status": "PAID"}
        fetched = client.get(f"/api/v1/orders/{created['id']}").json()["order"]
        assert fetched["status"] == "PAID"

    def test_unknown_status_is_400_and_order_unchanged(self, client):
        created = _create(client).json()["order"]

        response = client.patch(
            f"/api/v1/orders/{created['id']}/status", json={"status": "SHIPPED"}
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["code"] == "invalid_status"
        fetched = client.get(f"/api/v1/orders/{created['id']}").json()["order"]
        assert fetched["status"] == "PENDING"

    def test_unknown_order_is_404(self, client):
        response = client.patch(
            "/api/v1/orders/does-not-exist/status", json={"status": "PAID"}
        )

        assert response.status_code == 404

    def test_missing_status_is_422(self, client):
        created = _create(client).json()["order"]

        response = client.patch(f"/api/v1/orders/{created['id']}/status", json={})

        assert response.status_code == 422


# =============================================================================
# Deadline
# =============================================================================


class TestRequestTimeout:
    def test_slow_handler_is_504(self):
        class SlowHandler:
            async def handle(self, query):
                await asyncio.sleep(5)

        app.dependency_overrides[get_get_order_handler] = lambda: SlowHandler()
        try:
            with patch.object(settings, "request_timeout_seconds", 0.05):
                with TestClient(app) as client:
                    response = client.get("/api/v1/orders/o-1")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 504
        assert response.json()["title"] == "Request Timed Out"

    def test_slow_store_on_create_is_504_and_nothing_stored(self, notifier, logger):
        class SlowStore(InMemoryOrderRepository):
            async def create(self, order):
                await asyncio.sleep(5)
                return await super().create(order)

        repo = SlowStore()
        dispatcher = OrderNotificationDispatcher(notifier=notifier, logger=logger)
        app.dependency_overrides[get_create_order_handler] = lambda: CreateOrderHandler(
            order_repo=repo, dispatcher=dispatcher, logger=logger
        )
        try:
            with patch.object(settings, "request_timeout_seconds", 0.05):
                with TestClient(app) as client:
                    response = _create(client)
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 504
        assert len(repo) == 0
        assert dispatcher.in_flight == 0
        assert notifier.published == []


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}
