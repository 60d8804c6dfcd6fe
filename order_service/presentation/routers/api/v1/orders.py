"""Orders resource handlers.

Handler functions for order endpoints. Routes are registered in
``order_service.presentation.routers.api.v1`` (see ``v1_router``).

Handlers:
    create_order         - Place a new order
    get_order            - Get order details
    update_order_status  - Change an order's status

Every use case call runs under ``asyncio.timeout(settings.request_timeout_seconds)``.
The notification started by create_order is detached from this deadline.
"""

import asyncio
from typing import Annotated

from fastapi import Depends, Path, Request
from fastapi.responses import JSONResponse

from order_service.application.commands.handlers import (
    CreateOrderHandler,
    UpdateOrderStatusHandler,
)
from order_service.application.commands.order_commands import (
    CreateOrder,
    UpdateOrderStatus,
)
from order_service.application.errors import ApplicationError, ApplicationErrorCode
from order_service.application.queries.handlers import GetOrderHandler
from order_service.application.queries.order_queries import GetOrder
from order_service.core.config import settings
from order_service.core.container import (
    get_create_order_handler,
    get_get_order_handler,
    get_update_order_status_handler,
)
from order_service.core.errors import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from order_service.core.result import Failure
from order_service.presentation.routers.api.v1.errors import ErrorResponseBuilder
from order_service.schemas.order_schemas import (
    CreateOrderRequest,
    OrderEnvelope,
    OrderResponse,
    UpdateOrderStatusRequest,
)


# =============================================================================
# Error Mapping (DomainError → ApplicationError)
# =============================================================================


def _map_order_error(
    error: DomainError,
    fallback: ApplicationErrorCode = ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
) -> ApplicationError:
    """Map a use case failure to ApplicationError.

    Args:
        error: DomainError returned by a handler.
        fallback: Code for store failures and anything unrecognised.

    Returns:
        ApplicationError with appropriate code and message.
    """
    details = None
    if isinstance(error, ValidationError):
        code = ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        message = error.message
        if error.details:
            details = {k: str(v) for k, v in error.details.items()}
    elif isinstance(error, NotFoundError):
        code = ApplicationErrorCode.NOT_FOUND
        message = error.message
    elif isinstance(error, ConflictError):
        code = ApplicationErrorCode.CONFLICT
        message = error.message
    else:
        # Store internals stay out of the response body
        code = fallback
        message = "Order store is unavailable"

    return ApplicationError(
        code=code,
        message=message,
        domain_error=error,
        details=details,
    )


def _timeout_error() -> ApplicationError:
    return ApplicationError(
        code=ApplicationErrorCode.TIMEOUT,
        message=f"Order operation exceeded {settings.request_timeout_seconds}s",
    )


# =============================================================================
# Handlers
# =============================================================================


async def create_order(
    request: Request,
    data: CreateOrderRequest,
    handler: CreateOrderHandler = Depends(get_create_order_handler),
) -> OrderEnvelope | JSONResponse:
    """Place a new order.

    POST /api/v1/orders → 201 Created

    Args:
        request: FastAPI request object.
        data: User id and line items.
        handler: CreateOrder handler (injected).

    Returns:
        OrderEnvelope with the stored order (status PENDING).
        JSONResponse with RFC 9457 error on failure.
    """
    command = CreateOrder(
        user_id=data.user_id,
        items=tuple(item.to_entity() for item in data.items),
    )

    try:
        async with asyncio.timeout(settings.request_timeout_seconds):
            result = await handler.handle(command)
    except TimeoutError:
        return ErrorResponseBuilder.from_application_error(_timeout_error(), request)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            _map_order_error(result.error), request
        )

    return OrderEnvelope(order=OrderResponse.from_entity(result.value))


async def get_order(
    request: Request,
    order_id: Annotated[str, Path(description="Order identifier")],
    handler: GetOrderHandler = Depends(get_get_order_handler),
) -> OrderEnvelope | JSONResponse:
    """Get a specific order.

    GET /api/v1/orders/{order_id} → 200 OK
    """
    try:
        async with asyncio.timeout(settings.request_timeout_seconds):
            result = await handler.handle(GetOrder(order_id=order_id))
    except TimeoutError:
        return ErrorResponseBuilder.from_application_error(_timeout_error(), request)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            _map_order_error(result.error, ApplicationErrorCode.QUERY_FAILED),
            request,
        )

    return OrderEnvelope(order=OrderResponse.from_entity(result.value))


async def update_order_status(
    request: Request,
    order_id: Annotated[str, Path(description="Order identifier")],
    data: UpdateOrderStatusRequest,
    handler: UpdateOrderStatusHandler = Depends(get_update_order_status_handler),
) -> OrderEnvelope | JSONResponse:
    """Change an order's status.

    PATCH /api/v1/orders/{order_id}/status → 200 OK

    Returns:
        OrderEnvelope with the order carrying its new status.
        JSONResponse with RFC 9457 error on failure.
    """
    command = UpdateOrderStatus(order_id=order_id, status=data.status)

    try:
        async with asyncio.timeout(settings.request_timeout_seconds):
            result = await handler.handle(command)
    except TimeoutError:
        return ErrorResponseBuilder.from_application_error(_timeout_error(), request)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            _map_order_error(result.error), request
        )

    return OrderEnvelope(order=OrderResponse.from_entity(result.value))
