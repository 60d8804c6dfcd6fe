"""API v1 routers.

Resources:
    POST  /api/v1/orders                     - Place an order
    GET   /api/v1/orders/{order_id}          - Get an order
    PATCH /api/v1/orders/{order_id}/status   - Change an order's status
"""

from fastapi import APIRouter, status

from order_service.presentation.routers.api.v1.orders import (
    create_order,
    get_order,
    update_order_status,
)
from order_service.presentation.routers.api.v1.errors.problem_details import (
    ProblemDetails,
)
from order_service.schemas.order_schemas import OrderEnvelope

_ERROR_RESPONSES = {
    400: {"model": ProblemDetails, "description": "Invalid order data"},
    404: {"model": ProblemDetails, "description": "Order not found"},
    500: {"model": ProblemDetails, "description": "Order store failure"},
}

v1_router = APIRouter(prefix="/api/v1")

v1_router.add_api_route(
    "/orders",
    create_order,
    methods=["POST"],
    status_code=status.HTTP_201_CREATED,
    response_model=OrderEnvelope,
    responses={
        **_ERROR_RESPONSES,
        409: {"model": ProblemDetails, "description": "Order id already exists"},
    },
    summary="Place an order",
    tags=["Orders"],
)
v1_router.add_api_route(
    "/orders/{order_id}",
    get_order,
    methods=["GET"],
    status_code=status.HTTP_200_OK,
    response_model=OrderEnvelope,
    responses=_ERROR_RESPONSES,
    summary="Get an order",
    tags=["Orders"],
)
v1_router.add_api_route(
    "/orders/{order_id}/status",
    update_order_status,
    methods=["PATCH"],
    status_code=status.HTTP_200_OK,
    response_model=OrderEnvelope,
    responses=_ERROR_RESPONSES,
    summary="Change an order's status",
    tags=["Orders"],
)

__all__ = [
    "v1_router",
]
