"""Order domain errors.

Defines message constants for order validation and lookup failures, plus the
one error type that carries extra context (the offending item index).

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Never raised as exceptions (return Failure(error) instead)

Usage:
    from order_service.domain.errors import OrderError
    from order_service.core.errors import ValidationError
    from order_service.core.enums import ErrorCode
    from order_service.core.result import Failure

    if not user_id:
        return Failure(error=ValidationError(
            code=ErrorCode.INVALID_USER_ID,
            message=OrderError.INVALID_USER_ID,
            field="user_id",
        ))
"""

from dataclasses import dataclass

from order_service.core.errors import ValidationError


class OrderError:
    """Order error message constants.

    Error Categories:
        - Validation errors: INVALID_USER_ID, INVALID_ORDER_ID, EMPTY_ITEMS,
          INVALID_ITEM_QUANTITY, INVALID_ITEM_PRICE, INVALID_ITEM_AMOUNT,
          INVALID_STATUS
        - Lookup/persistence errors: ORDER_NOT_FOUND, ORDER_ALREADY_EXISTS
    """

    # -------------------------------------------------------------------------
    # Validation Errors
    # -------------------------------------------------------------------------

    INVALID_USER_ID = "Invalid user ID"
    """user_id is empty."""

    INVALID_ORDER_ID = "Invalid order ID"
    """order_id is empty."""

    EMPTY_ITEMS = "Items list cannot be empty"
    """Order submitted without any line items."""

    INVALID_ITEM_QUANTITY = "Item {index} has invalid quantity"
    """Line item quantity is zero or negative. Format with index."""

    INVALID_ITEM_PRICE = "Item {index} has invalid price"
    """Line item unit price is negative or not a finite number. Format with index."""

    INVALID_ITEM_AMOUNT = "Item {index} amount cannot be represented exactly"
    """Line total or running order total overflows or would be rounded.
    Format with index."""

    INVALID_STATUS = "Invalid order status"
    """Status is not one of PENDING, PAID, CANCELLED, FAILED."""

    # -------------------------------------------------------------------------
    # Lookup / Persistence Errors
    # -------------------------------------------------------------------------

    ORDER_NOT_FOUND = "Order not found"
    """No order stored under the given id."""

    ORDER_ALREADY_EXISTS = "Order already exists"
    """An order is already stored under the given id.

    Unreachable while ids come from uuid7(); kept because the store contract
    must reject duplicates from any caller.
    """


@dataclass(frozen=True, slots=True, kw_only=True)
class InvalidItemError(ValidationError):
    """Line item validation failure.

    Only the first offending item (in submission order) is reported.

    Attributes:
        code: ErrorCode.INVALID_ITEM.
        message: Human-readable message naming the index.
        field: Always "items".
        index: Zero-based position of the offending item.
        details: Additional context.
    """

    index: int
