"""Order validation rules and total computation.

Pure functions shared by the order use case handlers. Each validator returns
a Result instead of raising, so handlers can short-circuit with a single
``if isinstance(result, Failure)`` check.
"""

from decimal import (
    Decimal,
    DecimalException,
    Inexact,
    InvalidOperation,
    Overflow,
    localcontext,
)

from order_service.core.enums import ErrorCode
from order_service.core.errors import DomainError, ValidationError
from order_service.core.result import Failure, Result, Success
from order_service.domain.entities.order import Item
from order_service.domain.enums.order_status import OrderStatus
from order_service.domain.errors import InvalidItemError, OrderError


def validate_user_id(user_id: str) -> Result[str, DomainError]:
    """Reject an empty user id."""
    if not user_id:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_USER_ID,
                message=OrderError.INVALID_USER_ID,
                field="user_id",
            )
        )
    return Success(value=user_id)


def validate_order_id(order_id: str) -> Result[str, DomainError]:
    """Reject an empty order id."""
    if not order_id:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_ORDER_ID,
                message=OrderError.INVALID_ORDER_ID,
                field="order_id",
            )
        )
    return Success(value=order_id)


def validate_items(items: tuple[Item, ...]) -> Result[tuple[Item, ...], DomainError]:
    """Check the item list of a new order.

    Items are checked in submission order and validation stops at the first
    offending item; errors are not aggregated.

    Args:
        items: Line items as submitted.

    Returns:
        Success(items) if every item is valid.
        Failure(ValidationError) with EMPTY_ITEMS for an empty list.
        Failure(InvalidItemError) naming the first item with quantity <= 0
        or a price that is negative or not a finite number.
    """
    if not items:
        return Failure(
            error=ValidationError(
                code=ErrorCode.EMPTY_ITEMS,
                message=OrderError.EMPTY_ITEMS,
                field="items",
            )
        )

    for index, item in enumerate(items):
        if item.quantity <= 0:
            return Failure(error=_invalid_item(index, OrderError.INVALID_ITEM_QUANTITY))
        if not item.price.is_finite() or item.price < 0:
            return Failure(error=_invalid_item(index, OrderError.INVALID_ITEM_PRICE))

    return Success(value=items)


def validate_status(status: str) -> Result[OrderStatus, DomainError]:
    """Parse a raw status string into an OrderStatus.

    Returns:
        Success(OrderStatus) for PENDING, PAID, CANCELLED or FAILED,
        otherwise Failure(ValidationError) with INVALID_STATUS.
    """
    if not OrderStatus.is_valid(status):
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_STATUS,
                message=OrderError.INVALID_STATUS,
                field="status",
                details={"status": str(status)},
            )
        )
    return Success(value=OrderStatus(status))


def calculate_total(items: tuple[Item, ...]) -> Result[Decimal, DomainError]:
    """Sum quantity * price over items, accumulating left to right.

    Arithmetic runs in a local decimal context that traps rounding, overflow
    and invalid operations. Quiet NaN and infinities do not signal, so the
    running total is also checked for finiteness.

    Args:
        items: Validated line items.

    Returns:
        Success(Decimal) with the exact total.
        Failure(InvalidItemError) naming the item whose line total (or the
        running sum including it) cannot be represented exactly.

    Example:
        >>> calculate_total((
        ...     Item(product_id="p1", quantity=2, price=Decimal("10.0")),
        ...     Item(product_id="p2", quantity=1, price=Decimal("5.0")),
        ... ))
        Success(value=Decimal('25.0'))
    """
    total = Decimal("0")
    with localcontext() as ctx:
        ctx.traps[Inexact] = True
        ctx.traps[Overflow] = True
        ctx.traps[InvalidOperation] = True
        for index, item in enumerate(items):
            try:
                total += item.line_total
                representable = total.is_finite()
            except DecimalException:
                representable = False
            if not representable:
                return Failure(
                    error=_invalid_item(index, OrderError.INVALID_ITEM_AMOUNT)
                )
    return Success(value=total)


def _invalid_item(index: int, template: str) -> InvalidItemError:
    return InvalidItemError(
        code=ErrorCode.INVALID_ITEM,
        message=template.format(index=index),
        field="items",
        index=index,
        details={"index": str(index)},
    )
