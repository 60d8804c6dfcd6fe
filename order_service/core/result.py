"""Result types for railway-oriented programming.

Every order operation that can fail for an expected reason (bad input, missing
order, store outage) returns one of these instead of raising. Callers branch
with structural pattern matching.

Usage:
    result = await handler.handle(GetOrder(order_id=order_id))
    match result:
        case Success(value=order):
            print(order.total_amount)
        case Failure(error=error):
            print(error.code)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
