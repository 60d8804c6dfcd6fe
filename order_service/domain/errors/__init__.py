"""Domain errors package.

Usage:
    from order_service.domain.errors import InvalidItemError, OrderError
"""

from order_service.domain.errors.order_error import InvalidItemError, OrderError

__all__ = ["InvalidItemError", "OrderError"]
