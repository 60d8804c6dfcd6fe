"""Core errors package.

Usage:
    from order_service.core.errors import DomainError, ValidationError, NotFoundError
"""

from order_service.core.errors.common_errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
)
from order_service.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
]
