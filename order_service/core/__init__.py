"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error classes for domain-level error handling
- Error code and environment enums

The core module has NO dependencies on other application layers.
"""

from order_service.core.errors import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from order_service.core.enums import ErrorCode
from order_service.core.result import Failure, Result, Success

__all__ = [
    "ConflictError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "Result",
    "Success",
    "ValidationError",
]
