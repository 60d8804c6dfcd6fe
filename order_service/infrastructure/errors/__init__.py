"""Infrastructure errors package.

Usage:
    from order_service.infrastructure.errors import StoreError, NotificationError
"""

from order_service.infrastructure.errors.infrastructure_error import (
    InfrastructureError,
    NotificationError,
    StoreError,
)

__all__ = [
    "InfrastructureError",
    "NotificationError",
    "StoreError",
]
