"""Infrastructure-specific error codes.

These are internal codes for tracking infrastructure failures.
They are mapped to domain ErrorCode when flowing to domain layer.

Categories:
- Store errors (STORE_*)
- Notification bus errors (NOTIFICATION_*)
"""

from enum import Enum


class InfrastructureErrorCode(Enum):
    """Infrastructure-specific error codes.

    These are internal codes for tracking infrastructure failures.
    They are mapped to domain ErrorCode when flowing to domain layer.
    """

    # Store errors
    STORE_CREATE_ERROR = "store_create_error"
    STORE_GET_ERROR = "store_get_error"
    STORE_UPDATE_ERROR = "store_update_error"
    STORE_DATA_ERROR = "store_data_error"

    # Notification bus errors
    NOTIFICATION_CONNECTION_FAILED = "notification_connection_failed"
    NOTIFICATION_PUBLISH_FAILED = "notification_publish_failed"
