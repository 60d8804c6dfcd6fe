"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, EMPTY_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS)
- Infrastructure failures surfaced to the domain (*_FAILED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    INVALID_USER_ID = "invalid_user_id"
    INVALID_ORDER_ID = "invalid_order_id"
    EMPTY_ITEMS = "empty_items"
    INVALID_ITEM = "invalid_item"
    INVALID_STATUS = "invalid_status"

    # Resource errors
    ORDER_NOT_FOUND = "order_not_found"

    # Conflict errors
    ORDER_ALREADY_EXISTS = "order_already_exists"

    # Infrastructure failures
    ORDER_STORE_FAILED = "order_store_failed"
    ORDER_NOTIFICATION_FAILED = "order_notification_failed"
