"""Order validation rules."""

from order_service.domain.validators.order_rules import (
    calculate_total,
    validate_items,
    validate_order_id,
    validate_status,
    validate_user_id,
)

__all__ = [
    "calculate_total",
    "validate_items",
    "validate_order_id",
    "validate_status",
    "validate_user_id",
]
