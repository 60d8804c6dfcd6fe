"""Order status enumeration.

Defines the closed set of lifecycle states an order may hold.
"""

from enum import Enum


class OrderStatus(str, Enum):
    """Order lifecycle status.

    Every order is created as PENDING. Any status may be set from any other
    status (including the current one); no transition graph is enforced.

    Values are the exact upper-case names used on the wire and in storage.
    """

    PENDING = "PENDING"
    """Order accepted, awaiting payment."""

    PAID = "PAID"
    """Payment captured."""

    CANCELLED = "CANCELLED"
    """Order voided by the customer or operator."""

    FAILED = "FAILED"
    """Order could not be fulfilled (payment declined, processing error)."""

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check whether a raw status string names a member of the enumeration.

        Matching is exact and case-sensitive: "paid" and "SHIPPED" are both
        invalid.

        Args:
            value: Raw status string supplied by a caller.

        Returns:
            True if value is one of PENDING, PAID, CANCELLED, FAILED.

        Example:
            >>> OrderStatus.is_valid("PAID")
            True
            >>> OrderStatus.is_valid("SHIPPED")
            False
        """
        return value in cls._value2member_map_
