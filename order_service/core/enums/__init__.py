"""Core enums package.

Usage:
    from order_service.core.enums import ErrorCode, Environment
"""

from order_service.core.enums.environment import Environment
from order_service.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
