"""Infrastructure enums package.

Usage:
    from order_service.infrastructure.enums import InfrastructureErrorCode
"""

from order_service.infrastructure.enums.infrastructure_error_code import (
    InfrastructureErrorCode,
)

__all__ = ["InfrastructureErrorCode"]
