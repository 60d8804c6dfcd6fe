"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from order_service.domain.protocols import OrderRepository, OrderNotifierProtocol
"""

from order_service.domain.protocols.logger_protocol import LoggerProtocol
from order_service.domain.protocols.order_notifier_protocol import (
    OrderNotifierProtocol,
)
from order_service.domain.protocols.order_repository import OrderRepository

__all__ = [
    "LoggerProtocol",
    "OrderNotifierProtocol",
    "OrderRepository",
]
