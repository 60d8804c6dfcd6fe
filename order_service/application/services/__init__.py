"""Application services."""

from order_service.application.services.notification_dispatcher import (
    OrderNotificationDispatcher,
)

__all__ = ["OrderNotificationDispatcher"]
