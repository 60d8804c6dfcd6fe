"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from order_service.core.container import get_logger, get_order_repository, ...

The container is organized into modules by concern:
- infrastructure: Logging and the order store Redis client
- repositories: Order repository factory
- events: Order notifier and detached notification dispatcher
- handlers: Order use case handler factories
"""

# Infrastructure services
from order_service.core.container.infrastructure import (
    close_store_redis,
    get_logger,
    get_store_redis,
)

# Repositories
from order_service.core.container.repositories import get_order_repository

# Order notifications
from order_service.core.container.events import (
    get_notification_dispatcher,
    get_order_notifier,
    init_order_notifier,
    shutdown_order_notifications,
)

# Handlers
from order_service.core.container.handlers import (
    get_create_order_handler,
    get_get_order_handler,
    get_update_order_status_handler,
)

__all__ = [
    "close_store_redis",
    "get_create_order_handler",
    "get_get_order_handler",
    "get_logger",
    "get_notification_dispatcher",
    "get_order_notifier",
    "get_order_repository",
    "get_store_redis",
    "get_update_order_status_handler",
    "init_order_notifier",
    "shutdown_order_notifications",
]
