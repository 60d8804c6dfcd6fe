"""
Main FastAPI application entry point.

Wires settings, the order routes, RFC 9457 exception handlers and the
lifespan that brings the order notifier up and down.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from order_service.core.config import settings
from order_service.presentation.routers.api.v1 import v1_router
from order_service.presentation.routers.api.v1.errors import (
    register_exception_handlers,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Connect the order notifier (no-op fallback if unreachable)
    - Shutdown: Drain in-flight notifications, close notifier and store clients

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    from order_service.core.container import (
        close_store_redis,
        get_logger,
        init_order_notifier,
        shutdown_order_notifications,
    )

    logger = get_logger()
    await init_order_notifier()
    logger.info(
        "application_started",
        environment=settings.environment.value,
        store_backend=settings.store_backend,
        notifications_enabled=settings.notifications_enabled,
    )

    yield

    await shutdown_order_notifications()
    await close_store_redis()
    logger.info("application_stopped")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="Order creation, lookup and status management",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Register global exception handlers (RFC 9457 error responses)
register_exception_handlers(app)

app.include_router(v1_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """
    Health check endpoint for monitoring and load balancers.

    Returns:
        dict: Health status indicator.
    """
    return {"status": "healthy"}
