"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (console, structlog)
- Order store Redis client
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from order_service.core.config import get_settings

if TYPE_CHECKING:
    from redis.asyncio import Redis

    from order_service.domain.protocols.logger_protocol import LoggerProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    LOG_JSON overrides the environment default.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from order_service.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(use_json=settings.use_json_logs, level=settings.log_level)


@lru_cache()
def get_store_redis() -> "Redis":
    """Get the order store Redis client singleton (app-scoped).

    The connection pool is shared across the entire application. No
    connection is opened until the first command.

    Returns:
        Async Redis client bound to STORE_URL.

    Usage:
        redis_client = get_store_redis()
        await redis_client.ping()
    """
    from redis.asyncio import ConnectionPool, Redis

    settings = get_settings()
    pool = ConnectionPool.from_url(
        settings.store_url,
        max_connections=50,
        decode_responses=True,
        socket_connect_timeout=5,
        socket_timeout=5,
        retry_on_timeout=True,
        socket_keepalive=True,
    )
    return Redis(connection_pool=pool)


async def close_store_redis() -> None:
    """Close the order store client and disconnect its pool, if one was created.

    The client does not own an explicitly passed pool, so the pool is
    disconnected separately.
    """
    if get_store_redis.cache_info().currsize == 0:
        return
    client = get_store_redis()
    await client.aclose()
    await client.connection_pool.disconnect()
    get_store_redis.cache_clear()
