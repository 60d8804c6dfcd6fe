"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables. Every field has a default so the service starts against a local
Redis without any environment set up.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from order_service.core.config import settings

    store_url = settings.store_url
    if settings.notification_bus_url is None:
        # order.created notifications disabled
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from order_service.core.enums import Environment

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, detailed errors)",
    )
    host: str = Field(
        default="0.0.0.0",
        description="Server bind host",
    )
    port: int = Field(
        default=8000,
        description="Server listen port",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool | None = Field(
        default=None,
        description="Force JSON log output. Defaults to JSON outside development.",
    )

    # Application metadata
    app_name: str = Field(
        default="Order Service",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    api_base_url: str = Field(
        default="http://localhost:8000",
        description="Public base URL, used to build problem type URIs",
    )

    # Order store configuration
    store_backend: Literal["redis", "memory"] = Field(
        default="redis",
        description="Order store backend ('redis' document store or in-process 'memory')",
    )
    store_url: str = Field(
        default="redis://localhost:6379/0",
        description="Order store connection URL (e.g., redis://host:port/db)",
    )
    store_namespace: str = Field(
        default="orderdb",
        description="Database name used as key prefix for order documents",
    )

    # Notification bus configuration
    notification_bus_url: str | None = Field(
        default=None,
        description="Notification bus URL (redis://...). Unset disables order.created events.",
    )
    notification_channel: str = Field(
        default="order.created",
        description="Pub/sub channel for order.created events",
    )
    notification_timeout_seconds: float = Field(
        default=10.0,
        description="Lifetime bound of one detached notification (all retries included)",
    )
    notification_max_in_flight: int = Field(
        default=100,
        description="Maximum concurrent detached notifications before new ones are dropped",
    )
    notification_connect_attempts: int = Field(
        default=3,
        description="Connection attempts to the notification bus at startup",
    )
    notification_connect_retry_delay_seconds: float = Field(
        default=2.0,
        description="Fixed delay between notification bus connection attempts",
    )
    notification_publish_attempts: int = Field(
        default=3,
        description="Publish attempts for a single order.created event",
    )
    notification_publish_retry_delay_seconds: float = Field(
        default=1.0,
        description="Fixed delay between publish attempts",
    )

    # Request handling
    request_timeout_seconds: float = Field(
        default=10.0,
        description="Deadline applied to each order operation by the HTTP layer",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate log level name.

        Args:
            v: Log level name (any case).

        Returns:
            str: Upper-case log level.

        Raises:
            ValueError: If level is not one of the five standard levels.
        """
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @field_validator(
        "notification_timeout_seconds",
        "notification_connect_retry_delay_seconds",
        "notification_publish_retry_delay_seconds",
        "request_timeout_seconds",
    )
    @classmethod
    def validate_non_negative_seconds(cls, v: float) -> float:
        """Reject negative durations."""
        if v < 0:
            raise ValueError("durations must not be negative")
        return v

    @field_validator(
        "notification_max_in_flight",
        "notification_connect_attempts",
        "notification_publish_attempts",
    )
    @classmethod
    def validate_positive_count(cls, v: int) -> int:
        """Reject zero or negative counts."""
        if v < 1:
            raise ValueError("counts must be at least 1")
        return v

    @field_validator("notification_bus_url")
    @classmethod
    def blank_url_is_unset(cls, v: str | None) -> str | None:
        """Treat an empty NOTIFICATION_BUS_URL the same as an unset one."""
        if v is not None and not v.strip():
            return None
        return v

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def notifications_enabled(self) -> bool:
        """True when a notification bus URL is configured."""
        return self.notification_bus_url is not None

    @property
    def use_json_logs(self) -> bool:
        """JSON logs unless explicitly disabled or running in development."""
        if self.log_json is not None:
            return self.log_json
        return not self.is_development


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
