"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Default values
- Settings loading from environment variables
- Validation (log level, durations, counts, blank bus URL)
- Derived properties
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from order_service.core.config import Environment, Settings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


class TestSettingsDefaults:
    """Test defaults with an empty environment."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.port == 8000
        assert settings.store_backend == "redis"
        assert settings.store_url == "redis://localhost:6379/0"
        assert settings.store_namespace == "orderdb"
        assert settings.notification_bus_url is None
        assert settings.notification_channel == "order.created"
        assert settings.notification_timeout_seconds == 10.0
        assert settings.notification_max_in_flight == 100
        assert settings.notification_connect_attempts == 3
        assert settings.notification_connect_retry_delay_seconds == 2.0
        assert settings.notification_publish_attempts == 3
        assert settings.notification_publish_retry_delay_seconds == 1.0
        assert settings.notifications_enabled is False


class TestSettingsFromEnvironment:
    """Test loading from environment variables."""

    def test_overrides(self):
        env = {
            "ENVIRONMENT": "production",
            "PORT": "9090",
            "STORE_URL": "redis://store:6379/1",
            "STORE_NAMESPACE": "orders",
            "NOTIFICATION_BUS_URL": "redis://bus:6379/0",
            "NOTIFICATION_MAX_IN_FLIGHT": "5",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = get_settings()

        assert settings.environment == Environment.PRODUCTION
        assert settings.use_json_logs is True
        assert settings.port == 9090
        assert settings.store_url == "redis://store:6379/1"
        assert settings.store_namespace == "orders"
        assert settings.notifications_enabled is True
        assert settings.notification_max_in_flight == 5

    def test_blank_bus_url_disables_notifications(self):
        with patch.dict(os.environ, {"NOTIFICATION_BUS_URL": "  "}, clear=True):
            settings = Settings()

        assert settings.notification_bus_url is None
        assert settings.notifications_enabled is False

    def test_memory_backend(self):
        with patch.dict(os.environ, {"STORE_BACKEND": "memory"}, clear=True):
            assert Settings().store_backend == "memory"


class TestSettingsValidation:
    """Test Settings field validation."""

    def test_log_level_normalized(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}, clear=True):
            assert Settings().log_level == "DEBUG"

    def test_log_level_invalid(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "verbose"}, clear=True):
            with pytest.raises(ValidationError):
                Settings()

    def test_negative_timeout_rejected(self):
        with patch.dict(os.environ, {"NOTIFICATION_TIMEOUT_SECONDS": "-1"}, clear=True):
            with pytest.raises(ValidationError):
                Settings()

    def test_zero_attempts_rejected(self):
        with patch.dict(os.environ, {"NOTIFICATION_PUBLISH_ATTEMPTS": "0"}, clear=True):
            with pytest.raises(ValidationError):
                Settings()

    def test_unknown_store_backend_rejected(self):
        with patch.dict(os.environ, {"STORE_BACKEND": "mongo"}, clear=True):
            with pytest.raises(ValidationError):
                Settings()


class TestDerivedProperties:
    def test_json_logs_follow_environment(self):
        with patch.dict(os.environ, {"ENVIRONMENT": "development"}, clear=True):
            assert Settings().use_json_logs is False
        with patch.dict(os.environ, {"ENVIRONMENT": "ci"}, clear=True):
            assert Settings().use_json_logs is True

    def test_log_json_overrides_environment(self):
        env = {"ENVIRONMENT": "development", "LOG_JSON": "true"}
        with patch.dict(os.environ, env, clear=True):
            assert Settings().use_json_logs is True


class TestGetSettings:
    def test_cached_singleton(self):
        with patch.dict(os.environ, {}, clear=True):
            assert get_settings() is get_settings()
