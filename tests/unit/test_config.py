"""
Unit tests for ChainConfig.
"""

import pytest

from interceptchain.config import ChainConfig


class TestChainConfig:
    """Tests for ChainConfig."""

    def test_defaults(self):
        """Test default values."""
        config = ChainConfig()

        assert config.log_level == "INFO"
        assert config.server_latency == 0.0
        assert config.log_interceptor is True

    def test_from_env(self, monkeypatch):
        """Test reading configuration from environment variables."""
        monkeypatch.setenv("INTERCEPT_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("INTERCEPT_SERVER_LATENCY", "0.5")
        monkeypatch.setenv("INTERCEPT_LOG_INTERCEPTOR", "off")

        config = ChainConfig.from_env()

        assert config.log_level == "DEBUG"
        assert config.server_latency == 0.5
        assert config.log_interceptor is False

    def test_from_env_defaults(self, monkeypatch):
        """Test that missing variables fall back to defaults."""
        for name in ("INTERCEPT_LOG_LEVEL", "INTERCEPT_SERVER_LATENCY",
                     "INTERCEPT_LOG_INTERCEPTOR"):
            monkeypatch.delenv(name, raising=False)

        assert ChainConfig.from_env() == ChainConfig()

    def test_validate_ok(self):
        """Test that valid settings pass."""
        ChainConfig(log_level="debug", server_latency=1.0).validate()

    def test_validate_log_level(self):
        """Test that an unknown log level is rejected."""
        with pytest.raises(ValueError, match="log_level"):
            ChainConfig(log_level="LOUD").validate()

    def test_validate_latency(self):
        """Test that a negative latency is rejected."""
        with pytest.raises(ValueError, match="server_latency"):
            ChainConfig(server_latency=-0.1).validate()
