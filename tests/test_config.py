"""
Unit tests for environment configuration
"""
import pytest

from mcp_webfetch_ux.adapters.fetcher import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from mcp_webfetch_ux.config import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    get_fetch_timeout,
    get_host,
    get_log_level,
    get_port,
    get_user_agent,
)


class TestDefaults:
    """Test values when nothing is set."""

    def test_defaults(self, monkeypatch):
        for name in ("PORT", "HOST", "USER_AGENT", "FETCH_TIMEOUT", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        assert get_port() == DEFAULT_PORT == 5002
        assert get_host() == DEFAULT_HOST == "127.0.0.1"
        assert get_user_agent() == DEFAULT_USER_AGENT
        assert get_fetch_timeout() == DEFAULT_TIMEOUT == 30.0
        assert get_log_level() == "INFO"


class TestGetPort:
    """Test PORT parsing."""

    def test_valid(self, monkeypatch):
        monkeypatch.setenv("PORT", "8123")
        assert get_port() == 8123

    @pytest.mark.parametrize("value", ["abc", "80.5", ""])
    def test_invalid(self, monkeypatch, value):
        monkeypatch.setenv("PORT", value)
        with pytest.raises(ValueError, match="Invalid PORT value"):
            get_port()


class TestGetFetchTimeout:
    """Test FETCH_TIMEOUT parsing."""

    def test_valid(self, monkeypatch):
        monkeypatch.setenv("FETCH_TIMEOUT", "2.5")
        assert get_fetch_timeout() == 2.5

    @pytest.mark.parametrize("value", ["soon", "0", "-3"])
    def test_invalid_or_not_positive(self, monkeypatch, value):
        monkeypatch.setenv("FETCH_TIMEOUT", value)
        with pytest.raises(ValueError, match="Invalid FETCH_TIMEOUT value"):
            get_fetch_timeout()


class TestOtherSettings:
    """Test string settings."""

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("HOST", "0.0.0.0")
        monkeypatch.setenv("USER_AGENT", "tester/2.0")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert get_host() == "0.0.0.0"
        assert get_user_agent() == "tester/2.0"
        assert get_log_level() == "DEBUG"
