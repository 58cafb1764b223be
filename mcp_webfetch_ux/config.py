"""
Configuration from environment variables

- PORT: HTTP server port (default: 5002)
- HOST: HTTP server bind address (default: 127.0.0.1)
- USER_AGENT: User-Agent header for fetches
- FETCH_TIMEOUT: Fetch timeout in seconds (default: 30)
- LOG_LEVEL: Root log level (default: INFO)
"""
import os

from .adapters.fetcher import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT

DEFAULT_PORT = 5002
DEFAULT_HOST = "127.0.0.1"
DEFAULT_LOG_LEVEL = "INFO"


def get_port() -> int:
    """Get server port from environment or use default"""
    port_str = os.environ.get("PORT", str(DEFAULT_PORT))
    try:
        return int(port_str)
    except ValueError:
        msg = f"Invalid PORT value: {port_str}"
        raise ValueError(msg) from None


def get_host() -> str:
    """Get bind address from environment or use default"""
    return os.environ.get("HOST", DEFAULT_HOST)


def get_user_agent() -> str:
    """Get user agent from environment or use default"""
    return os.environ.get("USER_AGENT", DEFAULT_USER_AGENT)


def get_fetch_timeout() -> float:
    """Get fetch timeout (seconds) from environment or use default"""
    timeout_str = os.environ.get("FETCH_TIMEOUT", str(DEFAULT_TIMEOUT))
    try:
        timeout = float(timeout_str)
    except ValueError:
        msg = f"Invalid FETCH_TIMEOUT value: {timeout_str}"
        raise ValueError(msg) from None
    if timeout <= 0:
        raise ValueError(f"Invalid FETCH_TIMEOUT value: {timeout_str}")
    return timeout


def get_log_level() -> str:
    """Get log level name from environment or use default"""
    return os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
