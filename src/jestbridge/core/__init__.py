"""Core module exports."""

from jestbridge.core.errors import (
    ConfigError,
    DiscoveryError,
    ErrorCode,
    JestBridgeError,
    ReportError,
)
from jestbridge.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)

__all__ = [
    # Errors
    "ErrorCode",
    "JestBridgeError",
    "ConfigError",
    "DiscoveryError",
    "ReportError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
]
