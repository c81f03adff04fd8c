"""Config module exports."""

from jestbridge.config.loader import load_config
from jestbridge.config.models import (
    JestBridgeConfig,
    LoggingConfig,
    LogOutputConfig,
    RunnerConfig,
)

__all__ = [
    "load_config",
    "JestBridgeConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "RunnerConfig",
]
