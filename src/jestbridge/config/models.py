"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (JESTBRIDGE__SECTION__KEY)
3. Project YAML (.jestbridge/config.yaml)
4. Global YAML (~/.config/jestbridge/config.yaml)
5. Built-in defaults (this file)

Examples:
    JESTBRIDGE__LOGGING__LEVEL=DEBUG
    JESTBRIDGE__RUNNER__COMMAND="yarn jest --ci"
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from jestbridge.config.constants import (
    DEFAULT_FALLBACK_BINARY,
    DEFAULT_LOCAL_BINARY,
    DEFAULT_ROOT_MARKER,
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        JESTBRIDGE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class RunnerConfig(BaseModel):
    """Jest runner configuration.

    Env vars:
        JESTBRIDGE__RUNNER__COMMAND: Replace the runner command entirely
        JESTBRIDGE__RUNNER__OUTPUT_DIR: Where reports and capture files are written
    """

    command: str | None = Field(
        default=None,
        description="Runner command override, split on whitespace "
        "(e.g. 'yarn jest --ci'). When unset, the project-local binary is used "
        "if present, otherwise the fallback binary from PATH.",
    )
    local_binary: str = Field(
        default=DEFAULT_LOCAL_BINARY,
        description="Project-relative path of the local runner binary.",
    )
    fallback_binary: str = Field(
        default=DEFAULT_FALLBACK_BINARY,
        description="Command used when no local binary exists.",
    )
    root_marker: str = Field(
        default=DEFAULT_ROOT_MARKER,
        description="Manifest file that marks a project root.",
    )
    output_dir: str | None = Field(
        default=None,
        description="Directory for report and capture files. Default: system temp dir.",
    )

    @field_validator("command")
    @classmethod
    def validate_command(cls, v: str | None) -> str | None:
        if v is not None and not v.split():
            raise ValueError("Runner command must not be blank")
        return v


class JestBridgeConfig(BaseModel):
    """Root configuration for jestbridge."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    runner: RunnerConfig = Field(default_factory=RunnerConfig)
