"""jestbridge error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Discovery
- 7xxx: Report
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Discovery (3xxx)
    DISCOVERY_UNSUPPORTED_FILE = 3001
    DISCOVERY_GRAMMAR_UNAVAILABLE = 3002
    DISCOVERY_READ_FAILED = 3003

    # Report (7xxx)
    REPORT_NOT_FOUND = 7001
    REPORT_MALFORMED = 7002
    REPORT_EMPTY = 7003
    REPORT_MISSING_TITLE = 7004


@dataclass(frozen=True, slots=True)
class JestBridgeError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'REPORT_NOT_FOUND')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(JestBridgeError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class DiscoveryError(JestBridgeError):
    """Errors raised while turning a source file into positions."""

    @classmethod
    def unsupported_file(cls, path: str) -> "DiscoveryError":
        return cls(
            code=ErrorCode.DISCOVERY_UNSUPPORTED_FILE,
            message=f"No grammar for file: {path}",
            details={"path": path},
        )

    @classmethod
    def grammar_unavailable(cls, grammar: str, reason: str) -> "DiscoveryError":
        return cls(
            code=ErrorCode.DISCOVERY_GRAMMAR_UNAVAILABLE,
            message=f"Grammar not installed: {grammar}",
            details={"grammar": grammar, "reason": reason},
        )

    @classmethod
    def read_failed(cls, path: str, reason: str) -> "DiscoveryError":
        return cls(
            code=ErrorCode.DISCOVERY_READ_FAILED,
            message=f"Failed to read {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class ReportError(JestBridgeError):
    """Errors found while loading or translating a Jest JSON report."""

    @classmethod
    def not_found(cls, path: str, reason: str = "missing") -> "ReportError":
        return cls(
            code=ErrorCode.REPORT_NOT_FOUND,
            message=f"No test output file found: {path}",
            retryable=True,
            details={"path": path, "reason": reason},
        )

    @classmethod
    def malformed(cls, path: str, reason: str) -> "ReportError":
        return cls(
            code=ErrorCode.REPORT_MALFORMED,
            message=f"Failed to parse test output json: {path}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def empty(cls, path: str) -> "ReportError":
        return cls(
            code=ErrorCode.REPORT_EMPTY,
            message=f"Test output has no file results: {path}",
            details={"path": path},
        )

    @classmethod
    def missing_title(cls, file: str, index: int) -> "ReportError":
        return cls(
            code=ErrorCode.REPORT_MISSING_TITLE,
            message=f"Assertion result #{index} in {file} has no title",
            details={"file": file, "index": index},
        )
