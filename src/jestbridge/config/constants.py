"""Configuration constants.

Values that are part of the Jest command-line and report contract and
should NOT be user-configurable, plus the defaults for configurable ones.
"""

DEFAULT_LOCAL_BINARY = "node_modules/.bin/jest"
"""Project-relative location of the locally installed runner."""

DEFAULT_FALLBACK_BINARY = "jest"
"""Runner resolved through PATH when no local binary exists."""

DEFAULT_ROOT_MARKER = "package.json"
"""Manifest file marking a JavaScript project root."""

CONFIG_DIR_NAME = ".jestbridge"
"""Per-project configuration directory."""

# =============================================================================
# Runner Flags
# =============================================================================

RUNNER_FLAGS = (
    "--no-coverage",
    "--testLocationInResults",
    "--verbose",
    "--json",
)
"""Fixed flags prepended to the per-run flags of every command."""

MATCH_ALL_PATTERN = ".*"
"""Test-name filter used for file and namespace runs."""

REPORT_SUFFIX = ".json"

# =============================================================================
# Report Rendering
# =============================================================================

ID_SEPARATOR = "::"
"""Separator between the path and name segments of a position id."""

SUCCESS_MARKER = " \x1b[1;32m✔ \x1b[0m "
"""Prefix written to the capture file of a passing test."""
