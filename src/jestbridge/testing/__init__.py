"""Testing subsystem - discovery, run specs, report translation, reconciliation."""

from jestbridge.testing.adapter import JestAdapter
from jestbridge.testing.classifier import is_test_file
from jestbridge.testing.discovery import discover_positions
from jestbridge.testing.models import (
    OutcomeError,
    OutcomeRecord,
    Position,
    PositionKey,
    RunContext,
    RunSpec,
    normalize_id,
)
from jestbridge.testing.reconciler import reconcile
from jestbridge.testing.report import load_report, translate
from jestbridge.testing.spec_builder import build_spec
from jestbridge.testing.tree import PositionTree

__all__ = [
    "JestAdapter",
    "is_test_file",
    "discover_positions",
    "build_spec",
    "load_report",
    "translate",
    "reconcile",
    "OutcomeError",
    "OutcomeRecord",
    "Position",
    "PositionKey",
    "PositionTree",
    "RunContext",
    "RunSpec",
    "normalize_id",
]
