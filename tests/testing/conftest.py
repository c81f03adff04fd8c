"""Shared fixtures for testing subsystem tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from jestbridge.testing.models import Position, PositionType
from jestbridge.testing.tree import PositionTree

PositionFactory = Callable[..., Position]


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a source file under tmp_path and return its resolved path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path.resolve()

    return _write


@pytest.fixture
def make_position() -> PositionFactory:
    """Build a Position whose range starts at *start_line*."""

    def _make(
        kind: PositionType,
        position_id: str,
        name: str,
        *,
        path: str = "/proj/a.test.js",
        start_line: int = 0,
    ) -> Position:
        return Position(
            type=kind,
            name=name,
            path=path,
            id=position_id,
            range=(start_line, 0, start_line + 1, 0),
        )

    return _make


@pytest.fixture
def sample_tree(make_position: PositionFactory) -> PositionTree:
    """/proj/a.test.js -> 'Math' -> ('adds', 'subtracts', 'divides')."""
    path = "/proj/a.test.js"
    namespace_id = f"{path}::'Math'"
    tests = [("adds", 2), ("subtracts", 5), ("divides", 8)]
    return PositionTree(
        make_position("file", path, "a.test.js"),
        [
            PositionTree(
                make_position("namespace", namespace_id, "Math", start_line=1),
                [
                    PositionTree(
                        make_position("test", f"{namespace_id}::'{name}'", name, start_line=line)
                    )
                    for name, line in tests
                ],
            )
        ],
    )
