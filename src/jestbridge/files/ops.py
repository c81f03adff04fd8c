"""File operations - project root search and run artifact paths.

Pure filesystem I/O. Nothing here knows about Jest.
"""

from __future__ import annotations

import tempfile
from collections.abc import Callable
from pathlib import Path
from uuid import uuid4


def match_root_pattern(*markers: str) -> Callable[[str | Path], Path | None]:
    """Build a root finder that walks upward looking for any of *markers*.

    The returned callable accepts a file or directory path and returns the
    closest ancestor directory (inclusive) containing one of the markers,
    or None when the filesystem root is reached first.
    """

    def find_root(path: str | Path) -> Path | None:
        start = Path(path).expanduser().absolute()
        if not start.is_dir():
            start = start.parent
        for candidate in (start, *start.parents):
            if any((candidate / marker).exists() for marker in markers):
                return candidate
        return None

    return find_root


def allocate_path(suffix: str = "", directory: str | Path | None = None) -> Path:
    """Return a process-unique path that does not exist yet.

    The file is not created; the caller (or an external process) writes it.
    """
    base = Path(directory) if directory is not None else Path(tempfile.gettempdir())
    base.mkdir(parents=True, exist_ok=True)
    return base / f"jestbridge-{uuid4().hex}{suffix}"


def create_capture_file(content: str, directory: str | Path | None = None) -> Path:
    """Write *content* to a freshly allocated file and return its path."""
    path = allocate_path(".log", directory)
    path.write_text(content, encoding="utf-8")
    return path
