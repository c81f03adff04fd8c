"""File-system helpers: project roots and run artifacts."""

from jestbridge.files.ops import allocate_path, create_capture_file, match_root_pattern

__all__ = ["allocate_path", "create_capture_file", "match_root_pattern"]
