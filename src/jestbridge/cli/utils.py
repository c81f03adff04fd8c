"""Shared helpers for CLI commands."""

from __future__ import annotations

from pathlib import Path

import click

from jestbridge.config import load_config
from jestbridge.config.models import LoggingConfig
from jestbridge.core.errors import JestBridgeError
from jestbridge.core.logging import configure_logging
from jestbridge.testing.adapter import JestAdapter
from jestbridge.testing.tree import PositionTree


def apply_logging(config: LoggingConfig) -> None:
    """Configure logging from the loaded config; -v forces DEBUG."""
    ctx = click.get_current_context(silent=True)
    if ctx is not None and (ctx.find_root().obj or {}).get("verbose"):
        config = config.model_copy(update={"level": "DEBUG"})
    configure_logging(config=config)


def make_adapter(path: Path, runner_command: str | None = None) -> JestAdapter:
    """Load config for the project containing *path* and build an adapter."""
    try:
        project_root = JestAdapter().root(path) or Path.cwd()
        config = load_config(project_root)
        apply_logging(config.logging)
        if runner_command is not None:
            config.runner = config.runner.model_copy(update={"command": runner_command})
        return JestAdapter.from_config(config)
    except JestBridgeError as e:
        raise click.ClickException(str(e)) from e


def discover_or_fail(adapter: JestAdapter, path: Path) -> PositionTree:
    tree = adapter.discover_positions(path)
    if tree is None:
        raise click.ClickException(f"Could not parse '{path}'. Run with -v for details.")
    return tree
