"""jestbridge command command - print the run spec for a file or position."""

import json
from pathlib import Path

import click

from jestbridge.cli.utils import discover_or_fail, make_adapter


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--test-id", "test_id", default=None, help="Position id to scope the run to")
@click.option("--runner-command", default=None, help="Override the runner command")
def command_command(path: Path, test_id: str | None, runner_command: str | None) -> None:
    """Print the Jest command line for PATH (or one position in it) as JSON."""
    adapter = make_adapter(path, runner_command)
    tree = discover_or_fail(adapter, path)

    if test_id is not None:
        subtree = tree.get_key(test_id)
        if subtree is None:
            raise click.ClickException(f"No position with id '{test_id}' in {path}")
        tree = subtree

    spec = adapter.build_spec(tree)
    if spec is None:
        raise click.ClickException("No run spec could be built")
    click.echo(json.dumps(spec.to_dict(), indent=2))
