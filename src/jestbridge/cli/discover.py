"""jestbridge discover command - show the positions of a test file."""

import json
from pathlib import Path

import click
from rich.console import Console
from rich.tree import Tree

from jestbridge.cli.utils import discover_or_fail, make_adapter
from jestbridge.testing.tree import PositionTree

_STYLES = {"file": "bold", "namespace": "cyan", "test": "green"}


def _render(node: PositionTree, branch: Tree) -> None:
    for child in node.children:
        position = child.data()
        label = f"[{_STYLES[position.type]}]{position.name}[/] [dim]:{position.range[0] + 1}[/]"
        _render(child, branch.add(label))


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def discover_command(path: Path, as_json: bool) -> None:
    """Discover describe/it/test positions in PATH."""
    adapter = make_adapter(path)
    tree = discover_or_fail(adapter, path)

    if as_json:
        click.echo(json.dumps(tree.to_dict(), indent=2))
        return

    root = Tree(f"[{_STYLES['file']}]{tree.data().path}[/]")
    _render(tree, root)
    Console().print(root)
