"""jestbridge results command - reconcile a Jest report with a test file."""

import json
from pathlib import Path

import click

from jestbridge.cli.utils import discover_or_fail, make_adapter
from jestbridge.testing.models import RunContext, RunSpec


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--report",
    "report_path",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Jest --json output file",
)
def results_command(path: Path, report_path: Path) -> None:
    """Print per-position results for PATH from a Jest JSON report.

    Exits with status 1 when any position failed.
    """
    adapter = make_adapter(path)
    tree = discover_or_fail(adapter, path)
    spec = RunSpec(
        command=[],
        context=RunContext(results_path=str(report_path), file=tree.data().path),
    )

    results = adapter.results(spec, tree)
    click.echo(json.dumps({pid: record.to_dict() for pid, record in results.items()}, indent=2))
    if any(record.status == "failed" for record in results.values()):
        raise SystemExit(1)
