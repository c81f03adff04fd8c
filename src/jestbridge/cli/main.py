"""jestbridge CLI - jestbridge command."""

import click

from jestbridge import __version__
from jestbridge.cli.command import command_command
from jestbridge.cli.discover import discover_command
from jestbridge.cli.is_test import is_test_command
from jestbridge.cli.results import results_command
from jestbridge.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="jestbridge")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """jestbridge - discover, run and reconcile Jest tests."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(is_test_command, name="is-test")
cli.add_command(discover_command, name="discover")
cli.add_command(command_command, name="command")
cli.add_command(results_command, name="results")


if __name__ == "__main__":
    cli()
