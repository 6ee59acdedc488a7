"""stylegen CLI entry point: Click group with subcommands."""

import logging

import click

from stylegen import __version__


@click.group()
@click.version_option(version=__version__, prog_name="stylegen")
@click.option("-v", "--verbose", is_flag=True, help="Log compiler activity to stderr")
def cli(verbose: bool) -> None:
    """stylegen - compile nested style objects into class-scoped CSS."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register subcommands
from stylegen.cli.compile import compile_styles  # noqa: E402
from stylegen.cli.inspect import inspect  # noqa: E402

cli.add_command(compile_styles)
cli.add_command(inspect)
