"""Command-line interface for arithcode using Click command groups."""

from __future__ import annotations

import logging

import click

from arithcode import __version__


@click.group()
@click.version_option(version=__version__)
@click.option("verbose", "--verbose", "-v", count=True, help="Increase log verbosity (-v info, -vv debug)")
def cli(verbose: int) -> None:
    """arithcode: classic arithmetic coding of short texts."""

    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


# Register subcommands
from arithcode.commands.demo import demo  # noqa: E402
from arithcode.commands.encode import encode  # noqa: E402
from arithcode.commands.decode import decode  # noqa: E402
from arithcode.commands.inspect import inspect  # noqa: E402

cli.add_command(demo)
cli.add_command(encode)
cli.add_command(decode)
cli.add_command(inspect)


def main() -> None:
    """Entry point for the CLI."""
    cli()
