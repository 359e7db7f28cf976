"""Command-line interface for basexxx using Click command groups."""

from __future__ import annotations

from typing import NoReturn
import logging

import click

from basexxx import __version__
from basexxx.config import Config


@click.group()
@click.version_option(version=__version__)
@click.option("verbose", "--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """basexxx: convert text to and from base-N representations."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=Config.LOG_FORMAT)


# Register subcommands
from basexxx.commands.encode import encode  # noqa: E402
from basexxx.commands.decode import decode  # noqa: E402
from basexxx.commands.codecs import codecs  # noqa: E402

cli.add_command(encode)
cli.add_command(decode)
cli.add_command(codecs)


def main() -> NoReturn:
    """Entry point for the CLI."""
    cli()
