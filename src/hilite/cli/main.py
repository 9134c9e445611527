"""hilite CLI entry point: Click group with subcommands."""

import logging

import click

from hilite import __version__


@click.group()
@click.version_option(version=__version__, prog_name="hilite")
@click.option("-v", "--verbose", count=True, help="Log more (-v info, -vv debug).")
def cli(verbose: int) -> None:
    """hilite - render source code as theme-styled text runs."""
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from hilite.cli.render import render  # noqa: E402
from hilite.cli.listing import languages, themes  # noqa: E402
from hilite.cli.serve import serve  # noqa: E402

cli.add_command(render)
cli.add_command(themes)
cli.add_command(languages)
cli.add_command(serve)
