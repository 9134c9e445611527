"""CLI commands: hilite themes / hilite languages -- list what is available."""

from __future__ import annotations

import click

from hilite.theme import ThemeLoader
from hilite.tokenizer import PygmentsTokenizer


@click.command()
@click.option("--theme-dir", type=click.Path(file_okay=False), default=None,
              help="Extra directory of .css themes.")
def themes(theme_dir: str | None) -> None:
    """List available theme names."""
    for name in ThemeLoader(theme_dir).list_themes():
        click.echo(name)


@click.command()
def languages() -> None:
    """List supported language names."""
    for name in PygmentsTokenizer().list_languages():
        click.echo(name)
