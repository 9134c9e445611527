"""CLI command: hilite render -- highlight a source file."""

from __future__ import annotations

import json
import sys

import click

from hilite.config import HighlighterConfig
from hilite.errors import HighlighterError
from hilite.highlighter import Highlighter
from hilite.line_numbers import LineNumberConfig
from hilite.render import styled_to_dict, to_ansi


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option("-l", "--language", default=None, help="Language name; detected if omitted.")
@click.option("-t", "--theme", default=None, help="Theme name (see `hilite themes`).")
@click.option("--theme-dir", type=click.Path(file_okay=False), default=None,
              help="Extra directory of .css themes.")
@click.option("--font", "font_family", default=None, help="Font family.")
@click.option("--size", "font_size", type=float, default=None, help="Font size in points.")
@click.option("--ignore-illegals", is_flag=True, help="Highlight even when syntax is invalid.")
@click.option("-n", "--line-numbers", is_flag=True, help="Prefix lines with numbers.")
@click.option("--start", type=int, default=1, show_default=True, help="First line number.")
@click.option("--min-width", type=int, default=2, show_default=True,
              help="Minimum line number digits.")
@click.option("--separator", default="  ", help="Text between number and line.")
@click.option("--dark/--light", default=False, help="Line number color for dark or light themes.")
@click.option(
    "--format", "output_format",
    type=click.Choice(["ansi", "json", "text"]), default="ansi", show_default=True,
)
def render(
    source,
    language: str | None,
    theme: str | None,
    theme_dir: str | None,
    font_family: str | None,
    font_size: float | None,
    ignore_illegals: bool,
    line_numbers: bool,
    start: int,
    min_width: int,
    separator: str,
    dark: bool,
    output_format: str,
) -> None:
    """Highlight SOURCE ("-" for stdin) and print the result.

    Exits with code 1 if the theme or language is unknown.
    """
    env = HighlighterConfig.from_env()
    config = HighlighterConfig(
        theme=theme or env.theme,
        font_family=font_family or env.font_family,
        font_size=font_size or env.font_size,
        ignore_illegals=ignore_illegals or env.ignore_illegals,
        theme_dir=theme_dir or env.theme_dir,
    )

    try:
        highlighter = Highlighter(config)
    except HighlighterError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    numbering = None
    if line_numbers:
        numbering = LineNumberConfig(
            start=start,
            min_width=min_width,
            separator=separator,
            using_dark_theme=dark,
            font_size=highlighter.theme.font.size,
        )

    styled = highlighter.highlight(source.read(), language, line_numbers=numbering)
    if styled is None:
        click.echo(f"Error: could not highlight as {language or 'auto-detected language'}",
                   err=True)
        sys.exit(1)

    if output_format == "json":
        click.echo(json.dumps(styled_to_dict(styled, highlighter.theme), indent=2))
    elif output_format == "text":
        click.echo(styled.text, nl=False)
    else:
        click.echo(to_ansi(styled, highlighter.theme.background), nl=False)
