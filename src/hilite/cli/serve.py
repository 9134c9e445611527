"""CLI command: hilite serve -- run the HTTP API."""

from __future__ import annotations

import click

from hilite.config import HighlighterConfig


@click.command()
@click.option("--host", default=None, help="Host to bind to")
@click.option("--port", default=None, type=int, help="Port to bind to")
@click.option("--theme-dir", type=click.Path(file_okay=False), default=None,
              help="Extra directory of .css themes.")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(host: str | None, port: int | None, theme_dir: str | None, debug: bool) -> None:
    """Start the hilite web server."""
    from dataclasses import replace

    from hilite.web.app import create_app

    config = HighlighterConfig.from_env()
    config = replace(
        config,
        host=host or config.host,
        port=port or config.port,
        theme_dir=theme_dir or config.theme_dir,
    )
    app = create_app(config=config)
    click.echo(f"Starting hilite on {config.host}:{config.port}")
    app.run(host=config.host, port=config.port, debug=debug)
