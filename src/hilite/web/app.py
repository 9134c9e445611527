from __future__ import annotations

from flask import Flask

from hilite.config import HighlighterConfig
from hilite.highlighter import Highlighter


def create_app(
    config: HighlighterConfig | None = None,
    highlighter: Highlighter | None = None,
) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)
    config = config or HighlighterConfig()

    # One shared highlighter; requests pick themes without selecting them on it
    if highlighter is None:
        highlighter = Highlighter(config)

    app.extensions["hilite_config"] = config
    app.extensions["highlighter"] = highlighter

    from hilite.web.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    return app
