"""Shared fixtures: small themes and a Flask test client."""
from __future__ import annotations

import pytest

from hilite.config import HighlighterConfig
from hilite.highlighter import Highlighter
from hilite.theme import build_theme
from hilite.web.app import create_app

SAMPLE_CSS = (
    ".hljs{color:#000000;background:#ffffff}"
    ".hljs-keyword{color:#ff0000;font-weight:bold}"
    ".hljs-string{color:#00ff00}"
    ".hljs-subst{background-color:#0000ff}"
    ".hljs-comment{font-style:italic}"
    ".hljs-title{color:#0000ff}"
)


@pytest.fixture
def theme():
    """A small theme with a colored base scope."""
    return build_theme("sample", SAMPLE_CSS)


@pytest.fixture
def plain_theme():
    """A theme with no rules at all: only the base font applies."""
    return build_theme("plain", "")


@pytest.fixture
def highlighter():
    return Highlighter(HighlighterConfig())


@pytest.fixture
def app():
    """Create a Flask app for testing."""
    application = create_app(config=HighlighterConfig())
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()
