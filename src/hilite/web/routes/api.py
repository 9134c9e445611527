from __future__ import annotations

import logging

from flask import Blueprint, current_app, jsonify, request

from hilite.errors import HighlighterError, TokenizerError, UnknownLanguageError
from hilite.highlighter import Highlighter, render
from hilite.line_numbers import LineNumberConfig
from hilite.render import styled_to_dict

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)

_LINE_NUMBER_FIELDS = {
    "start": int,
    "min_width": int,
    "separator": str,
    "line_break": str,
    "using_dark_theme": bool,
    "font_size": float,
}


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    return response


@api_bp.route("/highlight", methods=["OPTIONS"])
def highlight_preflight():
    """Handle CORS preflight for highlighting."""
    return "", 204


def _highlighter() -> Highlighter:
    return current_app.extensions["highlighter"]


def _line_number_config(data) -> LineNumberConfig | None:
    """Build a LineNumberConfig from the request's ``line_numbers`` field.

    ``true`` means defaults; an object sets individual options.
    """
    if not data:
        return None
    if data is True:
        return LineNumberConfig()
    if not isinstance(data, dict):
        raise ValueError("line_numbers must be a boolean or an object")
    kwargs = {}
    for key, cast in _LINE_NUMBER_FIELDS.items():
        if key in data:
            kwargs[key] = cast(data[key])
    return LineNumberConfig(**kwargs)


@api_bp.route("/highlight", methods=["POST"])
def highlight():
    """Highlight code via JSON API."""
    data = request.get_json(silent=True)
    if not data or not isinstance(data.get("code"), str):
        return jsonify({"error": "code required"}), 400

    highlighter = _highlighter()
    try:
        font_size = float(data["font_size"]) if data.get("font_size") else None
        numbering = _line_number_config(data.get("line_numbers"))
        ignore_illegals = data.get("ignore_illegals", highlighter.ignore_illegals)
        if not isinstance(ignore_illegals, bool):
            raise TypeError("ignore_illegals must be a boolean")
    except (TypeError, ValueError) as exc:
        return jsonify({"error": f"invalid options: {exc}"}), 400

    theme_name = data.get("theme") or highlighter.theme.name
    try:
        theme = highlighter.load_theme(theme_name, data.get("font"), font_size)
    except HighlighterError as exc:
        return jsonify({"error": str(exc)}), 404

    language = data.get("language")
    try:
        styled = render(
            data["code"],
            language,
            theme,
            highlighter.tokenizer,
            ignore_illegals=ignore_illegals,
            line_numbers=numbering,
        )
    except UnknownLanguageError as exc:
        return jsonify({"error": str(exc)}), 422
    except TokenizerError as exc:
        logger.warning("Tokenizer failed for %s: %s", language or "auto", exc)
        return jsonify({"error": str(exc)}), 422

    return jsonify(styled_to_dict(styled, theme))


@api_bp.route("/themes")
def list_themes():
    """Return the available theme names."""
    return jsonify({"themes": _highlighter().available_themes()})


@api_bp.route("/languages")
def list_languages():
    """Return the supported language names."""
    return jsonify({"languages": _highlighter().supported_languages()})
