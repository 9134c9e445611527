"""JSON-ready views of styled runs."""

from __future__ import annotations

from typing import Any, Mapping

from hilite.model.color import Color
from hilite.model.font import Font
from hilite.model.runs import StyledText
from hilite.theme.theme import Theme


def font_to_dict(font: Font) -> dict[str, Any]:
    return {"family": font.family, "face": font.face, "size": font.size}


def _json_value(value: Any) -> Any:
    if isinstance(value, Font):
        return font_to_dict(value)
    if isinstance(value, Color):
        return value.to_hex()
    return value


def run_to_dict(entry: Mapping[str, Any]) -> dict[str, Any]:
    """Make one :meth:`StyledText.to_dicts` entry JSON-safe (fonts and hex colors)."""
    return {key: _json_value(value) for key, value in entry.items()}


def styled_to_dict(styled: StyledText, theme: Theme) -> dict[str, Any]:
    """Serialize a highlight result together with its theme's block styling."""
    return {
        "theme": theme.name,
        "background": theme.background.to_hex(),
        "font": font_to_dict(theme.font),
        "runs": [run_to_dict(entry) for entry in styled.to_dicts()],
    }
