"""hilite: render source code as theme-styled text runs."""
from __future__ import annotations

__version__ = "0.1.0"

from hilite.config import HighlighterConfig  # noqa: E402
from hilite.decoder import HtmlRunDecoder, decode_html  # noqa: E402
from hilite.errors import (  # noqa: E402
    FontResolutionError,
    HighlighterError,
    ThemeNotFoundError,
    TokenizerError,
    UnknownLanguageError,
)
from hilite.highlighter import Highlighter, render  # noqa: E402
from hilite.line_numbers import LineNumberConfig, add_line_numbers  # noqa: E402
from hilite.model import (  # noqa: E402
    Color,
    Font,
    StyledRun,
    StyledText,
    TextAttributes,
    color_from_spec,
)
from hilite.theme import Theme, ThemeLoader, build_theme  # noqa: E402

__all__ = [
    "__version__",
    "HighlighterConfig",
    "HtmlRunDecoder",
    "decode_html",
    "FontResolutionError",
    "HighlighterError",
    "ThemeNotFoundError",
    "TokenizerError",
    "UnknownLanguageError",
    "Highlighter",
    "render",
    "LineNumberConfig",
    "add_line_numbers",
    "Color",
    "Font",
    "StyledRun",
    "StyledText",
    "TextAttributes",
    "color_from_spec",
    "Theme",
    "ThemeLoader",
    "build_theme",
]
