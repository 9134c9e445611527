"""Data model: colors, fonts and styled runs."""

from hilite.model.color import GRAY, NAMED_COLORS, Color, color_from_spec
from hilite.model.font import (
    Font,
    FontCatalog,
    FontResolver,
    FontVariant,
    font_variant,
)
from hilite.model.runs import StyledRun, StyledText, TextAttributes

__all__ = [
    "GRAY",
    "NAMED_COLORS",
    "Color",
    "color_from_spec",
    "Font",
    "FontCatalog",
    "FontResolver",
    "FontVariant",
    "font_variant",
    "StyledRun",
    "StyledText",
    "TextAttributes",
]
