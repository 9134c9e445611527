"""Themes: loading highlight.js stylesheets and resolving them."""

from hilite.theme.loader import ThemeLoader
from hilite.theme.theme import (
    BASE_SCOPE,
    Theme,
    build_theme,
    font_variants,
    resolve_base_font,
    resolve_class_style,
    serialize_css,
)

__all__ = [
    "BASE_SCOPE",
    "Theme",
    "ThemeLoader",
    "build_theme",
    "font_variants",
    "resolve_base_font",
    "resolve_class_style",
    "serialize_css",
]
