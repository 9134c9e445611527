"""Theme: the resolved, immutable form of one highlight.js stylesheet."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Mapping

from hilite.errors import FontResolutionError
from hilite.model.color import Color, color_from_spec
from hilite.model.font import (
    DEFAULT_FAMILY,
    DEFAULT_SIZE,
    FACE_BOLD,
    FACE_ITALIC,
    FACE_OBLIQUE,
    FACE_REGULAR,
    PLATFORM_DEFAULT_FAMILY,
    Font,
    FontCatalog,
    FontResolver,
    FontVariant,
    font_variant,
)
from hilite.model.runs import TextAttributes
from hilite.stylesheet import ClassStyle, merge_rules, parse_stylesheet

logger = logging.getLogger(__name__)

# The class wrapping the whole code block; always the bottom scope.
BASE_SCOPE = "hljs"

_BACKGROUND_KEYS = ("background", "background-color")
_DEFAULT_BACKGROUND = Color.white(1.0)


@dataclass(frozen=True)
class Theme:
    """A fully resolved theme.

    Attributes:
        name: The theme's name.
        font: The base code font.
        bold_font: Bold variant of ``font``, or ``font`` itself.
        italic_font: Italic (or oblique) variant of ``font``, or ``font``.
        background: The code block background color.
        styles: Resolved attributes per bare class name.
        css: The theme as plain CSS, minus the base scope's background.
    """

    name: str
    font: Font
    bold_font: Font
    italic_font: Font
    background: Color
    styles: Mapping[str, ClassStyle]
    css: str

    @property
    def base_attributes(self) -> TextAttributes:
        return TextAttributes(font=self.font)

    def font_for(self, variant: FontVariant) -> Font:
        if variant is FontVariant.BOLD:
            return self.bold_font
        if variant is FontVariant.ITALIC:
            return self.italic_font
        return self.font

    def style_for(self, class_name: str) -> ClassStyle | None:
        return self.styles.get(class_name)

    def with_font(
        self, font: Font, resolver: FontResolver | None = None
    ) -> Theme:
        """Return a copy using *font*, with fresh bold and italic variants."""
        bold, italic = font_variants(font, resolver or FontCatalog())
        return replace(self, font=font, bold_font=bold, italic_font=italic)


def resolve_base_font(
    family: str | None,
    size: float | None,
    resolver: FontResolver,
) -> Font:
    """Resolve the requested font, falling back to Courier, then monospace."""
    size = size or DEFAULT_SIZE
    candidates = [DEFAULT_FAMILY, PLATFORM_DEFAULT_FAMILY]
    if family:
        candidates.insert(0, family)
    for candidate in candidates:
        font = resolver.resolve(candidate, FACE_REGULAR, size)
        if font is not None:
            if candidate != candidates[0]:
                logger.debug("Font %r unavailable, using %s", candidates[0], font)
            return font
    raise FontResolutionError(f"No usable font for family {family or DEFAULT_FAMILY!r}")


def font_variants(font: Font, resolver: FontResolver) -> tuple[Font, Font]:
    """Look up bold and italic faces of *font*'s family.

    Italic falls back to oblique, then to the base font. Bold falls back
    to the base font.
    """
    bold = resolver.resolve(font.family, FACE_BOLD, font.size) or font
    italic = (
        resolver.resolve(font.family, FACE_ITALIC, font.size)
        or resolver.resolve(font.family, FACE_OBLIQUE, font.size)
        or font
    )
    return bold, italic


def resolve_class_style(properties: Mapping[str, str]) -> ClassStyle:
    """Resolve the recognized declarations of one class.

    When both ``font-weight`` and ``font-style`` are set, a non-base choice
    beats a base one and ``font-style`` wins a tie.
    """
    foreground = background = variant = None
    if "color" in properties:
        foreground = color_from_spec(properties["color"])
    if "background-color" in properties:
        background = color_from_spec(properties["background-color"])

    weight = properties.get("font-weight")
    style = properties.get("font-style")
    if style is not None:
        variant = font_variant(style)
    if weight is not None and variant in (None, FontVariant.BASE):
        weight_variant = font_variant(weight)
        if variant is None or weight_variant is not FontVariant.BASE:
            variant = weight_variant
    return ClassStyle(foreground=foreground, background=background, variant=variant)


def serialize_css(rules: Mapping[str, Mapping[str, str]]) -> str:
    """Render merged rules as CSS, dropping the base scope's background."""
    out = []
    for name, props in rules.items():
        out.append(f".{name}{{")
        for key, value in props.items():
            if name == BASE_SCOPE and key in _BACKGROUND_KEYS:
                continue
            out.append(f"{key}:{value};")
        out.append("}")
    return "".join(out)


def build_theme(
    name: str,
    source: str,
    font_family: str | None = None,
    font_size: float | None = None,
    resolver: FontResolver | None = None,
) -> Theme:
    """Parse *source* and resolve it into a :class:`Theme`.

    Raises :class:`FontResolutionError` if no base font can be found. Text
    that is not a recognizable rule is ignored.
    """
    resolver = resolver or FontCatalog()
    rules = merge_rules(parse_stylesheet(source))

    font = resolve_base_font(font_family, font_size, resolver)
    bold, italic = font_variants(font, resolver)

    background = _DEFAULT_BACKGROUND
    base_props = rules.get(BASE_SCOPE, {})
    for key in _BACKGROUND_KEYS:
        if key in base_props:
            background = color_from_spec(base_props[key])
            break

    styles: dict[str, ClassStyle] = {}
    for class_name, props in rules.items():
        style = resolve_class_style(props)
        if not style.is_empty:
            styles[class_name] = style

    logger.debug("Built theme %r: %d classes, %d styled", name, len(rules), len(styles))
    return Theme(
        name=name,
        font=font,
        bold_font=bold,
        italic_font=italic,
        background=background,
        styles=MappingProxyType(styles),
        css=serialize_css(rules),
    )
