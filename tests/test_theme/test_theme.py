"""Tests for resolving stylesheets into themes."""

import pytest

from hilite.errors import FontResolutionError
from hilite.model.color import GRAY, Color
from hilite.model.font import (
    FACE_BOLD,
    FACE_ITALIC,
    FACE_OBLIQUE,
    FACE_REGULAR,
    Font,
    FontCatalog,
    FontVariant,
)
from hilite.stylesheet import ClassStyle
from hilite.theme import build_theme, resolve_class_style, serialize_css


class TestClassStyles:
    def test_foreground_color(self):
        theme = build_theme("t", ".foo{color:#ff0000;}")
        assert theme.styles["foo"].foreground == Color(1.0, 0.0, 0.0, 1.0)

    def test_background_color(self):
        theme = build_theme("t", ".foo{background-color:navy}")
        assert theme.styles["foo"] == ClassStyle(background=Color(0.0, 0.0, 0.5))

    def test_unrecognized_properties_ignored(self):
        theme = build_theme("t", ".foo{color:red;text-decoration:underline}")
        assert theme.styles["foo"] == ClassStyle(foreground=Color(1.0, 0.0, 0.0))

    def test_class_without_attributes_dropped(self):
        theme = build_theme("t", ".foo{display:block;padding:1em}")
        assert "foo" not in theme.styles
        assert ".foo{display:block;padding:1em;}" in theme.css

    def test_missing_class_is_none(self):
        theme = build_theme("t", ".foo{color:red}")
        assert theme.style_for("bar") is None

    def test_malformed_color_is_gray(self):
        theme = build_theme("t", ".foo{color:#12345}")
        assert theme.styles["foo"].foreground == GRAY

    def test_non_matching_source_never_raises(self):
        theme = build_theme("t", "this is { not css ; at all")
        assert dict(theme.styles) == {}


class TestFontVariantPrecedence:
    def test_weight_only(self):
        assert resolve_class_style({"font-weight": "700"}).variant is FontVariant.BOLD

    def test_style_only(self):
        assert resolve_class_style({"font-style": "italic"}).variant is FontVariant.ITALIC

    def test_explicit_normal_is_base(self):
        style = resolve_class_style({"font-weight": "normal"})
        assert style.variant is FontVariant.BASE
        assert not style.is_empty

    def test_style_wins_when_both_set(self):
        style = resolve_class_style({"font-weight": "bold", "font-style": "italic"})
        assert style.variant is FontVariant.ITALIC

    def test_non_base_beats_base(self):
        style = resolve_class_style({"font-style": "normal", "font-weight": "bold"})
        assert style.variant is FontVariant.BOLD

    def test_order_does_not_matter(self):
        first = resolve_class_style({"font-style": "italic", "font-weight": "bold"})
        second = resolve_class_style({"font-weight": "bold", "font-style": "italic"})
        assert first == second


class TestBackground:
    def test_background_from_base_scope(self):
        theme = build_theme("t", ".hljs{background:#000000}")
        assert theme.background == Color(0.0, 0.0, 0.0)

    def test_background_shorthand_takes_priority(self):
        theme = build_theme("t", ".hljs{background-color:#ffffff;background:#000000}")
        assert theme.background == Color(0.0, 0.0, 0.0)

    def test_background_color_used_when_alone(self):
        theme = build_theme("t", ".hljs{background-color:#000}")
        assert theme.background == Color(0.0, 0.0, 0.0)

    def test_default_background_is_white(self):
        assert build_theme("t", "").background == Color(1.0, 1.0, 1.0)


class TestSerializedCss:
    def test_base_background_stripped(self):
        theme = build_theme("t", ".hljs{color:#444;background:#f3f3f3}.a{color:red}")
        assert theme.css == ".hljs{color:#444;}.a{color:red;}"

    def test_other_backgrounds_kept(self):
        css = serialize_css({"a": {"background-color": "#fff"}})
        assert css == ".a{background-color:#fff;}"


class TestFonts:
    def test_default_font_is_courier(self):
        theme = build_theme("t", "")
        assert theme.font == Font("Courier", 14.0, FACE_REGULAR)
        assert theme.bold_font.face == FACE_BOLD

    def test_italic_falls_back_to_oblique(self):
        theme = build_theme("t", "")
        assert theme.italic_font == Font("Courier", 14.0, FACE_OBLIQUE)

    def test_italic_face_preferred(self):
        theme = build_theme("t", "", font_family="Menlo", font_size=12.0)
        assert theme.italic_font == Font("Menlo", 12.0, FACE_ITALIC)

    def test_missing_variants_fall_back_to_base(self):
        theme = build_theme("t", "", font_family="Monaco")
        assert theme.bold_font == theme.font
        assert theme.italic_font == theme.font

    def test_unknown_family_falls_back_to_courier(self):
        theme = build_theme("t", "", font_family="Nonexistent Mono", font_size=9.0)
        assert theme.font == Font("Courier", 9.0)

    def test_platform_default_when_courier_missing(self):
        catalog = FontCatalog({"monospace": frozenset({FACE_REGULAR})})
        theme = build_theme("t", "", resolver=catalog)
        assert theme.font.family == "monospace"

    def test_no_font_at_all_raises(self):
        with pytest.raises(FontResolutionError):
            build_theme("t", "", resolver=FontCatalog({}))

    def test_with_font_rebuilds_variants(self):
        theme = build_theme("t", ".a{color:red}").with_font(Font("Menlo", 20.0))
        assert theme.bold_font == Font("Menlo", 20.0, FACE_BOLD)
        assert theme.italic_font == Font("Menlo", 20.0, FACE_ITALIC)
        assert "a" in theme.styles

    def test_font_for_variant(self):
        theme = build_theme("t", "")
        assert theme.font_for(FontVariant.BOLD) is theme.bold_font
        assert theme.font_for(FontVariant.ITALIC) is theme.italic_font
        assert theme.font_for(FontVariant.BASE) is theme.font


class TestImmutability:
    def test_theme_is_frozen(self):
        theme = build_theme("t", "")
        with pytest.raises(AttributeError):
            theme.name = "other"  # type: ignore[misc]

    def test_styles_are_read_only(self):
        theme = build_theme("t", ".a{color:red}")
        with pytest.raises(TypeError):
            theme.styles["b"] = ClassStyle()  # type: ignore[index]
