"""Tests for post-hoc line numbering."""

import pytest

from hilite.line_numbers import (
    LineNumberConfig,
    add_line_numbers,
    number_attributes,
    number_width,
)
from hilite.model.color import Color
from hilite.model.font import FACE_ULTRALIGHT, Font
from hilite.model.runs import StyledText, TextAttributes

BASE = TextAttributes(font=Font("Courier"))
RED = TextAttributes(font=Font("Courier"), foreground=Color(1.0, 0.0, 0.0))


def lines_of(count: int) -> StyledText:
    styled = StyledText()
    styled.append("\n".join("x" for _ in range(count)), BASE)
    return styled


class TestConfig:
    def test_defaults(self):
        config = LineNumberConfig()
        assert config.start == 1
        assert config.min_width == 2
        assert config.separator == "  "
        assert config.line_break == "\n"
        assert config.using_dark_theme is False
        assert config.font_size == 16.0

    def test_start_clamped_to_one(self):
        assert LineNumberConfig(start=-5).start == 1
        assert LineNumberConfig(start=0).start == 1

    def test_min_width_clamped_to_two(self):
        assert LineNumberConfig(min_width=1).min_width == 2
        assert LineNumberConfig(min_width=5).min_width == 5

    def test_empty_separator_defaults(self):
        assert LineNumberConfig(separator="").separator == "  "

    def test_empty_line_break_rejected(self):
        with pytest.raises(ValueError):
            LineNumberConfig(line_break="")


class TestWidth:
    def test_two_digits_up_to_99_lines(self):
        assert number_width(99, LineNumberConfig()) == 2

    def test_three_digits_from_100_lines(self):
        assert number_width(100, LineNumberConfig()) == 3

    def test_ten_lines_still_two_digits(self):
        assert number_width(10, LineNumberConfig()) == 2

    def test_start_offset_counts(self):
        assert number_width(5, LineNumberConfig(start=95)) == 2
        assert number_width(6, LineNumberConfig(start=95)) == 3

    def test_min_width_respected(self):
        assert number_width(3, LineNumberConfig(min_width=4)) == 4


class TestAddLineNumbers:
    def test_none_config_returns_input(self):
        styled = lines_of(3)
        assert add_line_numbers(styled, None) is styled

    def test_basic_numbering(self):
        result = add_line_numbers(lines_of(2), LineNumberConfig())
        assert result.text == "01  x\n02  x\n"

    def test_switches_to_three_digits_past_99(self):
        assert add_line_numbers(lines_of(99), LineNumberConfig()).runs[0].text == "01"
        assert add_line_numbers(lines_of(100), LineNumberConfig()).runs[0].text == "001"

    def test_custom_start_and_separator(self):
        config = LineNumberConfig(start=9, separator=": ")
        result = add_line_numbers(lines_of(2), config)
        assert result.text == "09: x\n10: x\n"

    def test_custom_line_break(self):
        styled = StyledText()
        styled.append("a\r\nb", BASE)
        result = add_line_numbers(styled, LineNumberConfig(line_break="\r\n"))
        assert result.text == "01  a\r\n02  b\r\n"

    def test_trailing_break_gives_extra_line(self):
        styled = StyledText()
        styled.append("a\n", BASE)
        assert add_line_numbers(styled, LineNumberConfig()).text == "01  a\n02  \n"

    def test_run_layout_and_styles(self):
        styled = StyledText()
        styled.append("ab", RED)
        styled.append("c", BASE)
        result = add_line_numbers(styled, LineNumberConfig())
        numbers = number_attributes(LineNumberConfig())
        assert [(r.text, r.attributes) for r in result] == [
            ("01", numbers),
            ("  ", numbers),
            ("ab", RED),
            ("c", BASE),
            ("\n", numbers),
        ]


class TestNumberStyle:
    def test_light_theme_color(self):
        attrs = number_attributes(LineNumberConfig())
        assert attrs.foreground == Color(0.2, 0.2, 0.2, 0.2)

    def test_dark_theme_color(self):
        attrs = number_attributes(LineNumberConfig(using_dark_theme=True))
        assert attrs.foreground == Color(0.8, 0.8, 0.8, 0.2)

    def test_font(self):
        attrs = number_attributes(LineNumberConfig(font_size=11.0))
        assert attrs.font.face == FACE_ULTRALIGHT
        assert attrs.font.size == 11.0
