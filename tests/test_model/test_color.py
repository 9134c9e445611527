"""Tests for CSS color decoding."""

import pytest

from hilite.model.color import GRAY, Color, color_from_spec


class TestHexColors:
    def test_six_digits(self):
        color = color_from_spec("#808000")
        assert color.red == pytest.approx(0.502, abs=1e-3)
        assert color.green == pytest.approx(0.502, abs=1e-3)
        assert color.blue == 0.0
        assert color.alpha == 1.0

    def test_three_digits_scale_by_fifteen(self):
        color = color_from_spec("#444")
        assert color.red == pytest.approx(0.267, abs=1e-3)
        assert color.green == pytest.approx(0.267, abs=1e-3)
        assert color.blue == pytest.approx(0.267, abs=1e-3)
        assert color.alpha == 1.0

    def test_eight_digits_carry_alpha(self):
        color = color_from_spec("#80800080")
        assert color.red == pytest.approx(0.502, abs=1e-3)
        assert color.alpha == pytest.approx(0.502, abs=1e-3)

    def test_full_red(self):
        assert color_from_spec("#ff0000") == Color(1.0, 0.0, 0.0, 1.0)

    def test_surrounding_whitespace_is_trimmed(self):
        assert color_from_spec("  #fff \n") == Color(1.0, 1.0, 1.0, 1.0)

    def test_uppercase_digits(self):
        assert color_from_spec("#FFFFFF") == Color(1.0, 1.0, 1.0, 1.0)


class TestMalformedColors:
    def test_non_hex_digits_read_as_zero(self):
        assert color_from_spec("#ZZZ") == Color(0.0, 0.0, 0.0, 1.0)

    def test_partly_hex_component_reads_leading_digits(self):
        # "1Z" reads as 0x1
        assert color_from_spec("#1Z0000").red == pytest.approx(1 / 255)

    @pytest.mark.parametrize("value", ["#aaaaa", "#444a", "#", "#1234567"])
    def test_bad_length_is_gray(self, value):
        assert color_from_spec(value) == GRAY

    def test_gray_sentinel_differs_from_hex_failure(self):
        assert color_from_spec("#aaaaa") != color_from_spec("#ZZZ")

    def test_gray_sentinel_value(self):
        assert GRAY == Color(0.5, 0.5, 0.5, 1.0)


class TestNamedColors:
    def test_red(self):
        assert color_from_spec("red") == Color(1.0, 0.0, 0.0, 1.0)

    def test_green_is_half_intensity(self):
        assert color_from_spec("green") == Color(0.0, 0.5, 0.0, 1.0)

    def test_navy(self):
        assert color_from_spec("navy") == Color(0.0, 0.0, 0.5, 1.0)

    def test_white_and_black(self):
        assert color_from_spec("white") == Color(1.0, 1.0, 1.0, 1.0)
        assert color_from_spec("black") == Color(0.0, 0.0, 0.0, 1.0)

    def test_unknown_name_is_gray(self):
        assert color_from_spec("olive") == GRAY


class TestColorOutput:
    def test_to_hex_opaque(self):
        assert Color(1.0, 0.0, 0.0).to_hex() == "#ff0000"

    def test_to_hex_with_alpha(self):
        assert Color(0.0, 0.0, 0.0, 0.5).to_hex() == "#00000080"

    def test_to_rgb255(self):
        assert color_from_spec("#808000").to_rgb255() == (128, 128, 0)

    def test_color_is_frozen(self):
        with pytest.raises(AttributeError):
            Color(0, 0, 0).red = 1.0  # type: ignore[misc]
