"""Tests for themecontrast.color_utils module."""

import math

import numpy as np
import pytest

from themecontrast.color_utils import (
    Color,
    color_to_hex,
    format_color,
    parse_color,
    parse_hex_color,
    parse_hsl_color,
    parse_hsv_color,
    parse_rgb_color,
)
from themecontrast.errors import InvalidColorError


class TestColor:
    """Test Color construction and validation."""

    def test_defaults_to_opaque(self):
        assert Color(0.1, 0.2, 0.3).alpha == 1.0

    def test_value_equality_and_hash(self):
        assert Color(1, 0, 0) == Color(1.0, 0.0, 0.0)
        assert len({Color(1, 0, 0), Color(1.0, 0.0, 0.0)}) == 1

    def test_immutable(self):
        color = Color(0.5, 0.5, 0.5)
        with pytest.raises(AttributeError):
            color.red = 1.0  # type: ignore[misc]

    def test_numpy_channels_are_converted(self):
        color = Color(np.float64(0.25), np.float32(0.5), 1)
        assert color.rgb == (0.25, 0.5, 1.0)
        assert all(type(c) is float for c in color.rgb)

    @pytest.mark.parametrize(
        "channels",
        [
            (1.5, 0.0, 0.0),
            (0.0, -0.1, 0.0),
            (0.0, 0.0, 255),
            (0.0, 0.0, 0.0, 2.0),
            (math.nan, 0.0, 0.0),
            (math.inf, 0.0, 0.0),
        ],
    )
    def test_out_of_range_rejected(self, channels):
        with pytest.raises(InvalidColorError):
            Color(*channels)

    @pytest.mark.parametrize("bad", ["0.5", None, True, [0.5]])
    def test_non_numeric_rejected(self, bad):
        with pytest.raises(InvalidColorError) as exc_info:
            Color(bad, 0.0, 0.0)
        assert exc_info.value.value == bad

    def test_invalid_color_error_is_value_error(self):
        with pytest.raises(ValueError):
            Color(2.0, 0.0, 0.0)

    def test_from_rgb255(self):
        assert Color.from_rgb255(255, 0, 0) == Color(1.0, 0.0, 0.0)
        assert Color.from_rgb255(0, 0, 0, 0).alpha == 0.0

    @pytest.mark.parametrize("channels", [(256, 0, 0), (-1, 0, 0), (0.5, 0, 0)])
    def test_from_rgb255_rejects_bad_values(self, channels):
        with pytest.raises(InvalidColorError):
            Color.from_rgb255(*channels)

    def test_from_hex(self):
        assert Color.from_hex("#00FF00") == Color(0.0, 1.0, 0.0)

    def test_from_hex_invalid(self):
        with pytest.raises(InvalidColorError):
            Color.from_hex("00FF00")

    def test_coerce(self):
        red = Color(1.0, 0.0, 0.0)
        assert Color.coerce(red) is red
        assert Color.coerce("#FF0000") == red
        assert Color.coerce((1.0, 0.0, 0.0)) == red
        assert Color.coerce(np.array([1.0, 0.0, 0.0])) == red

    @pytest.mark.parametrize("value", [None, 42, (1.0, 0.0), {"red": 1.0}])
    def test_coerce_rejects_unknown(self, value):
        with pytest.raises(InvalidColorError):
            Color.coerce(value)


class TestParseHexColor:
    """Test the parse_hex_color function."""

    def test_valid_hex_uppercase(self):
        assert parse_hex_color("#FF0000") == (1.0, 0.0, 0.0, 1.0)

    def test_valid_hex_lowercase(self):
        assert parse_hex_color("#00ff00") == (0.0, 1.0, 0.0, 1.0)

    def test_valid_hex_with_alpha(self):
        assert parse_hex_color("#0000FF00") == (0.0, 0.0, 1.0, 0.0)

    def test_valid_hex_with_whitespace(self):
        assert parse_hex_color("  #FFFFFF  ") == (1.0, 1.0, 1.0, 1.0)

    def test_invalid_missing_hash(self):
        assert parse_hex_color("FF0000") is None

    def test_invalid_length(self):
        assert parse_hex_color("#FF00") is None
        assert parse_hex_color("#FF00000") is None

    def test_invalid_non_hex_chars(self):
        assert parse_hex_color("#GGGGGG") is None

    @pytest.mark.parametrize(
        "color_str", ["#+F+F+F", "#+0+0+0", "# FFFFF", "#FF FF FF", "#-FFFFF"]
    )
    def test_invalid_signs_and_inner_whitespace(self, color_str):
        """Only bare hex digits are accepted between the # and the end."""
        assert parse_hex_color(color_str) is None


class TestParseRgbColor:
    """Test the parse_rgb_color function."""

    def test_valid_rgb_basic(self):
        assert parse_rgb_color("rgb(255, 0, 0)") == (1.0, 0.0, 0.0, 1.0)

    def test_valid_rgb_case_insensitive(self):
        assert parse_rgb_color("RGB( 0 , 0 , 255 )") == (0.0, 0.0, 1.0, 1.0)

    def test_valid_rgba(self):
        assert parse_rgb_color("rgba(0, 255, 0, 0.5)") == (0.0, 1.0, 0.0, 0.5)

    def test_out_of_range(self):
        assert parse_rgb_color("rgb(256, 0, 0)") is None

    def test_missing_component(self):
        assert parse_rgb_color("rgb(255, 0)") is None


class TestParseCylindricalColors:
    """Test HSL and HSV parsing."""

    def test_hsl_red(self):
        r, g, b, a = parse_hsl_color("hsl(0, 100%, 50%)")
        assert (r, g, b, a) == pytest.approx((1.0, 0.0, 0.0, 1.0))

    def test_hsl_gray(self):
        r, g, b, _ = parse_hsl_color("hsl(180, 0%, 50%)")
        assert r == pytest.approx(0.5)
        assert g == pytest.approx(0.5)
        assert b == pytest.approx(0.5)

    def test_hsv_blue(self):
        result = parse_hsv_color("hsv(240, 100%, 100%)")
        assert result == pytest.approx((0.0, 0.0, 1.0, 1.0))

    def test_hsl_out_of_range(self):
        assert parse_hsl_color("hsl(361, 50%, 50%)") is None

    def test_hsv_not_matching(self):
        assert parse_hsv_color("hsl(0, 100%, 50%)") is None

    def test_prefix_is_case_insensitive(self):
        assert parse_hsl_color("HSL(120, 100%, 50%)") == pytest.approx((0.0, 1.0, 0.0, 1.0))
        assert parse_hsv_color("Hsv(0, 0%, 0%)") == pytest.approx((0.0, 0.0, 0.0, 1.0))

    def test_hsv_out_of_range(self):
        assert parse_hsv_color("hsv(120, 101%, 50%)") is None


class TestParseColor:
    """Test the parse_color dispatcher."""

    def test_dispatches_to_each_format(self):
        assert parse_color("#FF0000") == Color(1.0, 0.0, 0.0)
        assert parse_color("rgb(0, 255, 0)") == Color(0.0, 1.0, 0.0)
        assert parse_color("hsv(0, 0%, 100%)").rgb == pytest.approx((1.0, 1.0, 1.0))

    def test_invalid_formats(self, invalid_color_formats):
        for color_str in invalid_color_formats:
            with pytest.raises(InvalidColorError, match="Invalid color format"):
                parse_color(color_str)

    def test_non_string(self):
        with pytest.raises(InvalidColorError):
            parse_color(0xFFFFFF)  # type: ignore[arg-type]


class TestColorToHex:
    """Test hex formatting."""

    def test_opaque_colors(self):
        assert color_to_hex(Color(1.0, 0.0, 0.0)) == "#FF0000FF"
        assert color_to_hex(Color(0.0, 0.0, 0.0)) == "#000000FF"

    def test_alpha_included(self):
        assert color_to_hex(Color(1.0, 1.0, 1.0, 0.0)) == "#FFFFFF00"

    def test_uppercase(self):
        assert color_to_hex(Color.from_hex("#abcdef")) == "#ABCDEFFF"

    def test_parse_hex_roundtrip(self):
        assert color_to_hex(parse_color("#12345678")) == "#12345678"


class TestFormatColor:
    """Test format_color output variants."""

    def test_hex(self):
        assert format_color(Color(1.0, 0.0, 0.0)) == "#FF0000FF"

    def test_rgb(self):
        assert format_color(Color(1.0, 0.0, 0.0), "rgb") == "rgb(255, 0, 0)"

    def test_raw(self):
        assert format_color(Color(1.0, 0.5, 0.0), "raw") == "(1.0000, 0.5000, 0.0000, 1.0000)"
