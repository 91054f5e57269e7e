"""Tests for hex/RGB/HSV conversions."""

import math

import pytest

from themestudio.core.color_model import (
    HSV,
    RGB,
    from_hsv,
    normalize_hex,
    parse_color,
    round_half_up,
    to_hex,
    to_hsv,
)


class TestNormalizeHex:
    """Tests for normalize_hex."""

    def test_expands_short_form(self):
        assert normalize_hex("#abc") == "#aabbcc"

    def test_lowercases_and_adds_hash(self):
        assert normalize_hex("  AABBCC ") == "#aabbcc"

    @pytest.mark.parametrize("value", ["not-a-color", "", None, "#abcd", "#gggggg", "#1234567"])
    def test_rejects_invalid(self, value):
        assert normalize_hex(value) is None


class TestParseColor:
    """Tests for parse_color."""

    def test_parses_hex(self):
        assert parse_color("#FF8000") == RGB(255, 128, 0)

    def test_percentage_channel_rounds(self):
        assert parse_color("rgb(50%, 0, 255)") == RGB(128, 0, 255)

    def test_rgba_and_space_separated(self):
        assert parse_color("rgba(10 20 30 / 0.5)") == RGB(10, 20, 30)

    def test_clamps_out_of_range_channels(self):
        assert parse_color("rgb(300, -5, 12.4)") == RGB(255, 0, 12)

    def test_non_numeric_channel_counts_as_zero(self):
        assert parse_color("rgb(abc, 10, 20)") == RGB(0, 10, 20)

    def test_too_few_channels_fails(self):
        assert parse_color("rgb(1, 2)") is None

    def test_garbage_fails(self):
        assert parse_color("hsl(10, 20%, 30%)") is None
        assert parse_color("") is None


def test_hex_round_trip_is_case_normalized() -> None:
    for value in ("#000000", "#FFFFFF", "#1a2B3c", "#9b7bff", "#808080"):
        assert to_hex(parse_color(value)) == value.lower()


def test_hsv_round_trip_has_no_drift_for_integer_channels() -> None:
    samples = [
        RGB(0, 0, 0),
        RGB(255, 255, 255),
        RGB(255, 0, 0),
        RGB(0, 255, 0),
        RGB(0, 0, 255),
        RGB(128, 64, 200),
        RGB(1, 2, 3),
        RGB(254, 253, 1),
        RGB(17, 170, 85),
    ]
    for rgb in samples:
        assert from_hsv(to_hsv(rgb)) == rgb


def test_to_hsv_primary_hues() -> None:
    assert to_hsv(RGB(255, 0, 0)) == HSV(0.0, 1.0, 1.0)
    assert to_hsv(RGB(0, 255, 0)).h == pytest.approx(120.0)
    assert to_hsv(RGB(0, 0, 255)).h == pytest.approx(240.0)


def test_to_hsv_grey_has_zero_hue_and_saturation() -> None:
    hsv = to_hsv(RGB(128, 128, 128))
    assert hsv.h == 0.0
    assert hsv.s == 0.0


def test_from_hsv_wraps_hue_and_clamps() -> None:
    assert from_hsv(HSV(360, 1, 1)) == RGB(255, 0, 0)
    assert from_hsv(HSV(-120, 2, 1)) == from_hsv(HSV(240, 1, 1))


def test_to_hex_rounds_half_up_and_clamps() -> None:
    assert to_hex(RGB(127.5, 0.49, 300)) == "#8000ff"


def test_round_half_up() -> None:
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(-0.5) == 0


class TestNonFiniteInput:
    """NaN and infinite channels degrade to zero instead of raising."""

    def test_to_hex(self):
        assert to_hex(RGB(math.nan, 0, 0)) == "#000000"
        assert to_hex(RGB(math.inf, 255, -math.inf)) == "#00ff00"

    def test_from_hsv(self):
        assert from_hsv(HSV(math.nan, 1, 1)) == RGB(255, 0, 0)
        assert from_hsv(HSV(math.inf, 1, 1)) == RGB(255, 0, 0)
        assert from_hsv(HSV(120, math.nan, math.inf)) == RGB(0, 0, 0)

    def test_to_hsv(self):
        assert to_hsv(RGB(math.nan, math.inf, 0)) == HSV(0.0, 0.0, 0.0)
        assert to_hsv(RGB(math.nan, 255, 0)).h == pytest.approx(120.0)
