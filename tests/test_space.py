"""Tests for RGB <-> HSL conversion."""

import pytest

from colorconverter.models import HSLColor, RGBColor
from colorconverter.space import hsl_to_rgb, rgb_to_hsl, round_half_away


@pytest.mark.unit
class TestRoundHalfAway:
    """Ties round away from zero, unlike the built-in round()."""

    @pytest.mark.parametrize(
        "value,expected",
        [(0.5, 1), (1.5, 2), (2.5, 3), (-2.5, -3), (2.4, 2), (-0.4, 0), (0.0, 0)],
    )
    def test_rounding(self, value, expected):
        assert round_half_away(value) == expected


@pytest.mark.unit
class TestRgbToHsl:
    """Test rgb_to_hsl."""

    def test_red(self):
        hsl = rgb_to_hsl(RGBColor(red=255, green=0, blue=0))
        assert (hsl.hue, hsl.saturation, hsl.lightness) == (0.0, 100.0, 50.0)

    def test_blue(self):
        hsl = rgb_to_hsl(RGBColor(red=0, green=0, blue=255))
        assert (hsl.hue, hsl.saturation, hsl.lightness) == (240.0, 100.0, 50.0)

    def test_grey_has_no_hue_or_saturation(self):
        hsl = rgb_to_hsl(RGBColor(red=128, green=128, blue=128))
        assert hsl.hue == 0.0
        assert hsl.saturation == 0.0
        assert hsl.lightness == 50.0

    def test_orange(self, orange_rgb):
        hsl = rgb_to_hsl(orange_rgb)
        assert (hsl.hue, hsl.saturation, hsl.lightness) == (11.0, 100.0, 60.0)

    def test_light_blue(self):
        """Lightness above 50% uses the other saturation formula."""
        hsl = rgb_to_hsl(RGBColor(red=0x34, green=0x98, blue=0xDB))
        assert (hsl.hue, hsl.saturation, hsl.lightness) == (204.0, 70.0, 53.0)

    def test_magenta_hue_wraps_below_360(self):
        """Red max with green < blue adds a full turn before dividing."""
        hsl = rgb_to_hsl(RGBColor(red=255, green=0, blue=255))
        assert hsl.hue == 300.0

    def test_alpha_preserved(self):
        hsl = rgb_to_hsl(RGBColor(red=0, green=0, blue=0, alpha=0.25))
        assert hsl.alpha == 0.25


@pytest.mark.unit
class TestHslToRgb:
    """Test hsl_to_rgb."""

    @pytest.mark.parametrize(
        "hue,expected",
        [(0, (255, 0, 0)), (120, (0, 255, 0)), (240, (0, 0, 255))],
    )
    def test_primaries(self, hue, expected):
        rgb = hsl_to_rgb(HSLColor(hue=hue, saturation=100, lightness=50))
        assert rgb.to_rgb_tuple() == expected

    def test_achromatic(self):
        """Zero saturation gives a grey; 127.5 rounds up."""
        rgb = hsl_to_rgb(HSLColor(hue=200, saturation=0, lightness=50))
        assert rgb.to_rgb_tuple() == (128, 128, 128)

    def test_black_and_white(self):
        assert hsl_to_rgb(HSLColor(hue=0, saturation=0, lightness=0)).to_rgb_tuple() == (0, 0, 0)
        assert hsl_to_rgb(HSLColor(hue=0, saturation=0, lightness=100)).to_rgb_tuple() == (
            255,
            255,
            255,
        )

    def test_orange(self):
        rgb = hsl_to_rgb(HSLColor(hue=11, saturation=100, lightness=60))
        assert rgb.to_rgb_tuple() == (255, 88, 51)

    def test_alpha_preserved(self):
        rgb = hsl_to_rgb(HSLColor(hue=0, saturation=100, lightness=50, alpha=0.8))
        assert rgb.alpha == 0.8

    def test_round_trip_primaries(self):
        for rgb in (
            RGBColor(red=255, green=0, blue=0),
            RGBColor(red=0, green=255, blue=0),
            RGBColor(red=0, green=0, blue=255),
            RGBColor(red=255, green=255, blue=255),
            RGBColor(red=0, green=0, blue=0),
        ):
            assert hsl_to_rgb(rgb_to_hsl(rgb)) == rgb
