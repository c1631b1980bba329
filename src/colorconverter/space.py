"""RGB <-> HSL color-space conversion.

Both directions round half away from zero (not Python's banker's
rounding), which keeps round trips of the primaries, black and white
exact:

    >>> rgb_to_hsl(RGBColor(red=255, green=0, blue=0))
    HSLColor(hue=0.0, saturation=100.0, lightness=50.0, alpha=1.0)
"""

import math

from colorconverter.models import HSLColor, RGBColor


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    rounded = int(math.floor(abs(value) + 0.5))
    return rounded if value >= 0 else -rounded


def rgb_to_hsl(rgb: RGBColor) -> HSLColor:
    """Convert an RGB color to HSL with integer-rounded hue/saturation/lightness."""
    r = rgb.red / 255.0
    g = rgb.green / 255.0
    b = rgb.blue / 255.0

    high = max(r, g, b)
    low = min(r, g, b)
    delta = high - low

    lightness = (high + low) / 2.0

    if delta == 0:
        saturation = 0.0
    elif lightness > 0.5:
        saturation = delta / (2.0 - high - low)
    else:
        saturation = delta / (high + low)

    if delta == 0:
        hue = 0.0
    elif high == r:
        hue = ((g - b) / delta + (6 if g < b else 0)) / 6
    elif high == g:
        hue = ((b - r) / delta + 2) / 6
    else:
        hue = ((r - g) / delta + 4) / 6

    return HSLColor(
        hue=round_half_away(hue * 360),
        saturation=round_half_away(saturation * 100),
        lightness=round_half_away(lightness * 100),
        alpha=rgb.alpha,
    )


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1.0 / 6.0:
        return p + (q - p) * 6 * t
    if t < 1.0 / 2.0:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6
    return p


def hsl_to_rgb(hsl: HSLColor) -> RGBColor:
    """Convert an HSL color to 8-bit RGB."""
    h = hsl.hue / 360.0
    s = hsl.saturation / 100.0
    l = hsl.lightness / 100.0

    if s == 0:
        # Achromatic
        value = round_half_away(l * 255)
        return RGBColor(red=value, green=value, blue=value, alpha=hsl.alpha)

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q

    r = _hue_to_channel(p, q, h + 1.0 / 3.0)
    g = _hue_to_channel(p, q, h)
    b = _hue_to_channel(p, q, h - 1.0 / 3.0)

    return RGBColor(
        red=round_half_away(r * 255),
        green=round_half_away(g * 255),
        blue=round_half_away(b * 255),
        alpha=hsl.alpha,
    )
