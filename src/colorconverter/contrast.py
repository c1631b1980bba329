"""WCAG relative luminance and contrast ratio."""

from typing import Optional

from colorconverter.converter import parse_color
from colorconverter.models import ContrastLevel, RGBColor

LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)

# Ratios are reported to this many decimals so that black on white is 21.0
RATIO_DECIMALS = 10


def _linearize(value: float) -> float:
    if value <= 0.03928:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: RGBColor) -> float:
    """WCAG relative luminance (0.0 for black, 1.0 for white). Alpha is ignored."""
    channels = (_linearize(channel / 255.0) for channel in rgb.to_rgb_tuple())
    return sum(weight * channel for weight, channel in zip(LUMINANCE_WEIGHTS, channels))


def contrast_ratio(foreground: str, background: str) -> Optional[float]:
    """
    Contrast ratio between two colors, from 1.0 to 21.0.

    The ratio is symmetric; argument order only documents intent.

    Args:
        foreground: Text color in any supported format
        background: Background color in any supported format

    Returns:
        The ratio, or None if either color is invalid
    """
    fg_rgb = parse_color(foreground)
    bg_rgb = parse_color(background)
    if fg_rgb is None or bg_rgb is None:
        return None

    fg_luminance = relative_luminance(fg_rgb)
    bg_luminance = relative_luminance(bg_rgb)
    lighter = max(fg_luminance, bg_luminance)
    darker = min(fg_luminance, bg_luminance)

    return round((lighter + 0.05) / (darker + 0.05), RATIO_DECIMALS)


def wcag_level(ratio: float) -> ContrastLevel:
    """Highest WCAG level a ratio meets (AAA, AA, AA Large, or Fail)."""
    for level in (ContrastLevel.AAA, ContrastLevel.AA, ContrastLevel.AA_LARGE):
        if ratio >= level.minimum_ratio:
            return level
    return ContrastLevel.FAIL
