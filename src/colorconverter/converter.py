"""Conversion facade: format detection, validation and conversion.

Example:
    >>> convert("#FF5733", ColorFormat.RGB)
    'rgb(255,87,51)'
    >>> convert("rgb(255,87,51)", "hex")
    '#FF5733'
    >>> convert("not a color", "hex") is None
    True

Malformed input is an expected outcome here, not an exceptional one:
functions return ``None`` (or ``False``) instead of raising.
"""

import logging
from typing import Optional, Union

from colorconverter.formatting import format_from_rgb
from colorconverter.grammar import is_valid_hex, is_valid_hsl, is_valid_rgb
from colorconverter.models import ColorFormat, RGBColor
from colorconverter.parsing import parse_to_rgb

logger = logging.getLogger(__name__)


def detect_format(color: str) -> Optional[ColorFormat]:
    """Detect which grammar a color string matches (HEX, then RGB, then HSL)."""
    normalized = color.strip().lower()

    if normalized.startswith("#") and is_valid_hex(normalized):
        return ColorFormat.HEX
    if normalized.startswith(("rgb(", "rgba(")) and is_valid_rgb(normalized):
        return ColorFormat.RGB
    if normalized.startswith(("hsl(", "hsla(")) and is_valid_hsl(normalized):
        return ColorFormat.HSL
    return None


def coerce_format(value: Union[ColorFormat, str]) -> Optional[ColorFormat]:
    """Resolve a ColorFormat or its name (case-insensitive); None if unknown."""
    if isinstance(value, ColorFormat):
        return value
    try:
        return ColorFormat(value.strip().lower())
    except (AttributeError, ValueError):
        return None


def parse_color(color: str) -> Optional[RGBColor]:
    """Detect the format of ``color`` and parse it to RGB."""
    normalized = color.strip()
    rgb = parse_to_rgb(normalized, detect_format(normalized))
    if rgb is None:
        logger.debug(f"Could not parse color {color!r}")
    return rgb


def is_valid(color: str) -> bool:
    """True if the string is a valid HEX, RGB or HSL color."""
    return detect_format(color) is not None


def convert(color: str, to: Union[ColorFormat, str]) -> Optional[str]:
    """
    Convert a color string to another format, auto-detecting the source.

    When the source is already in the target format the trimmed input is
    returned as-is (no re-formatting, so ``#ff5733`` stays lowercase).

    Args:
        color: Source color string
        to: Target format (ColorFormat or "hex"/"rgb"/"hsl")

    Returns:
        The converted color, or None if the input or target is invalid
    """
    target = coerce_format(to)
    if target is None:
        logger.debug(f"Unknown target format {to!r}")
        return None

    normalized = color.strip()
    source = detect_format(normalized)
    if source is None:
        logger.debug(f"No format detected for {color!r}")
        return None

    if source == target:
        return normalized

    rgb = parse_to_rgb(normalized, source)
    if rgb is None:
        return None
    return format_from_rgb(rgb, target)
