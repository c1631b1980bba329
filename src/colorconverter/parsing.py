"""Parsers from validated color strings to numeric color models.

RGB is the common intermediate: every format is parsed to an
:class:`RGBColor` (HSL strings are parsed to :class:`HSLColor` first and
converted). Parsers assume the string already passed the grammar check
and return ``None`` rather than raising when it did not.
"""

import logging
import re
from typing import Optional

from colorconverter.models import ColorFormat, HSLColor, RGBColor
from colorconverter.space import hsl_to_rgb

logger = logging.getLogger(__name__)

# Integers and decimals, including a bare fraction such as ".8"
_NUMBER = re.compile(r"[0-9]*\.?[0-9]+", re.ASCII)


def _extract_numbers(text: str) -> list[float]:
    return [float(token) for token in _NUMBER.findall(text)]


def parse_hex(color: str) -> Optional[RGBColor]:
    """Parse ``#RGB``, ``#RRGGBB`` or ``#RRGGBBAA``.

    Shorthand nibbles are expanded by x17 (``F`` -> ``FF``); the alpha byte
    of the 8-digit form is normalized by /255.
    """
    digits = color.strip().removeprefix("#")
    try:
        value = int(digits, 16)
    except ValueError:
        logger.debug(f"Not a hex number: {color!r}")
        return None

    if len(digits) == 3:
        return RGBColor(
            red=((value >> 8) & 0xF) * 17,
            green=((value >> 4) & 0xF) * 17,
            blue=(value & 0xF) * 17,
        )
    if len(digits) == 6:
        return RGBColor(
            red=(value >> 16) & 0xFF,
            green=(value >> 8) & 0xFF,
            blue=value & 0xFF,
        )
    if len(digits) == 8:
        return RGBColor(
            red=(value >> 24) & 0xFF,
            green=(value >> 16) & 0xFF,
            blue=(value >> 8) & 0xFF,
            alpha=(value & 0xFF) / 255.0,
        )

    logger.debug(f"Unsupported hex length {len(digits)}: {color!r}")
    return None


def parse_rgb(color: str) -> Optional[RGBColor]:
    """Parse ``rgb(...)``/``rgba(...)``; decimal channels are truncated."""
    numbers = _extract_numbers(color)
    if len(numbers) < 3:
        logger.debug(f"Expected at least 3 numbers in {color!r}, got {len(numbers)}")
        return None

    return RGBColor(
        red=int(numbers[0]),
        green=int(numbers[1]),
        blue=int(numbers[2]),
        alpha=numbers[3] if len(numbers) > 3 else 1.0,
    )


def parse_hsl(color: str) -> Optional[HSLColor]:
    """Parse ``hsl(...)``/``hsla(...)`` into an HSL value."""
    numbers = _extract_numbers(color)
    if len(numbers) < 3:
        logger.debug(f"Expected at least 3 numbers in {color!r}, got {len(numbers)}")
        return None

    return HSLColor(
        hue=numbers[0],
        saturation=numbers[1],
        lightness=numbers[2],
        alpha=numbers[3] if len(numbers) > 3 else 1.0,
    )


def parse_to_rgb(color: str, source_format: Optional[ColorFormat]) -> Optional[RGBColor]:
    """Parse a color string of a known format into RGB."""
    if source_format is None:
        return None

    if source_format == ColorFormat.HEX:
        return parse_hex(color)
    if source_format == ColorFormat.RGB:
        return parse_rgb(color)

    hsl = parse_hsl(color)
    return hsl_to_rgb(hsl) if hsl is not None else None
