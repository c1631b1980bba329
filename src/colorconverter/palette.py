"""Palette generators built on hue rotation and lightness sweeps in HSL.

All generators return hex strings, starting from the base color where the
strategy includes it. An unparseable base color yields an empty list.
Generated colors are opaque; only the base keeps its alpha.
"""

import logging
from typing import Optional, Union

from colorconverter.converter import parse_color
from colorconverter.exceptions import UnsupportedFormatError
from colorconverter.formatting import format_hex
from colorconverter.models import HSLColor, PaletteType

logger = logging.getLogger(__name__)

MONOCHROMATIC_MIN_LIGHTNESS = 20.0
MONOCHROMATIC_MAX_LIGHTNESS = 80.0


def _opaque_hex(hsl: HSLColor) -> str:
    return format_hex(hsl.opaque().to_rgb())


def _rotations(base_color: str, offsets: tuple[float, ...]) -> list[str]:
    rgb = parse_color(base_color)
    if rgb is None:
        return []

    hsl = rgb.to_hsl()
    return [format_hex(rgb)] + [_opaque_hex(hsl.rotate(offset)) for offset in offsets]


def complementary(base_color: str) -> list[str]:
    """Base color plus its opposite on the color wheel (hue + 180)."""
    return _rotations(base_color, (180.0,))


def triadic(base_color: str) -> list[str]:
    """Base color plus hues rotated by 120 and 240 degrees, in that order."""
    return _rotations(base_color, (120.0, 240.0))


def monochromatic(base_color: str, count: int = 5) -> list[str]:
    """
    Sweep lightness from 20% to 80% at the base hue and saturation.

    Color ``i`` has lightness ``20 + i * 60 / (count - 1)``. A single
    color uses the base color's own lightness, and ``count <= 0`` returns
    an empty list.
    """
    rgb = parse_color(base_color)
    if rgb is None or count <= 0:
        return []

    hsl = rgb.to_hsl()
    if count == 1:
        return [_opaque_hex(hsl)]

    span = MONOCHROMATIC_MAX_LIGHTNESS - MONOCHROMATIC_MIN_LIGHTNESS
    return [
        _opaque_hex(hsl.with_lightness(MONOCHROMATIC_MIN_LIGHTNESS + i * span / (count - 1)))
        for i in range(count)
    ]


def generate_palette(
    base_color: str,
    palette_type: Union[PaletteType, str],
    count: Optional[int] = None,
) -> list[str]:
    """
    Generate a palette by type name.

    Args:
        base_color: Base color in any supported format
        palette_type: PaletteType or its value ("complementary", ...)
        count: Number of colors for monochromatic palettes
               (defaults to PaletteType.MONOCHROMATIC.color_count);
               ignored by the fixed-size strategies

    Raises:
        UnsupportedFormatError: If palette_type is not a known palette type
    """
    try:
        palette_type = PaletteType(palette_type)
    except ValueError as e:
        logger.debug(f"Unknown palette type {palette_type!r}")
        raise UnsupportedFormatError(
            str(palette_type), "palette type", [p.value for p in PaletteType]
        ) from e

    if palette_type == PaletteType.COMPLEMENTARY:
        return complementary(base_color)
    if palette_type == PaletteType.TRIADIC:
        return triadic(base_color)
    if count is None:
        count = palette_type.color_count
    return monochromatic(base_color, count)
