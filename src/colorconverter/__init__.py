"""colorconverter: HEX/RGB/HSL conversion, palettes and WCAG contrast."""

__version__ = "0.1.0"

# Conversion
from .converter import convert, detect_format, is_valid

# Palettes and contrast
from .contrast import contrast_ratio, relative_luminance, wcag_level
from .palette import complementary, generate_palette, monochromatic, triadic

# Models
from .models import ColorFormat, ContrastLevel, HSLColor, PaletteType, RGBColor

__all__ = [
    "ColorFormat",
    "ContrastLevel",
    "HSLColor",
    "PaletteType",
    "RGBColor",
    "complementary",
    "contrast_ratio",
    "convert",
    "detect_format",
    "generate_palette",
    "is_valid",
    "monochromatic",
    "relative_luminance",
    "triadic",
    "wcag_level",
]
