"""Data models for colorconverter."""

from .color import HSLColor, RGBColor
from .config import ConverterConfig
from .enums import ColorFormat, ContrastLevel, PaletteType

__all__ = [
    # Enums
    "ColorFormat",
    "ContrastLevel",
    "ConverterConfig",
    # Models
    "HSLColor",
    "PaletteType",
    "RGBColor",
]
