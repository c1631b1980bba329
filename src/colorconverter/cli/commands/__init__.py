"""CLI commands for colorconverter."""

from .color import convert, formats, validate
from .config import config
from .contrast import contrast
from .palette import palette

__all__ = ["config", "contrast", "convert", "formats", "palette", "validate"]
