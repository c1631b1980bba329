"""Formatters from RGB values to canonical color strings.

Output is always the compact canonical form: uppercase 6/8-digit hex and
no spaces inside ``rgb(...)``/``hsl(...)``. The alpha variant is chosen
only when alpha is below 1.0.
"""

from colorconverter.models import ColorFormat, HSLColor, RGBColor
from colorconverter.space import rgb_to_hsl, round_half_away


def format_hex(rgb: RGBColor) -> str:
    """Format as ``#RRGGBB`` or ``#RRGGBBAA``."""
    if not rgb.is_opaque:
        alpha_byte = round_half_away(rgb.alpha * 255)
        return f"#{rgb.red:02X}{rgb.green:02X}{rgb.blue:02X}{alpha_byte:02X}"
    return f"#{rgb.red:02X}{rgb.green:02X}{rgb.blue:02X}"


def format_rgb(rgb: RGBColor) -> str:
    """Format as ``rgb(r,g,b)`` or ``rgba(r,g,b,a)``."""
    if not rgb.is_opaque:
        return f"rgba({rgb.red},{rgb.green},{rgb.blue},{rgb.alpha})"
    return f"rgb({rgb.red},{rgb.green},{rgb.blue})"


def format_hsl(hsl: HSLColor) -> str:
    """Format as ``hsl(h,s%,l%)`` or ``hsla(h,s%,l%,a)``."""
    h = round_half_away(hsl.hue)
    s = round_half_away(hsl.saturation)
    l = round_half_away(hsl.lightness)
    if hsl.alpha < 1.0:
        return f"hsla({h},{s}%,{l}%,{hsl.alpha})"
    return f"hsl({h},{s}%,{l}%)"


def format_from_rgb(rgb: RGBColor, target: ColorFormat) -> str:
    """Format an RGB value in the target format (HSL goes through rgb_to_hsl)."""
    if target == ColorFormat.HEX:
        return format_hex(rgb)
    if target == ColorFormat.RGB:
        return format_rgb(rgb)
    return format_hsl(rgb_to_hsl(rgb))
