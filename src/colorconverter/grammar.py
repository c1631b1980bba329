"""Grammar validators for the HEX, RGB and HSL textual formats.

Accepted shapes (case-insensitive, whitespace allowed inside the
parentheses around numbers and commas):

    #RGB  #RRGGBB  #RRGGBBAA
    rgb(r, g, b)          rgba(r, g, b, a)
    hsl(h, s%, l%)        hsla(h, s%, l%, a)

Channels are plain ASCII integers; r/g/b must be 0-255, hue 0-360,
saturation and lightness 0-100. Alpha is ``0``, ``1`` or a fraction such
as ``0.8`` or ``.8``. Anything else (trailing text, wrong brackets, an
alpha on ``rgb``/``hsl`` or a missing one on ``rgba``/``hsla``) is rejected.
"""

import re
import string

# [0-9] rather than \d: \d also matches non-ASCII digits
_ALPHA = r"(0|1|0?\.[0-9]+)"

_RGB_PATTERN = re.compile(
    r"rgb\(\s*([0-9]+)\s*,\s*([0-9]+)\s*,\s*([0-9]+)\s*\)", re.ASCII
)
_RGBA_PATTERN = re.compile(
    r"rgba\(\s*([0-9]+)\s*,\s*([0-9]+)\s*,\s*([0-9]+)\s*,\s*" + _ALPHA + r"\s*\)", re.ASCII
)
_HSL_PATTERN = re.compile(
    r"hsl\(\s*([0-9]+)\s*,\s*([0-9]+)%\s*,\s*([0-9]+)%\s*\)", re.ASCII
)
_HSLA_PATTERN = re.compile(
    r"hsla\(\s*([0-9]+)\s*,\s*([0-9]+)%\s*,\s*([0-9]+)%\s*,\s*" + _ALPHA + r"\s*\)", re.ASCII
)

_HEX_DIGITS = frozenset(string.hexdigits)
HEX_LENGTHS = (3, 6, 8)

MAX_CHANNEL = 255
MAX_HUE = 360
MAX_PERCENT = 100


def is_valid_hex(color: str) -> bool:
    """Check ``#`` followed by exactly 3, 6 or 8 hex digits."""
    if not color.startswith("#"):
        return False
    digits = color[1:]
    if len(digits) not in HEX_LENGTHS:
        return False
    return all(c in _HEX_DIGITS for c in digits)


def is_valid_rgb(color: str) -> bool:
    """Check ``rgb(r,g,b)`` / ``rgba(r,g,b,a)`` syntax and channel ranges."""
    color = color.lower()
    pattern = _RGBA_PATTERN if "rgba" in color else _RGB_PATTERN
    match = pattern.fullmatch(color)
    if match is None:
        return False
    return all(int(value) <= MAX_CHANNEL for value in match.groups()[:3])


def is_valid_hsl(color: str) -> bool:
    """Check ``hsl(h,s%,l%)`` / ``hsla(h,s%,l%,a)`` syntax and ranges."""
    color = color.lower()
    pattern = _HSLA_PATTERN if "hsla" in color else _HSL_PATTERN
    match = pattern.fullmatch(color)
    if match is None:
        return False
    hue, saturation, lightness = (int(value) for value in match.groups()[:3])
    return hue <= MAX_HUE and saturation <= MAX_PERCENT and lightness <= MAX_PERCENT
