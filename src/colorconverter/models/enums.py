"""Enumerations for color formats, palettes and contrast levels."""

from enum import Enum


class ColorFormat(str, Enum):
    """Textual color formats."""

    HEX = "hex"  # #F57, #FF5733, #FF5733CC
    RGB = "rgb"  # rgb(255,87,51), rgba(255,87,51,0.8)
    HSL = "hsl"  # hsl(11,100%,60%), hsla(11,100%,60%,0.8)

    @property
    def description(self) -> str:
        """Human-readable description."""
        return _FORMAT_DESCRIPTIONS[self]

    @property
    def example(self) -> str:
        """Example color in this format."""
        return _FORMAT_EXAMPLES[self]

    @property
    def supports_alpha(self) -> bool:
        """Whether the format has an explicit alpha variant (rgba/hsla).

        HEX carries alpha through its 8-digit form instead.
        """
        return self in (ColorFormat.RGB, ColorFormat.HSL)


_FORMAT_DESCRIPTIONS = {
    ColorFormat.HEX: "Hexadecimal (#FF5733)",
    ColorFormat.RGB: "RGB (rgb(255,87,51))",
    ColorFormat.HSL: "HSL (hsl(11,100%,60%))",
}

_FORMAT_EXAMPLES = {
    ColorFormat.HEX: "#FF5733",
    ColorFormat.RGB: "rgb(255,87,51)",
    ColorFormat.HSL: "hsl(11,100%,60%)",
}


class PaletteType(str, Enum):
    """Palette generation strategies."""

    COMPLEMENTARY = "complementary"  # opposite hue
    TRIADIC = "triadic"  # three evenly spaced hues
    MONOCHROMATIC = "monochromatic"  # lightness sweep of one hue

    @property
    def description(self) -> str:
        """Human-readable description."""
        return _PALETTE_DESCRIPTIONS[self]

    @property
    def color_count(self) -> int:
        """Typical number of colors in this palette type."""
        return _PALETTE_COUNTS[self]


_PALETTE_DESCRIPTIONS = {
    PaletteType.COMPLEMENTARY: "Complementary (opposite colors)",
    PaletteType.TRIADIC: "Triadic (three evenly spaced colors)",
    PaletteType.MONOCHROMATIC: "Monochromatic (variations of one hue)",
}

_PALETTE_COUNTS = {
    PaletteType.COMPLEMENTARY: 2,
    PaletteType.TRIADIC: 3,
    PaletteType.MONOCHROMATIC: 5,
}


class ContrastLevel(str, Enum):
    """WCAG 2.x conformance level for a contrast ratio."""

    AAA = "AAA"  # >= 7.0, enhanced contrast
    AA = "AA"  # >= 4.5, normal text
    AA_LARGE = "AA Large"  # >= 3.0, large text only
    FAIL = "Fail"

    @property
    def minimum_ratio(self) -> float:
        """Lowest ratio that reaches this level."""
        return _LEVEL_THRESHOLDS[self]


_LEVEL_THRESHOLDS = {
    ContrastLevel.AAA: 7.0,
    ContrastLevel.AA: 4.5,
    ContrastLevel.AA_LARGE: 3.0,
    ContrastLevel.FAIL: 1.0,
}
