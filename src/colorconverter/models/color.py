"""Numeric color models (RGB and HSL)."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class RGBColor(BaseModel):
    """8-bit RGB color with an alpha channel.

    Channels are clamped into range on construction instead of being
    rejected, so every instance is valid. The model is frozen, which
    also makes it hashable.

    Example:
        >>> RGBColor(red=300, green=-5, blue=51)
        RGBColor(red=255, green=0, blue=51, alpha=1.0)
    """

    model_config = ConfigDict(frozen=True)

    red: int = Field(description="Red (0-255)")
    green: int = Field(description="Green (0-255)")
    blue: int = Field(description="Blue (0-255)")
    alpha: float = Field(default=1.0, description="Alpha (0.0-1.0)")

    @field_validator("red", "green", "blue", mode="before")
    @classmethod
    def clamp_channel(cls, v) -> int:
        """Truncate to int and clamp to 0-255."""
        return int(_clamp(int(v), 0, 255))

    @field_validator("alpha", mode="before")
    @classmethod
    def clamp_alpha(cls, v) -> float:
        """Clamp alpha to 0.0-1.0."""
        return float(_clamp(float(v), 0.0, 1.0))

    @property
    def is_opaque(self) -> bool:
        """True when alpha is exactly 1.0."""
        return self.alpha >= 1.0

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple (alpha dropped)."""
        return (self.red, self.green, self.blue)

    def to_hsl(self) -> "HSLColor":
        """Convert to HSL color space (see :func:`colorconverter.space.rgb_to_hsl`)."""
        from colorconverter.space import rgb_to_hsl

        return rgb_to_hsl(self)


class HSLColor(BaseModel):
    """HSL color with an alpha channel.

    Hue is wrapped into [0, 360) with a positive modulo, so -30 becomes
    330 and 360 becomes 0. Saturation and lightness are percentages
    clamped to [0, 100].
    """

    model_config = ConfigDict(frozen=True)

    hue: float = Field(description="Hue in degrees [0, 360)")
    saturation: float = Field(description="Saturation percent (0-100)")
    lightness: float = Field(description="Lightness percent (0-100)")
    alpha: float = Field(default=1.0, description="Alpha (0.0-1.0)")

    @field_validator("hue", mode="before")
    @classmethod
    def wrap_hue(cls, v) -> float:
        """Wrap hue into [0, 360)."""
        return float(v) % 360.0

    @field_validator("saturation", "lightness", mode="before")
    @classmethod
    def clamp_percent(cls, v) -> float:
        """Clamp saturation and lightness to 0-100."""
        return float(_clamp(float(v), 0.0, 100.0))

    @field_validator("alpha", mode="before")
    @classmethod
    def clamp_alpha(cls, v) -> float:
        """Clamp alpha to 0.0-1.0."""
        return float(_clamp(float(v), 0.0, 1.0))

    def rotate(self, degrees: float) -> "HSLColor":
        """Return a copy with the hue rotated by ``degrees``."""
        return HSLColor(
            hue=self.hue + degrees,
            saturation=self.saturation,
            lightness=self.lightness,
            alpha=self.alpha,
        )

    def with_lightness(self, lightness: float) -> "HSLColor":
        """Return a copy with a different lightness (clamped)."""
        return HSLColor(
            hue=self.hue,
            saturation=self.saturation,
            lightness=lightness,
            alpha=self.alpha,
        )

    def to_rgb(self) -> RGBColor:
        """Convert to RGB color space (see :func:`colorconverter.space.hsl_to_rgb`)."""
        from colorconverter.space import hsl_to_rgb

        return hsl_to_rgb(self)

    def opaque(self) -> "HSLColor":
        """Return a copy with alpha 1.0."""
        return HSLColor(
            hue=self.hue,
            saturation=self.saturation,
            lightness=self.lightness,
        )
