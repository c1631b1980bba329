"""Command line settings model."""

import os
from pathlib import Path

from pydantic import BaseModel, Field

from colorconverter.utils.persistence import PydanticPersistence

from .enums import ColorFormat

CONFIG_ENV_VAR = "COLORCONVERTER_CONFIG"


def default_config_path() -> Path:
    """Settings file location (``$COLORCONVERTER_CONFIG`` or ~/.colorconverter/config.json)."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".colorconverter" / "config.json"


class ConverterConfig(BaseModel):
    """Defaults used by the command line tool.

    The conversion API does not read this; it only affects what the
    CLI does when an option is omitted and how it displays results.
    """

    default_format: ColorFormat = Field(
        default=ColorFormat.HEX,
        description="Target format for 'convert' when --to is omitted",
    )
    monochromatic_count: int = Field(
        default=5,
        ge=0,
        description="Number of colors for monochromatic palettes when --count is omitted",
    )
    contrast_precision: int = Field(
        default=2,
        ge=0,
        le=15,
        description="Decimal places shown for contrast ratios",
    )
    uppercase_hex: bool = Field(
        default=True,
        description="Display hex output in uppercase (lowercase when false)",
    )

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "ConverterConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default_config_path().

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = default_config_path()
        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = default_config_path()
        PydanticPersistence.save_json(self, path)
