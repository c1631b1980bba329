"""Color input exceptions.

This module defines exceptions raised by the command line layer when the
conversion API reports no result:
- InvalidColorError: Input matches none of the HEX/RGB/HSL grammars
- UnsupportedFormatError: Unknown target format or palette type name
"""

from .base import ColorConverterError


class InvalidColorError(ColorConverterError):
    """Color string is not a valid HEX, RGB or HSL color."""

    def __init__(self, color: str):
        """
        Initialize invalid color error.

        Args:
            color: The rejected input, as given by the user
        """
        super().__init__(
            user_message=f"Invalid color: {color!r}",
            technical_message=f"No color grammar matched input {color!r}",
            recovery_hint=(
                "Use one of the supported formats:\n"
                "  - HEX: #F57, #FF5733, #FF5733CC\n"
                "  - RGB: rgb(255,87,51), rgba(255,87,51,0.8)\n"
                "  - HSL: hsl(11,100%,60%), hsla(11,100%,60%,0.8)\n"
                "Run 'colorconverter formats' for details"
            ),
        )
        self.color = color


class UnsupportedFormatError(ColorConverterError):
    """Requested format or palette type does not exist."""

    def __init__(self, name: str, kind: str, choices: list[str]):
        """
        Initialize unsupported format error.

        Args:
            name: The unknown name
            kind: What was being looked up ("format", "palette type")
            choices: Valid names
        """
        super().__init__(
            user_message=f"Unsupported {kind}: {name!r}",
            recovery_hint=f"Valid choices: {', '.join(choices)}",
        )
        self.name = name
        self.kind = kind
        self.choices = choices
