"""Base exception class for colorconverter.

Malformed colors are not exceptional for the conversion API (it returns
``None``); these errors belong to the command line and settings layers,
which show ``user_message`` and ``recovery_hint`` and log
``technical_message``.
"""

from typing import Optional


class ColorConverterError(Exception):
    """
    Base exception for all colorconverter errors.

    Attributes:
        user_message: Short message shown on the command line
        technical_message: Detail for the log (defaults to user_message)
        recovery_hint: Optional suggestion printed below the message
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message
