"""Decorators for CLI commands."""

import logging
import sys
from functools import wraps

import click

from colorconverter.exceptions import ColorConverterError, format_error_for_display

logger = logging.getLogger(__name__)


def handle_cli_errors(operation_name: str):
    """
    Report ColorConverterError as a clean message and exit with status 1.

    Other exceptions propagate so genuine bugs keep their traceback.

    Example:
        @handle_cli_errors("convert color")
        def convert_cmd(...):
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except ColorConverterError as e:
                logger.error(f"Failed to {operation_name}: {e.technical_message}")
                user_message, recovery_hint = format_error_for_display(e)
                click.echo(f"ERROR: {user_message}", err=True)
                if recovery_hint:
                    click.echo(f"\n{recovery_hint}", err=True)
                sys.exit(1)
        return wrapper
    return decorator
