"""Contrast command."""

import click

from colorconverter.cli.context import load_config
from colorconverter.cli.decorators import handle_cli_errors
from colorconverter.contrast import contrast_ratio, wcag_level
from colorconverter.converter import is_valid
from colorconverter.exceptions import InvalidColorError


@click.command(name="contrast")
@click.argument("foreground")
@click.argument("background")
@click.pass_context
@handle_cli_errors("calculate contrast")
def contrast(ctx, foreground: str, background: str):
    """Show the WCAG contrast ratio between FOREGROUND and BACKGROUND."""
    settings = load_config(ctx)

    ratio = contrast_ratio(foreground, background)
    if ratio is None:
        raise InvalidColorError(foreground if not is_valid(foreground) else background)

    level = wcag_level(ratio)
    click.echo(f"Contrast ratio: {ratio:.{settings.contrast_precision}f}:1")
    click.echo(f"WCAG level: {level.value}")
