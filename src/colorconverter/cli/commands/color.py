"""Conversion and validation commands."""

import sys
from typing import Optional

import click

from colorconverter.cli.context import load_config
from colorconverter.cli.decorators import handle_cli_errors
from colorconverter.converter import convert as convert_color
from colorconverter.converter import detect_format
from colorconverter.exceptions import InvalidColorError
from colorconverter.models import ColorFormat

FORMAT_CHOICES = [fmt.value for fmt in ColorFormat]


@click.command(name="convert")
@click.argument("color")
@click.option(
    "--to", "-t",
    "target",
    type=click.Choice(FORMAT_CHOICES, case_sensitive=False),
    default=None,
    help="Target format (default: default_format setting, initially hex)",
)
@click.pass_context
@handle_cli_errors("convert color")
def convert(ctx, color: str, target: Optional[str]):
    """Convert COLOR to another format (source format is auto-detected)."""
    settings = load_config(ctx)
    target_format = ColorFormat(target.lower()) if target else settings.default_format

    result = convert_color(color, target_format)
    if result is None:
        raise InvalidColorError(color)

    if target_format == ColorFormat.HEX and not settings.uppercase_hex:
        result = result.lower()
    click.echo(result)


@click.command(name="validate")
@click.argument("colors", nargs=-1, required=True)
def validate(colors: tuple[str, ...]):
    """Check that each of COLORS is a valid HEX, RGB or HSL color."""
    failed = 0
    for color in colors:
        detected = detect_format(color)
        if detected is None:
            failed += 1
            click.echo(f"[FAIL] {color}")
        else:
            click.echo(f"[OK] {color} ({detected.value})")

    if failed:
        click.echo(f"\n{failed} of {len(colors)} color(s) invalid", err=True)
        sys.exit(1)


@click.command(name="formats")
def formats():
    """List supported color formats."""
    click.echo("Supported formats:\n")
    for fmt in ColorFormat:
        alpha = "rgba/hsla variant" if fmt.supports_alpha else "8-digit form"
        click.echo(f"  {fmt.value:<4} {fmt.description}")
        click.echo(f"       example: {fmt.example}")
        click.echo(f"       alpha:   {alpha}")
