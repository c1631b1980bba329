"""Palette command."""

from typing import Optional

import click

from colorconverter.cli.context import load_config
from colorconverter.cli.decorators import handle_cli_errors
from colorconverter.converter import is_valid
from colorconverter.exceptions import InvalidColorError
from colorconverter.models import PaletteType
from colorconverter.palette import generate_palette


@click.command(name="palette")
@click.argument("color")
@click.option(
    "--type", "-T",
    "palette_type",
    type=click.Choice([p.value for p in PaletteType], case_sensitive=False),
    default=PaletteType.COMPLEMENTARY.value,
    show_default=True,
    help="Palette strategy",
)
@click.option(
    "--count", "-n",
    type=click.IntRange(min=0),
    default=None,
    help="Colors in a monochromatic palette (default: monochromatic_count setting)",
)
@click.pass_context
@handle_cli_errors("generate palette")
def palette(ctx, color: str, palette_type: str, count: Optional[int]):
    """Generate a palette from COLOR, one hex color per line."""
    settings = load_config(ctx)
    if not is_valid(color):
        raise InvalidColorError(color)

    kind = PaletteType(palette_type.lower())
    if kind == PaletteType.MONOCHROMATIC and count is None:
        count = settings.monochromatic_count

    for entry in generate_palette(color, kind, count):
        click.echo(entry if settings.uppercase_hex else entry.lower())
