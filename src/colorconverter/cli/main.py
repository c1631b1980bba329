"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from colorconverter import __version__
from colorconverter.models.config import default_config_path

from .commands import config, contrast, convert, formats, palette, validate

logger = logging.getLogger(__name__)

_installed_handlers: list[logging.Handler] = []


def setup_logging(verbose: int, log_file: Optional[Path]) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        log_file: Optional log file path (rotating, always DEBUG)
    """
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [console_handler]

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        # Keeps last 3 files, max 1MB each
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=1024 * 1024,
            backupCount=3
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    # Replace handlers from a previous invocation (tests invoke cli repeatedly)
    root_logger = logging.getLogger()
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(logging.DEBUG if log_file else level)
    for handler in handlers:
        root_logger.addHandler(handler)
        _installed_handlers.append(handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_file}")


@click.group()
@click.version_option(version=__version__, prog_name="colorconverter")
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Also write a DEBUG log to this file'
)
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Settings file (default: $COLORCONVERTER_CONFIG or ~/.colorconverter/config.json)'
)
@click.pass_context
def cli(ctx, verbose: int, log_file: Optional[Path], config_path: Optional[Path]):
    """
    Color Converter - convert HEX, RGB and HSL colors, build palettes and
    check WCAG contrast.

    \b
    Examples:
      # Convert between formats (source format is auto-detected)
      colorconverter convert "#FF5733" --to rgb
      colorconverter convert "rgb(255,87,51)" --to hsl

      # Validate colors
      colorconverter validate "#F57" "hsl(361,0%,0%)"

      # Generate palettes
      colorconverter palette "#3498DB" --type triadic
      colorconverter palette "#3498DB" --type monochromatic --count 7

      # Check contrast
      colorconverter contrast "#777777" "#FFFFFF"
    """
    setup_logging(verbose, log_file)

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path or default_config_path()


cli.add_command(convert)
cli.add_command(validate)
cli.add_command(formats)
cli.add_command(palette)
cli.add_command(contrast)
cli.add_command(config)

if __name__ == "__main__":
    cli()
