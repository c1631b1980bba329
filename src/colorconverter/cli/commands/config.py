"""
Settings commands.

Commands:
    - config show                 # Display settings
    - config path                 # Print the settings file location
    - config set KEY VALUE        # Update one setting and save
    - config reset [--yes]        # Restore defaults
"""

import logging

import click
from pydantic import ValidationError

from colorconverter.cli.context import config_path, load_config
from colorconverter.cli.decorators import handle_cli_errors
from colorconverter.exceptions import ConfigValidationError, wrap_pydantic_error
from colorconverter.models import ConverterConfig

logger = logging.getLogger(__name__)


@click.group(name="config")
def config():
    """View and change colorconverter settings."""
    pass


@config.command(name="show")
@click.pass_context
@handle_cli_errors("show settings")
def show_config(ctx):
    """Display current settings."""
    settings = load_config(ctx)
    for name, value in settings.model_dump(mode="json").items():
        description = ConverterConfig.model_fields[name].description
        click.echo(f"{name}: {value}")
        click.echo(f"    {description}")


@config.command(name="path")
@click.pass_context
def show_path(ctx):
    """Print the settings file location."""
    path = config_path(ctx)
    suffix = "" if path.exists() else "  (not created yet)"
    click.echo(f"{path}{suffix}")


@config.command(name="set")
@click.argument("key")
@click.argument("value")
@click.pass_context
@handle_cli_errors("update settings")
def set_config(ctx, key: str, value: str):
    """Set KEY to VALUE and save (e.g. 'config set default-format rgb')."""
    field = key.replace("-", "_")
    path = config_path(ctx)

    if field not in ConverterConfig.model_fields:
        raise ConfigValidationError(
            field=field,
            value=value,
            error_msg=f"Unknown setting. Valid settings: {', '.join(ConverterConfig.model_fields)}",
            file_path=str(path),
        )

    current = load_config(ctx)
    try:
        updated = ConverterConfig.model_validate({**current.model_dump(), field: value})
    except ValidationError as e:
        raise wrap_pydantic_error(e, str(path)) from e

    updated.save(path)
    ctx.obj["config"] = updated
    logger.info(f"Set {field}={value} in {path}")
    click.echo(f"[OK] {field} = {updated.model_dump(mode='json')[field]}")


@config.command(name="reset")
@click.option("--yes", "-y", is_flag=True, help="Don't ask for confirmation")
@click.pass_context
@handle_cli_errors("reset settings")
def reset_config(ctx, yes: bool):
    """Restore default settings."""
    path = config_path(ctx)
    if not yes and not click.confirm(f"Reset all settings in {path}?"):
        click.echo("Aborted")
        return

    defaults = ConverterConfig()
    defaults.save(path)
    ctx.obj["config"] = defaults
    click.echo("[OK] Settings reset to defaults")
