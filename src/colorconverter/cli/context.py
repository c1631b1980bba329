"""Per-invocation CLI state shared by commands."""

import logging
from pathlib import Path

import click

from colorconverter.models import ConverterConfig
from colorconverter.models.config import default_config_path

logger = logging.getLogger(__name__)


def config_path(ctx: click.Context) -> Path:
    """Settings file chosen on the command group."""
    obj = ctx.ensure_object(dict)
    return obj.get("config_path") or default_config_path()


def load_config(ctx: click.Context) -> ConverterConfig:
    """Load the settings file once per invocation (defaults if it is missing)."""
    obj = ctx.ensure_object(dict)
    if "config" not in obj:
        path = config_path(ctx)
        obj["config"] = ConverterConfig.load_or_default(path)
        logger.debug(f"Using settings from {path}")
    return obj["config"]
