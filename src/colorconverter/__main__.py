"""Main entry point for ``python -m colorconverter``."""

from colorconverter.cli.main import cli

if __name__ == "__main__":
    cli()
