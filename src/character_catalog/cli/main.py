"""
Main CLI entry point for the Character Catalog.

Provides unified command-line interface with subcommands for the catalog and
its configuration.
"""

import logging
from pathlib import Path
from typing import Optional

import click

from .. import __version__
from ..core.config import Config
from ..core.exceptions import ConfigurationError
from ..core.logging import configure_logging
from .character import character_commands
from .config import config_commands

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", "-d", is_flag=True, help="Enable debug output")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML configuration file (defaults to CHARDB_* environment variables)",
)
@click.pass_context
def cli(
    ctx: click.Context, verbose: bool, debug: bool, config_path: Optional[Path]
) -> None:
    """
    Character Catalog CLI

    Parses the character database, numbers the forms of characters sharing a
    name, and lists, filters, sorts and exports the resulting table.
    """
    # Ensure that ctx.obj exists and is a dict
    ctx.ensure_object(dict)

    try:
        config = Config.from_file(config_path) if config_path else Config.from_env()
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    # Set logging level
    if debug or config.debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    else:
        level = config.monitoring.log_level.upper()
    configure_logging(level, json_format=config.monitoring.structured_logging)
    logging.getLogger().setLevel(getattr(logging, level))

    ctx.obj["config"] = config
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug


@cli.group()
def character() -> None:
    """Character listing, inspection and export commands."""
    pass


@cli.group()
def config() -> None:
    """Configuration commands."""
    pass


# Add all commands from each module to their respective groups
for command in character_commands.commands.values():
    character.add_command(command)
for command in config_commands.commands.values():
    config.add_command(command)


@cli.command()
def info() -> None:
    """Show catalog information."""
    click.echo("Character Catalog")
    click.echo("=" * 30)
    click.echo(f"Version: {__version__}")
    click.echo("Description: Character database parser and table exporter")
    click.echo("\nQuick Start:")
    click.echo("  chardb character list --file database.txt")
    click.echo("  chardb character list --sort averageStats --sort averageStats")
    click.echo("  chardb character show Wolf")
    click.echo("  chardb character export -o characters.xlsx")
    click.echo("  chardb config show")


if __name__ == "__main__":
    cli()
