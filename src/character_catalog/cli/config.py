"""
Configuration commands for the Character Catalog CLI.
"""

import json
import logging
from typing import Optional

import click
import yaml

from .character.helpers import _get_config

logger = logging.getLogger(__name__)


@click.group()
def config_commands() -> None:
    """Configuration commands."""
    pass


@config_commands.command()
@click.option(
    "--format",
    type=click.Choice(["json", "yaml", "table"]),
    default="table",
    help="Output format",
)
@click.option("--section", help="Show specific configuration section")
@click.pass_context
def show(ctx: click.Context, format: str, section: Optional[str]) -> None:
    """Show current configuration."""
    data = _get_config(ctx).to_dict()

    if section:
        if section not in data or not isinstance(data[section], dict):
            click.echo(f"Unknown section: {section}", err=True)
            raise click.Abort()
        data = data[section]

    if format == "json":
        click.echo(json.dumps(data, indent=2, default=str))
    elif format == "yaml":
        click.echo(yaml.dump(data, default_flow_style=False, sort_keys=False))
    else:
        click.echo("Character Catalog Configuration")
        click.echo("=" * 40)
        for key, value in data.items():
            if isinstance(value, dict):
                click.echo(f"{key}:")
                for sub_key, sub_value in value.items():
                    click.echo(f"  {sub_key}: {sub_value}")
            else:
                click.echo(f"{key}: {value}")
