"""
Character catalog commands for the Character Catalog CLI.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Tuple

import click
import yaml

from ...core.exceptions import ExportError
from .helpers import (
    _build_view,
    _format_character_list,
    _format_statistics,
    _load_catalog,
    source_options,
    view_options,
)

logger = logging.getLogger(__name__)


@click.command(name="list")
@source_options
@view_options
@click.option(
    "--format",
    type=click.Choice(["table", "json", "yaml"]),
    default="table",
    help="Output format",
)
@click.pass_context
def list_characters(
    ctx: click.Context,
    database_url: Optional[str],
    database_file: Optional[Path],
    hide_beasts: bool,
    only_beasts: bool,
    sort_fields: Tuple[str, ...],
    format: str,
) -> None:
    """List characters, optionally filtered and sorted."""
    catalog = _load_catalog(ctx, database_url, database_file)
    view = _build_view(catalog, hide_beasts, only_beasts, sort_fields)
    characters = catalog.get_characters(view)

    if format == "table":
        click.echo(f"{catalog.character_count} characters loaded")
    click.echo(_format_character_list(characters, format))


@click.command()
@click.argument("character_name")
@source_options
@click.option(
    "--format",
    type=click.Choice(["json", "yaml"]),
    default="yaml",
    help="Output format",
)
@click.pass_context
def show(
    ctx: click.Context,
    character_name: str,
    database_url: Optional[str],
    database_file: Optional[Path],
    format: str,
) -> None:
    """Show every form of a character."""
    catalog = _load_catalog(ctx, database_url, database_file)
    forms = catalog.get_forms(character_name)

    if not forms:
        click.echo(f"Character '{character_name}' not found.", err=True)
        raise click.Abort()

    character_data = {
        "name": character_name,
        "forms": [form.to_dict() for form in forms],
    }

    if format == "json":
        click.echo(json.dumps(character_data, indent=2))
    else:
        click.echo(
            yaml.dump(character_data, default_flow_style=False, sort_keys=False)
        )


@click.command()
@source_options
@click.pass_context
def stats(
    ctx: click.Context, database_url: Optional[str], database_file: Optional[Path]
) -> None:
    """Show character statistics."""
    catalog = _load_catalog(ctx, database_url, database_file)

    if catalog.character_count == 0:
        click.echo("No characters found.")
        return

    click.echo(_format_statistics(catalog.get_statistics()))


@click.command()
@source_options
@view_options
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Workbook path (defaults to <exports_dir>/characters.xlsx)",
)
@click.option(
    "--visible-only",
    is_flag=True,
    help="Export only the rows left by the beast filter",
)
@click.pass_context
def export(
    ctx: click.Context,
    database_url: Optional[str],
    database_file: Optional[Path],
    hide_beasts: bool,
    only_beasts: bool,
    sort_fields: Tuple[str, ...],
    output: Optional[Path],
    visible_only: bool,
) -> None:
    """Export the character table to an Excel workbook."""
    catalog = _load_catalog(ctx, database_url, database_file)
    view = _build_view(catalog, hide_beasts, only_beasts, sort_fields)

    try:
        output_file = catalog.export_workbook(
            output, view=view if visible_only else None
        )
    except ExportError as e:
        click.echo(f"Error exporting characters: {e.message}", err=True)
        raise click.Abort()

    click.echo(f"✓ Exported characters to {output_file}")
