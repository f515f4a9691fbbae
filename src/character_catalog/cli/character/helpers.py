"""
Shared helper functions for character CLI commands.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

import click
import yaml

from ...characters import CharacterRecord, ViewState
from ...characters.catalog import Catalog
from ...characters.catalog.import_export.import_export_manager import format_average
from ...characters.loaders import (
    LocalFileDatabaseSource,
    RemoteDatabaseSource,
    local_source_from_config,
    remote_source_from_config,
)
from ...core.config import Config
from ...core.exceptions import ValidationError

logger = logging.getLogger(__name__)

TABLE_HEADERS = [
    "Name",
    "Damage",
    "Defense",
    "Energy Rate",
    "Move Speed",
    "Average",
    "Beast",
]


def source_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add the --url/--file database source options to a command."""
    func = click.option(
        "--file",
        "database_file",
        type=click.Path(dir_okay=False, path_type=Path),
        help="Local database file (fallback when the URL fails)",
    )(func)
    func = click.option(
        "--url", "database_url", help="Remote database URL (overrides config)"
    )(func)
    return func


def view_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add the beast filter and sort options to a command."""
    func = click.option(
        "--sort",
        "sort_fields",
        multiple=True,
        help=(
            "Sort by column (name, damage, defense, energyRate, moveSpeed, "
            "averageStats, beast or 0-6). Repeat a column to flip the direction."
        ),
    )(func)
    func = click.option("--only-beasts", is_flag=True, help="Show only beasts")(func)
    func = click.option("--hide-beasts", is_flag=True, help="Hide beasts")(func)
    return func


def _get_config(ctx: click.Context) -> Config:
    ctx.ensure_object(dict)
    config = ctx.obj.get("config")
    if config is None:
        config = Config.from_env()
        ctx.obj["config"] = config
    return config


def _resolve_sources(
    config: Config, database_url: Optional[str], database_file: Optional[Path]
) -> Tuple[Optional[RemoteDatabaseSource], LocalFileDatabaseSource]:
    remote = remote_source_from_config(config.source)
    if database_url:
        remote = RemoteDatabaseSource(database_url, timeout_s=config.source.timeout_s)

    local = local_source_from_config(config.source)
    if database_file is not None:
        local = LocalFileDatabaseSource(database_file, encoding=config.source.encoding)
    return remote, local


async def _initial_load(
    catalog: Catalog,
    remote: Optional[RemoteDatabaseSource],
    local: LocalFileDatabaseSource,
) -> bool:
    if remote is not None:
        if await catalog.load_database(remote):
            return True
        click.echo(
            f"Automatic loading from {remote.describe()} failed. "
            f"Falling back to {local.describe()}.",
            err=True,
        )
    return await catalog.load_local_file(local)


def _load_catalog(
    ctx: click.Context,
    database_url: Optional[str] = None,
    database_file: Optional[Path] = None,
) -> Catalog:
    """Build a catalog from the configured sources, remote first."""
    config = _get_config(ctx)
    remote, local = _resolve_sources(config, database_url, database_file)
    catalog = Catalog(config.export)

    if not asyncio.run(_initial_load(catalog, remote, local)):
        raise click.ClickException(
            f"Error reading database file {local.describe()}. "
            "Pass --file or --url to choose another source."
        )
    return catalog


def _build_view(
    catalog: Catalog, hide_beasts: bool, only_beasts: bool, sort_fields: Sequence[str]
) -> ViewState:
    """Apply the filter flags and header clicks to a fresh view state."""
    if hide_beasts and only_beasts:
        raise click.UsageError("--hide-beasts and --only-beasts are mutually exclusive")

    view = ViewState()
    if hide_beasts:
        view.toggle_beasts()
    if only_beasts:
        view.toggle_only_beasts()

    for sort_field in sort_fields:
        try:
            catalog.sort(view, sort_field)
        except ValidationError as e:
            raise click.BadParameter(e.message, param_hint="--sort") from e
    return view


def _record_row(record: CharacterRecord) -> List[Any]:
    return [
        record.display_name or record.name,
        record.damage,
        record.defense,
        record.energy_rate,
        record.move_speed,
        format_average(record.average_stats),
        record.beast,
    ]


def _format_character_list(
    characters: Sequence[CharacterRecord], format: str = "table"
) -> str:
    """Format character list for display.

    Structured formats always produce a document, ``[]`` when nothing matches.
    """
    if format == "json":
        return json.dumps([char.to_dict() for char in characters], indent=2)
    elif format == "yaml":
        return yaml.dump(
            [char.to_dict() for char in characters],
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )
    else:  # table format
        if not characters:
            return "No characters found."

        from tabulate import tabulate

        return tabulate(
            [_record_row(char) for char in characters],
            headers=TABLE_HEADERS,
            tablefmt="grid",
        )


def _format_statistics(stats: Dict[str, Any]) -> str:
    """Format catalog statistics for display."""
    lines = [
        "Character Statistics:",
        "=" * 30,
        f"Total Characters: {stats['total_characters']}",
        f"Beasts: {stats['beasts']}",
        f"Non-beasts: {stats['non_beasts']}",
        f"Distinct Names: {stats['distinct_names']}",
        f"Characters With Several Forms: {stats['multi_form_characters']}",
        f"Largest Form Group: {stats['largest_form_group']}",
    ]

    if stats["stats"]:
        lines.append("")
        lines.append("Stat Ranges:")
        for attribute, values in stats["stats"].items():
            lines.append(
                f"  {attribute}: min {values['min']:g}, max {values['max']:g}, "
                f"mean {values['mean']:.2f}"
            )

    return "\n".join(lines)
