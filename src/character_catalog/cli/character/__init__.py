"""
Character catalog commands for the Character Catalog CLI.

Provides Click-based commands for listing, inspecting and exporting characters.
"""

import click

from .management import export, list_characters, show, stats


@click.group()
def character_commands() -> None:
    """Character catalog commands."""
    pass


character_commands.add_command(list_characters)
character_commands.add_command(show)
character_commands.add_command(stats)
character_commands.add_command(export)
