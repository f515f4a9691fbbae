"""
Base configuration infrastructure for the Character Catalog.

Contains shared constants and the Environment enum.
"""

import logging
from enum import Enum

logger = logging.getLogger(__name__)

# Default data source and export constants
DEFAULT_DATABASE_NAME = "database.txt"
DEFAULT_EXPORT_FILENAME = "characters.xlsx"
DEFAULT_EXPORT_SHEET = "Characters"

ENV_PREFIX = "CHARDB_"


class Environment(Enum):
    """Environment types for configuration."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"
