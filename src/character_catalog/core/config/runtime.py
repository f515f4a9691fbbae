"""
Runtime configuration for the Character Catalog.

Contains data source, export and monitoring configuration classes.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .base import DEFAULT_DATABASE_NAME, DEFAULT_EXPORT_FILENAME, DEFAULT_EXPORT_SHEET


@dataclass
class SourceConfig:
    """Where the raw character database is read from."""

    # Remote location is base_url + database_name; None disables remote loading
    base_url: Optional[str] = None
    database_name: str = DEFAULT_DATABASE_NAME
    local_path: Path = field(default_factory=lambda: Path(DEFAULT_DATABASE_NAME))
    timeout_s: float = 10.0
    encoding: str = "utf-8"

    @property
    def database_url(self) -> Optional[str]:
        """Full remote URL of the database, if a base URL is configured."""
        if not self.base_url:
            return None
        return f"{self.base_url.rstrip('/')}/{self.database_name}"


@dataclass
class ExportConfig:
    """Spreadsheet export configuration."""

    exports_dir: Path = field(default_factory=lambda: Path.cwd() / "exports")
    filename: str = DEFAULT_EXPORT_FILENAME
    sheet_name: str = DEFAULT_EXPORT_SHEET


@dataclass
class MonitoringConfig:
    """Logging configuration."""

    log_level: str = "WARNING"
    structured_logging: bool = False
