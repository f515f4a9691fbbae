"""
Configuration management for the Character Catalog.

Provides a clean public API for all configuration components.
"""

# Base infrastructure
from .base import (
    DEFAULT_DATABASE_NAME,
    DEFAULT_EXPORT_FILENAME,
    DEFAULT_EXPORT_SHEET,
    Environment,
)

# Main configuration class
from .main import Config

# Runtime configuration
from .runtime import ExportConfig, MonitoringConfig, SourceConfig

# Public API
__all__ = [
    # Main class
    "Config",
    # Base
    "Environment",
    "DEFAULT_DATABASE_NAME",
    "DEFAULT_EXPORT_FILENAME",
    "DEFAULT_EXPORT_SHEET",
    # Runtime
    "ExportConfig",
    "MonitoringConfig",
    "SourceConfig",
]
