"""
YAML loading for catalog configuration files.
"""

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class YAMLConfigLoader:
    """Reads configuration mappings from YAML files."""

    @staticmethod
    def load_yaml(path: Path) -> Dict[str, Any]:
        """
        Read a YAML mapping.

        Args:
            path: Configuration file

        Returns:
            The top-level mapping; an empty or comment-only file gives ``{}``

        Raises:
            FileNotFoundError: If ``path`` does not exist
            ConfigurationError: If the file is not valid YAML or its top
                level is not a mapping
        """
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            logger.error(f"Cannot parse {path}: {e}")
            raise ConfigurationError(
                f"Invalid YAML in {path}: {e}", component="YAMLConfigLoader"
            ) from e

        if data is None:
            logger.warning(f"Configuration file {path} is empty")
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Expected a mapping at the top of {path}, got {type(data).__name__}",
                component="YAMLConfigLoader",
            )

        logger.debug(f"Loaded configuration from {path}")
        return data
