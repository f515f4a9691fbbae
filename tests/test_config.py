"""
Tests for configuration management.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from character_catalog.core.config import (
    Config,
    Environment,
    ExportConfig,
    SourceConfig,
)
from character_catalog.core.config.yaml_loader import YAMLConfigLoader
from character_catalog.core.exceptions import ConfigurationError


class TestConfig:
    """Test configuration management."""

    def test_config_default_initialization(self) -> None:
        """Test default config initialization."""
        config = Config()
        assert config.environment == Environment.DEVELOPMENT
        assert config.debug is False
        assert config.source.base_url is None
        assert config.source.local_path == Path("database.txt")
        assert config.export.filename == "characters.xlsx"
        assert config.export.sheet_name == "Characters"
        assert config.monitoring.log_level == "WARNING"

    def test_production_defaults(self) -> None:
        """Test production environment defaults."""
        config = Config(environment=Environment.PRODUCTION, debug=True)
        assert config.debug is False
        assert config.monitoring.structured_logging is True

    def test_testing_defaults(self) -> None:
        """Test testing environment defaults."""
        config = Config(environment=Environment.TESTING)
        assert config.debug is True
        assert config.monitoring.log_level == "DEBUG"

    def test_database_url(self) -> None:
        """Test building the remote URL from base URL and file name."""
        assert SourceConfig().database_url is None
        source = SourceConfig(base_url="https://cdn.example/game/")
        assert source.database_url == "https://cdn.example/game/database.txt"

    @patch.dict(
        os.environ,
        {
            "CHARDB_ENV": "production",
            "CHARDB_SOURCE__BASE_URL": "https://cdn.example",
            "CHARDB_SOURCE__DATABASE_NAME": "chars.txt",
            "CHARDB_SOURCE__LOCAL_PATH": "/data/chars.txt",
            "CHARDB_SOURCE__TIMEOUT_S": "2.5",
            "CHARDB_EXPORT__EXPORTS_DIR": "/tmp/exports",
            "CHARDB_EXPORT__SHEET_NAME": "Roster",
            "CHARDB_MONITORING__LOG_LEVEL": "WARNING",
        },
    )
    def test_config_environment_overrides(self) -> None:
        """Test configuration environment variable overrides."""
        config = Config.from_env()

        assert config.environment == Environment.PRODUCTION
        assert config.source.database_url == "https://cdn.example/chars.txt"
        assert config.source.local_path == Path("/data/chars.txt")
        assert config.source.timeout_s == 2.5
        assert config.export.exports_dir == Path("/tmp/exports")
        assert config.export.sheet_name == "Roster"
        assert config.export.filename == "characters.xlsx"
        assert config.monitoring.log_level == "WARNING"
        assert config.monitoring.structured_logging is True

    @patch.dict(os.environ, {"CHARDB_SOURCE__TIMEOUT_S": "soon"})
    def test_invalid_timeout(self) -> None:
        """Test that a non-numeric timeout is a configuration error."""
        with pytest.raises(ConfigurationError):
            Config.from_env()

    @patch.dict(os.environ, {"CHARDB_ENV": "staging"})
    def test_unknown_environment(self) -> None:
        """Test that an unknown environment name is rejected."""
        with pytest.raises(ConfigurationError):
            Config.from_env()

    def test_from_file(self, temp_dir: Path) -> None:
        """Test loading configuration from YAML."""
        path = temp_dir / "chardb.yaml"
        path.write_text(
            "environment: testing\n"
            "source:\n"
            "  base_url: https://cdn.example\n"
            f"  local_path: {temp_dir / 'database.txt'}\n"
            "export:\n"
            f"  exports_dir: {temp_dir / 'out'}\n"
            "  filename: roster.xlsx\n",
            encoding="utf-8",
        )

        config = Config.from_file(path)

        assert config.environment == Environment.TESTING
        assert config.debug is True
        assert config.source.database_url == "https://cdn.example/database.txt"
        assert config.source.local_path == temp_dir / "database.txt"
        assert config.export == ExportConfig(
            exports_dir=temp_dir / "out", filename="roster.xlsx"
        )

    def test_from_file_unknown_key(self, temp_dir: Path) -> None:
        """Test that unknown section keys are reported."""
        path = temp_dir / "chardb.yaml"
        path.write_text("source:\n  colour: blue\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            Config.from_file(path)

    def test_to_dict(self) -> None:
        """Test the display view of the configuration."""
        data = Config().to_dict()
        assert data["environment"] == "development"
        assert set(data) == {"environment", "debug", "source", "export", "monitoring"}
        assert data["source"]["local_path"] == "database.txt"


class TestYAMLConfigLoader:
    """Test YAML loading."""

    def test_missing_file(self, temp_dir: Path) -> None:
        """Test that a missing file raises."""
        with pytest.raises(FileNotFoundError):
            YAMLConfigLoader.load_yaml(temp_dir / "missing.yaml")

    def test_empty_file(self, temp_dir: Path) -> None:
        """Test that an empty file is an empty mapping."""
        path = temp_dir / "empty.yaml"
        path.write_text("# nothing\n", encoding="utf-8")
        assert YAMLConfigLoader.load_yaml(path) == {}

    def test_invalid_yaml(self, temp_dir: Path) -> None:
        """Test that malformed YAML is a configuration error."""
        path = temp_dir / "bad.yaml"
        path.write_text("source: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            YAMLConfigLoader.load_yaml(path)

    def test_non_mapping(self, temp_dir: Path) -> None:
        """Test that a top-level list is rejected."""
        path = temp_dir / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            YAMLConfigLoader.load_yaml(path)
