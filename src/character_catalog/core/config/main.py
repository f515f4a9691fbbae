"""
Main configuration class for the Character Catalog.

Contains the Config class that groups the source, export and monitoring
sections and knows how to build itself from YAML or the environment.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union

from ..exceptions import ConfigurationError
from .base import ENV_PREFIX, Environment
from .runtime import ExportConfig, MonitoringConfig, SourceConfig
from .yaml_loader import YAMLConfigLoader

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """Main configuration class for the Character Catalog."""

    # Environment
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False

    source: SourceConfig = field(default_factory=SourceConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    monitoring: MonitoringConfig = field(default_factory=MonitoringConfig)

    def __post_init__(self) -> None:
        """Apply environment-specific defaults."""
        if self.environment == Environment.PRODUCTION:
            self.monitoring.structured_logging = True
            self.debug = False
        elif self.environment == Environment.TESTING:
            self.debug = True
            self.monitoring.log_level = "DEBUG"

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "Config":
        """Load configuration from YAML file."""
        config_path = Path(config_path)
        data = YAMLConfigLoader.load_yaml(config_path)

        try:
            environment = Environment(data.get("environment", "development"))
        except ValueError as e:
            raise ConfigurationError(
                f"Unknown environment in {config_path}: {data.get('environment')}",
                component="Config",
            ) from e

        source_data = dict(data.get("source") or {})
        export_data = dict(data.get("export") or {})
        monitoring_data = dict(data.get("monitoring") or {})

        if "local_path" in source_data:
            source_data["local_path"] = Path(source_data["local_path"])
        if "exports_dir" in export_data:
            export_data["exports_dir"] = Path(export_data["exports_dir"])

        try:
            return cls(
                environment=environment,
                debug=data.get("debug", False),
                source=SourceConfig(**source_data),
                export=ExportConfig(**export_data),
                monitoring=MonitoringConfig(**monitoring_data),
            )
        except TypeError as e:
            raise ConfigurationError(
                f"Invalid configuration in {config_path}: {e}", component="Config"
            ) from e

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""

        def getenv_bool(name: str, default: bool) -> bool:
            v = os.getenv(ENV_PREFIX + name)
            return default if v is None else v.lower() in {"1", "true", "yes", "on"}

        def getenv_float(name: str, default: float) -> float:
            v = os.getenv(ENV_PREFIX + name)
            if v is None:
                return default
            try:
                return float(v)
            except ValueError as e:
                raise ConfigurationError(
                    f"{ENV_PREFIX + name} must be a number, got {v!r}",
                    component="Config",
                ) from e

        def getenv_str(name: str, default: str) -> str:
            return os.getenv(ENV_PREFIX + name, default)

        try:
            env = Environment(getenv_str("ENV", "development"))
        except ValueError as e:
            raise ConfigurationError(
                f"Unknown environment: {getenv_str('ENV', '')}", component="Config"
            ) from e

        defaults = SourceConfig()
        source = SourceConfig(
            base_url=os.getenv(ENV_PREFIX + "SOURCE__BASE_URL") or None,
            database_name=getenv_str("SOURCE__DATABASE_NAME", defaults.database_name),
            local_path=Path(
                getenv_str("SOURCE__LOCAL_PATH", str(defaults.local_path))
            ),
            timeout_s=getenv_float("SOURCE__TIMEOUT_S", defaults.timeout_s),
            encoding=getenv_str("SOURCE__ENCODING", defaults.encoding),
        )

        export_defaults = ExportConfig()
        export = ExportConfig(
            exports_dir=Path(
                getenv_str("EXPORT__EXPORTS_DIR", str(export_defaults.exports_dir))
            ),
            filename=getenv_str("EXPORT__FILENAME", export_defaults.filename),
            sheet_name=getenv_str("EXPORT__SHEET_NAME", export_defaults.sheet_name),
        )

        monitoring = MonitoringConfig(
            log_level=getenv_str("MONITORING__LOG_LEVEL", "WARNING"),
            structured_logging=getenv_bool("MONITORING__STRUCTURED_LOGGING", False),
        )

        return cls(
            environment=env,
            debug=getenv_bool("DEBUG", False),
            source=source,
            export=export,
            monitoring=monitoring,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data view of the configuration, for display."""
        return {
            "environment": self.environment.value,
            "debug": self.debug,
            "source": {
                "base_url": self.source.base_url,
                "database_name": self.source.database_name,
                "local_path": str(self.source.local_path),
                "timeout_s": self.source.timeout_s,
                "encoding": self.source.encoding,
            },
            "export": {
                "exports_dir": str(self.export.exports_dir),
                "filename": self.export.filename,
                "sheet_name": self.export.sheet_name,
            },
            "monitoring": {
                "log_level": self.monitoring.log_level,
                "structured_logging": self.monitoring.structured_logging,
            },
        }
