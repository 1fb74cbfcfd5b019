"""Configuration management backed by a YAML file."""

import logging
import shutil
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from speciescatalog.config.models import CatalogConfig
from speciescatalog.system.path_resolver import PathResolver

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages configuration loading and saving."""

    CURRENT_VERSION = "1.0.0"

    def __init__(self, path_resolver: PathResolver | None = None, config_path: Path | None = None):
        """Initialize ConfigManager.

        Args:
            path_resolver: Optional PathResolver instance. If None, creates a new one.
            config_path: Explicit config file path, overriding the resolver.
        """
        self.path_resolver = path_resolver or PathResolver()
        self.config_path = config_path or self.path_resolver.get_speciescatalog_config_path()

    def load(self) -> CatalogConfig:
        """Load and validate configuration.

        Returns:
            CatalogConfig: Loaded and validated configuration

        Raises:
            ValueError: If the file content does not validate
        """
        self._ensure_config_exists()
        raw_config = self._read_yaml()
        raw_config.setdefault("config_version", self.CURRENT_VERSION)

        try:
            return CatalogConfig.model_validate(raw_config)
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors()
            ]
            raise ValueError(f"Configuration validation failed: {', '.join(errors)}") from e

    def save(self, config: CatalogConfig) -> None:
        """Save configuration to file with backup.

        Args:
            config: Configuration to save

        Raises:
            PermissionError: If config file cannot be written
        """
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        if self.config_path.exists():
            backup_path = self.config_path.with_suffix(".yaml.backup")
            try:
                shutil.copy2(self.config_path, backup_path)
            except PermissionError:
                logger.warning("Could not create backup at %s", backup_path)

        config_yaml = yaml.dump(config.model_dump(), default_flow_style=False, sort_keys=False)
        self.config_path.write_text(config_yaml)
        logger.info("Configuration saved successfully to %s", self.config_path)

    def reload(self) -> CatalogConfig:
        """Reload configuration from disk."""
        return self.load()

    def _ensure_config_exists(self) -> None:
        """Create the config file from defaults if it is missing."""
        if self.config_path.exists():
            return

        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        defaults = CatalogConfig(config_version=self.CURRENT_VERSION).model_dump()
        self.config_path.write_text(yaml.dump(defaults, default_flow_style=False, sort_keys=False))
        logger.info("Created default configuration at %s", self.config_path)

    def _read_yaml(self) -> dict[str, Any]:
        """Read YAML config file.

        Returns:
            dict: Raw configuration dictionary (empty for an empty file)

        Raises:
            ValueError: If the file is not a YAML mapping
        """
        try:
            data = yaml.safe_load(self.config_path.read_text())
        except yaml.YAMLError as e:
            raise ValueError(f"Could not parse configuration file {self.config_path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Configuration file {self.config_path} must contain a mapping")
        return data
