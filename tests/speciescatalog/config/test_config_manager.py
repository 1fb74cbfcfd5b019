"""Tests for ConfigManager."""

import pytest
import yaml

from speciescatalog.config import CatalogConfig, ConfigManager


class TestConfigManager:
    """Test ConfigManager functionality."""

    def test_load_config_creates_default_if_missing(self, path_resolver):
        """Should create a default config if the file doesn't exist."""
        config_path = path_resolver.get_speciescatalog_config_path()
        assert not config_path.exists()

        manager = ConfigManager(path_resolver)
        config = manager.load()

        assert isinstance(config, CatalogConfig)
        assert config.config_version == "1.0.0"
        assert config.capacity == 80
        assert config.logging.level == "INFO"
        assert config_path.exists()

    def test_load_config_with_existing_file(self, path_resolver):
        """Should load values from an existing config file."""
        config_path = path_resolver.get_speciescatalog_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        config_data = {
            "config_version": "1.0.0",
            "catalog_name": "Campus Biodiversity",
            "capacity": 10,
            "logging": {"level": "debug", "json_logs": True},
        }
        with open(config_path, "w") as f:
            yaml.dump(config_data, f)

        config = ConfigManager(path_resolver).load()

        assert config.catalog_name == "Campus Biodiversity"
        assert config.capacity == 10
        assert config.logging.level == "DEBUG"
        assert config.logging.json_logs is True

    def test_load_empty_file_uses_defaults(self, path_resolver):
        """Should treat an empty file as all defaults."""
        config_path = path_resolver.get_speciescatalog_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text("")

        config = ConfigManager(path_resolver).load()

        assert config == CatalogConfig()

    @pytest.mark.parametrize("capacity", [0, 81])
    def test_load_rejects_capacity_out_of_bounds(self, path_resolver, capacity):
        """Should raise ValueError naming the offending field."""
        config_path = path_resolver.get_speciescatalog_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(yaml.dump({"capacity": capacity}))

        with pytest.raises(ValueError, match="Configuration validation failed: capacity"):
            ConfigManager(path_resolver).load()

    def test_load_rejects_bad_log_level(self, path_resolver):
        """Should reject unknown log levels."""
        config_path = path_resolver.get_speciescatalog_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(yaml.dump({"logging": {"level": "LOUD"}}))

        with pytest.raises(ValueError, match="logging.level"):
            ConfigManager(path_resolver).load()

    def test_load_rejects_non_mapping(self, path_resolver):
        """Should reject a YAML document that is not a mapping."""
        config_path = path_resolver.get_speciescatalog_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text("- just\n- a list\n")

        with pytest.raises(ValueError, match="must contain a mapping"):
            ConfigManager(path_resolver).load()

    def test_load_rejects_invalid_yaml(self, path_resolver):
        """Should wrap YAML parse errors in ValueError."""
        config_path = path_resolver.get_speciescatalog_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text("capacity: [unclosed\n")

        with pytest.raises(ValueError, match="Could not parse configuration file"):
            ConfigManager(path_resolver).load()

    def test_explicit_config_path(self, tmp_path, path_resolver):
        """Should prefer an explicit path over the resolver."""
        config_path = tmp_path / "custom.yaml"
        config_path.write_text(yaml.dump({"capacity": 5}))

        manager = ConfigManager(path_resolver, config_path=config_path)

        assert manager.load().capacity == 5

    def test_save_config_creates_backup(self, path_resolver):
        """Should back up the existing file before writing."""
        manager = ConfigManager(path_resolver)
        config = manager.load()

        config.catalog_name = "Updated"
        manager.save(config)

        backup_path = manager.config_path.with_suffix(".yaml.backup")
        assert backup_path.exists()
        assert yaml.safe_load(backup_path.read_text())["catalog_name"] == "Species Catalog"
        assert manager.reload().catalog_name == "Updated"

    def test_save_round_trips_logging_settings(self, path_resolver):
        """Should persist nested logging settings."""
        manager = ConfigManager(path_resolver)
        config = CatalogConfig(capacity=12)
        config.logging.include_caller = True

        manager.save(config)

        saved = yaml.safe_load(manager.config_path.read_text())
        assert saved["capacity"] == 12
        assert saved["logging"]["include_caller"] is True
