import os
from pathlib import Path


class PathResolver:
    """Central authority for file path resolution in the species catalog.

    Uses environment variables for configuration with sensible defaults.
    Only configuration lives on disk; catalog entries stay in memory.
    """

    def __init__(self) -> None:
        """Initialize PathResolver with environment-based configuration."""
        default_data_dir = Path.home() / ".local" / "share" / "speciescatalog"
        self.data_dir = Path(os.getenv("SPECIESCATALOG_DATA", str(default_data_dir)))

    def get_speciescatalog_config_path(self) -> Path:
        """Get the path to the main configuration file.

        Checks SPECIESCATALOG_CONFIG environment variable first, then falls back to default.
        """
        config_path = os.getenv("SPECIESCATALOG_CONFIG")
        if config_path:
            return Path(config_path)

        return self.data_dir / "config" / "speciescatalog.yaml"

    def get_data_dir(self) -> Path:
        """Get the data directory path."""
        return self.data_dir
