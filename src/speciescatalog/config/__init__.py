"""Species catalog configuration package.

This package provides configuration management with:
- Pydantic validation of every setting
- Defaults written on first run
- YAML parsing and serialization
"""

from .manager import ConfigManager
from .models import CatalogConfig, LoggingConfig

__all__ = [
    "CatalogConfig",
    "ConfigManager",
    "LoggingConfig",
]
