"""Configuration models for the species catalog.

This module contains the Pydantic models used to validate the YAML configuration.
"""

from pydantic import BaseModel, Field, field_validator

from speciescatalog.catalog.controller import MAX_CAPACITY


class LoggingConfig(BaseModel):
    """Structlog-based logging configuration."""

    level: str = "INFO"
    json_logs: bool | None = None  # None = auto-detect based on environment
    include_caller: bool = False  # Include file:line info (useful for debugging)
    extra_fields: dict[str, str] = Field(default_factory=lambda: {"service": "species-catalog"})

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate and normalize the log level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level '{v}'")
        return level


class CatalogConfig(BaseModel):
    """Configuration settings for the species catalog application."""

    # Version tracking
    config_version: str = "1.0.0"

    catalog_name: str = "Species Catalog"
    capacity: int = Field(default=MAX_CAPACITY, ge=1, le=MAX_CAPACITY)

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
