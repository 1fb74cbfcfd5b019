"""Structlog-based logging configuration for the species catalog.

Entry points call ``configure_structlog`` once at startup. Library modules keep
using ``logging.getLogger(__name__)`` and end up on the same root handler.

Output format depends on the deployment environment:
- Development: human-readable console output (JSON on request)
- Production: JSON lines, unless the config says otherwise
"""

import logging
import os
import sys
from collections.abc import Callable
from typing import Any

import structlog

from speciescatalog import __version__
from speciescatalog.config.models import CatalogConfig


def get_deployment_environment() -> str:
    """Get deployment environment, defaulting to 'production'."""
    env = os.environ.get("SPECIESCATALOG_ENV", "production").lower()
    return env if env in {"development", "production"} else "production"


def _add_static_context(extra_fields: dict[str, str]) -> Callable:
    """Processor to add static context fields to all log entries."""

    def processor(
        logger: structlog.BoundLogger, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.update(extra_fields)
        return event_dict

    return processor


def _use_json_output(config: CatalogConfig, is_development: bool) -> bool:
    """Decide between JSON and console rendering."""
    if is_development and os.environ.get("SPECIESCATALOG_JSON_LOGS", "false").lower() == "true":
        return True
    if config.logging.json_logs is not None:
        return config.logging.json_logs
    return not is_development


def _configure_processors(config: CatalogConfig) -> list:
    """Build the processors shared by structlog and stdlib records."""
    extra_fields = {
        "service": "species-catalog",
        "version": __version__,
        "deployment": get_deployment_environment(),
        **config.logging.extra_fields,
    }
    if config.catalog_name:
        extra_fields["catalog_name"] = config.catalog_name

    processors = [
        structlog.contextvars.merge_contextvars,
        _add_static_context(extra_fields),
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="ISO"),
    ]

    if config.logging.include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder())

    return processors


def _configure_renderer(config: CatalogConfig, is_development: bool) -> Callable:
    """Pick the final renderer based on environment."""
    if _use_json_output(config, is_development):
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=is_development)


def _configure_handlers(
    config: CatalogConfig, shared_processors: list, renderer: Callable
) -> None:
    """Route the root logger to stderr; stdout belongs to the interactive menu.

    Records from plain ``logging`` loggers go through the shared processors
    first, with their ``extra`` fields lifted into the event, so they render
    exactly like structlog events.
    """
    root_logger = logging.getLogger()
    log_level = getattr(logging, config.logging.level.upper(), logging.INFO)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(log_level)

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[*shared_processors, structlog.stdlib.ExtraAdder()],
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)


def configure_structlog(config: CatalogConfig) -> None:
    """Configure structlog-based logging system.

    Args:
        config: The CatalogConfig instance containing logging settings.
    """
    is_development = get_deployment_environment() == "development"

    shared_processors = _configure_processors(config)
    renderer = _configure_renderer(config, is_development)

    structlog.configure(
        processors=[*shared_processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, config.logging.level.upper(), logging.INFO)
        ),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _configure_handlers(config, shared_processors, renderer)

    logger = structlog.get_logger(__name__)
    logger.debug(
        "Structured logging configured",
        log_level=config.logging.level,
        environment=get_deployment_environment(),
        json_output=_use_json_output(config, is_development),
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured structlog BoundLogger instance
    """
    return structlog.get_logger(name)
