"""Application configuration helpers."""

from __future__ import annotations

from .errors import ConfigurationError, InvalidConfigurationError
from .layout import (
    DATE_FORMAT_ENV_VAR,
    DateLayoutConfig,
    configure_date_layout,
    get_date_layout_config,
)
from .logging import configure_logging

__all__ = [
    "DATE_FORMAT_ENV_VAR",
    "ConfigurationError",
    "DateLayoutConfig",
    "InvalidConfigurationError",
    "configure_date_layout",
    "configure_logging",
    "get_date_layout_config",
]
