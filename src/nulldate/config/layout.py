"""Date layout configuration."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Final

from nulldate.domain.layout import DEFAULT_DATE_PATTERN, DateLayout, set_default_layout

from .errors import InvalidConfigurationError

log = logging.getLogger(__name__)

DATE_FORMAT_ENV_VAR: Final[str] = "NULLDATE_DATE_FORMAT"


@dataclass(frozen=True, slots=True)
class DateLayoutConfig:
    """Holds the ``strftime`` pattern nullable dates are parsed against."""

    pattern: str = DEFAULT_DATE_PATTERN

    def to_layout(self) -> DateLayout:
        try:
            return DateLayout(self.pattern)
        except ValueError as exc:
            raise InvalidConfigurationError(
                f"Invalid date layout configuration {self.pattern!r}: {exc}"
            ) from exc


def get_date_layout_config() -> DateLayoutConfig:
    """Read the date layout from the environment, falling back to ``%Y-%m-%d``."""
    pattern = os.getenv(DATE_FORMAT_ENV_VAR)
    if pattern is None or not pattern.strip():
        return DateLayoutConfig()
    return DateLayoutConfig(pattern=pattern)


def configure_date_layout(config: DateLayoutConfig | None = None) -> DateLayout:
    """Build the configured layout and install it as the process-wide default.

    Meant to run once at startup, before nullable dates are used concurrently.
    """
    layout_config = config or get_date_layout_config()
    layout = layout_config.to_layout()
    set_default_layout(layout)
    log.info("Nullable dates use layout %r", layout.pattern)
    return layout
