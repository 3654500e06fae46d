"""Domain layer: the nullable date string value type and its date layout."""

from __future__ import annotations

from .date_string import DateStringDecodeError, NullableDateString, json_default
from .layout import (
    DEFAULT_DATE_PATTERN,
    DateLayout,
    get_default_layout,
    reset_default_layout,
    set_default_layout,
)

__all__ = [
    "DEFAULT_DATE_PATTERN",
    "DateLayout",
    "DateStringDecodeError",
    "NullableDateString",
    "get_default_layout",
    "json_default",
    "reset_default_layout",
    "set_default_layout",
]
