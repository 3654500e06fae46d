from __future__ import annotations

from importlib import metadata

from nulldate.domain import (
    DateLayout,
    DateStringDecodeError,
    NullableDateString,
    get_default_layout,
    json_default,
    set_default_layout,
)

try:
    __version__ = metadata.version("nulldate")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "DateLayout",
    "DateStringDecodeError",
    "NullableDateString",
    "__version__",
    "get_default_layout",
    "json_default",
    "set_default_layout",
]
