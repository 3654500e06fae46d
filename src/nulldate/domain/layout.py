"""Date layout used to parse, validate and normalize date strings.

A :class:`DateLayout` wraps a ``strftime``/``strptime`` pattern. Validating
operations on :class:`~nulldate.domain.date_string.NullableDateString` accept an
explicit layout; when none is given they consult the process-wide default held
here. The default is meant to be installed once at startup (see
:func:`nulldate.config.configure_date_layout`) and is not lock protected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Final

log = logging.getLogger(__name__)

DEFAULT_DATE_PATTERN: Final[str] = "%Y-%m-%d"

# Formatted and re-parsed when a layout is built, to reject unusable patterns early.
_REFERENCE_DATE: Final[date] = date(2006, 1, 2)


@dataclass(frozen=True, slots=True)
class DateLayout:
    """A fixed textual date pattern, e.g. ``%Y-%m-%d`` for ``2023-02-14``."""

    pattern: str = DEFAULT_DATE_PATTERN

    def __post_init__(self) -> None:
        if not isinstance(self.pattern, str) or not self.pattern.strip():
            raise ValueError("date layout pattern must be a non-empty string")
        if "%" not in self.pattern:
            raise ValueError(f"date layout pattern {self.pattern!r} has no format directives")
        try:
            datetime.strptime(_REFERENCE_DATE.strftime(self.pattern), self.pattern)
        except ValueError as exc:
            raise ValueError(f"unusable date layout pattern {self.pattern!r}: {exc}") from exc

    def parse(self, value: str) -> date | None:
        """Return the calendar date for ``value``, or ``None`` when it does not parse.

        Parsing is strict: ``value`` must be exactly what the layout renders for that
        date, so unpadded fields (``2023-2-4``) and non-ASCII digits are rejected.
        """
        try:
            parsed = datetime.strptime(value, self.pattern).date()
        except ValueError:
            return None
        if parsed.strftime(self.pattern) != value:
            return None
        return parsed

    def normalize(self, value: str) -> str | None:
        """Return ``value`` re-rendered in this layout, or ``None`` when it does not parse."""
        parsed = self.parse(value)
        if parsed is None:
            return None
        return parsed.strftime(self.pattern)

    def is_valid(self, value: str) -> bool:
        return self.parse(value) is not None


@dataclass(slots=True)
class _LayoutState:
    layout: DateLayout


_state = _LayoutState(layout=DateLayout())


def get_default_layout() -> DateLayout:
    """Return the layout used when a caller does not pass one explicitly."""
    return _state.layout


def set_default_layout(layout: DateLayout) -> DateLayout:
    """Install ``layout`` as the process-wide default and return the previous one.

    Affects every instance constructed or decoded afterwards. Call it during
    startup, before the value type is used from several threads.
    """
    previous = _state.layout
    _state.layout = layout
    if layout != previous:
        log.debug("Default date layout changed from %r to %r", previous.pattern, layout.pattern)
    return previous


def reset_default_layout() -> None:
    set_default_layout(DateLayout())


def resolve_layout(layout: DateLayout | None) -> DateLayout:
    return layout if layout is not None else _state.layout
