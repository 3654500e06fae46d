"""Nullable date carried as a string.

``NullableDateString`` keeps an "absent date" state intact across a database
round trip (``NULL`` vs a string column), a JSON round trip (``null`` vs a
string) and a plain-text round trip (blank vs populated).

There are two ways in:

* validating paths (:meth:`NullableDateString.from_string`,
  :meth:`~NullableDateString.from_optional` and the ``load_*`` decoders) parse
  the value against a :class:`~nulldate.domain.layout.DateLayout` and derive
  ``valid`` from the outcome;
* trusted paths (the constructor, :meth:`~NullableDateString.new` and
  :meth:`~NullableDateString.set_valid`) store exactly what they are given. They
  can therefore hold a ``(value, valid)`` pair the layout would reject; nothing
  re-checks it until the next validating call.

A string that does not parse is not an error: it yields an invalid (null)
instance. The only exception raised here is :class:`DateStringDecodeError`, for
JSON input that is neither ``null`` nor a string.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Self

from .layout import resolve_layout

if TYPE_CHECKING:
    from .layout import DateLayout

log = logging.getLogger(__name__)

_JSON_NULL: Final[str] = "null"
_TIME_SEPARATOR: Final[str] = "T"
_TEXT_ENCODING: Final[str] = "utf-8"
_TEXT_ERRORS: Final[str] = "surrogateescape"


class DateStringDecodeError(ValueError):
    """Raised when JSON input for a nullable date is neither ``null`` nor a string."""


@dataclass(eq=False, slots=True)
class NullableDateString:
    """A date string paired with a validity flag; ``valid=False`` means null."""

    value: str = ""
    valid: bool = False

    # Construction -------------------------------------------------------------

    @classmethod
    def new(cls, value: str, valid: bool) -> Self:  # noqa: FBT001
        """Store ``value`` and ``valid`` verbatim, without parsing."""
        return cls(value=value, valid=valid)

    @classmethod
    def null(cls) -> Self:
        return cls(value="", valid=False)

    @classmethod
    def from_string(cls, value: str, *, layout: DateLayout | None = None) -> Self:
        """Parse ``value``; valid and normalized on success, invalid and verbatim otherwise."""
        normalized = resolve_layout(layout).normalize(value)
        if normalized is None:
            log.debug("Date string %r does not match the date layout; treating as null", value)
            return cls(value=value, valid=False)
        return cls(value=normalized, valid=True)

    @classmethod
    def from_optional(cls, value: str | None, *, layout: DateLayout | None = None) -> Self:
        """Like :meth:`from_string`, but ``None`` gives an empty null instance."""
        if value is None:
            return cls.null()
        return cls.from_string(value, layout=layout)

    @classmethod
    def from_json(cls, data: str | bytes, *, layout: DateLayout | None = None) -> Self:
        instance = cls.null()
        instance.load_json(data, layout=layout)
        return instance

    @classmethod
    def from_json_value(cls, obj: object, *, layout: DateLayout | None = None) -> Self:
        instance = cls.null()
        instance.load_json_value(obj, layout=layout)
        return instance

    @classmethod
    def from_text(cls, text: bytes | str, *, layout: DateLayout | None = None) -> Self:
        instance = cls.null()
        instance.load_text(text, layout=layout)
        return instance

    # Validity and extraction ----------------------------------------------------

    def check_valid(self, *, layout: DateLayout | None = None) -> bool:
        """Return whether the stored value currently parses. Does not touch ``valid``."""
        return resolve_layout(layout).is_valid(self.value)

    def value_or_zero(self) -> str:
        if not self.valid:
            return ""
        return self.value

    def ptr(self) -> str | None:
        """Return the value, or ``None`` when this date is null."""
        if not self.valid:
            return None
        return self.value

    def is_zero(self) -> bool:
        return not self.valid

    def set_valid(self, value: str) -> None:
        """Set the value and mark it present. No parsing happens here."""
        self.value = value
        self.valid = True

    # Equality -------------------------------------------------------------------

    def equal(self, other: NullableDateString) -> bool:
        """Two instances are equal when both are null, or both hold the same value."""
        return self.valid == other.valid and (not self.valid or self.value == other.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NullableDateString):
            return NotImplemented
        return self.equal(other)

    # JSON -------------------------------------------------------------------------

    def load_json(self, data: str | bytes, *, layout: DateLayout | None = None) -> None:
        """Decode a JSON ``null`` or string token into this instance.

        ``null`` marks the instance invalid and leaves ``value`` as it was. A string
        is stored as-is and ``valid`` is re-derived from the date layout, so a
        well-formed string that is not a date decodes to an invalid instance.
        """
        try:
            decoded = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DateStringDecodeError(f"couldn't unmarshal JSON: {exc}") from exc
        self.load_json_value(decoded, layout=layout)

    def load_json_value(self, obj: object, *, layout: DateLayout | None = None) -> None:
        """Apply an already-decoded JSON value (``None`` or ``str``) to this instance."""
        if obj is None:
            self.valid = False
            return
        if not isinstance(obj, str):
            log.debug("Rejecting JSON %s for nullable date", type(obj).__name__)
            raise DateStringDecodeError(
                f"couldn't unmarshal JSON: cannot decode {type(obj).__name__} into a date string"
            )
        self.value = obj
        self.valid = self.check_valid(layout=layout)

    def to_json_value(self) -> str | None:
        if not self.valid:
            return None
        return self._date_prefix()

    def to_json(self) -> str:
        """Encode as JSON: ``null`` when invalid, otherwise the date part as a string."""
        json_value = self.to_json_value()
        if json_value is None:
            return _JSON_NULL
        return json.dumps(json_value)

    # Text ---------------------------------------------------------------------------

    def to_text(self) -> bytes:
        """Encode as text: empty when invalid, otherwise the date part."""
        if not self.valid:
            return b""
        return self._date_prefix().encode(_TEXT_ENCODING, _TEXT_ERRORS)

    def load_text(self, text: bytes | str, *, layout: DateLayout | None = None) -> None:
        """Store ``text`` verbatim and derive ``valid`` from the date layout.

        Empty text never parses, so it round-trips back to a null instance.
        """
        if isinstance(text, bytes):
            text = text.decode(_TEXT_ENCODING, _TEXT_ERRORS)
        self.value = text
        self.valid = self.check_valid(layout=layout)

    def _date_prefix(self) -> str:
        # Drops any time-of-day component that may have been stored with the date.
        return self.value.split(_TIME_SEPARATOR, 1)[0]


def json_default(obj: object) -> str | None:
    """``default=`` hook for :func:`json.dumps` that knows how to encode nullable dates."""
    if isinstance(obj, NullableDateString):
        return obj.to_json_value()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
