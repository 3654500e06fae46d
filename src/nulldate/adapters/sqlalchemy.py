"""SQLAlchemy column type for nullable date strings."""

from __future__ import annotations

from datetime import date
from typing import Any

from sqlalchemy import Dialect, String, TypeDecorator

from nulldate.domain import NullableDateString, get_default_layout


class NullableDateStringType(TypeDecorator[NullableDateString]):
    """Store a :class:`NullableDateString` in a nullable string column.

    Null instances bind as SQL ``NULL``. Values read back are trusted: any
    non-``NULL`` column value comes back valid without re-parsing.
    """

    impl = String
    cache_ok = True

    def process_bind_param(
        self, value: NullableDateString | None, dialect: Dialect
    ) -> str | None:
        _ = dialect
        if value is None or not value.valid:
            return None
        return value.value

    def process_result_value(self, value: Any, dialect: Dialect) -> NullableDateString:
        _ = dialect
        if value is None:
            return NullableDateString.null()
        if isinstance(value, date):
            return NullableDateString.new(value.strftime(get_default_layout().pattern), True)
        if isinstance(value, bytes):
            return NullableDateString.new(value.decode("utf-8", "surrogateescape"), True)
        return NullableDateString.new(str(value), True)
