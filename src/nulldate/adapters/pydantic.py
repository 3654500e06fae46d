"""pydantic field type for nullable date strings."""

from __future__ import annotations

from typing import Annotated

from pydantic import PlainSerializer, PlainValidator

from nulldate.domain import NullableDateString


def _validate(value: object) -> NullableDateString:
    if isinstance(value, NullableDateString):
        return value
    return NullableDateString.from_json_value(value)


def _serialize(value: NullableDateString) -> str | None:
    return value.to_json_value()


# JSON null or a date string; numbers, objects and other tokens fail validation.
NullableDateField = Annotated[
    NullableDateString,
    PlainValidator(_validate),
    PlainSerializer(_serialize, return_type=str | None),
]

__all__ = ["NullableDateField"]
