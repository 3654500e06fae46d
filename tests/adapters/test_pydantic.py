from __future__ import annotations

import pytest
from pydantic import BaseModel, Field, ValidationError

from nulldate.adapters.pydantic import NullableDateField
from nulldate.domain import NullableDateString


class Person(BaseModel):
    name: str
    birthday: NullableDateField = Field(default_factory=NullableDateString.null)


def test_model_validates_string_and_null() -> None:
    person = Person.model_validate({"name": "Ada", "birthday": "1815-12-10"})
    unknown = Person.model_validate({"name": "Anon", "birthday": None})

    assert person.birthday == NullableDateString.from_string("1815-12-10")
    assert unknown.birthday.is_zero()


def test_missing_field_defaults_to_null() -> None:
    person = Person(name="Anon")

    assert person.birthday == NullableDateString.null()
    assert person.model_dump() == {"name": "Anon", "birthday": None}


def test_unparseable_string_is_null_not_an_error() -> None:
    person = Person.model_validate({"name": "Ada", "birthday": "sometime"})

    assert not person.birthday.valid
    assert person.birthday.value == "sometime"


def test_non_string_token_fails_validation() -> None:
    with pytest.raises(ValidationError, match="couldn't unmarshal JSON"):
        Person.model_validate_json('{"name": "Ada", "birthday": 18151210}')

    with pytest.raises(ValidationError):
        Person.model_validate({"name": "Ada", "birthday": {"year": 1815}})


def test_model_json_round_trip() -> None:
    person = Person(name="Ada", birthday=NullableDateString.new("1815-12-10T08:00:00", True))

    encoded = person.model_dump_json()
    decoded = Person.model_validate_json(encoded)

    assert encoded == '{"name":"Ada","birthday":"1815-12-10"}'
    assert decoded.birthday == NullableDateString.from_string("1815-12-10")


def test_existing_instance_passes_through() -> None:
    trusted = NullableDateString.new("not checked", True)

    person = Person(name="Ada", birthday=trusted)

    assert person.birthday is trusted
