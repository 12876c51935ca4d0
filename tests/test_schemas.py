"""Tests for input validation and user-facing messages."""

import pytest
from pydantic import ValidationError

from growthcheck.core.enums import Sex
from growthcheck.schemas.growth import (
    FIELD_MESSAGES,
    MISSING_FIELDS_MESSAGE,
    GrowthInput,
    field_errors,
    first_error_message,
)


def _errors(**overrides):
    data = {"age": 13, "sex": "male", "current_height": 150, "father_height": 175, "mother_height": 160}
    data.update(overrides)
    with pytest.raises(ValidationError) as exc:
        GrowthInput(**data)
    return exc.value.errors()


class TestGrowthInput:
    def test_valid(self, payload):
        data = GrowthInput(**payload)
        assert data.sex == Sex.MALE
        assert data.current_height == 150.0

    @pytest.mark.parametrize(
        "field, value",
        [("age", 8), ("age", 20), ("current_height", 100), ("current_height", 220),
         ("father_height", 140), ("father_height", 220), ("mother_height", 140), ("mother_height", 200)],
    )
    def test_bounds_are_inclusive(self, payload, field, value):
        payload[field] = value
        GrowthInput(**payload)

    def test_coerces_form_strings(self):
        data = GrowthInput.model_validate(
            {"age": "12", "sex": "female", "current_height": "148.5", "father_height": "180", "mother_height": "165"}
        )
        assert data.age == 12
        assert data.current_height == 148.5

    def test_frozen(self, payload):
        data = GrowthInput(**payload)
        with pytest.raises(ValidationError):
            data.age = 14


class TestMessages:
    @pytest.mark.parametrize(
        "field, value",
        [("age", 7), ("age", 21), ("sex", "other"), ("current_height", 99.9),
         ("father_height", 221), ("mother_height", 200.5)],
    )
    def test_message_per_field(self, field, value):
        assert first_error_message(_errors(**{field: value})) == FIELD_MESSAGES[field]

    def test_first_field_in_form_order_wins(self):
        errors = _errors(mother_height=210, age=30)
        assert first_error_message(errors) == FIELD_MESSAGES["age"]
        assert [e["field"] for e in field_errors(errors)] == ["age", "mother_height"]

    def test_request_locations(self):
        errors = [{"loc": ("query", "sex"), "msg": "bad"}, {"loc": ("body", "age"), "msg": "bad"}]
        assert [e["field"] for e in field_errors(errors)] == ["age", "sex"]

    def test_unknown_location(self):
        assert first_error_message([{"loc": ("body",), "msg": "missing"}]) == MISSING_FIELDS_MESSAGE
        assert first_error_message([]) == MISSING_FIELDS_MESSAGE

    def test_messages_mention_bounds(self):
        assert FIELD_MESSAGES["age"] == "Enter an age between 8 and 20 years."
        assert FIELD_MESSAGES["mother_height"] == "Enter your mother's height (between 140 and 200 cm)."
