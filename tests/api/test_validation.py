"""
Unit tests for the declarative rule sets and violation reporting.
"""

import pytest

from cinema_api.api.models import MovieIn, UserIn
from cinema_api.api.validation import (
    PayloadValidationError,
    Violation,
    collect_violations,
    parse_payload,
    to_violation,
)

VALID_MOVIE = {
    "title": "Metropolis",
    "director": "Fritz Lang",
    "year": 1927,
    "color": False,
    "duration": 153,
}

VALID_USER = {
    "firstname": "Ada",
    "lastname": "Lovelace",
    "email": "ada@example.org",
    "city": "London",
    "language": "English",
}


class TestCollectViolations:

    def test_valid_movie(self):
        assert collect_violations(MovieIn, VALID_MOVIE) == []

    def test_valid_user(self):
        assert collect_violations(UserIn, VALID_USER) == []

    def test_empty_movie_reports_every_field(self):
        violations = collect_violations(MovieIn, {})
        assert [v.path for v in violations] == [
            ["title"], ["director"], ["year"], ["color"], ["duration"]
        ]
        assert violations[0].message == '"title" is required'

    def test_bounds_are_inclusive(self):
        payload = {**VALID_MOVIE, "year": 2024, "duration": 500, "title": "t" * 255}
        assert collect_violations(MovieIn, payload) == []

    def test_string_field_rejects_number(self):
        [violation] = collect_violations(UserIn, {**VALID_USER, "city": 75})
        assert violation == Violation(message='"city" must be a string', path=["city"], type="string_type")

    def test_fractional_duration_rejected(self):
        [violation] = collect_violations(MovieIn, {**VALID_MOVIE, "duration": 90.5})
        assert violation.type == "int_from_float"
        assert violation.message == '"duration" must be an integer'

    @pytest.mark.parametrize("email", ["plain", "a@b", "two@@example.com", "sp ace@example.com"])
    def test_bad_emails(self, email):
        [violation] = collect_violations(UserIn, {**VALID_USER, "email": email})
        assert violation.type == "string_email"

    def test_user_and_movie_rule_sets_differ(self):
        assert collect_violations(UserIn, VALID_MOVIE) != collect_violations(MovieIn, VALID_MOVIE)

    @pytest.mark.parametrize("color", [1, 0, "yes", "no", "on", "off", "1", "t"])
    def test_color_rejects_loose_booleans(self, color):
        [violation] = collect_violations(MovieIn, {**VALID_MOVIE, "color": color})
        assert violation == Violation(message='"color" must be a boolean', path=["color"], type="bool_type")

    @pytest.mark.parametrize("color,expected", [
        (True, True), (False, False), ("true", True), ("False", False), ("  TRUE ", True),
    ])
    def test_color_accepts_boolean_strings(self, color, expected):
        movie = parse_payload(MovieIn, {**VALID_MOVIE, "color": color})
        assert movie.color is expected

    def test_numbers_bounded_below(self):
        violations = collect_violations(MovieIn, {**VALID_MOVIE, "year": -2 ** 64, "duration": -2 ** 53})
        assert [(v.path, v.type) for v in violations] == [
            (["year"], "greater_than_equal"),
            (["duration"], "greater_than_equal"),
        ]
        assert violations[0].message == '"year" must be greater than or equal to -9007199254740991'

    def test_lowest_safe_integer_accepted(self):
        payload = {**VALID_MOVIE, "year": -(2 ** 53 - 1), "duration": -(2 ** 53 - 1)}
        assert collect_violations(MovieIn, payload) == []


class TestParsePayload:

    def test_returns_model(self):
        movie = parse_payload(MovieIn, VALID_MOVIE)
        assert movie.model_dump() == VALID_MOVIE

    def test_raises_with_violations(self):
        with pytest.raises(PayloadValidationError) as excinfo:
            parse_payload(UserIn, {"lastname": "Dujardin"})
        assert len(excinfo.value.violations) == 4


class TestToViolation:

    def test_unknown_type_falls_back_to_pydantic_message(self):
        violation = to_violation({"type": "url_parsing", "loc": ("site",), "msg": "Input should be a valid URL"})
        assert violation.message == '"site" Input should be a valid URL'

    def test_nested_location_uses_last_name(self):
        violation = to_violation({"type": "missing", "loc": ("body", "tags", 0), "msg": "Field required"})
        assert violation.path == ["body", "tags", 0]
        assert violation.message == '"tags" is required'
