"""
Tests for the shared input normalization helpers.
"""
from datetime import date

import pytest

from record_store_api.app.core.validation import (
    nullable_date,
    optional_date,
    optional_string,
    parse_date,
    parse_int,
    required_int,
    required_string,
    string_list,
    unique,
)


class TestStrings:
    def test_required_string_is_trimmed(self):
        assert required_string("  Maria  ", "name is required") == "Maria"

    @pytest.mark.parametrize("value", [None, "", "   ", 42, ["x"]])
    def test_required_string_rejects(self, value):
        with pytest.raises(ValueError, match="name is required"):
            required_string(value, "name is required")

    def test_optional_string_blank_becomes_none(self):
        assert optional_string("   ", "bad") is None
        assert optional_string(None, "bad") is None
        assert optional_string(" a@b.c ", "bad") == "a@b.c"

    def test_optional_string_rejects_other_types(self):
        with pytest.raises(ValueError, match="email must be a string"):
            optional_string(12, "email must be a string (or null)")


class TestNumbers:
    @pytest.mark.parametrize(
        "value, expected",
        [(3, 3), ("7", 7), (" 12 ", 12), (4.0, 4), ("-2", -2)],
    )
    def test_parse_int_accepts_integral_values(self, value, expected):
        assert parse_int(value) == expected

    @pytest.mark.parametrize("value", [True, False, 1.5, "abc", "1.5", None, [], {}])
    def test_parse_int_rejects(self, value):
        assert parse_int(value) is None

    def test_required_int_message(self):
        with pytest.raises(ValueError, match="year is required and must be an integer"):
            required_int("twenty", "year is required and must be an integer")


class TestDates:
    def test_plain_date(self):
        assert parse_date("2025-01-10") == date(2025, 1, 10)

    def test_datetime_keeps_date_part(self):
        assert parse_date("2025-01-10T23:15:00Z") == date(2025, 1, 10)

    @pytest.mark.parametrize("value", ["", "not a date", "2025-13-01", 20250110, None])
    def test_invalid_dates(self, value):
        assert parse_date(value) is None

    def test_optional_date_treats_null_and_blank_as_absent(self):
        assert optional_date(None, "bad") is None
        assert optional_date("", "bad") is None

    def test_optional_date_rejects_garbage(self):
        with pytest.raises(ValueError, match="endDate must be a valid date"):
            optional_date("soon", "endDate must be a valid date (or null)")


class TestLists:
    def test_string_list_drops_blank_and_non_strings(self):
        assert string_list([" a@x.org ", "", "   ", 5, None, "b@x.org"], "bad") == ["a@x.org", "b@x.org"]

    def test_string_list_requires_a_list(self):
        with pytest.raises(ValueError, match="emails must be an array of strings"):
            string_list("a@x.org", "emails must be an array of strings")

    def test_unique_keeps_first_occurrence(self):
        assert unique(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


class TestIntegerRange:
    def test_largest_sqlite_integer_is_accepted(self):
        assert parse_int(2**63 - 1) == 2**63 - 1
        assert parse_int(str(-(2**63))) == -(2**63)

    @pytest.mark.parametrize("value", [2**63, -(2**63) - 1, str(2**63), float(2**64)])
    def test_values_sqlite_cannot_hold_are_rejected(self, value):
        assert parse_int(value) is None

    def test_required_int_reports_overflow_as_invalid(self):
        with pytest.raises(ValueError, match="typeId must be an integer"):
            required_int(2**63, "typeId must be an integer")


def test_nullable_date_only_clears_on_null():
    assert nullable_date(None, "bad") is None
    assert nullable_date("2025-02-01", "bad") == date(2025, 2, 1)
    with pytest.raises(ValueError, match="endDate must be a valid date"):
        nullable_date("", "endDate must be a valid date (or null)")
