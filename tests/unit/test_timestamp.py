"""Unit tests for date parsing and long-form date formatting."""

from datetime import date, datetime

import pytest

from sieve.utils.timestamp import format_long_date, now_stamp, parse_iso_date


@pytest.mark.unit
class TestParseIsoDate:
    def test_iso_string(self):
        assert parse_iso_date("2025-10-16") == date(2025, 10, 16)

    def test_iso_string_with_time_component(self):
        assert parse_iso_date("2025-10-16T09:30:00") == date(2025, 10, 16)

    def test_surrounding_whitespace(self):
        assert parse_iso_date("  2025-10-16 ") == date(2025, 10, 16)

    def test_date_object_passes_through(self):
        assert parse_iso_date(date(2024, 2, 29)) == date(2024, 2, 29)

    def test_datetime_is_truncated_to_date(self):
        assert parse_iso_date(datetime(2025, 1, 5, 23, 59)) == date(2025, 1, 5)

    @pytest.mark.parametrize(
        "value",
        [None, "", "not a date", "2025-02-30", "2025-13-01", "16/10/2025", "2025-10", 20251016],
    )
    def test_unusable_values_return_none(self, value):
        assert parse_iso_date(value) is None


@pytest.mark.unit
class TestFormatLongDate:
    def test_lowercase_month_name(self):
        assert format_long_date(date(2025, 10, 16)) == "october 16, 2025"

    def test_day_is_zero_padded(self):
        assert format_long_date(date(2025, 9, 1)) == "september 01, 2025"

    def test_first_and_last_month(self):
        assert format_long_date(date(2024, 1, 31)) == "january 31, 2024"
        assert format_long_date(date(2024, 12, 2)) == "december 02, 2024"


@pytest.mark.unit
def test_now_stamp_shape():
    stamp = now_stamp()
    assert len(stamp) == 15
    assert stamp[8] == "_"
    assert stamp.replace("_", "").isdigit()
