"""Tests for exact age computation."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from vaxband.core.age import compute_age, parse_birth_date


def breakdown(age) -> tuple[int, int, int, float]:
    return (age.years, age.months, age.days, age.total_months)


class TestParseBirthDate:
    """Tests for birth date parsing."""

    def test_iso_string(self):
        assert parse_birth_date("2024-06-15") == date(2024, 6, 15)

    def test_surrounding_whitespace(self):
        assert parse_birth_date("  2024-06-15 ") == date(2024, 6, 15)

    def test_date_passthrough(self):
        assert parse_birth_date(date(2001, 2, 3)) == date(2001, 2, 3)

    def test_datetime_uses_calendar_day(self):
        assert parse_birth_date(datetime(2001, 2, 3, 22, 15)) == date(2001, 2, 3)

    @pytest.mark.parametrize(
        "value",
        ["", "not-a-date", "2023-02-30", "2024/06/15", "15-06-2024", "2024-6-5", "2024-13-01", None, 20240615],
    )
    def test_invalid_values(self, value):
        assert parse_birth_date(value) is None


class TestComputeAge:
    """Tests for the calendar difference with borrow and carry."""

    def test_same_day_is_zero(self, reference_date):
        assert breakdown(compute_age("2024-06-15", reference_date)) == (0, 0, 0, 0.0)

    def test_two_months_five_days(self, reference_date):
        assert breakdown(compute_age("2024-04-10", reference_date)) == (0, 2, 5, 2.0)

    def test_exact_eighteenth_birthday(self, reference_date):
        assert breakdown(compute_age("2006-06-15", reference_date)) == (18, 0, 0, 216.0)

    def test_older_adult(self, reference_date):
        assert breakdown(compute_age("1950-01-01", reference_date)) == (74, 5, 14, 893.0)

    def test_future_birth_date_is_invalid(self, reference_date):
        assert compute_age("2030-01-01", reference_date) is None

    def test_day_after_reference_is_invalid(self, reference_date):
        assert compute_age("2024-06-16", reference_date) is None

    def test_unparseable_birth_date_is_invalid(self, reference_date):
        assert compute_age("garbage", reference_date) is None

    def test_borrow_from_31_day_month(self, reference_date):
        # May has 31 days
        assert breakdown(compute_age("2024-04-20", reference_date)) == (0, 1, 26, 1.5)

    def test_borrow_from_leap_february(self):
        age = compute_age("2023-01-30", date(2024, 3, 10))
        assert breakdown(age) == (1, 1, 9, 13.0)

    def test_borrow_from_common_february(self):
        age = compute_age("2022-01-30", date(2023, 3, 10))
        assert breakdown(age) == (1, 1, 8, 13.0)

    def test_january_reference_borrows_december(self):
        age = compute_age("2023-11-20", date(2024, 1, 5))
        assert breakdown(age) == (0, 1, 16, 1.5)

    def test_birth_day_missing_from_borrowed_month(self):
        """Born on the 31st, borrowing a 29-day February."""
        age = compute_age("2024-01-31", date(2024, 3, 1))
        assert breakdown(age) == (0, 1, 1, 1.0)

    def test_birth_day_missing_from_common_february(self):
        age = compute_age("2023-01-31", date(2023, 3, 1))
        assert breakdown(age) == (0, 1, 1, 1.0)

    def test_birth_day_equal_to_borrowed_month_length(self):
        age = compute_age("2024-01-30", date(2024, 3, 1))
        assert breakdown(age) == (0, 1, 0, 1.0)

    def test_half_month_added_at_fifteen_days(self, reference_date):
        assert breakdown(compute_age("2024-05-31", reference_date)) == (0, 0, 15, 0.5)

    def test_no_half_month_below_fifteen_days(self, reference_date):
        assert breakdown(compute_age("2024-06-01", reference_date)) == (0, 0, 14, 0.0)

    def test_datetime_reference_uses_calendar_day(self):
        age = compute_age("2024-06-15", datetime(2024, 6, 15, 23, 59))
        assert breakdown(age) == (0, 0, 0, 0.0)

    def test_accepts_date_objects(self, reference_date):
        assert compute_age(date(2006, 6, 15), reference_date).years == 18

    def test_idempotent(self, reference_date):
        first = compute_age("1987-09-23", reference_date)
        second = compute_age("1987-09-23", reference_date)
        assert first == second

    def test_days_stay_in_range_over_a_leap_year(self):
        reference = date(2024, 3, 1)
        for offset in range(366):
            birth = date.fromordinal(reference.toordinal() - offset)
            age = compute_age(birth, reference)
            assert 0 <= age.days <= 30
            assert 0 <= age.months <= 11
