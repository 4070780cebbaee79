from datetime import date

import pytest

from habit_tracker.dates import resolve_range, to_iso, today_local, validate_iso_date
from habit_tracker.errors import (
    InvalidDate,
    InvalidRange,
    InvalidRangeDays,
    MissingRangeBound,
    ValidationError,
)


def test_validate_iso_date_accepts_calendar_dates():
    assert validate_iso_date("2024-02-29") == date(2024, 2, 29)
    assert validate_iso_date("1999-12-31") == date(1999, 12, 31)


@pytest.mark.parametrize(
    "value",
    ["2024-02-30", "2023-02-29", "2024-13-01", "2024-00-10", "2024-1-05", "20240105",
     "2024-01-05T00:00:00", " 2024-01-05", "", "yesterday", None, 20240105],
)
def test_validate_iso_date_rejects(value):
    with pytest.raises(InvalidDate):
        validate_iso_date(value)


def test_today_local_is_iso_formatted():
    assert today_local() == date.today().isoformat()


def test_to_iso_normalizes_dates_and_strings():
    assert to_iso(date(2024, 3, 7)) == "2024-03-07"
    assert to_iso("2024-03-07 00:00:00") == "2024-03-07"


class TestResolveRange:
    def test_explicit_bounds(self):
        assert resolve_range("2024-01-01", "2024-01-07") == (date(2024, 1, 1), date(2024, 1, 7))

    def test_single_day_range(self):
        assert resolve_range("2024-01-01", "2024-01-01") == (date(2024, 1, 1), date(2024, 1, 1))

    @pytest.mark.parametrize("start,end", [("2024-01-01", None), (None, "2024-01-01")])
    def test_one_bound_missing(self, start, end):
        with pytest.raises(MissingRangeBound):
            resolve_range(start, end)

    def test_start_after_end(self):
        with pytest.raises(InvalidRange) as excinfo:
            resolve_range("2024-01-08", "2024-01-07")
        assert isinstance(excinfo.value, ValidationError)

    def test_invalid_bound(self):
        with pytest.raises(InvalidDate):
            resolve_range("2024-02-30", "2024-03-01")

    def test_default_trailing_fourteen_days(self):
        assert resolve_range(today=date(2024, 3, 14)) == (date(2024, 3, 1), date(2024, 3, 14))

    def test_trailing_days(self):
        assert resolve_range(days=7, today=date(2024, 3, 1)) == (date(2024, 2, 24), date(2024, 3, 1))
        assert resolve_range(days=1, today=date(2024, 3, 1)) == (date(2024, 3, 1), date(2024, 3, 1))

    @pytest.mark.parametrize("days", [0, -3])
    def test_non_positive_days(self, days):
        with pytest.raises(InvalidRangeDays):
            resolve_range(days=days)

    @pytest.mark.parametrize("days", [1_000_000, 10**12])
    def test_days_past_earliest_date(self, days):
        with pytest.raises(InvalidRangeDays):
            resolve_range(days=days, today=date(2024, 3, 1))

    def test_explicit_bounds_win_over_days(self):
        assert resolve_range("2024-01-01", "2024-01-02", days=0) == (date(2024, 1, 1), date(2024, 1, 2))
