"""Tests for month-boundary operating windows."""

import logging
from datetime import date

import pytest

from datespan import (
    Interval,
    InvalidRangeError,
    MissingArgumentError,
    monthly_window,
    monthly_windows,
    window_containing,
)


def test_default_window_runs_16th_to_15th():
    assert monthly_window(2024, 1) == Interval.create(
        date(2024, 1, 16), date(2024, 2, 15)
    )


def test_december_window_rolls_into_next_year():
    window = monthly_window(2024, 12)

    assert window == Interval.create(date(2024, 12, 16), date(2025, 1, 15))
    assert window.duration_days() == 31


def test_start_day_one_is_calendar_month():
    assert monthly_window(2024, 2, start_day=1) == Interval.create(
        date(2024, 2, 1), date(2024, 2, 29)
    )
    assert monthly_window(2023, 2, start_day=1).end == date(2023, 2, 28)


def test_window_with_late_start_day():
    assert monthly_window(2024, 1, start_day=28) == Interval.create(
        date(2024, 1, 28), date(2024, 2, 27)
    )


@pytest.mark.parametrize("start_day", [0, 29, 31])
def test_rejects_start_days_missing_from_some_months(start_day):
    with pytest.raises(InvalidRangeError):
        monthly_window(2024, 1, start_day=start_day)


def test_rejects_bad_month_and_missing_year():
    with pytest.raises(InvalidRangeError):
        monthly_window(2024, 13)
    with pytest.raises(MissingArgumentError):
        monthly_window(None, 1)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "day,opens",
    [
        (date(2024, 3, 10), date(2024, 2, 16)),
        (date(2024, 3, 15), date(2024, 2, 16)),
        (date(2024, 3, 16), date(2024, 3, 16)),
        (date(2024, 3, 31), date(2024, 3, 16)),
        (date(2024, 1, 5), date(2023, 12, 16)),
    ],
)
def test_window_containing(day, opens):
    window = window_containing(day)

    assert window.start == opens
    assert window.contains(day)


def test_monthly_windows_cover_interval():
    interval = Interval.create(date(2024, 1, 10), date(2024, 3, 20))

    windows = list(monthly_windows(interval))

    assert [w.start for w in windows] == [
        date(2023, 12, 16),
        date(2024, 1, 16),
        date(2024, 2, 16),
        date(2024, 3, 16),
    ]
    assert all(w.overlaps(interval) for w in windows)
    # consecutive windows tile the calendar without gaps
    assert all(
        (b.start - a.end).days == 1 for a, b in zip(windows, windows[1:])
    )


def test_monthly_windows_single_window():
    interval = Interval.single(date(2024, 6, 20))

    assert list(monthly_windows(interval, start_day=1)) == [
        Interval.create(date(2024, 6, 1), date(2024, 6, 30))
    ]


def test_rejected_month_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="datespan"):
        with pytest.raises(InvalidRangeError):
            monthly_window(2024, 13)
        with pytest.raises(MissingArgumentError):
            monthly_window(2024, 1, start_day=None)  # type: ignore[arg-type]

    assert "rejected window 2024-13" in caplog.text
    assert "rejected window start day None" in caplog.text
