"""Administrative operating windows that straddle calendar-month boundaries.

A window starts on a fixed day of the month and ends the day before that
same day of the following month, e.g. the 16th of January through the 15th
of February. A start day of 1 yields plain calendar months.
"""

import logging
from collections.abc import Iterator
from datetime import date

from dateutil.relativedelta import relativedelta

from datespan.errors import InvalidRangeError, MissingArgumentError
from datespan.interval import Interval
from datespan.util import DEFAULT_WINDOW_START_DAY, MAX_WINDOW_START_DAY, ONE_DAY

logger = logging.getLogger(__name__)

_ONE_MONTH = relativedelta(months=1)


def _check_start_day(start_day: int) -> None:
    if start_day is None:
        logger.debug("rejected window start day None")
        raise MissingArgumentError("Operating window start day is required, got None")
    if not 1 <= start_day <= MAX_WINDOW_START_DAY:
        logger.debug("rejected window start day %r", start_day)
        raise InvalidRangeError(
            f"Operating window start day must be in 1..{MAX_WINDOW_START_DAY}, "
            f"got {start_day}\n"
            f"Hint: Later days do not exist in every month"
        )


def monthly_window(
    year: int, month: int, start_day: int = DEFAULT_WINDOW_START_DAY
) -> Interval:
    """Return the window opening on ``start_day`` of ``year``/``month``.

    Args:
        year: Calendar year the window opens in
        month: Calendar month the window opens in (1-12)
        start_day: Day of the month windows open on (1-28)

    Example:
        >>> str(monthly_window(2024, 12))
        'Interval(2024-12-16→2025-01-15, 31d)'

    Raises:
        MissingArgumentError: If any argument is None
        InvalidRangeError: If ``month`` or ``start_day`` is out of range
    """
    if year is None or month is None:
        logger.debug("rejected window %r-%r", year, month)
        raise MissingArgumentError(
            f"monthly_window() requires a year and month, got {year!r}, {month!r}"
        )
    _check_start_day(start_day)
    if not 1 <= month <= 12:
        logger.debug("rejected window %r-%r", year, month)
        raise InvalidRangeError(
            f"Operating window month must be in 1..12, got {month}"
        )

    opens = date(year, month, start_day)
    return Interval.create(opens, opens + _ONE_MONTH - ONE_DAY)


def window_containing(
    day: date, start_day: int = DEFAULT_WINDOW_START_DAY
) -> Interval:
    """Return the operating window that ``day`` falls in."""
    if day is None:
        logger.debug("rejected window lookup for None")
        raise MissingArgumentError("window_containing() requires a date, got None")
    _check_start_day(start_day)
    opened_in = day if day.day >= start_day else day - _ONE_MONTH
    return monthly_window(opened_in.year, opened_in.month, start_day)


def monthly_windows(
    interval: Interval, start_day: int = DEFAULT_WINDOW_START_DAY
) -> Iterator[Interval]:
    """Yield, in order, every operating window overlapping ``interval``."""
    if interval is None:
        logger.debug("rejected window listing for None")
        raise MissingArgumentError("monthly_windows() requires an interval, got None")
    window = window_containing(interval.start, start_day)

    def generate() -> Iterator[Interval]:
        current = window
        while current.start <= interval.end:
            yield current
            opens = current.start + _ONE_MONTH
            current = monthly_window(opens.year, opens.month, start_day)

    return generate()
