"""Closed date intervals.

An ``Interval`` is the inclusive range ``[start, end]`` over calendar dates.
Every instance satisfies ``start <= end``: the constructor validates its
bounds, so the factories below and direct construction share one path.

Example::

    from datetime import date
    from datespan import Interval, MonthDay

    spring = Interval.create(date(2024, 3, 1), date(2024, 5, 31))
    spring.contains(date(2024, 5, 31))  # True
    spring.duration_days()  # 92

    winter = Interval.recurring_annual(MonthDay(11, 1), MonthDay(2, 28), 2024)
    str(winter)  # Interval(2024-11-01→2025-02-28, 120d)
"""

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Any, Literal

from dateutil.rrule import DAILY, rrule

from datespan.errors import InvalidRangeError, MissingArgumentError
from datespan.monthday import MonthDay
from datespan.util import ISO_SEPARATOR

logger = logging.getLogger(__name__)


def _check_date(value: Any, edge: Literal["start", "end"]) -> None:
    if value is None:
        logger.debug("rejected interval: %s is None", edge)
        raise MissingArgumentError(
            f"Interval {edge} is required, got None.\n"
            f"Example: Interval.create(date(2024, 1, 2), date(2024, 5, 31))"
        )
    # datetime subclasses date but carries a time of day
    if isinstance(value, datetime) or not isinstance(value, date):
        logger.debug("rejected interval %s %r", edge, value)
        raise TypeError(
            f"Interval {edge} must be a datetime.date, "
            f"got {type(value).__name__!r}: {value!r}\n"
            f"Hint: Use dt.date() to drop the time of day from a datetime"
        )


def _parse_date(text: Any, edge: Literal["start", "end"]) -> date:
    if text is None:
        logger.debug("rejected serialized interval: no %s", edge)
        raise MissingArgumentError(f"Serialized interval has no {edge} date")
    if isinstance(text, date) and not isinstance(text, datetime):
        return text
    if not isinstance(text, str):
        logger.debug("rejected serialized interval %s %r", edge, text)
        raise InvalidRangeError(
            f"Interval {edge} must be an ISO date string, "
            f"got {type(text).__name__!r}: {text!r}"
        )
    try:
        return date.fromisoformat(text.strip())
    except ValueError as exc:
        logger.debug("rejected serialized interval %s %r", edge, text)
        raise InvalidRangeError(
            f"Interval {edge} is not an ISO calendar date: {text!r}\n"
            f"Expected 'YYYY-MM-DD', e.g. '2024-01-02'"
        ) from exc


@dataclass(frozen=True, kw_only=True, order=True)
class Interval:
    """An inclusive range of calendar dates.

    Attributes:
        start: First day in the interval.
        end: Last day in the interval, never before ``start``.

    Instances order by ``(start, end)``.
    """

    start: date
    end: date

    def __post_init__(self) -> None:
        _check_date(self.start, "start")
        _check_date(self.end, "end")
        if self.start > self.end:
            logger.debug("rejected interval: %s > %s", self.start, self.end)
            raise InvalidRangeError(
                f"Interval start ({self.start}) must be <= end ({self.end})"
            )

    def __str__(self) -> str:
        """Human-friendly string showing range and duration."""
        return f"Interval({self.start}→{self.end}, {self.duration_days()}d)"

    def __contains__(self, day: date) -> bool:
        return self.contains(day)

    @classmethod
    def create(cls, start: date, end: date) -> "Interval":
        """Build the interval ``[start, end]``.

        Raises:
            MissingArgumentError: If either bound is None
            InvalidRangeError: If ``start`` is after ``end``
        """
        return cls(start=start, end=end)

    @classmethod
    def single(cls, day: date) -> "Interval":
        """Build the one-day interval ``[day, day]``."""
        return cls(start=day, end=day)

    @classmethod
    def recurring_annual(
        cls, start_month_day: MonthDay, end_month_day: MonthDay, year: int
    ) -> "Interval":
        """Resolve a yearly month-day window against ``year``.

        The start is anchored to ``year``. The end is anchored to ``year`` as
        well unless it falls before the start in the calendar, in which case
        the window wraps into ``year + 1``.

        Example:
            >>> Interval.recurring_annual(MonthDay(11, 1), MonthDay(2, 28), 2024)
            Interval(start=datetime.date(2024, 11, 1), end=datetime.date(2025, 2, 28))
        """
        if start_month_day is None or end_month_day is None or year is None:
            logger.debug(
                "rejected recurring interval: %r, %r, %r",
                start_month_day,
                end_month_day,
                year,
            )
            raise MissingArgumentError(
                f"recurring_annual() requires start and end month-days and a year, "
                f"got {start_month_day!r}, {end_month_day!r}, {year!r}"
            )
        end_year = year if end_month_day >= start_month_day else year + 1
        return cls.create(
            start_month_day.at_year(year), end_month_day.at_year(end_year)
        )

    @classmethod
    def parse(cls, text: str) -> "Interval":
        """Parse the ISO 8601 form ``YYYY-MM-DD/YYYY-MM-DD``."""
        if text is None:
            logger.debug("rejected interval text None")
            raise MissingArgumentError("Interval.parse() requires text, got None")
        parts = text.split(ISO_SEPARATOR)
        if len(parts) != 2:
            logger.debug("rejected interval text %r", text)
            raise InvalidRangeError(
                f"Cannot parse interval from {text!r}.\n"
                f"Expected 'YYYY-MM-DD{ISO_SEPARATOR}YYYY-MM-DD', "
                f"e.g. '2024-01-02{ISO_SEPARATOR}2024-05-31'"
            )
        return cls.create(_parse_date(parts[0], "start"), _parse_date(parts[1], "end"))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Interval":
        """Inverse of :meth:`to_dict`; runs the same validation as ``create``."""
        return cls.create(
            _parse_date(data.get("start"), "start"),
            _parse_date(data.get("end"), "end"),
        )

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def overlaps(self, other: "Interval") -> bool:
        """True if the intervals share at least one day, boundaries included."""
        return other.end >= self.start and other.start <= self.end

    def intersect(self, other: "Interval") -> "Interval | None":
        """Return the shared sub-range, or None when the intervals are disjoint."""
        if not self.overlaps(other):
            return None
        return Interval(
            start=max(self.start, other.start), end=min(self.end, other.end)
        )

    def span(self, other: "Interval") -> "Interval":
        """Return the smallest interval covering both."""
        return Interval(
            start=min(self.start, other.start), end=max(self.end, other.end)
        )

    def shift(self, days: int) -> "Interval":
        offset = timedelta(days=days)
        return Interval(start=self.start + offset, end=self.end + offset)

    def duration_days(self) -> int:
        """Number of days covered, counting both endpoints."""
        return (self.end - self.start).days + 1

    def days(self) -> Iterator[date]:
        """Yield every day in the interval in order."""
        rule = rrule(
            DAILY,
            dtstart=datetime.combine(self.start, time.min),
            until=datetime.combine(self.end, time.min),
        )
        return (occurrence.date() for occurrence in rule)

    def to_iso(self) -> str:
        return f"{self.start.isoformat()}{ISO_SEPARATOR}{self.end.isoformat()}"

    def to_dict(self) -> dict[str, str]:
        return {"start": self.start.isoformat(), "end": self.end.isoformat()}
