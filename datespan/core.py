"""Set arithmetic over collections of intervals.

Callers own their collections (availability lists, exclusion dates and so
on); these helpers take any iterable of intervals and return new lists, so
no caller needs to re-derive merging or subtraction.
"""

from collections.abc import Iterable
from datetime import date

from datespan.interval import Interval
from datespan.util import ONE_DAY


def flatten(intervals: Iterable[Interval]) -> list[Interval]:
    """Coalesce overlapping and adjacent intervals into sorted disjoint spans.

    Days are discrete, so ``[Jan 1, Jan 5]`` and ``[Jan 6, Jan 9]`` merge into
    ``[Jan 1, Jan 9]``.
    """
    merged: list[Interval] = []
    for interval in sorted(intervals):
        if merged and _touches(merged[-1], interval):
            merged[-1] = merged[-1].span(interval)
        else:
            merged.append(interval)
    return merged


def _touches(earlier: Interval, later: Interval) -> bool:
    """True if ``later`` overlaps ``earlier`` or starts the day after it ends."""
    # step back from the later start; date.max has no day after it
    return later.start == date.min or later.start - ONE_DAY <= earlier.end


def difference(
    intervals: Iterable[Interval], excluded: Iterable[Interval]
) -> list[Interval]:
    """Subtract every excluded interval from ``intervals`` using a sweep line.

    Algorithm: Flatten both sides, then for each source span walk the
    exclusions and emit the fragments that fall between them. A cursor tracks
    the first day not yet emitted or carved out.

    The result is sorted, disjoint and covers exactly the days found in
    ``intervals`` but in none of ``excluded``.
    """
    holes = flatten(excluded)
    result: list[Interval] = []
    first_hole = 0

    for interval in flatten(intervals):
        # Skip holes that end before this interval starts
        while first_hole < len(holes) and holes[first_hole].end < interval.start:
            first_hole += 1

        cursor: date | None = interval.start
        for hole in holes[first_hole:]:
            if hole.start > interval.end:
                break
            if hole.start > cursor:
                result.append(Interval(start=cursor, end=hole.start - ONE_DAY))
            if hole.end >= interval.end:
                # hole covers the rest of this interval
                cursor = None
                break
            cursor = max(cursor, hole.end + ONE_DAY)

        if cursor is not None:
            result.append(Interval(start=cursor, end=interval.end))

    return result


def covering(intervals: Iterable[Interval], day: date) -> list[Interval]:
    """Return the intervals containing ``day``, in their original order."""
    return [interval for interval in intervals if interval.contains(day)]
