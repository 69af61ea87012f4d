"""Month-and-day values without a year, for intervals that recur annually."""

import calendar
import logging
import re
from dataclasses import dataclass
from datetime import date

from datespan.errors import InvalidRangeError, MissingArgumentError

logger = logging.getLogger(__name__)

# "--MM-DD" (ISO 8601) or the short "MM-DD"
_MONTH_DAY_RE = re.compile(r"^(?:--)?(\d{1,2})-(\d{1,2})$")

# Any leap year works here; it only sizes February at 29 days.
_LEAP_YEAR = 2000


@dataclass(frozen=True, order=True)
class MonthDay:
    month: int
    day: int

    def __post_init__(self) -> None:
        if self.month is None or self.day is None:
            logger.debug("rejected MonthDay(%r, %r)", self.month, self.day)
            raise MissingArgumentError(
                f"MonthDay requires both month and day, "
                f"got month={self.month!r}, day={self.day!r}"
            )
        if not 1 <= self.month <= 12:
            logger.debug("rejected MonthDay(%r, %r)", self.month, self.day)
            raise InvalidRangeError(
                f"MonthDay month must be in 1..12, got {self.month}"
            )
        last_day = calendar.monthrange(_LEAP_YEAR, self.month)[1]
        if not 1 <= self.day <= last_day:
            logger.debug("rejected MonthDay(%r, %r)", self.month, self.day)
            raise InvalidRangeError(
                f"MonthDay day must be in 1..{last_day} for month {self.month}, "
                f"got {self.day}"
            )

    def __str__(self) -> str:
        return f"--{self.month:02d}-{self.day:02d}"

    @classmethod
    def of(cls, day: date) -> "MonthDay":
        """Return the month-day of ``day``, dropping its year."""
        if day is None:
            logger.debug("rejected MonthDay.of(None)")
            raise MissingArgumentError("MonthDay.of() requires a date, got None")
        return cls(day.month, day.day)

    @classmethod
    def parse(cls, text: str) -> "MonthDay":
        """Parse ``--MM-DD`` or ``MM-DD``.

        Raises:
            MissingArgumentError: If ``text`` is None
            InvalidRangeError: If the text is malformed or names no real day
        """
        if text is None:
            logger.debug("rejected MonthDay text None")
            raise MissingArgumentError("MonthDay.parse() requires text, got None")
        match = _MONTH_DAY_RE.match(text.strip())
        if match is None:
            logger.debug("rejected MonthDay text %r", text)
            raise InvalidRangeError(
                f"Cannot parse month-day from {text!r}.\n"
                f"Expected '--MM-DD' or 'MM-DD', e.g. '--11-01'"
            )
        return cls(int(match.group(1)), int(match.group(2)))

    def is_valid_year(self, year: int) -> bool:
        """True unless this is February 29 and ``year`` is not a leap year."""
        return not (self.month == 2 and self.day == 29) or calendar.isleap(year)

    def at_year(self, year: int) -> date:
        """Anchor to ``year``.

        February 29 resolves to February 28 in years without a leap day.
        """
        if year is None:
            logger.debug("rejected MonthDay year None")
            raise MissingArgumentError("MonthDay.at_year() requires a year, got None")
        if not self.is_valid_year(year):
            return date(year, 2, 28)
        return date(year, self.month, self.day)
