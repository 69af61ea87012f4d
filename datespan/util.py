"""Configuration constants for datespan.

Operating windows start on a fixed day of the month and run until the day
before the same day of the following month.
"""

from datetime import timedelta

# Operating windows: "day 16 of month M through day 15 of month M+1"
DEFAULT_WINDOW_START_DAY = 16
MAX_WINDOW_START_DAY = 28

# ISO 8601 interval form: "2024-01-02/2024-05-31"
ISO_SEPARATOR = "/"

ONE_DAY = timedelta(days=1)
