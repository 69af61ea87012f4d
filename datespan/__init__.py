from .core import covering, difference, flatten
from .errors import IntervalError, InvalidRangeError, MissingArgumentError
from .interval import Interval
from .monthday import MonthDay
from .windows import monthly_window, monthly_windows, window_containing

__all__ = [
    "Interval",
    "MonthDay",
    "IntervalError",
    "InvalidRangeError",
    "MissingArgumentError",
    "flatten",
    "difference",
    "covering",
    "monthly_window",
    "monthly_windows",
    "window_containing",
]
