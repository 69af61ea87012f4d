"""Exceptions raised when an interval cannot be constructed.

Queries on a constructed interval never raise; every failure here is a
caller input problem surfaced at construction time.
"""


class IntervalError(ValueError):
    """Base class for datespan construction errors."""


class MissingArgumentError(IntervalError):
    """Raised when a required date input is ``None``."""


class InvalidRangeError(IntervalError):
    """Raised when bounds are out of order or otherwise out of range."""
