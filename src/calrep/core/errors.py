from __future__ import annotations

from typing import Any, Optional


class CalrepError(Exception):
    """Base error."""


class OutOfRangeError(CalrepError, ValueError):
    """Raised when a date part or an instant lies outside the calendar's bounds."""

    def __init__(
        self,
        field: str,
        value: Any,
        lower: Optional[Any] = None,
        upper: Optional[Any] = None,
        message: Optional[str] = None,
    ):
        self.field = field
        self.value = value
        self.lower = lower
        self.upper = upper
        if message is None:
            if lower is not None and upper is not None:
                message = f"{field} must be between {lower} and {upper}, got {value!r}"
            else:
                message = f"{field} is out of range: {value!r}"
        super().__init__(message)


class InvalidOperationError(CalrepError):
    """Raised when an operation has no meaning for the given date (e.g. months from the complementary days)."""
