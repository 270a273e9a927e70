from __future__ import annotations
from dataclasses import dataclass, field
from datetime import time

from . import rules


@dataclass(frozen=True, order=True)
class RepublicanDate:
    """
    A date and time of day in the French Republican calendar.

    Month 13 holds the complementary days. Every field is validated once,
    at construction, in the order era, year, month, day, hour, minute,
    second, millisecond.
    """
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0
    era: int = field(default=rules.ERA, compare=False)

    def __post_init__(self) -> None:
        rules.validate_day(self.year, self.month, self.day, self.era)
        rules.validate_time(self.hour, self.minute, self.second, self.millisecond)

    @property
    def time_of_day(self) -> time:
        return time(self.hour, self.minute, self.second, self.millisecond * 1000)

    @property
    def is_complementary(self) -> bool:
        return self.month == rules.COMPLEMENTARY_MONTH

    @property
    def is_leap_day(self) -> bool:
        return rules.is_leap_day(self.year, self.month, self.day, self.era)

    @property
    def day_of_year(self) -> int:
        return rules.MONTH_LENGTH * (self.month - 1) + self.day

    @property
    def week_of_year(self) -> int:
        """Décade of the year, 1..36; the complementary days form décade 37."""
        return 3 * (self.month - 1) + (self.day - 1) // rules.DECADE_LENGTH + 1

    @property
    def day_of_week(self) -> int:
        """Day within the décade, 1 (primidi) .. 10 (décadi)."""
        return (self.day - 1) % rules.DECADE_LENGTH + 1
