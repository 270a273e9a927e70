"""
calrep.format.formatter
-----------------------
Pattern-based text rendering of Republican dates.

Tokens (whole words only):
  dddd  day of the décade (Primidi .. Décadi)
  d     day of the month
  MMMM  month name, MMM abbreviated month name
  yyyy  year in Roman numerals
  HH/H  hour (zero padded / plain), mm minute, ss second

On a complementary day the run of day and month tokens is replaced by the
name of the day, e.g. "Jour de la révolution III".
"""

from __future__ import annotations

import re
from datetime import date
from typing import Dict, Union

import roman

from calrep.core.types import RepublicanDate
from calrep.engines.converter import to_republican
from calrep.format.names import (
    ABBREVIATED_MONTH_NAMES,
    COMPLEMENTARY_DAY_NAMES,
    DAY_NAMES,
    MONTH_NAMES,
)

STANDARD_PATTERNS: Dict[str, str] = {
    "D": "dddd, d. MMMM yyyy",
    "d": "d. MMMM yyyy",
    "G": "d. MMMM yyyy HH:mm:ss",
}

_TOKEN_RE = re.compile(r"\b(dddd|d|MMMM|MMM|yyyy|HH|H|mm|ss)\b")
_DAY_MONTH_SPAN_RE = re.compile(
    r"\b(?:dddd|d|MMMM|MMM)\b(?:[ .,-]*\b(?:dddd|d|MMMM|MMM)\b)*[.,-]?"
)


def roman_year(year: int) -> str:
    return roman.toRoman(year)


def _fields(t: RepublicanDate) -> Dict[str, str]:
    out = {
        "yyyy": roman_year(t.year),
        "HH": f"{t.hour:02d}",
        "H": str(t.hour),
        "mm": f"{t.minute:02d}",
        "ss": f"{t.second:02d}",
    }
    if not t.is_complementary:
        out.update({
            "dddd": DAY_NAMES[t.day_of_week - 1],
            "d": str(t.day),
            "MMMM": MONTH_NAMES[t.month - 1],
            "MMM": ABBREVIATED_MONTH_NAMES[t.month - 1],
        })
    return out


def fill_pattern(pattern: str, t: RepublicanDate) -> str:
    if t.is_complementary:
        name = COMPLEMENTARY_DAY_NAMES[t.day - 1]
        pattern = _DAY_MONTH_SPAN_RE.sub(lambda m: name, pattern)

    fields = _fields(t)
    return _TOKEN_RE.sub(lambda m: fields.get(m.group(0), m.group(0)), pattern)


def format_date(value: Union[RepublicanDate, date], pattern: str = "D") -> str:
    """
    Render a RepublicanDate, or a Gregorian date/datetime converted first.

    `pattern` is a standard pattern name ("D", "d", "G") or a custom pattern.
    """
    if isinstance(value, RepublicanDate):
        t = value
    elif isinstance(value, date):
        t = to_republican(value)
    else:
        raise TypeError(
            f"expected RepublicanDate, date or datetime, got {type(value).__name__}"
        )
    if not pattern:
        pattern = "G"
    return fill_pattern(STANDARD_PATTERNS.get(pattern, pattern), t)
