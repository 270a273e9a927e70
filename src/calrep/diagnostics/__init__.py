"""Diagnostics package.

- round_trip, new_years_table, pretty_month: plain-text checks, no extras needed
- new_year_drift: plot, requires the diagnostics extras (numpy, matplotlib)
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "new_year_drift"]
