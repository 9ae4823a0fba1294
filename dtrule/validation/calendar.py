"""Gregorian calendar checks for parsed date fields."""
from __future__ import annotations

MIN_YEAR = 0
MAX_YEAR = 9999

# Index 0 unused so month numbers index directly.
_DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Divisible by 4, except centuries not divisible by 400."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month. Raises ValueError for months outside 1..12."""
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be in 1..12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month]


def is_valid_date(year: int, month: int, day: int) -> bool:
    """Check that (year, month, day) names a real day of the Gregorian calendar."""
    if not MIN_YEAR <= year <= MAX_YEAR:
        return False
    if not 1 <= month <= 12:
        return False
    return 1 <= day <= days_in_month(year, month)
