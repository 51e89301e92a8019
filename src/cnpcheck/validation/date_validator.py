"""Calendar plausibility of a decoded birth date."""

from __future__ import annotations

from datetime import date
from typing import Optional

from cnpcheck.models.cnp import BirthDate

THIRTY_ONE_DAY_MONTHS = frozenset({1, 3, 5, 7, 8, 10, 12})
THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})


def is_leap_year(year: int) -> bool:
    """Gregorian leap rule: 2000 is a leap year, 1900 is not."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> Optional[int]:
    """Number of days in *month* of *year*, or None for a month outside 1-12."""
    if month in THIRTY_ONE_DAY_MONTHS:
        return 31
    if month in THIRTY_DAY_MONTHS:
        return 30
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return None


def is_valid_birth_date(
    birth_date: BirthDate,
    allow_future_dates: bool,
    today: date,
) -> bool:
    """Check that *birth_date* is a real date and, if required, not after *today*."""
    last_day = days_in_month(birth_date.year, birth_date.month)
    if last_day is None:
        return False
    if not 1 <= birth_date.day <= last_day:
        return False

    if not allow_future_dates and birth_date.to_date() > today:
        return False

    return True
