"""Birth date reconstruction from the sex digit and the embedded date digits."""

from __future__ import annotations

from typing import Optional

from cnpcheck.core.types import DigitSequence
from cnpcheck.models.cnp import BirthDate

SEX_DATE_LENGTH = 7

# Sex digit -> century base. 7, 8 and 9 (foreign residents) are handled apart.
CENTURY_BY_SEX_DIGIT: dict[int, int] = {
    1: 1900,
    2: 1900,
    3: 1800,
    4: 1800,
    5: 2000,
    6: 2000,
}

FOREIGN_RESIDENT_SEX_DIGITS = frozenset({7, 8, 9})


def to_digits(code: str) -> DigitSequence:
    """Split an all-digit string into its integer digits."""
    return tuple(ord(ch) - ord("0") for ch in code)


def decode_year(sex_digit: int, yy: int) -> Optional[int]:
    """Map a sex digit and a two-digit year to a full year, or None."""
    if sex_digit in CENTURY_BY_SEX_DIGIT:
        return CENTURY_BY_SEX_DIGIT[sex_digit] + yy
    if sex_digit in FOREIGN_RESIDENT_SEX_DIGITS:
        return 2000 if yy == 0 else 1900 + yy
    return None


def decode_birth_date(digits: DigitSequence) -> Optional[BirthDate]:
    """Decode the first seven digits into a candidate birth date.

    Returns None when the sex digit has no century mapping. Month and day
    are not range-checked.
    """
    if len(digits) < SEX_DATE_LENGTH:
        return None

    year = decode_year(digits[0], digits[1] * 10 + digits[2])
    if year is None:
        return None

    return BirthDate(
        year=year,
        month=digits[3] * 10 + digits[4],
        day=digits[5] * 10 + digits[6],
    )
