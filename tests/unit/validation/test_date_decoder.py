"""Tests for birth date decoding and century mapping."""

from __future__ import annotations

import pytest

from cnpcheck.models.cnp import BirthDate
from cnpcheck.validation.date_decoder import decode_birth_date, decode_year, to_digits


def test_to_digits_splits_every_position():
    assert to_digits("1800101221144") == (1, 8, 0, 0, 1, 0, 1, 2, 2, 1, 1, 4, 4)


@pytest.mark.parametrize(
    ("sex_digit", "yy", "year"),
    [
        (1, 99, 1999),
        (2, 0, 1900),
        (3, 50, 1850),
        (4, 99, 1899),
        (5, 5, 2005),
        (6, 23, 2023),
        (7, 0, 2000),
        (8, 50, 1950),
        (9, 1, 1901),
    ],
)
def test_century_mapping(sex_digit, yy, year):
    assert decode_year(sex_digit, yy) == year


def test_sex_digit_zero_has_no_century():
    assert decode_year(0, 80) is None
    assert decode_birth_date(to_digits("0800101")) is None


def test_decodes_month_and_day_without_range_checks():
    assert decode_birth_date(to_digits("1801399")) == BirthDate(year=1980, month=13, day=99)


def test_decodes_full_code():
    assert decode_birth_date(to_digits("1800101221144")) == BirthDate(year=1980, month=1, day=1)


def test_too_short_sequence_fails():
    assert decode_birth_date((1, 8, 0)) is None
