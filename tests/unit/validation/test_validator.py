"""Tests for the validation facade and detail decoding."""

from __future__ import annotations

import logging
from datetime import date

import pytest

from cnpcheck.core.exceptions import InvalidCnpError
from cnpcheck.models.cnp import FailureReason, Sex, ValidationOutcome
from cnpcheck.validation import parse_cnp, validate

TODAY = date(2026, 10, 18)


def test_documented_example_is_valid():
    assert validate("1800101221144", False, TODAY) == ValidationOutcome.ok()


@pytest.mark.parametrize(
    "candidate",
    ["", "1800101", "18001012211441", "1800101 221144", "abcdefghijklm", None, 1800101221144, "1801301221144"],
)
def test_non_matching_input_is_bad_format(candidate):
    outcome = validate(candidate, True, TODAY)
    assert outcome.reason is FailureReason.BAD_FORMAT
    assert not outcome.valid


def test_leap_day_2000_is_valid():
    assert validate("5000229401231", True, TODAY).valid


def test_leap_day_1900_is_bad_date():
    # checksum digit is correct, so only the date can fail
    assert validate("1000229401232", True, TODAY).reason is FailureReason.BAD_DATE


def test_foreign_resident_year_2000():
    assert validate("7000229401233", True, TODAY).valid


def test_april_31_is_bad_date_even_with_matching_checksum():
    assert validate("1900431401230", True, TODAY).reason is FailureReason.BAD_DATE


def test_month_13_is_rejected_before_checksum():
    assert validate("1801301221144", True, TODAY).reason is FailureReason.BAD_FORMAT


def test_wrong_control_digit_is_bad_checksum():
    assert validate("1800101221145", True, TODAY).reason is FailureReason.BAD_CHECKSUM


class TestFutureDates:
    def test_rejected_when_disallowed(self):
        assert validate("5300101401232", False, TODAY).reason is FailureReason.BAD_DATE

    def test_accepted_when_allowed(self):
        assert validate("5300101401232", True, TODAY).valid

    def test_depends_on_supplied_today(self):
        assert validate("5300101401232", False, date(2030, 1, 1)).valid


def test_repeated_calls_agree():
    first = validate("1800101221145", True, TODAY)
    second = validate("1800101221145", True, TODAY)
    assert first == second


class TestParse:
    def test_decodes_male_born_1980(self):
        details = parse_cnp("1800101221144", True, TODAY)
        assert details.sex is Sex.MALE
        assert details.birth_date == date(1980, 1, 1)
        assert details.county_code == "22"
        assert details.county_name == "Iași"
        assert details.serial == "114"
        assert details.control_digit == 4
        assert not details.foreign_resident

    def test_decodes_female(self):
        details = parse_cnp("2950615123454", True, TODAY)
        assert details.sex is Sex.FEMALE
        assert details.birth_date == date(1995, 6, 15)
        assert details.county_name == "Cluj"

    def test_sex_digit_nine_has_no_sex(self):
        details = parse_cnp("9000229401237", True, TODAY)
        assert details.sex is None
        assert details.foreign_resident
        assert details.birth_date == date(2000, 2, 29)

    def test_invalid_code_raises_with_reason(self):
        with pytest.raises(InvalidCnpError) as excinfo:
            parse_cnp("1800101221145", True, TODAY)
        assert excinfo.value.reason is FailureReason.BAD_CHECKSUM
        assert excinfo.value.cnp == "1800101221145"


def test_rejection_is_logged_without_full_code(caplog):
    with caplog.at_level(logging.DEBUG, logger="cnpcheck.validation.validator"):
        validate("1800101221145", True, TODAY)
    assert "bad_checksum" in caplog.text
    assert "1800101221145" not in caplog.text
