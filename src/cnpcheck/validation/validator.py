"""Validation facade: format, then date, then checksum.

The order is fixed so that every code maps to one deterministic failure
reason. Nothing here reads the clock or keeps state between calls.
"""

from __future__ import annotations

import logging
from datetime import date

from cnpcheck.core.exceptions import InvalidCnpError
from cnpcheck.core.logging import mask_cnp
from cnpcheck.models.cnp import CnpDetails, FailureReason, Sex, ValidationOutcome
from cnpcheck.models.counties import COUNTIES
from cnpcheck.validation.checksum import verify_checksum
from cnpcheck.validation.date_decoder import (
    FOREIGN_RESIDENT_SEX_DIGITS,
    decode_birth_date,
    to_digits,
)
from cnpcheck.validation.date_validator import is_valid_birth_date
from cnpcheck.validation.format_matcher import is_valid_format

logger = logging.getLogger(__name__)


def validate(
    candidate: object,
    allow_future_dates: bool,
    today: date,
) -> ValidationOutcome:
    """Validate a candidate CNP against the injected *today*.

    Never raises for malformed input: non-strings and wrong lengths are
    reported as ``bad_format``.
    """
    outcome = _check(candidate, allow_future_dates, today)
    if not outcome.valid:
        logger.debug(
            "CNP rejected: %s",
            outcome.reason,
            extra={"reason": outcome.reason, "masked_cnp": mask_cnp(candidate)},
        )
    return outcome


def _check(candidate: object, allow_future_dates: bool, today: date) -> ValidationOutcome:
    if not is_valid_format(candidate):
        return ValidationOutcome.invalid(FailureReason.BAD_FORMAT)

    digits = to_digits(candidate)  # type: ignore[arg-type]

    birth_date = decode_birth_date(digits)
    if birth_date is None:
        return ValidationOutcome.invalid(FailureReason.BAD_DATE)
    if not is_valid_birth_date(birth_date, allow_future_dates, today):
        return ValidationOutcome.invalid(FailureReason.BAD_DATE)

    if not verify_checksum(digits):
        return ValidationOutcome.invalid(FailureReason.BAD_CHECKSUM)

    return ValidationOutcome.ok()


def parse_cnp(
    candidate: str,
    allow_future_dates: bool,
    today: date,
) -> CnpDetails:
    """Validate *candidate* and decode everything it encodes.

    Raises:
        InvalidCnpError: the code does not validate; ``reason`` says why.
    """
    outcome = validate(candidate, allow_future_dates, today)
    if not outcome.valid:
        raise InvalidCnpError(candidate, outcome.reason)  # type: ignore[arg-type]

    digits = to_digits(candidate)
    birth_date = decode_birth_date(digits)
    assert birth_date is not None

    sex_digit = digits[0]
    sex = None
    if sex_digit != 9:
        sex = Sex.MALE if sex_digit % 2 == 1 else Sex.FEMALE

    county_code = candidate[7:9]
    return CnpDetails(
        cnp=candidate,
        sex=sex,
        foreign_resident=sex_digit in FOREIGN_RESIDENT_SEX_DIGITS,
        birth_date=birth_date.to_date(),
        county_code=county_code,
        county_name=COUNTIES[county_code],
        serial=candidate[9:12],
        control_digit=digits[12],
    )
