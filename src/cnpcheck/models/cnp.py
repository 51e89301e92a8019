"""CNP value models: decoded birth date, validation outcome, decoded details."""

from __future__ import annotations

from datetime import date
from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, model_validator


class FailureReason(StrEnum):
    BAD_FORMAT = "bad_format"
    BAD_DATE = "bad_date"
    BAD_CHECKSUM = "bad_checksum"


class Sex(StrEnum):
    MALE = "male"
    FEMALE = "female"


class BirthDate(BaseModel):
    """Candidate (year, month, day) decoded from a code.

    Month and day are kept exactly as encoded and may be out of range until
    the date validator has accepted them.
    """

    model_config = {"frozen": True}

    year: int
    month: int
    day: int

    def to_date(self) -> date:
        """Build a :class:`datetime.date`; raises ``ValueError`` if not a real date."""
        return date(self.year, self.month, self.day)


class ValidationOutcome(BaseModel):
    """Either valid, or invalid with exactly one failure reason."""

    model_config = {"frozen": True}

    valid: bool
    reason: Optional[FailureReason] = None

    @model_validator(mode="after")
    def _reason_matches_validity(self) -> ValidationOutcome:
        if self.valid and self.reason is not None:
            raise ValueError("a valid outcome cannot carry a failure reason")
        if not self.valid and self.reason is None:
            raise ValueError("an invalid outcome needs a failure reason")
        return self

    @classmethod
    def ok(cls) -> ValidationOutcome:
        return cls(valid=True)

    @classmethod
    def invalid(cls, reason: FailureReason) -> ValidationOutcome:
        return cls(valid=False, reason=reason)


class CnpDetails(BaseModel):
    """Everything a valid code encodes."""

    model_config = {"frozen": True}

    cnp: str
    sex: Optional[Sex] = None  # sex digit 9 does not record one
    foreign_resident: bool = False
    birth_date: date
    county_code: str
    county_name: str
    serial: str
    control_digit: int
