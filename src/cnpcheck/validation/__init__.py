"""CNP validation core: pure functions, no I/O, no state."""

from __future__ import annotations

from cnpcheck.validation.checksum import compute_control_digit, verify_checksum
from cnpcheck.validation.date_decoder import decode_birth_date, to_digits
from cnpcheck.validation.date_validator import is_leap_year, is_valid_birth_date
from cnpcheck.validation.format_matcher import is_valid_format, is_valid_prefix
from cnpcheck.validation.validator import parse_cnp, validate

__all__ = [
    "compute_control_digit",
    "decode_birth_date",
    "is_leap_year",
    "is_valid_birth_date",
    "is_valid_format",
    "is_valid_prefix",
    "parse_cnp",
    "to_digits",
    "validate",
    "verify_checksum",
]
