"""Romanian personal numeric code (CNP) validation."""

from __future__ import annotations

from cnpcheck.core.exceptions import CnpCheckError, InvalidCnpError
from cnpcheck.models.cnp import CnpDetails, FailureReason, ValidationOutcome
from cnpcheck.validation import is_valid_format, is_valid_prefix, parse_cnp, validate

__all__ = [
    "CnpCheckError",
    "CnpDetails",
    "FailureReason",
    "InvalidCnpError",
    "ValidationOutcome",
    "is_valid_format",
    "is_valid_prefix",
    "parse_cnp",
    "validate",
]
