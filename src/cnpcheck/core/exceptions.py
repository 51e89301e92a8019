"""cnpcheck exception hierarchy."""

from __future__ import annotations

from cnpcheck.core.types import Cnp
from cnpcheck.models.cnp import FailureReason


class CnpCheckError(Exception):
    """Base exception for all cnpcheck errors."""


class InvalidCnpError(CnpCheckError):
    """A code was asked to be decoded but did not validate."""

    def __init__(self, cnp: Cnp, reason: FailureReason) -> None:
        self.cnp = cnp
        self.reason = reason
        super().__init__(f"Invalid CNP ({reason})")
