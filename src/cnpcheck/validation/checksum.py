"""Control digit computation: weighted sum of the first 12 digits mod 11."""

from __future__ import annotations

from cnpcheck.core.types import DigitSequence

CONTROL_WEIGHTS: tuple[int, ...] = (2, 7, 9, 1, 4, 6, 3, 5, 8, 2, 7, 9)


def compute_control_digit(digits: DigitSequence) -> int:
    """Expected control digit for the first 12 digits of *digits*.

    A remainder of 10 maps to 1. Accepts a 12-digit body or a full code.
    """
    if len(digits) < len(CONTROL_WEIGHTS):
        raise ValueError(
            f"need at least {len(CONTROL_WEIGHTS)} digits, got {len(digits)}"
        )
    remainder = sum(d * w for d, w in zip(digits, CONTROL_WEIGHTS)) % 11
    return 1 if remainder == 10 else remainder


def verify_checksum(digits: DigitSequence) -> bool:
    """True iff the 13th digit equals the computed control digit."""
    if len(digits) != len(CONTROL_WEIGHTS) + 1:
        return False
    return digits[12] == compute_control_digit(digits)
