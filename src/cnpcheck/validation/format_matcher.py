"""Structural grammar of a CNP.

The pattern is a purely syntactic filter: it knows month and day tokens but
not calendars, so day 31 in a 30-day month still matches here.
"""

from __future__ import annotations

import re

CNP_LENGTH = 13

# sex, year, month, day, county, serial, last serial digit, control digit.
# [0-9] instead of \d keeps non-Latin Unicode digits out.
CNP_PATTERN = re.compile(
    r"[1-9][0-9]{2}"
    r"(?:0[1-9]|1[0-2])"
    r"(?:0[1-9]|[12][0-9]|3[01])"
    r"(?:0[1-9]|[1-3][0-9]|4[0-6]|5[12])"
    r"[0-9]{2}[1-9][0-9]"
)

_DIGITS = frozenset("0123456789")


def is_valid_format(candidate: object) -> bool:
    """Return True if *candidate* is a 13-digit string matching the CNP grammar.

    Anything that is not a ``str`` is simply not a match.
    """
    if not isinstance(candidate, str) or len(candidate) != CNP_LENGTH:
        return False
    return CNP_PATTERN.fullmatch(candidate) is not None


def is_valid_prefix(partial: object) -> bool:
    """Return True if *partial* could still be typed into a CNP field.

    Only the character set and the maximum length are checked; input masks
    call this on every keystroke.
    """
    if not isinstance(partial, str) or len(partial) > CNP_LENGTH:
        return False
    return all(ch in _DIGITS for ch in partial)
