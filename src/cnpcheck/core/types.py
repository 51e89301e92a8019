"""Type aliases used across cnpcheck."""

from __future__ import annotations

Cnp = str
DigitSequence = tuple[int, ...]
