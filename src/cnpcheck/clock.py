"""Clock implementations of :class:`cnpcheck.core.protocols.IClock`."""

from __future__ import annotations

from datetime import date


class SystemClock:
    """Reads the local calendar date on every call."""

    def today(self) -> date:
        return date.today()


class FixedClock:
    """Always returns the same date; for tests and reproducible runs."""

    def __init__(self, today: date) -> None:
        self._today = today

    def today(self) -> date:
        return self._today
