"""CnpValidatorService: binds settings and a clock to the pure validator."""

from __future__ import annotations

from typing import Optional

from cnpcheck.clock import SystemClock
from cnpcheck.core.config import AppSettings
from cnpcheck.core.protocols import IClock
from cnpcheck.models.cnp import CnpDetails, ValidationOutcome
from cnpcheck.validation import parse_cnp, validate


class CnpValidatorService:
    """Front-end facing wrapper around :func:`cnpcheck.validation.validate`.

    The service holds no validation state; the clock and settings are
    injected at construction time and read on each call.
    """

    def __init__(
        self,
        *,
        settings: Optional[AppSettings] = None,
        clock: Optional[IClock] = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._clock = clock or SystemClock()

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def _resolve_allow_future(self, allow_future_dates: Optional[bool]) -> bool:
        if allow_future_dates is None:
            return self._settings.validation.allow_future_dates
        return allow_future_dates

    def check(
        self, candidate: object, allow_future_dates: Optional[bool] = None
    ) -> ValidationOutcome:
        return validate(
            candidate,
            self._resolve_allow_future(allow_future_dates),
            self._clock.today(),
        )

    def details(
        self, candidate: str, allow_future_dates: Optional[bool] = None
    ) -> CnpDetails:
        """Decode a valid code; raises InvalidCnpError otherwise."""
        return parse_cnp(
            candidate,
            self._resolve_allow_future(allow_future_dates),
            self._clock.today(),
        )
