"""Controlled CNP input field, independent of any GUI toolkit.

Reproduces the behaviour of the desktop form: keystrokes are limited to
digits and at most 13 characters, the submit action is only enabled at
exactly 13 characters, and any edit (or a change of the future-dates
toggle) clears the shown result. Resubmitting the text that was just
verified returns the previous result instead of validating again.
"""

from __future__ import annotations

from typing import Literal, Optional

from cnpcheck.models.cnp import ValidationOutcome
from cnpcheck.services.validator_service import CnpValidatorService
from cnpcheck.validation.format_matcher import CNP_LENGTH, is_valid_prefix

FieldStatus = Literal["empty", "valid", "invalid"]


class CnpInputField:
    def __init__(
        self,
        service: CnpValidatorService,
        *,
        allow_future_dates: Optional[bool] = None,
    ) -> None:
        if allow_future_dates is None:
            allow_future_dates = service.settings.validation.allow_future_dates
        self._service = service
        self._text = ""
        self._allow_future_dates = allow_future_dates
        self._result: Optional[ValidationOutcome] = None
        self._verified_last: Optional[str] = None

    @property
    def text(self) -> str:
        return self._text

    @property
    def result(self) -> Optional[ValidationOutcome]:
        return self._result

    @property
    def submit_enabled(self) -> bool:
        return len(self._text) == CNP_LENGTH

    @property
    def status(self) -> FieldStatus:
        if self._result is None:
            return "empty"
        return "valid" if self._result.valid else "invalid"

    @property
    def allow_future_dates(self) -> bool:
        return self._allow_future_dates

    @allow_future_dates.setter
    def allow_future_dates(self, value: bool) -> None:
        if value != self._allow_future_dates:
            self._allow_future_dates = value
            self._clear()

    def propose(self, new_text: str) -> bool:
        """Apply an edit if the new text is acceptable; return whether it was."""
        if not is_valid_prefix(new_text):
            return False
        if new_text != self._text:
            self._text = new_text
            self._clear()
        return True

    def submit(self) -> Optional[ValidationOutcome]:
        """Validate the current text. None while the submit action is disabled."""
        if not self.submit_enabled:
            return None
        if self._text == self._verified_last:
            return self._result

        self._verified_last = self._text
        self._result = self._service.check(self._text, self._allow_future_dates)
        return self._result

    def _clear(self) -> None:
        self._result = None
        self._verified_last = None
