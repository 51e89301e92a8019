"""Protocol interfaces for collaborators the validator consumes.

Structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from datetime import date
from typing import Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------

@runtime_checkable
class IClock(Protocol):
    """Source of the current date for the future-date rule."""

    def today(self) -> date: ...
