from __future__ import annotations

from datetime import date
from typing import Protocol, runtime_checkable

__all__ = ["Clock"]


@runtime_checkable
class Clock(Protocol):
    """Source of "today" for lines typed without a date."""

    def today(self) -> date: ...  # noqa: D401
