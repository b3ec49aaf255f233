from __future__ import annotations

from datetime import date, datetime
from zoneinfo import ZoneInfo

from beancount_shorthand.application.ports import Clock

__all__ = ["SystemClock", "FixedClock"]


class SystemClock(Clock):  # type: ignore[misc]
    """Today's date in the configured time zone (the user's, not the server's)."""

    def __init__(self, timezone: str = "UTC") -> None:
        self._tz = ZoneInfo(timezone)

    def today(self) -> date:  # noqa: D401
        return datetime.now(self._tz).date()


class FixedClock(Clock):  # type: ignore[misc]
    def __init__(self, fixed: date) -> None:
        self._fixed = fixed

    def today(self) -> date:  # noqa: D401
        return self._fixed
