"""
Injectable clock.

Entries that are created without a date take "today" from a
Clock handed to them, never from a global call, so tests can
pin the date.
"""

import datetime as dt
from abc import ABC, abstractmethod


class Clock(ABC):
    """Source of the current date."""

    @abstractmethod
    def today(self) -> dt.date:
        ...


class SystemClock(Clock):
    """Reads the real calendar date."""

    def today(self) -> dt.date:
        return dt.date.today()


class FixedClock(Clock):
    """
    Test clock that returns the same date until told otherwise.
    """

    def __init__(self, fixed_date: dt.date | None = None):
        self._date = fixed_date or dt.date(2024, 1, 1)

    def today(self) -> dt.date:
        return self._date

    def set_date(self, new_date: dt.date) -> None:
        self._date = new_date

    def advance(self, days: int = 1) -> dt.date:
        self._date = self._date + dt.timedelta(days=days)
        return self._date
