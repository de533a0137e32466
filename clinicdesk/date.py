"""Calendar dates kept in day/month/year form."""

from __future__ import annotations

import datetime as _dt
import functools
import re

_DAYS_IN_MONTH = (
    (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31),
    (0, 31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31),
)

_PATTERN = re.compile(r"\s*([+-]?\d+)/\s*([+-]?\d+)/\s*([+-]?\d+)")


def _normalize(day: int, month: int, year: int) -> tuple[int, int, int]:
    """Carry overflowing months into years and overflowing days into months."""
    if month > 12:
        year += month // 12
        month %= 12
    table = _DAYS_IN_MONTH[1 if Date.is_leap_year(year) else 0]
    while day > table[month]:
        day -= table[month]
        month += 1
        if month > 12:
            year += 1
            month = 1
    return day, month, year


@functools.total_ordering
class Date:
    """A calendar date; negative parts are taken as their absolute value."""

    __slots__ = ("_day", "_month", "_year")

    def __init__(self, day: int = 1, month: int = 1, year: int = 1) -> None:
        self._day, self._month, self._year = _normalize(abs(day), abs(month), abs(year))

    @classmethod
    def from_days(cls, days: int) -> Date:
        """Date reached by counting ``days`` days from 1/1/1."""
        date = cls()
        date._day, date._month, date._year = _normalize(abs(days), 1, 1)
        if date._day == 0:
            date._day = 1
        return date

    @classmethod
    def parse(cls, text: str) -> Date:
        """Parse text of the form ``day/month/year``."""
        match = _PATTERN.match(text)
        if match is None:
            raise ValueError(f"invalid date: {text!r}")
        day, month, year = (int(part) for part in match.groups())
        return cls(day, month, year)

    @classmethod
    def today(cls) -> Date:
        """The current local date."""
        now = _dt.date.today()
        return cls(now.day, now.month, now.year)

    @staticmethod
    def is_leap_year(year: int) -> bool:
        return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0

    @property
    def day(self) -> int:
        return self._day

    @property
    def month(self) -> int:
        return self._month

    @property
    def year(self) -> int:
        return self._year

    def _key(self) -> tuple[int, int, int]:
        return (self._year, self._month, self._day)

    def __str__(self) -> str:
        return "%02d/%02d/%d" % (self._day, self._month, self._year)

    def __repr__(self) -> str:
        return f"Date({self._day}, {self._month}, {self._year})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())