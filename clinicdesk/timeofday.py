"""Times of day in hours, minutes and seconds."""

from __future__ import annotations

import datetime as _dt
import functools
import re

_PATTERN = re.compile(r"\s*([+-]?\d+):\s*([+-]?\d+):\s*([+-]?\d+)")


@functools.total_ordering
class Time:
    """A time of day; seconds and minutes overflow into the next unit."""

    __slots__ = ("_hour", "_minute", "_second")

    def __init__(self, hour: int = 0, minute: int = 0, second: int = 0) -> None:
        hour, minute, second = abs(hour), abs(minute), abs(second)
        minute += second // 60
        second %= 60
        hour += minute // 60
        minute %= 60
        self._hour, self._minute, self._second = hour, minute, second

    @classmethod
    def from_seconds(cls, seconds: int) -> Time:
        return cls(0, 0, seconds)

    @classmethod
    def parse(cls, text: str) -> Time:
        """Parse text of the form ``hours:minutes:seconds``."""
        match = _PATTERN.match(text)
        if match is None:
            raise ValueError(f"invalid time: {text!r}")
        hour, minute, second = (int(part) for part in match.groups())
        return cls(hour, minute, second)

    @classmethod
    def now(cls) -> Time:
        """The current local time."""
        current = _dt.datetime.now()
        return cls(current.hour, current.minute, current.second)

    @property
    def hour(self) -> int:
        return self._hour

    @property
    def minute(self) -> int:
        return self._minute

    @property
    def second(self) -> int:
        return self._second

    def to_seconds(self) -> int:
        return self._hour * 3600 + self._minute * 60 + self._second

    def _key(self) -> tuple[int, int, int]:
        return (self._hour, self._minute, self._second)

    def __str__(self) -> str:
        return "%02d:%02d:%02d" % self._key()

    def __repr__(self) -> str:
        return f"Time({self._hour}, {self._minute}, {self._second})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._key() < other._key()

    def __sub__(self, other: object) -> int:
        """Seconds elapsed from ``other`` to this time."""
        if not isinstance(other, Time):
            return NotImplemented
        if self < other:
            raise ValueError("cannot subtract a later time")
        return self.to_seconds() - other.to_seconds()

    def __hash__(self) -> int:
        return hash(self._key())