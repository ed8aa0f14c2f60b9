"""Modification dates and their rendering in several styles."""

from __future__ import annotations

import functools
import os
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_WEEK = 7 * _DAY
_MONTH = 30 * _DAY
_YEAR = 365 * _DAY

# 365.2425 days per year, halved.
_SIX_MONTHS = timedelta(seconds=15_778_476)


class DateStyle(Enum):
    """How a date is written."""

    DATE = "date"
    RELATIVE = "relative"
    ISO = "iso"
    FORMATTED = "formatted"


@dataclass(frozen=True)
class DateFormat:
    """A date style, with the strftime pattern used by ``FORMATTED``."""

    style: DateStyle = DateStyle.DATE
    pattern: str | None = None

    def __post_init__(self) -> None:
        if self.style is DateStyle.FORMATTED and not self.pattern:
            raise ValueError("a formatted date style needs a pattern")


class Age(Enum):
    """How recent a date is, used to pick its colour."""

    HOUR_OLD = "hour_old"
    DAY_OLD = "day_old"
    OLDER = "older"


def _rough_period(seconds: int) -> str:
    if seconds > 547 * _DAY:
        return f"{max(seconds // _YEAR, 2)} years"
    if seconds > 345 * _DAY:
        return "a year"
    if seconds > 45 * _DAY:
        return f"{max(seconds // _MONTH, 2)} months"
    if seconds > 29 * _DAY:
        return "a month"
    if seconds > 10 * _DAY + 12 * _HOUR:
        return f"{max(seconds // _WEEK, 2)} weeks"
    if seconds > 6 * _DAY + 12 * _HOUR:
        return "a week"
    if seconds > 36 * _HOUR:
        return f"{max(seconds // _DAY, 2)} days"
    if seconds > 22 * _HOUR:
        return "a day"
    if seconds > 90 * _MINUTE:
        return f"{max(seconds // _HOUR, 2)} hours"
    if seconds > 45 * _MINUTE:
        return "an hour"
    if seconds > 90:
        return f"{max(seconds // _MINUTE, 2)} minutes"
    if seconds > 45:
        return "a minute"
    return f"{seconds} seconds"


def humanize_delta(delta: timedelta) -> str:
    """Describe a time difference roughly, e.g. ``"2 days ago"`` or ``"in an hour"``."""
    seconds = int(delta.total_seconds())
    if abs(seconds) <= 10:
        return "now"
    text = _rough_period(abs(seconds))
    return f"{text} ago" if seconds < 0 else f"in {text}"


def _now() -> datetime:
    return datetime.now().astimezone()


@functools.total_ordering
@dataclass(frozen=True)
class Date:
    """A local modification time; ``value`` is ``None`` when it cannot be represented."""

    value: datetime | None = None

    @classmethod
    def from_timestamp(cls, timestamp: float) -> Date:
        """Convert a POSIX timestamp, yielding an invalid date when out of range."""
        try:
            return cls(datetime.fromtimestamp(timestamp).astimezone())
        except (OverflowError, ValueError, OSError):
            return cls(None)

    @classmethod
    def from_stat(cls, st: os.stat_result) -> Date:
        """Take the modification time of a stat result."""
        return cls.from_timestamp(st.st_mtime)

    def _sort_key(self) -> tuple:
        # Valid dates sort before invalid ones.
        return (1,) if self.value is None else (0, self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def age(self) -> Age:
        """Classify the date as under an hour old, under a day old, or older."""
        if self.value is None:
            return Age.OLDER
        now = _now()
        if self.value > now - timedelta(hours=1):
            return Age.HOUR_OLD
        if self.value > now - timedelta(days=1):
            return Age.DAY_OLD
        return Age.OLDER

    def date_string(self, date_format: DateFormat = DateFormat()) -> str:
        """Write the date in the requested style, or ``"-"`` if invalid."""
        if self.value is None:
            return "-"
        style = date_format.style
        if style is DateStyle.DATE:
            return self.value.strftime("%c")
        if style is DateStyle.RELATIVE:
            return humanize_delta(self.value - _now())
        if style is DateStyle.ISO:
            if self.value > _now() - _SIX_MONTHS:
                return self.value.strftime("%m-%d %H:%M")
            return self.value.strftime("%Y-%m-%d")
        return self.value.strftime(date_format.pattern or "")

    def render(self, date_format: DateFormat = DateFormat()) -> tuple[str, Age]:
        """Return the date text together with its age class."""
        return self.date_string(date_format), self.age()