"""Rolling one-year date window and per-day activity state."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from .config import DAYS_PER_WEEK, FULL_WEEKS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DateWindow:
    """Displayed date range, Monday-first.

    `start` is the Monday of the week 51 weeks before the week holding `end`.
    """

    start: date
    end: date

    @property
    def days_in_final_week(self) -> int:
        return iso_weekday_number(self.end)

    @property
    def day_count(self) -> int:
        return FULL_WEEKS * DAYS_PER_WEEK + self.days_in_final_week

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


def normalize_date(value: date | datetime | None) -> date | None:
    """Drop the time of day from `value`; `None` passes through."""
    if value is None:
        return None
    # datetime is a date subclass, so check it first.
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    msg = f"expected a date or datetime, got {type(value).__name__}."
    raise TypeError(msg)


def iso_weekday_number(day: date) -> int:
    """Return 1 for Monday through 7 for Sunday."""
    return day.isoweekday()


def week_start(day: date) -> date:
    """Return the Monday of the week containing `day`."""
    return day - timedelta(days=day.weekday())


def days_between(first: date | datetime, second: date | datetime) -> int:
    """Count whole days from `first` to `second`; 0 unless `second` is later."""
    first_day = normalize_date(first)
    second_day = normalize_date(second)
    if first_day is None or second_day is None:
        msg = "days_between requires two dates."
        raise TypeError(msg)
    return max((second_day - first_day).days, 0)


def compute_date_window(today: date | datetime) -> DateWindow:
    """Return the window ending on `today`."""
    end = normalize_date(today)
    if end is None:
        msg = "today is required."
        raise TypeError(msg)
    start = week_start(end - timedelta(weeks=FULL_WEEKS))
    return DateWindow(start=start, end=end)


class ActivityCalendar:
    """Date window plus one active/inactive flag per displayed day.

    The window is a snapshot taken by `initialize`; it does not follow the
    wall clock. Not thread-safe.
    """

    def __init__(self, today: date | datetime | None = None) -> None:
        self.initialize(today)

    def initialize(self, today: date | datetime | None = None) -> None:
        """Anchor the window on `today` (default: the current date) and clear all days."""
        self._window = compute_date_window(date.today() if today is None else today)
        self._states = [False] * self._window.day_count

    @property
    def window(self) -> DateWindow:
        return self._window

    @property
    def range_start(self) -> date:
        return self._window.start

    @property
    def range_end(self) -> date:
        return self._window.end

    @property
    def states(self) -> tuple[bool, ...]:
        return tuple(self._states)

    def day_count(self) -> int:
        return self._window.day_count

    def set_active(self, day: date | datetime | None, is_active: bool = True) -> bool:
        """Flag one day; return False without changes when it is outside the window."""
        normalized = normalize_date(day)
        if normalized is None or not self._window.contains(normalized):
            logger.debug(
                "Rejected %s outside %s..%s", normalized, self._window.start, self._window.end
            )
            return False
        self._states[days_between(self._window.start, normalized)] = bool(is_active)
        return True

    def is_active(self, day: date | datetime | None) -> bool:
        normalized = normalize_date(day)
        if normalized is None or not self._window.contains(normalized):
            return False
        return self._states[days_between(self._window.start, normalized)]

    def active_dates(self) -> tuple[date, ...]:
        """Return active days in ascending order."""
        return tuple(
            self._window.start + timedelta(days=index)
            for index, active in enumerate(self._states)
            if active
        )
