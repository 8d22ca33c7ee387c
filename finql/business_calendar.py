"""Business calendars built from rules that define bank holidays.

A set of holiday rules is expanded once into the concrete holidays that fall
within a range of years, so that lookups afterwards are cheap.
"""

from __future__ import annotations

import calendar as _stdcalendar
import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum
from typing import Any, Iterable, Union

_ONE_DAY = timedelta(days=1)


class Weekday(Enum):
    """Day of the week; values match ``date.weekday()``."""

    Mon = 0
    Tue = 1
    Wed = 2
    Thu = 3
    Fri = 4
    Sat = 5
    Sun = 6

    @classmethod
    def of(cls, day: date) -> "Weekday":
        return cls(day.weekday())


class NthWeek(Enum):
    """Which occurrence of a weekday within a month."""

    First = "First"
    Second = "Second"
    Third = "Third"
    Fourth = "Fourth"
    Last = "Last"


_NTH_START_DAY = {
    NthWeek.First: 1,
    NthWeek.Second: 8,
    NthWeek.Third: 15,
    NthWeek.Fourth: 22,
}


@dataclass(frozen=True)
class WeekDay:
    """A weekday that is never a business day (e.g. Saturday)."""

    weekday: Weekday


@dataclass(frozen=True)
class YearlyDay:
    """A holiday on the same day every year, within optional first/last years."""

    month: int
    day: int
    first: int | None = None
    last: int | None = None


@dataclass(frozen=True)
class MovableYearlyDay:
    """A yearly holiday moved off Saturday/Sunday and off earlier holidays."""

    month: int
    day: int
    first: int | None = None
    last: int | None = None


@dataclass(frozen=True)
class SingularDay:
    """A holiday that happens only once."""

    date: date


@dataclass(frozen=True)
class EasterOffset:
    """A holiday a fixed number of days away from Easter Sunday."""

    offset: int
    first: int | None = None
    last: int | None = None


@dataclass(frozen=True)
class MonthWeekday:
    """A holiday on the nth (or last) given weekday of a month."""

    month: int
    weekday: Weekday
    nth: NthWeek
    first: int | None = None
    last: int | None = None


Holiday = Union[WeekDay, YearlyDay, MovableYearlyDay, SingularDay, EasterOffset, MonthWeekday]


def easter_sunday(year: int) -> date:
    """Date of Easter Sunday in the Gregorian calendar."""
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return date(year, month, day + 1)


def is_leap_year(year: int) -> bool:
    """True if February 29th exists in the given year."""
    return _stdcalendar.isleap(year)


def last_day_of_month(year: int, month: int) -> int:
    """Number of the last day of the given month."""
    return _stdcalendar.monthrange(year, month)[1]


def _year_range(start: int, end: int, first: int | None, last: int | None) -> range:
    lo = start if first is None else max(start, first)
    hi = end if last is None else min(end, last)
    return range(lo, hi + 1)


@dataclass(frozen=True)
class Calendar:
    """Precomputed holidays and weekend days."""

    holidays: frozenset = field(default_factory=frozenset)
    weekdays: tuple = ()

    @classmethod
    def calc_calendar(cls, holiday_rules: Iterable[Holiday], start: int, end: int) -> "Calendar":
        """Expand holiday rules into all holidays from year `start` to `end` inclusive."""
        holidays: set[date] = set()
        weekdays: list[Weekday] = []

        for rule in holiday_rules:
            match rule:
                case SingularDay(date=day):
                    if start <= day.year <= end:
                        holidays.add(day)
                case WeekDay(weekday=weekday):
                    weekdays.append(weekday)
                case YearlyDay(month=month, day=day, first=first, last=last):
                    for year in _year_range(start, end, first, last):
                        holidays.add(date(year, month, day))
                case MovableYearlyDay(month=month, day=day, first=first, last=last):
                    for year in _year_range(start, end, first, last):
                        moved = date(year, month, day)
                        if moved.weekday() == Weekday.Sat.value:
                            moved += 2 * _ONE_DAY
                        elif moved.weekday() == Weekday.Sun.value:
                            moved += _ONE_DAY
                        while moved in holidays:
                            moved += _ONE_DAY
                        holidays.add(moved)
                case EasterOffset(offset=offset, first=first, last=last):
                    for year in _year_range(start, end, first, last):
                        holidays.add(easter_sunday(year) + timedelta(days=offset))
                case MonthWeekday(month=month, weekday=weekday, nth=nth, first=first, last=last):
                    for year in _year_range(start, end, first, last):
                        if nth is NthWeek.Last:
                            day = date(year, month, last_day_of_month(year, month))
                            step = -_ONE_DAY
                        else:
                            day = date(year, month, _NTH_START_DAY[nth])
                            step = _ONE_DAY
                        while day.weekday() != weekday.value:
                            day += step
                        holidays.add(day)
                case _:
                    raise TypeError(f"unknown holiday rule: {rule!r}")

        return cls(holidays=frozenset(holidays), weekdays=tuple(weekdays))

    def next_bday(self, date: date) -> date:
        """First business day strictly after `date`."""
        day = date + _ONE_DAY
        while not self.is_business_day(day):
            day += _ONE_DAY
        return day

    def prev_bday(self, date: date) -> date:
        """Last business day strictly before `date`."""
        day = date - _ONE_DAY
        while not self.is_business_day(day):
            day -= _ONE_DAY
        return day

    def is_weekend(self, day: date) -> bool:
        return Weekday.of(day) in self.weekdays

    def is_holiday(self, date: date) -> bool:
        return date in self.holidays

    def is_business_day(self, date: date) -> bool:
        return not self.is_weekend(date) and not self.is_holiday(date)


class CalendarNotFound(LookupError):
    """Raised when a calendar provider does not know a calendar."""


class CalendarProvider(ABC):
    """Source of calendars looked up by name."""

    @abstractmethod
    def get_calendar(self, calendar_name: str) -> Calendar:
        """Return the named calendar or raise CalendarNotFound."""


class SimpleCalendar(CalendarProvider):
    """Provider that answers every lookup with one and the same calendar."""

    def __init__(self, cal: Calendar | None = None) -> None:
        self.cal = cal if cal is not None else Calendar.calc_calendar([], 2020, 2021)

    def get_calendar(self, calendar_name: str) -> Calendar:
        return self.cal


def holiday_to_dict(holiday: Holiday) -> dict[str, Any]:
    """Represent a holiday rule as an externally tagged mapping."""
    match holiday:
        case WeekDay(weekday=weekday):
            return {"WeekDay": weekday.name}
        case SingularDay(date=day):
            return {"SingularDay": day.isoformat()}
        case YearlyDay() | MovableYearlyDay():
            body = {"month": holiday.month, "day": holiday.day,
                    "first": holiday.first, "last": holiday.last}
        case EasterOffset():
            body = {"offset": holiday.offset, "first": holiday.first, "last": holiday.last}
        case MonthWeekday():
            body = {"month": holiday.month, "weekday": holiday.weekday.name,
                    "nth": holiday.nth.value, "first": holiday.first, "last": holiday.last}
        case _:
            raise TypeError(f"unknown holiday rule: {holiday!r}")
    return {type(holiday).__name__: body}


def holiday_from_dict(data: dict[str, Any]) -> Holiday:
    """Build a holiday rule from its externally tagged mapping."""
    if not isinstance(data, dict) or len(data) != 1:
        raise ValueError(f"invalid holiday definition: {data!r}")
    (tag, body), = data.items()
    try:
        if tag == "WeekDay":
            return WeekDay(Weekday[body])
        if tag == "SingularDay":
            return SingularDay(date.fromisoformat(body))
        if tag == "YearlyDay":
            return YearlyDay(body["month"], body["day"], body.get("first"), body.get("last"))
        if tag == "MovableYearlyDay":
            return MovableYearlyDay(body["month"], body["day"], body.get("first"), body.get("last"))
        if tag == "EasterOffset":
            return EasterOffset(body["offset"], body.get("first"), body.get("last"))
        if tag == "MonthWeekday":
            return MonthWeekday(body["month"], Weekday[body["weekday"]], NthWeek(body["nth"]),
                                body.get("first"), body.get("last"))
    except (KeyError, TypeError) as exc:
        raise ValueError(f"invalid {tag} definition: {body!r}") from exc
    raise ValueError(f"unknown holiday variant: {tag!r}")


def dumps_holidays(holidays: Iterable[Holiday]) -> str:
    """Serialize holiday rules as pretty-printed JSON."""
    return json.dumps([holiday_to_dict(h) for h in holidays], indent=2)


def loads_holidays(text: str) -> list[Holiday]:
    """Parse holiday rules from JSON text."""
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("holiday definitions must be a JSON array")
    return [holiday_from_dict(item) for item in data]