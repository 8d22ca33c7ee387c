"""Day count conventions that turn two dates into a year fraction."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional

from finql.icma import IcmaNoFrequency, PeriodLike, act_act_icma

_ALIASES = {
    "act/act icma": "icma",
    "Act/Act": "icma",
    "Act/Act ICMA": "icma",
    "Act/365f": "act/365",
    "act/365leap": "act/365l",
}


class DayCountConvError(ValueError):
    """A year fraction cannot be calculated.

    ``kind`` tells which check failed; it is one of the class constants.
    """

    IMPOSSIBLE_360 = "impossible_360"
    ICMA_MISSING_TIME_PERIOD = "icma_missing_time_period"
    ICMA_MISSING_ROLL_DATE = "icma_missing_roll_date"
    ICMA_NO_FREQUENCY = "icma_no_frequency"

    _MESSAGES = {
        IMPOSSIBLE_360: "day count convention in 30/x style are not applicable "
        "periods from 30th to 31st",
        ICMA_MISSING_TIME_PERIOD: "missing time period required for Act/Act ICMA",
        ICMA_MISSING_ROLL_DATE: "missing roll date required for Act/Act ICMA",
        ICMA_NO_FREQUENCY: "time period can't be converted to frequency "
        "as required by Act/Act ICMA",
    }

    def __init__(self, kind: str) -> None:
        super().__init__(self._MESSAGES[kind])
        self.kind = kind


def days_in_year(year: int) -> int:
    """Number of days in the given year."""
    if year % 4 == 0 and (year % 100 != 0 or year % 400 == 0):
        return 366
    return 365


def days_to_date(date: date) -> int:
    """Number of days since January 1st of the same year."""
    return (date - date.replace(month=1, day=1)).days


def _act_365_leap(start: date, end: date) -> float:
    return (
        (end.year - start.year)
        + days_to_date(end) / days_in_year(end.year)
        - days_to_date(start) / days_in_year(start.year)
    )


def _thirty_360(start: date, end: date) -> float:
    start_day = min(start.day, 30)
    end_day = 30 if start_day == 30 and end.day == 31 else end.day
    return (
        (end.year - start.year)
        + (end.month - start.month) / 12.0
        + (end_day - start_day) / 360.0
    )


def _thirty_e_360(start: date, end: date) -> float:
    return (
        (end.year - start.year)
        + (end.month - start.month) / 12.0
        + (min(end.day, 30) - min(start.day, 30)) / 360.0
    )


class DayCountConv(Enum):
    """Method to count days between two dates as a fraction of a year."""

    ActActICMA = "icma"
    Act365 = "act/365"
    Act365l = "act/365l"
    Act360 = "act/360"
    D30_360 = "30/360"
    D30E360 = "30E/360"

    @classmethod
    def parse(cls, text: str) -> "DayCountConv":
        """Look up a convention by its name or one of its aliases."""
        try:
            return cls(_ALIASES.get(text, text))
        except ValueError:
            raise ValueError(f"unknown day count convention: {text!r}") from None

    def year_fraction(
        self,
        start: date,
        end: date,
        roll_date: Optional[date] = None,
        time_period: Optional[PeriodLike] = None,
    ) -> float:
        """Year fraction from `start` to `end`.

        Act/Act ICMA needs the `roll_date` and `time_period` of the coupon
        schedule; the other conventions ignore them.
        """
        if self is DayCountConv.Act365:
            return (end - start).days / 365.0
        if self is DayCountConv.Act365l:
            return _act_365_leap(start, end)
        if self is DayCountConv.Act360:
            return (end - start).days / 360.0
        if self in (DayCountConv.D30_360, DayCountConv.D30E360):
            calc = _thirty_360 if self is DayCountConv.D30_360 else _thirty_e_360
            fraction = calc(start, end)
            # e.g. one-day periods from the 30th to the 31st give zero
            if fraction == 0.0 and start != end:
                raise DayCountConvError(DayCountConvError.IMPOSSIBLE_360)
            return fraction
        if roll_date is None:
            raise DayCountConvError(DayCountConvError.ICMA_MISSING_ROLL_DATE)
        if time_period is None:
            raise DayCountConvError(DayCountConvError.ICMA_MISSING_TIME_PERIOD)
        try:
            return act_act_icma(start, end, roll_date, time_period)
        except IcmaNoFrequency as exc:
            raise DayCountConvError(DayCountConvError.ICMA_NO_FREQUENCY) from exc