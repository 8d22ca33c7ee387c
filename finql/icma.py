"""Act/Act ICMA year fractions for periodic coupon schedules."""

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from finql.business_calendar import Calendar


class IcmaNoFrequency(ValueError):
    """The time period cannot be expressed as a number of periods per year."""

    def __init__(self) -> None:
        super().__init__(
            "time period can't be converted to frequency as required by Act/Act ICMA"
        )


class PeriodLike(Protocol):
    """A regular time period that can be added to and subtracted from dates."""

    def add_to(self, date: date, cal: Optional[Calendar] = None) -> date:
        """Date one period after `date`."""
        ...

    def sub_from(self, date: date, cal: Optional[Calendar] = None) -> date:
        """Date one period before `date`."""
        ...

    def frequency(self) -> int:
        """Number of periods per year; raises ValueError if there is none."""
        ...


def act_act_icma(start: date, end: date, roll_date: date, time_period: PeriodLike) -> float:
    """Year fraction between `start` and `end` under Act/Act ICMA.

    The coupon schedule is given by `roll_date` and `time_period`; broken
    periods at either end are counted as the fraction of the actual days in
    the surrounding regular period.
    """
    try:
        freq = float(time_period.frequency())
    except ValueError as exc:
        raise IcmaNoFrequency() from exc

    add = time_period.add_to
    sub = time_period.sub_from

    base = roll_date
    while base < start:
        base = add(base)
    while base > end:
        base = sub(base)

    if base < start:
        # The whole interval lies within one regular period.
        days = (end - start).days
        period_days = (add(base) - base).days
        return days / (period_days * freq)

    periods = 0
    year_fraction = 0.0

    first = base
    while first > start:
        first = sub(first)
        if first >= start:
            periods += 1
    if first < start:
        # Broken first period.
        first_end = add(first)
        year_fraction += (first_end - start).days / (first_end - first).days

    while base < end:
        base = add(base)
        if base <= end:
            periods += 1
    if base > end:
        # Broken last period.
        last_start = sub(base)
        year_fraction += (end - last_start).days / (base - last_start).days

    return (year_fraction + periods) / freq