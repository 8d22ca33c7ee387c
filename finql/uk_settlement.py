"""UK settlement calendar, a holiday set with many historical exceptions."""

from __future__ import annotations

import argparse
from datetime import date

from finql.business_calendar import (
    Calendar,
    EasterOffset,
    Holiday,
    MonthWeekday,
    MovableYearlyDay,
    NthWeek,
    SingularDay,
    WeekDay,
    Weekday,
)


def uk_settlement_holidays() -> list[Holiday]:
    """Holiday rules of the UK settlement calendar."""
    return [
        WeekDay(Weekday.Sat),
        WeekDay(Weekday.Sun),
        # New Year's day
        MovableYearlyDay(month=1, day=1),
        # Good Friday and Easter Monday
        EasterOffset(offset=-2),
        EasterOffset(offset=1),
        # First Monday of May, moved twice to 8th of May
        MonthWeekday(month=5, weekday=Weekday.Mon, nth=NthWeek.First, last=1994),
        SingularDay(date(1995, 5, 8)),
        MonthWeekday(month=5, weekday=Weekday.Mon, nth=NthWeek.First, first=1996, last=2019),
        SingularDay(date(2020, 5, 8)),
        MonthWeekday(month=5, weekday=Weekday.Mon, nth=NthWeek.First, first=2021),
        # Spring Bank Holiday, last Monday of May, skipped twice
        MonthWeekday(month=5, weekday=Weekday.Mon, nth=NthWeek.Last, last=2001),
        MonthWeekday(month=5, weekday=Weekday.Mon, nth=NthWeek.Last, first=2003, last=2011),
        MonthWeekday(month=5, weekday=Weekday.Mon, nth=NthWeek.Last, first=2013),
        # Summer Bank Holiday, last Monday of August
        MonthWeekday(month=8, weekday=Weekday.Mon, nth=NthWeek.Last),
        # Christmas and Boxing Day
        MovableYearlyDay(month=12, day=25),
        MovableYearlyDay(month=12, day=26),
        # Golden Jubilee and Special Spring Holiday
        SingularDay(date(2002, 6, 3)),
        SingularDay(date(2002, 6, 4)),
        # Royal Wedding
        SingularDay(date(2011, 4, 29)),
        # Diamond Jubilee and Special Spring Holiday
        SingularDay(date(2012, 6, 4)),
        SingularDay(date(2012, 6, 5)),
        # Introduction of EUR
        SingularDay(date(1999, 12, 31)),
    ]


def main(argv: list[str] | None = None) -> int:
    """Print the UK settlement calendar for a range of years."""
    parser = argparse.ArgumentParser(description="Show the UK settlement calendar.")
    parser.add_argument("start", nargs="?", type=int, default=1999, help="first year (default 1999)")
    parser.add_argument("end", nargs="?", type=int, default=2020, help="last year (default 2020)")
    args = parser.parse_args(argv)

    cal = Calendar.calc_calendar(uk_settlement_holidays(), args.start, args.end)
    print("Weekend days: " + ", ".join(day.name for day in cal.weekdays))
    print("Holidays:")
    for day in sorted(cal.holidays):
        print(f"  {day.isoformat()}")
    return 0