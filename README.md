# finql

Building blocks for fixed income calculations:

- **Business calendars** (`finql.business_calendar`) built from holiday rules:
  fixed weekend days, yearly holidays, holidays that move off the weekend,
  one-off days, days relative to Easter Sunday, and "nth weekday of a month"
  rules. Each rule may be limited to a range of years.
- **Business day adjustment** rules (`finql.day_adjust`): none, following,
  preceding and modified following.
- **Day count conventions** (`finql.day_count_conv`, `finql.icma`) for year
  fractions: Act/365, Act/365 leap, Act/360, 30/360, 30E/360 and Act/Act ICMA.
- **Coupon dates** (`finql.coupon_date`) in the `dd.mm` notation used by bond
  term sheets.
- A simple **currency converter** (`finql.fx_rates`) that keeps a table of
  exchange rates and their inverses.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Calendars

Holiday rules are frozen dataclasses: `WeekDay`, `YearlyDay`,
`MovableYearlyDay`, `SingularDay`, `EasterOffset` and `MonthWeekday`, with the
enums `Weekday` and `NthWeek`. A calendar is computed from a list of rules for
a range of years (both ends inclusive):

```python
from datetime import date

from finql.business_calendar import Calendar, EasterOffset, MovableYearlyDay, WeekDay, Weekday

rules = [
    WeekDay(Weekday.Sat),
    WeekDay(Weekday.Sun),
    MovableYearlyDay(month=1, day=1),   # New Year's day
    EasterOffset(offset=-2),            # Good Friday
]
cal = Calendar.calc_calendar(rules, 2019, 2020)

cal.is_holiday(date(2019, 4, 19))        # True
cal.is_business_day(date(2020, 4, 10))   # False
cal.next_bday(date(2020, 4, 9))          # first business day after the date
cal.prev_bday(date(2020, 4, 14))         # last business day before the date
```

A `MovableYearlyDay` that falls on a Saturday or Sunday moves to the following
Monday, and further on while it meets a holiday computed from an earlier rule.
Weekend days only count through `WeekDay` rules: `is_weekend` checks them,
`is_holiday` checks the computed holidays.

`CalendarProvider` is the abstract interface for looking calendars up by name;
`SimpleCalendar` answers every name with one calendar (by default an empty
calendar for 2020–2021). `CalendarNotFound` is the error a provider raises
for unknown names.

Holiday rule lists can be written to and read from JSON with
`dumps_holidays` and `loads_holidays`; single rules convert with
`holiday_to_dict` and `holiday_from_dict`. Each rule is stored as a one-key
object tagged with its class name, e.g. `{"WeekDay": "Sat"}` or
`{"SingularDay": "2019-11-25"}`.

Helper functions `easter_sunday`, `is_leap_year` and `last_day_of_month`
are available from the same module.

### The UK settlement calendar

`finql.uk_settlement.uk_settlement_holidays()` returns the holiday rules of the
UK settlement calendar, including its historical exceptions. To print the
weekend days and all holidays computed from them, run:

```
finql-uk-settlement
```

By default the years 1999 to 2020 are covered; a first and last year may be
given as arguments, e.g. `finql-uk-settlement 2015 2025`.

## Business day adjustment

```python
from finql.day_adjust import DayAdjust

rule = DayAdjust.parse("modified")   # also "none", "following", "preceding", "modified following"
pay_date = rule.adjust_date(date(2020, 4, 10), cal)
```

`Following` and `Preceding` move a date only if it is a holiday; `Modified`
moves any non-business day to the next business day, or to the preceding one
if the next lies in another month. The "none" rule is the member
`DayAdjust.None_`.

## Day count conventions

```python
from finql.day_count_conv import DayCountConv

dcc = DayCountConv.parse("act/365")
dcc.year_fraction(date(2019, 10, 1), date(2020, 10, 1))  # 366 / 365
```

Accepted names are `icma`, `act/365`, `act/365l`, `act/360`, `30/360` and
`30E/360`, plus the aliases `act/act icma`, `Act/Act`, `Act/Act ICMA`,
`Act/365f` and `act/365leap`. `days_in_year` and `days_to_date` are available
from the same module.

Act/Act ICMA needs a roll date and a time period; if either is missing, a
`DayCountConvError` is raised. The 30/360 conventions raise the same error
for periods they cannot measure, such as the one day from the 30th to the
31st of a month. The error's `kind` attribute tells which check failed.

The package has no time period type of its own. For Act/Act ICMA pass any
object that follows the `finql.icma.PeriodLike` protocol: `add_to(date)` and
`sub_from(date)` return the date one period later or earlier, and
`frequency()` returns the number of periods per year or raises `ValueError`
(reported as `IcmaNoFrequency` by `finql.icma.act_act_icma`, and as a
`DayCountConvError` by `year_fraction`).

## Coupon dates

```python
from finql.coupon_date import CouponDate

cd = CouponDate.parse("01.04")
str(cd)                            # '01.04'
cd.to_json()                       # '"01.04"'
CouponDate.from_json('"10.12"')
```

Invalid days or months, including the 29th of February, and text that cannot
be parsed raise `CouponDateError`, whose `kind` attribute tells which check
failed.

## Currency conversion

`finql.fx_rates.SimpleCurrencyConverter` stores the price of one unit of a
foreign currency in a domestic currency with `insert_fx_rate`, together with
the inverse rate. Currencies are keyed by their string form, so plain codes
such as `"EUR"` work. `fx_rate` looks a rate up and raises `ConversionFailed`
if the currency pair is unknown; the time passed to it is ignored.

## Other helpers

`finql.helpers.some_equal(opt, s)` is true if `opt` is not `None` and equals `s`.

## What this package does not do

It offers no bond or other product model, no cash flow rollout, no accrued
interest or yield calculation, no time period parser, no storage of assets,
quotes or transactions, and no download of market data. Exchange rates live
only in memory inside a `SimpleCurrencyConverter`.