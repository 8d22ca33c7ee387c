from datetime import date

import pytest

from finql.business_calendar import (
    Calendar,
    CalendarProvider,
    EasterOffset,
    MonthWeekday,
    MovableYearlyDay,
    NthWeek,
    SimpleCalendar,
    SingularDay,
    WeekDay,
    Weekday,
    YearlyDay,
    dumps_holidays,
    easter_sunday,
    holiday_from_dict,
    holiday_to_dict,
    is_leap_year,
    last_day_of_month,
    loads_holidays,
)


def test_fixed_dates_calendar():
    holidays = [
        SingularDay(date(2019, 11, 20)),
        SingularDay(date(2019, 11, 24)),
        SingularDay(date(2019, 11, 25)),
        WeekDay(Weekday.Sat),
        WeekDay(Weekday.Sun),
    ]
    cal = Calendar.calc_calendar(holidays, 2019, 2019)
    assert cal.is_business_day(date(2019, 11, 20)) is False
    assert cal.is_business_day(date(2019, 11, 21)) is True
    assert cal.is_business_day(date(2019, 11, 22)) is True
    assert cal.is_business_day(date(2019, 11, 23)) is False
    assert cal.is_weekend(date(2019, 11, 23)) is True
    assert cal.is_holiday(date(2019, 11, 23)) is False
    assert cal.is_business_day(date(2019, 11, 24)) is False
    assert cal.is_weekend(date(2019, 11, 24)) is True
    assert cal.is_holiday(date(2019, 11, 24)) is True
    assert cal.is_business_day(date(2019, 11, 25)) is False
    assert cal.is_business_day(date(2019, 11, 26)) is True


def test_yearly_day():
    holidays = [
        YearlyDay(11, 1, None, None),
        YearlyDay(11, 2, 2019, None),
        YearlyDay(11, 3, None, 2019),
        YearlyDay(11, 4, 2019, 2019),
    ]
    cal = Calendar.calc_calendar(holidays, 2018, 2020)
    assert cal.is_holiday(date(2018, 11, 1))
    assert cal.is_holiday(date(2019, 11, 1))
    assert cal.is_holiday(date(2020, 11, 1))

    assert not cal.is_holiday(date(2018, 11, 2))
    assert cal.is_holiday(date(2019, 11, 2))
    assert cal.is_holiday(date(2020, 11, 2))

    assert cal.is_holiday(date(2018, 11, 3))
    assert cal.is_holiday(date(2019, 11, 3))
    assert not cal.is_holiday(date(2020, 11, 3))

    assert not cal.is_holiday(date(2018, 11, 4))
    assert cal.is_holiday(date(2019, 11, 4))
    assert not cal.is_holiday(date(2020, 11, 4))


def test_movable_yearly_day():
    holidays = [
        MovableYearlyDay(11, 1, None, None),
        MovableYearlyDay(11, 2, None, None),
        MovableYearlyDay(11, 10, None, 2019),
        MovableYearlyDay(11, 17, 2019, None),
        MovableYearlyDay(11, 24, 2019, 2019),
    ]
    cal = Calendar.calc_calendar(holidays, 2018, 2020)
    assert cal.is_holiday(date(2018, 11, 1))
    assert cal.is_holiday(date(2018, 11, 2))
    assert cal.is_holiday(date(2019, 11, 1))
    assert cal.is_holiday(date(2019, 11, 4))
    assert cal.is_holiday(date(2020, 11, 2))
    assert cal.is_holiday(date(2020, 11, 3))

    assert cal.is_holiday(date(2018, 11, 12))
    assert cal.is_holiday(date(2019, 11, 11))
    assert not cal.is_holiday(date(2020, 11, 10))
    assert not cal.is_holiday(date(2018, 11, 19))
    assert cal.is_holiday(date(2019, 11, 18))
    assert cal.is_holiday(date(2020, 11, 17))
    assert not cal.is_holiday(date(2018, 11, 26))
    assert cal.is_holiday(date(2019, 11, 25))
    assert not cal.is_holiday(date(2020, 11, 24))


def test_easter_offset():
    cal = Calendar.calc_calendar([EasterOffset(-2, None, None)], 2019, 2020)
    assert cal.is_business_day(date(2019, 4, 19)) is False
    assert cal.is_business_day(date(2020, 4, 10)) is False


def test_easter_sunday_matches_good_friday():
    assert easter_sunday(2019) == date(2019, 4, 21)
    assert easter_sunday(2020) == date(2020, 4, 12)


def test_month_weekday():
    holidays = [
        MonthWeekday(11, Weekday.Mon, NthWeek.First),
        MonthWeekday(11, Weekday.Tue, NthWeek.Second),
        MonthWeekday(11, Weekday.Wed, NthWeek.Third),
        MonthWeekday(11, Weekday.Thu, NthWeek.Fourth),
        MonthWeekday(11, Weekday.Fri, NthWeek.Last),
        MonthWeekday(11, Weekday.Sat, NthWeek.First, None, 2018),
        MonthWeekday(11, Weekday.Sun, NthWeek.Last, 2020, None),
    ]
    cal = Calendar.calc_calendar(holidays, 2018, 2020)
    assert cal.is_holiday(date(2019, 11, 4))
    assert cal.is_holiday(date(2019, 11, 12))
    assert cal.is_holiday(date(2019, 11, 20))
    assert cal.is_holiday(date(2019, 11, 28))
    assert cal.is_holiday(date(2019, 11, 29))

    assert cal.is_holiday(date(2018, 11, 3))
    assert not cal.is_holiday(date(2019, 11, 2))
    assert not cal.is_holiday(date(2020, 11, 7))
    assert not cal.is_holiday(date(2018, 11, 25))
    assert not cal.is_holiday(date(2019, 11, 24))
    assert cal.is_holiday(date(2020, 11, 29))


EXPECTED_JSON = """[
  {
    "MonthWeekday": {
      "month": 11,
      "weekday": "Mon",
      "nth": "First",
      "first": null,
      "last": null
    }
  },
  {
    "MovableYearlyDay": {
      "month": 11,
      "day": 1,
      "first": 2016,
      "last": null
    }
  },
  {
    "YearlyDay": {
      "month": 11,
      "day": 3,
      "first": null,
      "last": 2019
    }
  },
  {
    "SingularDay": "2019-11-25"
  },
  {
    "WeekDay": "Sat"
  },
  {
    "EasterOffset": {
      "offset": -2,
      "first": null,
      "last": null
    }
  }
]"""


def test_serialize_cal_definition():
    holidays = [
        MonthWeekday(11, Weekday.Mon, NthWeek.First, None, None),
        MovableYearlyDay(11, 1, 2016, None),
        YearlyDay(11, 3, None, 2019),
        SingularDay(date(2019, 11, 25)),
        WeekDay(Weekday.Sat),
        EasterOffset(-2, None, None),
    ]
    text = dumps_holidays(holidays)
    assert text == EXPECTED_JSON
    assert loads_holidays(text) == holidays


def test_holiday_dict_round_trip():
    rule = MonthWeekday(5, Weekday.Mon, NthWeek.Last, 2003, 2011)
    assert holiday_from_dict(holiday_to_dict(rule)) == rule


def test_unknown_variant_rejected():
    with pytest.raises(ValueError):
        holiday_from_dict({"Nonsense": 1})
    with pytest.raises(ValueError):
        loads_holidays('{"WeekDay": "Sat"}')


def test_next_and_prev_bday():
    holidays = [SingularDay(date(2019, 11, 25)), WeekDay(Weekday.Sat), WeekDay(Weekday.Sun)]
    cal = Calendar.calc_calendar(holidays, 2019, 2019)
    assert cal.next_bday(date(2019, 11, 22)) == date(2019, 11, 26)
    assert cal.prev_bday(date(2019, 11, 26)) == date(2019, 11, 22)


def test_singular_day_outside_range_ignored():
    cal = Calendar.calc_calendar([SingularDay(date(2018, 5, 1))], 2019, 2020)
    assert not cal.is_holiday(date(2018, 5, 1))


def test_leap_year_and_last_day():
    assert is_leap_year(2020) is True
    assert is_leap_year(2019) is False
    assert is_leap_year(2000) is True
    assert is_leap_year(2100) is False
    assert last_day_of_month(2020, 2) == 29
    assert last_day_of_month(2019, 2) == 28
    assert last_day_of_month(2019, 12) == 31
    assert last_day_of_month(2019, 11) == 30


def test_simple_calendar_provider():
    cal = Calendar.calc_calendar([WeekDay(Weekday.Sun)], 2020, 2020)
    provider = SimpleCalendar(cal)
    assert isinstance(provider, CalendarProvider)
    assert provider.get_calendar("TARGET") is cal
    assert provider.get_calendar("anything").is_weekend(date(2020, 3, 1))


def test_default_simple_calendar_has_no_holidays():
    cal = SimpleCalendar().get_calendar("TARGET")
    assert cal.is_business_day(date(2020, 3, 1))
    assert cal.next_bday(date(2020, 3, 1)) == date(2020, 3, 2)