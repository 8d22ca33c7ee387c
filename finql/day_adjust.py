"""Rules that move dates onto business days."""

from __future__ import annotations

from datetime import date
from enum import Enum

from finql.business_calendar import Calendar

_ALIASES = {"modified following": "modified"}


class DayAdjust(Enum):
    """Business day adjustment rule.

    ``Modified`` moves to the next business day unless that falls in the
    following month, in which case the preceding business day is used.
    """

    None_ = "none"
    Following = "following"
    Preceding = "preceding"
    Modified = "modified"

    @classmethod
    def parse(cls, text: str) -> "DayAdjust":
        """Look up a rule by its name, accepting ``modified following`` too."""
        try:
            return cls(_ALIASES.get(text, text))
        except ValueError:
            raise ValueError(f"unknown business day rule: {text!r}") from None

    def adjust_date(self, date: date, cal: Calendar) -> date:
        """Apply this rule to `date` using calendar `cal`."""
        if self is DayAdjust.Following:
            return cal.next_bday(date) if cal.is_holiday(date) else date
        if self is DayAdjust.Preceding:
            return cal.prev_bday(date) if cal.is_holiday(date) else date
        if self is DayAdjust.Modified:
            if cal.is_business_day(date):
                return date
            moved = cal.next_bday(date)
            if moved.month != date.month:
                return cal.prev_bday(date)
            return moved
        return date