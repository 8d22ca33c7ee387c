"""Month and day of the year that anchor a coupon schedule.

The coupon date is the (unadjusted) end date of the first coupon period and
serves as the reference for rolling out cash flows. Its text form is
``dd.mm``.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass

from finql.business_calendar import last_day_of_month

_UNSIGNED = re.compile(r"\+?[0-9]+")

# A year that is not a leap year, so that February 29th is rejected.
_REFERENCE_YEAR = 2019


class CouponDateError(ValueError):
    """A coupon date could not be built or parsed.

    ``kind`` tells which check failed; it is one of the class constants.
    """

    PARSE_ERROR = "parse_error"
    DAY_OUT_OF_RANGE = "day_out_of_range"
    INVALID_DAY = "invalid_day"
    DAY_TOO_BIG = "day_too_big"

    _MESSAGES = {
        PARSE_ERROR: "parsing of coupon date failed",
        DAY_OUT_OF_RANGE: "day or month is out of range",
        INVALID_DAY: "parsing date or month failed",
        DAY_TOO_BIG: "day must not be larger than last day of month or 29th of February",
    }

    def __init__(self, kind: str) -> None:
        super().__init__(self._MESSAGES[kind])
        self.kind = kind


def _parse_unsigned(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise CouponDateError(CouponDateError.PARSE_ERROR)
    return int(text)


@dataclass(frozen=True)
class CouponDate:
    """Day and month of a coupon date; February 29th is never valid."""

    day: int
    month: int

    def __post_init__(self) -> None:
        if self.day == 0 or self.month == 0 or self.month > 12:
            raise CouponDateError(CouponDateError.DAY_OUT_OF_RANGE)
        if self.day < 0 or self.month < 0:
            raise CouponDateError(CouponDateError.DAY_OUT_OF_RANGE)
        if self.day > last_day_of_month(_REFERENCE_YEAR, self.month):
            raise CouponDateError(CouponDateError.DAY_TOO_BIG)

    def __str__(self) -> str:
        return f"{self.day:02d}.{self.month:02d}"

    @classmethod
    def parse(cls, text: str) -> "CouponDate":
        """Parse a coupon date of the form ``<day>.<month>``."""
        parts = text.strip().split(".")
        if len(parts) < 2:
            raise CouponDateError(CouponDateError.PARSE_ERROR)
        return cls(_parse_unsigned(parts[0]), _parse_unsigned(parts[1]))

    def to_json(self) -> str:
        """Serialize as a JSON string ``"dd.mm"``."""
        return json.dumps(str(self))

    @classmethod
    def from_json(cls, text: str) -> "CouponDate":
        """Read a coupon date from a JSON string value."""
        try:
            value = json.loads(text)
        except json.JSONDecodeError as exc:
            raise CouponDateError(CouponDateError.PARSE_ERROR) from exc
        if not isinstance(value, str):
            raise CouponDateError(CouponDateError.PARSE_ERROR)
        return cls.parse(value)