"""Currency conversion from a stored table of exchange rates."""

from __future__ import annotations

import threading
from datetime import datetime
from typing import Any


class ConversionFailed(LookupError):
    """No exchange rate is known for the requested currency pair."""


def _pair(foreign: Any, domestic: Any) -> str:
    return f"{foreign}/{domestic}"


class SimpleCurrencyConverter:
    """Converter based on a stored list of exchange rates, ignoring dates."""

    def __init__(self) -> None:
        self._fx_rates: dict[str, float] = {}
        self._lock = threading.RLock()

    def insert_fx_rate(self, foreign_currency: Any, domestic_currency: Any, fx_rate: float) -> None:
        """Store the price of one unit of foreign currency in domestic currency and its inverse."""
        with self._lock:
            self._fx_rates[_pair(foreign_currency, domestic_currency)] = fx_rate
            self._fx_rates[_pair(domestic_currency, foreign_currency)] = 1.0 / fx_rate

    def fx_rate(self, foreign_currency: Any, domestic_currency: Any, time: datetime | None = None) -> float:
        """Price of one unit of foreign currency in domestic currency; `time` is ignored."""
        key = _pair(foreign_currency, domestic_currency)
        with self._lock:
            try:
                return self._fx_rates[key]
            except KeyError:
                raise ConversionFailed(f"no fx rate for {key}") from None