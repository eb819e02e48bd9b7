"""Historical exchange rates loaded from a ``date,exchange_rate`` CSV file."""

from __future__ import annotations

import re
from bisect import bisect_left
from collections.abc import Iterable

DATABASE_HEADER = "date,exchange_rate"

_FLOAT_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*"
    r"([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _atof(text: str) -> float:
    """Parse the longest leading float in ``text``; 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


class ExchangeRates:
    """Exchange rates keyed by ``YYYY-MM-DD`` date strings."""

    def __init__(self, path) -> None:
        try:
            with open(path, encoding="utf-8", errors="replace") as handle:
                self._load(handle)
        except OSError as exc:
            raise OSError("Error: could not open database file.") from exc

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> ExchangeRates:
        """Build a table from CSV lines, the first of which is the header."""
        table = cls.__new__(cls)
        table._load(lines)
        return table

    def _load(self, lines: Iterable[str]) -> None:
        rows = (line.removesuffix("\n") for line in lines)
        if next(rows, "") != DATABASE_HEADER:
            raise ValueError("Invalid database header")
        rates: dict[str, float] = {}
        for line in rows:
            date, comma, number = line.partition(",")
            if not comma:
                raise ValueError("Invalid input string format in database.")
            rates[date] = _atof(number)
        self._rates = rates
        self._dates = sorted(rates)

    def __len__(self) -> int:
        return len(self._dates)

    def rate_on(self, date: str) -> float:
        """Return the rate for ``date``, or for the closest earlier date.

        Dates before the first entry, and dates after the last one, are
        reported as missing.
        """
        index = bisect_left(self._dates, date)
        if index == len(self._dates):
            raise LookupError("Error: date not found in database.")
        if self._dates[index] == date:
            return self._rates[date]
        if index == 0:
            raise LookupError("Error: date not found in database.")
        return self._rates[self._dates[index - 1]]