"""Value bitcoin amounts listed in a ``date | value`` file at historical rates."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator

from threetools.exchange import ExchangeRates, _atof

INPUT_HEADER = "date | value"
DATABASE_PATH = "data.csv"

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_ALLOWED = frozenset(_DIGITS + _WHITESPACE + "-.|")
_LONG_MONTHS = (1, 3, 5, 7, 8, 10, 12)


class InputLineError(ValueError):
    """A line of the input file could not be used."""


def _invalid_date() -> InputLineError:
    return InputLineError("Error: invalid date format.")


def check_date_format(date: str) -> None:
    """Raise InputLineError unless ``date`` looks like a valid YYYY-MM-DD."""
    if date.count("-") != 2:
        raise _invalid_date()
    year, month_text, day_text = date.split("-")
    if (len(year), len(month_text), len(day_text)) != (4, 2, 2):
        raise _invalid_date()
    month = _atof(month_text)
    day = _atof(day_text)
    if not month or not day or month > 12 or day > 31:
        raise _invalid_date()
    if month not in _LONG_MONTHS and day > 30:
        raise _invalid_date()
    if month == 2 and day > 29:
        raise _invalid_date()


def check_number(text: str) -> None:
    """Reject a value made of two runs of digits separated by whitespace."""
    rest = text.lstrip(_WHITESPACE).lstrip(_DIGITS).lstrip(_WHITESPACE)
    if rest[:1] and rest[0] in _DIGITS:
        raise InputLineError("Error: invalid number.")


def parse_line(line: str) -> tuple[str, float]:
    """Split an input line into its date and a value between 0 and 1000."""
    before_pipe = line.partition("|")[0]
    if (
        not set(line) <= _ALLOWED
        or line.count("|") != 1
        or before_pipe.count("-") != 2
        or line.count(".") > 1
    ):
        raise InputLineError("Error: bad input => " + line)

    date, _, number = line.partition("|")
    date = date.strip(_WHITESPACE)
    if len(date) != 10:
        raise _invalid_date()
    check_date_format(date)

    check_number(number)
    value = _atof(number)
    if value < 0:
        raise InputLineError("Error: not a positive number.")
    if value > 1000.0:
        raise InputLineError("Error: too large a number.")
    return date, value


def process_lines(
    exchange: ExchangeRates, lines: Iterable[str]
) -> Iterator[str | Exception]:
    """Yield a result line for each input line, or the error it raised.

    The first line is the header; a wrong header is reported and the
    remaining lines are processed anyway.
    """
    rows = (line.removesuffix("\n") for line in lines)
    if next(rows, "") != INPUT_HEADER:
        yield InputLineError("Error: Invalid database header")
    for line in rows:
        try:
            date, value = parse_line(line)
            rate = exchange.rate_on(date)
        except (InputLineError, LookupError) as exc:
            yield exc
        else:
            yield f"{date} => {value:g} = {value * rate:g}"


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: btc input_file.txt")
        return 1
    try:
        exchange = ExchangeRates(DATABASE_PATH)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        handle = open(args[0], encoding="utf-8", errors="replace")
    except OSError:
        print("Error: could not open input file.", file=sys.stderr)
        return 1
    with handle:
        for result in process_lines(exchange, handle):
            if isinstance(result, Exception):
                print(result, file=sys.stderr)
            else:
                print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())