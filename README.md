# threetools

Three small command-line tools in one package.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## btc: value of bitcoin holdings on a date

```
btc input.txt
```

Rates are read from `data.csv` in the current directory. That file must start
with the header `date,exchange_rate` and hold one `date,rate` pair per line. If
the file cannot be opened, or its header or one of its lines is malformed, the
tool prints the error to standard error and exits with status 1.

The input file starts with the header `date | value`. If the header is wrong,
`Error: Invalid database header` goes to standard error and the remaining lines
are still processed. Each line after the header reads `YYYY-MM-DD | amount`,
where the amount is between 0 and 1000. For every valid line the tool prints
the date, the amount and the amount times the rate:

```
2011-01-03 => 3 = 0.9
```

If the exact date is not in the database, the rate of the closest earlier date
is used. A date before the first entry or after the last entry is reported as
`Error: date not found in database.`. Other invalid lines produce messages such
as `Error: bad input => ...`, `Error: invalid date format.`,
`Error: invalid number.`, `Error: not a positive number.` or
`Error: too large a number.` on standard error. Processing then continues with
the next line.

From Python:

```python
from threetools.exchange import ExchangeRates
from threetools.btc import parse_line, process_lines

rates = ExchangeRates.from_lines(["date,exchange_rate", "2011-01-01,0.3", "2011-01-05,0.4"])
rates.rate_on("2011-01-03")   # 0.3
len(rates)                    # 2
parse_line("2011-01-03 | 3")  # ("2011-01-03", 3.0)

for result in process_lines(rates, ["date | value", "2011-01-03 | 3"]):
    print(result)             # "2011-01-03 => 3 = 0.9"
```

`process_lines` yields either a result string or the exception raised for that
line. `ExchangeRates(path)` loads a file. It raises `OSError` if the file cannot
be opened and `ValueError` if its contents are malformed. `rate_on` raises
`LookupError` for dates it cannot cover. `check_date_format` and `check_number`
raise `InputLineError`, a subclass of `ValueError`.

No `data.csv` comes with the package. You must supply your own rate file.

## rpn: reverse Polish calculator

```
rpn "8 9 * 9 - 9 - 9 - 4 - 1 +"
```

Operands are single digits, and whitespace is ignored. The operators are
`+ - * /`. Division truncates toward zero, so every result is an integer. A
malformed expression prints `Error`. This covers unknown characters, fewer than
three tokens, missing operands and leftover operands. Division by zero prints
`Error: Division by zero`. Both messages go to standard output.

```python
from threetools.rpn import evaluate, perform_operation, RPNError

evaluate("1 2 * 2 / 2 * 2 4 - +")  # 0
perform_operation("/", -7, 2)      # -3
```

## pmergeme: merge sort with insertion for short runs

```
pmergeme 3 5 9 7 4
```

The tool prints the sequence before and after sorting. It then prints the time
taken, in microseconds, to sort the values held in a list and in a deque. Each
argument must consist only of digits and be at most 4294967295. Empty arguments
are skipped. Any other argument prints `Error: ...` and the tool stops.

```python
from threetools.pmergeme import merge_insertion_sort, parse_arguments, format_values

merge_insertion_sort([3, 5, 9, 7, 4])  # [3, 4, 5, 7, 9]
parse_arguments(["3", "", "5"])        # [3, 5]
format_values([3, 5])                  # "3 5 "
```

Runs of more than six items are halved and merged. Shorter runs are sorted by
insertion.