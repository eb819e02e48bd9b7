import random
from collections import deque

import pytest

from threetools.pmergeme import (
    format_values,
    main,
    merge_insertion_sort,
    parse_arguments,
)


@pytest.mark.parametrize("size", list(range(0, 20)) + [63, 64, 65, 1000])
def test_sort_matches_sorted(size):
    rng = random.Random(size)
    values = [rng.randrange(0, 50) for _ in range(size)]
    assert merge_insertion_sort(values) == sorted(values)


def test_sort_does_not_modify_input():
    values = [5, 3, 9, 1, 7, 2, 8, 6, 4]
    snapshot = list(values)
    result = merge_insertion_sort(values)
    assert values == snapshot
    assert result == sorted(snapshot)


def test_sort_accepts_deque():
    values = deque([4294967295, 0, 17, 3, 3, 9, 1, 12])
    assert merge_insertion_sort(values) == sorted(values)


def test_sort_already_ordered_and_reversed():
    values = list(range(30))
    assert merge_insertion_sort(values) == values
    assert merge_insertion_sort(reversed(values)) == values


def test_parse_arguments_skips_empty():
    assert parse_arguments(["3", "", "1", "42"]) == [3, 1, 42]


def test_parse_arguments_accepts_max_unsigned():
    assert parse_arguments(["4294967295"]) == [4294967295]


@pytest.mark.parametrize("arg", ["-1", "abc", "1.5", " 1", "+3"])
def test_parse_arguments_rejects_non_digits(arg):
    with pytest.raises(ValueError, match="Non Digit Character Entred"):
        parse_arguments([arg])


def test_parse_arguments_rejects_overflow():
    with pytest.raises(ValueError, match="Conversion to unsigned int failed"):
        parse_arguments(["4294967296"])


def test_format_values():
    assert format_values([1, 2]) == "1 2 "
    assert format_values([]) == ""


def test_main_output(capsys):
    assert main(["3", "1", "2"]) == 0
    lines = capsys.readouterr().out.split("\n")
    assert lines[0] == "Before: 3 1 2 "
    assert lines[2] == "After:  1 2 3 "
    assert lines[4].startswith("Time to process a range of 3 elements with list : ")
    assert lines[4].endswith(" us")
    assert lines[6].startswith("Time to process a range of 3 elements with deque : ")


def test_main_reports_bad_argument(capsys):
    assert main(["1", "x"]) == 0
    assert capsys.readouterr().out == "Error: Non Digit Character Entred\n"


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Too few argument\n"