"""Sort non-negative integers with a merge sort that finishes small runs by insertion."""

from __future__ import annotations

import sys
import time
from bisect import insort_right
from collections import deque
from collections.abc import Iterable

UINT_MAX = 4294967295
_INSERTION_LIMIT = 6
_DIGITS = frozenset("0123456789")


def _insertion_sort(values: list[int]) -> list[int]:
    result: list[int] = []
    for value in values:
        insort_right(result, value)
    return result


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] > right[j]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_insertion_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order as a new list.

    Runs of more than six items are halved and merged; shorter runs are
    sorted by insertion.
    """
    items = list(values)
    if len(items) <= _INSERTION_LIMIT:
        return _insertion_sort(items)
    half = (len(items) + 1) // 2
    return _merge(merge_insertion_sort(items[:half]), merge_insertion_sort(items[half:]))


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn digit-only arguments into integers, skipping empty ones."""
    numbers: list[int] = []
    for arg in args:
        if not arg:
            continue
        if not set(arg) <= _DIGITS:
            raise ValueError("Non Digit Character Entred")
        number = int(arg)
        if number > UINT_MAX:
            raise ValueError("Conversion to unsigned int failed")
        numbers.append(number)
    return numbers


def format_values(values: Iterable[int]) -> str:
    """Render each value followed by a single space."""
    return "".join(f"{value} " for value in values)


def _timed_sort(values: Iterable[int]) -> tuple[list[int], float]:
    start = time.perf_counter()
    result = merge_insertion_sort(values)
    return result, (time.perf_counter() - start) * 1_000_000.0


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Too few argument")
        return 1
    try:
        numbers = parse_arguments(args)
    except ValueError as exc:
        print(f"Error: {exc}")
        return 0

    print(f"Before: {format_values(numbers)}", end="")
    _, deque_elapsed = _timed_sort(deque(numbers))
    ordered, list_elapsed = _timed_sort(numbers)
    print(f"\n\nAfter:  {format_values(ordered)}", end="")
    count = len(numbers)
    print(
        f"\n\nTime to process a range of {count} elements with list : "
        f"{list_elapsed:g} us"
    )
    print(
        f"\nTime to process a range of {count} elements with deque : "
        f"{deque_elapsed:g} us"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())