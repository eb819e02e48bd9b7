"""Evaluate single-digit integer expressions in reverse Polish notation."""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


class RPNError(ValueError):
    """The expression could not be evaluated."""


def _truncating_divide(left: int, right: int) -> int:
    if right == 0:
        raise RPNError("Error: Division by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_divide,
}


def perform_operation(op: str, left: int, right: int) -> int:
    """Apply ``op`` to two operands; division truncates toward zero."""
    try:
        operation = _OPERATIONS[op]
    except KeyError:
        raise RPNError("Error") from None
    return operation(left, right)


def evaluate(expression: str) -> int:
    """Evaluate an expression whose operands are single decimal digits.

    Whitespace is ignored, so every digit is an operand of its own. Any
    other character, too short an expression, missing operands or
    operands left over raise RPNError.
    """
    tokens = [char for char in expression if char not in _WHITESPACE]
    if any(char not in _DIGITS and char not in _OPERATIONS for char in tokens):
        raise RPNError("Error")
    if len(tokens) <= 2:
        raise RPNError("Error")

    operands: list[int] = []
    for token in tokens:
        if token in _DIGITS:
            operands.append(int(token))
            continue
        if len(operands) < 2:
            raise RPNError("Error")
        right = operands.pop()
        left = operands.pop()
        operands.append(perform_operation(token, left, right))

    if len(operands) > 1:
        raise RPNError("Error")
    return operands[-1]


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print('Usage: RPN "inverted Polish expression"')
        return 1
    try:
        print(evaluate(args[0]))
    except RPNError as exc:
        print(exc)
    return 0


if __name__ == "__main__":
    sys.exit(main())