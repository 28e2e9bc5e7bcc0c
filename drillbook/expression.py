"""Evaluate arithmetic spelled in words, such as "add onectwo three"."""

from __future__ import annotations

import argparse
import operator
import sys
from collections.abc import Callable, Iterable

INVALID_WORDS = "expression evaluation stopped invalid words present"
INCOMPLETE = "expression is not complete or invalid"

_DIGITS = {
    "zero": 0, "one": 1, "two": 2, "three": 3, "four": 4,
    "five": 5, "six": 6, "seven": 7, "eight": 8, "nine": 9,
}


def _divide(left: int, right: int) -> int:
    """Integer division that truncates toward zero."""
    if right == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _remainder(left: int, right: int) -> int:
    """Remainder whose sign follows the dividend."""
    return left - right * _divide(left, right)


def _power(base: int, exponent: int) -> int:
    if exponent < 0:
        raise ValueError("negative exponent")
    return base**exponent


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "add": operator.add,
    "sub": operator.sub,
    "mul": operator.mul,
    "rem": _remainder,
    "pow": _power,
    "div": _divide,
}


def word_to_number(word: str) -> int:
    """Read digit words joined by 'c', e.g. "onectwoczero" is 120.

    Every segment followed by a 'c' must be a digit word, otherwise
    ValueError is raised; an unrecognised final segment is ignored.
    """
    *complete, last = word.split("c")
    number = 0
    for segment in complete:
        if segment not in _DIGITS:
            raise ValueError(f"{segment!r} is not a digit word")
        number = number * 10 + _DIGITS[segment]
    if last in _DIGITS:
        number = number * 10 + _DIGITS[last]
    return number


def evaluate_tokens(tokens: Iterable[str]) -> int:
    """Evaluate operation and number words.

    Operations and numbers are kept on separate stacks; the most recent
    operation is applied to the two most recent numbers until one number
    remains. Raises ValueError with the program's message when a word is
    invalid or the expression is incomplete.
    """
    numbers: list[int] = []
    operations: list[Callable[[int, int], int]] = []
    for token in tokens:
        if token in _OPERATIONS:
            operations.append(_OPERATIONS[token])
            continue
        try:
            numbers.append(word_to_number(token))
        except ValueError:
            raise ValueError(INVALID_WORDS) from None

    if not operations or len(numbers) < 2:
        raise ValueError(INCOMPLETE)

    while operations and len(numbers) >= 2:
        apply = operations.pop()
        right = numbers.pop()
        left = numbers.pop()
        numbers.append(apply(left, right))

    if len(numbers) != 1:
        raise ValueError(INCOMPLETE)
    return numbers[0]


def evaluate(line: str) -> int:
    """Evaluate a whitespace-separated line of words."""
    return evaluate_tokens(line.split())


def main(argv: list[str] | None = None) -> int:
    """Evaluate words given as arguments, or one line read from standard input."""
    parser = argparse.ArgumentParser(description="Evaluate arithmetic written in words.")
    parser.add_argument("words", nargs="*", help="words of the expression")
    args = parser.parse_args(argv)
    line = " ".join(args.words) if args.words else sys.stdin.readline()
    try:
        print(evaluate(line))
    except (ValueError, ArithmeticError) as exc:
        print(exc)
    return 0