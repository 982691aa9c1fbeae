"""Iterator drills: checked division, factorials and counting progress values."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from enum import Enum

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1
U64_MAX = 2**64 - 1
NUMBERS = (27, 297, 38502, 81)
DIVISOR = 27


class DivisionError(ArithmeticError):
    """A division that could not produce an exact integer result."""


class NotDivisibleError(DivisionError):
    """The dividend is not an exact multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivideByZeroError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(DivideByZeroError)


def divide(a: int, b: int) -> int:
    """Return a divided by b if a is evenly divisible by b; raise a DivisionError otherwise."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(dividend=a, divisor=b)
    quotient = a // b
    if not I32_MIN <= quotient <= I32_MAX:
        raise OverflowError("attempt to divide with overflow")
    return quotient


def result_with_list() -> list[int]:
    """Divide every number by 27, raising at the first failure."""
    return [divide(number, DIVISOR) for number in NUMBERS]


def list_of_results() -> list[int | DivisionError]:
    """Divide every number by 27, keeping each failure in place of its result."""
    results: list[int | DivisionError] = []
    for number in NUMBERS:
        try:
            results.append(divide(number, DIVISOR))
        except DivisionError as err:
            results.append(err)
    return results


def factorial(num: int) -> int:
    """The factorial of an unsigned 64-bit number, raising OverflowError past that range."""
    if num < 0:
        raise ValueError(f"{num} is negative")
    result = math.prod(range(1, num + 1))
    if result > U64_MAX:
        raise OverflowError("attempt to multiply with overflow")
    return result


class Progress(Enum):
    """How far an exercise has come."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count the entries of the mapping with the given progress."""
    count = 0
    for progress in mapping.values():
        if progress == value:
            count += 1
    return count


def count_iterator(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count the entries of the mapping with the given progress."""
    return sum(1 for progress in mapping.values() if progress == value)


def count_collection_for(collection: Iterable[Mapping[str, Progress]], value: Progress) -> int:
    """Count the entries with the given progress across all mappings."""
    count = 0
    for mapping in collection:
        count += count_for(mapping, value)
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count the entries with the given progress across all mappings."""
    return sum(count_iterator(mapping, value) for mapping in collection)