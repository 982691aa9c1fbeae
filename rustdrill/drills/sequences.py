"""Sequence drills: optional values, arrays and doubling lists."""

from __future__ import annotations

from collections.abc import Iterable

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1


def _i32(value: int) -> int:
    if not I32_MIN <= value <= I32_MAX:
        raise OverflowError("attempt to multiply with overflow")
    return value


def maybe_icecream(time_of_day: int) -> int | None:
    """Ice cream left at an hour: 5 before 22, 0 up to 24, None past that."""
    if time_of_day < 22:
        return 5
    if time_of_day <= 24:
        return 0
    return None


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed array and a list holding the same elements."""
    array = (10, 20, 30, 40)
    return array, list(array)


def vec_loop(values: Iterable[int]) -> list[int]:
    """Double every value, element by element."""
    doubled = list(values)
    for index, value in enumerate(doubled):
        doubled[index] = _i32(value * 2)
    return doubled


def vec_map(values: Iterable[int]) -> list[int]:
    """Double every value into a new list."""
    return [_i32(2 * value) for value in values]