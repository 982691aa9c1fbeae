"""Basic drills: conditionals and simple functions."""

from __future__ import annotations

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1


def _i32(value: int) -> int:
    if not I32_MIN <= value <= I32_MAX:
        raise OverflowError(f"{value} does not fit in a signed 32-bit integer")
    return value


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """"foo" for "fizz", "bar" for "fuzz", "baz" otherwise."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def call_me(num: int) -> list[str]:
    """Print and return one ring line per call, numbered from 1."""
    lines = [f"Ring! Call number {i + 1}" for i in range(num)]
    for line in lines:
        print(line)
    return lines


def is_even(num: int) -> bool:
    """Whether the number is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Take 10 off an even price and 3 off an odd one."""
    return _i32(price - 10) if is_even(price) else _i32(price - 3)


def square(num: int) -> int:
    """Square a signed 32-bit number, raising OverflowError when it does not fit."""
    return _i32(num * num)