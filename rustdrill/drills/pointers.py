"""Pointer drills: a cons list and copy-on-write absolute values."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A value followed by the rest of the list."""

    value: int
    rest: Union[Cons, Nil]


def create_empty_list() -> Nil:
    """An empty cons list."""
    return Nil()


def create_non_empty_list() -> Cons:
    """A cons list holding a single zero."""
    return Cons(0, create_empty_list())


def abs_all(values: Sequence[int]) -> Sequence[int]:
    """Absolute values of the sequence.

    The same object comes back when nothing is negative; otherwise a new
    list is made and the input is left untouched.
    """
    if all(value >= 0 for value in values):
        return values
    return [abs(value) for value in values]