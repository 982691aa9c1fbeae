"""Quiz drills: pricing, a string transformer and report cards."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


def calculate_price_of_apples(quantity: int) -> int:
    """Two per apple, or one per apple when more than 40 are bought."""
    return quantity * 2 if quantity <= 40 else quantity


@dataclass(frozen=True)
class Uppercase:
    """Upper-case the string."""


@dataclass(frozen=True)
class Trim:
    """Strip surrounding whitespace."""


@dataclass(frozen=True)
class Append:
    """Append "bar" the given number of times."""

    count: int


Command = Union[Uppercase, Trim, Append]


def _apply(text: str, command: Command) -> str:
    match command:
        case Uppercase():
            return text.upper()
        case Trim():
            return text.strip()
        case Append(count=count):
            return text + "bar" * count
    raise TypeError(f"unknown command: {command!r}")


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    return [_apply(text, command) for text, command in items]


@dataclass
class ReportCard(Generic[T]):
    """A report card with a numeric or alphabetic grade."""

    grade: T
    student_name: str
    student_age: int

    def render(self) -> str:
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"