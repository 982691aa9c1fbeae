"""Error-handling drills: name tags, token costs and positive integers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

I32_BITS = 32
I64_BITS = 64
U64_MAX = 2**64 - 1
PROCESSING_FEE = 1
COST_PER_ITEM = 5

_SIGNED = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width strictly, like a typed parser would."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _SIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > 2 ** (bits - 1) - 1:
        raise ValueError("number too large to fit in target type")
    if value < -(2 ** (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the name tag text; ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Token cost of the typed quantity: five per item plus a fee of one.

    Raises ValueError if the quantity is not a 32-bit integer and
    OverflowError if the cost does not fit in one.
    """
    quantity = _parse_int(item_quantity, I32_BITS)
    cost = quantity * COST_PER_ITEM + PROCESSING_FEE
    if not -(2 ** (I32_BITS - 1)) <= cost <= 2 ** (I32_BITS - 1) - 1:
        raise OverflowError("attempt to multiply with overflow")
    return cost


def remaining_tokens(tokens: int, item_quantity: str) -> int:
    """Spend tokens on the typed quantity if affordable and return what is left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationErrorKind(Enum):
    """Why a positive non-zero integer could not be created."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """A value is not a positive non-zero integer."""

    def __init__(self, kind: CreationErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


class ParsePosNonzeroError(ValueError):
    """Text could not be parsed into a positive non-zero integer.

    `cause` is either the CreationError or the ValueError from parsing.
    """

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero; CreationError otherwise."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationErrorKind.ZERO)
        if self.value > U64_MAX:
            raise OverflowError(f"{self.value} does not fit in an unsigned 64-bit integer")


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text as a positive non-zero integer, raising ParsePosNonzeroError."""
    try:
        value = _parse_int(text, I64_BITS)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err