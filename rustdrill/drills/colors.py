"""Colour drills: building RGB colours from integers that may be out of range."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

_COMPONENTS = 3
_MIN = 0
_MAX = 255


class ColorErrorKind(Enum):
    """Why integers could not be turned into a colour."""

    BAD_LEN = "incorrect number of components"
    INT_CONVERSION = "component outside 0..=255"


class IntoColorError(ValueError):
    """Integers could not be converted into a Color."""

    def __init__(self, kind: ColorErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


def _check_range(values: tuple[int, ...]) -> None:
    if any(not _MIN <= value <= _MAX for value in values):
        raise IntoColorError(ColorErrorKind.INT_CONVERSION)


@dataclass(frozen=True)
class Color:
    """An RGB colour with components in 0..=255."""

    red: int
    green: int
    blue: int

    @classmethod
    def from_components(cls, values: Iterable[int]) -> Color:
        """Build a colour from exactly three integers in 0..=255."""
        components = tuple(values)
        if len(components) != _COMPONENTS:
            raise IntoColorError(ColorErrorKind.BAD_LEN)
        _check_range(components)
        red, green, blue = components
        return cls(red=red, green=green, blue=blue)

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> Color:
        """Build a colour from three separate integers in 0..=255."""
        return cls.from_components((red, green, blue))