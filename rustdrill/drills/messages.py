"""Message drills: a small state machine driven by message variants."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Point:
    """A position on the board."""

    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    """Switch to a new colour."""

    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class Echo:
    """Say something."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to a point."""

    point: Point


@dataclass(frozen=True)
class Quit:
    """Stop processing."""


Message = Union[ChangeColor, Echo, Move, Quit]


@dataclass
class State:
    """Colour, position and quit flag updated by messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(red=red, green=green, blue=blue):
                self.color = (red, green, blue)
            case Move(point=point):
                self.position = point
            case Quit():
                self.quit = True
            case Echo():
                print("Echo")
            case _:
                raise TypeError(f"unknown message: {message!r}")