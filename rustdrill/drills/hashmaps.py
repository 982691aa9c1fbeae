"""Hash map drills: fruit baskets and a football scores table."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

U8_MAX = 255
_UNSIGNED = re.compile(r"\+?[0-9]+")
_NEW_FRUIT_COUNT = 2


class Fruit(Enum):
    """Kinds of fruit that may go in a basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds and at least five fruits."""
    return {"banana": 2, "orange": 2, "mango": 3}


def fill_basket(basket: dict[Fruit, int]) -> dict[Fruit, int]:
    """Add two of every kind of fruit not yet in the basket, leaving the rest untouched."""
    for fruit in Fruit:
        basket.setdefault(fruit, _NEW_FRUIT_COUNT)
    return basket


@dataclass
class Team:
    """A team's goal tally."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0

    def record(self, scored: int, conceded: int) -> None:
        """Add the goals of one match."""
        self.goals_scored = _checked_u8(self.goals_scored + scored)
        self.goals_conceded = _checked_u8(self.goals_conceded + conceded)


def _checked_u8(value: int) -> int:
    if value > U8_MAX:
        raise OverflowError("attempt to add with overflow")
    return value


def _parse_u8(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > U8_MAX:
        raise ValueError(f"goal count too large: {text!r}")
    return value


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def build_scores_table(results: str) -> dict[str, Team]:
    """Build the scores table from lines of "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_u8(fields[2])
        team_2_score = _parse_u8(fields[3])

        scores.setdefault(team_1_name, Team(team_1_name)).record(team_1_score, team_2_score)
        scores.setdefault(team_2_name, Team(team_2_name)).record(team_2_score, team_1_score)
    return scores