"""Counting with dictionaries: fruit baskets and a football scores table."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_GOALS = re.compile(r"\+?[0-9]+")
_MAX_GOALS = 255


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds of fruit and at least five pieces."""
    return {"banana": 2, "apple": 8, "mango": 4}


class Fruit(Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add one of every kind of fruit not yet in the basket, leaving the rest alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    goals_scored: int = 0
    goals_conceded: int = 0


def _goals(text: str) -> int:
    if _GOALS.fullmatch(text) is None:
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > _MAX_GOALS:
        raise ValueError(f"goal count out of range: {text!r}")
    return value


def build_scores_table(results: str) -> dict[str, Team]:
    """Goals scored and conceded per team, from lines of `team1,team2,goals1,goals2`."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        score_1, score_2 = _goals(fields[2]), _goals(fields[3])

        first = scores.setdefault(team_1, Team())
        first.goals_scored += score_1
        first.goals_conceded += score_2

        second = scores.setdefault(team_2, Team())
        second.goals_scored += score_2
        second.goals_conceded += score_1
    return scores