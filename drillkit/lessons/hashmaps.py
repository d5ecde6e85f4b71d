"""Worked answers to the hash map exercises."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_U8_MAX = 255
_U8_TEXT = re.compile(r"\+?[0-9]+")


def basket_of_fruits() -> dict[str, int]:
    """A basket with at least three kinds and five pieces of fruit."""
    return {"banana": 2, "apple": 3, "strawberrie": 8}


class Fruit(enum.Enum):
    APPLE = enum.auto()
    BANANA = enum.auto()
    MANGO = enum.auto()
    LYCHEE = enum.auto()
    PINEAPPLE = enum.auto()


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add two of every fruit kind not yet in ``basket``; present kinds stay untouched."""
    for fruit in Fruit:
        basket.setdefault(fruit, 2)


@dataclass
class Team:
    """Goals a team scored and conceded."""

    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str) -> int:
    if not _U8_TEXT.fullmatch(text):
        raise ValueError(f"invalid goal count: {text!r}")
    goals = int(text)
    if goals > _U8_MAX:
        raise ValueError(f"goal count out of range: {text!r}")
    return goals


def _add_goals(total: int, goals: int) -> int:
    result = total + goals
    if result > _U8_MAX:
        raise OverflowError("goal total exceeds 255")
    return result


def build_scores_table(results: str) -> dict[str, Team]:
    """Tally goals from lines of the form "team_1,team_2,goals_1,goals_2"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_goals(fields[2])
        team_2_score = _parse_goals(fields[3])

        team_1 = scores.setdefault(team_1_name, Team())
        team_1.goals_scored = _add_goals(team_1.goals_scored, team_1_score)
        team_1.goals_conceded = _add_goals(team_1.goals_conceded, team_2_score)

        team_2 = scores.setdefault(team_2_name, Team())
        team_2.goals_scored = _add_goals(team_2.goals_scored, team_2_score)
        team_2.goals_conceded = _add_goals(team_2.goals_conceded, team_1_score)
    return scores