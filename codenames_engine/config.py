"""Game settings and their JSON loader."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from .state import Team


DEFAULT_NUMBER_OF_CARDS = 25
DEFAULT_NUMBER_OF_ASSASSINS = 1


@dataclass(frozen=True)
class GameSettings:
    """Board size and key layout for a new game."""
    number_of_cards: int = DEFAULT_NUMBER_OF_CARDS
    starting_team: Team = Team.RED
    number_of_assassins: int = DEFAULT_NUMBER_OF_ASSASSINS

    def __post_init__(self):
        _require(
            isinstance(self.number_of_cards, int) and self.number_of_cards > 0,
            "numberOfCards must be a positive integer",
        )
        _require(
            isinstance(self.number_of_assassins, int) and self.number_of_assassins >= 0,
            "numberOfAssassins must be a non-negative integer",
        )
        _require(self.starting_team.is_playing, "startingTeam must be 'red' or 'green'")


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ValueError(msg)


def settings_from_dict(data: Dict[str, Any]) -> GameSettings:
    starting_team = data.get("startingTeam", Team.RED.value)
    _require(
        starting_team in (Team.RED.value, Team.GREEN.value),
        f"startingTeam must be 'red' or 'green', got {starting_team!r}",
    )
    return GameSettings(
        number_of_cards=int(data.get("numberOfCards", DEFAULT_NUMBER_OF_CARDS)),
        starting_team=Team(starting_team),
        number_of_assassins=int(data.get("numberOfAssassins", DEFAULT_NUMBER_OF_ASSASSINS)),
    )


def load_settings(path: str | Path) -> GameSettings:
    p = Path(path)
    data = json.loads(p.read_text())
    _require(isinstance(data, dict), "Settings file must contain a JSON object")
    return settings_from_dict(data)
