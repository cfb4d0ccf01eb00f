"""Conversion between GameState and the stored JSON game document."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from .errors import ValidationError
from .state import Card, GameState, Round, Stage, Team, Turn, TurnOutcome


def _field(data: Dict[str, Any], key: str, where: str) -> Any:
    if not isinstance(data, dict) or key not in data:
        raise ValidationError(f"Missing '{key}' in {where}")
    return data[key]


def _enum(enum_cls, value: Any, key: str):
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationError(f"Invalid value for '{key}': {value!r}") from None


def _guess_count(value: Any):
    # bool is an int subclass; a JSON true is not a guess count
    if value is None or (isinstance(value, int) and not isinstance(value, bool)):
        return value
    raise ValidationError(f"Invalid value for 'guessesAllowed': {value!r}")


def _flag(value: Any, key: str) -> bool:
    if not isinstance(value, bool):
        raise ValidationError(f"Invalid value for '{key}': {value!r}")
    return value


def state_to_dict(state: GameState) -> Dict[str, Any]:
    rounds: List[Dict[str, Any]] = []
    for round_ in state.rounds:
        round_data: Dict[str, Any] = {"team": round_.team.value}
        if round_.codeword is not None:
            round_data["codeword"] = round_.codeword
        if round_.guesses_allowed is not None:
            round_data["guessesAllowed"] = round_.guesses_allowed
        turns = []
        for turn in round_.turns:
            turn_data: Dict[str, Any] = {"guessedWord": turn.guessed_word}
            if turn.outcome is not None:
                turn_data["outcome"] = turn.outcome.value
            turns.append(turn_data)
        round_data["turns"] = turns
        rounds.append(round_data)

    data: Dict[str, Any] = {
        "stage": state.stage.value,
        "cards": [
            {"word": c.word, "team": c.team.value, "selected": c.selected}
            for c in state.cards
        ],
        "rounds": rounds,
    }
    if state.winner is not None:
        data["winner"] = state.winner.value
    return data


def state_from_dict(data: Dict[str, Any]) -> GameState:
    cards = [
        Card(
            word=_field(c, "word", "card"),
            team=_enum(Team, _field(c, "team", "card"), "team"),
            selected=_flag(c.get("selected", False), "selected"),
        )
        for c in _field(data, "cards", "game state")
    ]

    rounds = []
    for r in _field(data, "rounds", "game state"):
        team = _enum(Team, _field(r, "team", "round"), "team")
        turns = [
            Turn(
                guessed_word=_field(t, "guessedWord", "turn"),
                outcome=_enum(TurnOutcome, t["outcome"], "outcome") if t.get("outcome") else None,
            )
            for t in r.get("turns") or []
        ]
        rounds.append(Round(
            team=team,
            codeword=r.get("codeword"),
            guesses_allowed=_guess_count(r.get("guessesAllowed")),
            turns=turns,
        ))

    winner = data.get("winner")
    return GameState(
        stage=_enum(Stage, _field(data, "stage", "game state"), "stage"),
        cards=cards,
        rounds=rounds,
        winner=_enum(Team, winner, "winner") if winner else None,
    )


def dumps_state(state: GameState) -> str:
    return json.dumps(state_to_dict(state), indent=2)


def loads_state(text: str) -> GameState:
    return state_from_dict(json.loads(text))


def save_state(state: GameState, filepath: str | Path) -> None:
    """
    Save a game state to a JSON file.

    Args:
        state: Game state to save
        filepath: Path to save the JSON file
    """
    p = Path(filepath)
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w") as f:
        f.write(dumps_state(state))


def load_state(filepath: str | Path) -> GameState:
    """
    Load a game state from a JSON file.

    Args:
        filepath: Path to the JSON file

    Returns:
        The stored GameState
    """
    with open(filepath) as f:
        return loads_state(f.read())
