"""Turn engine entry point.

`advance` is the single operation the host application calls. It looks at
`state.stage` and runs the matching transition from `stages`.

Input can reach the engine two ways. The host may write the clue or guess
into the latest round itself and call `advance(state)`, or it may pass a
`Clue` / `Guess` action and let `advance` merge it first.

The engine does not serialize concurrent calls. The host must run at most
one `advance` per game at a time, against the latest stored state.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from .errors import InvalidStageError, ValidationError
from .state import GameState, Stage, Turn
from .stages import (
    process_codebreaker_stage,
    process_codemaster_stage,
    process_intro_stage,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Clue:
    """A clue given by a codemaster."""
    codeword: str
    guesses_allowed: int


@dataclass(frozen=True)
class Guess:
    """A word picked by a codebreaker."""
    word: str


TurnInput = Union[Clue, Guess]


def give_clue(state: GameState, codeword: str, guesses_allowed: int) -> GameState:
    """
    Write a clue into the latest round.

    Args:
        state: Current game state
        codeword: The one-word clue
        guesses_allowed: How many guesses the codebreakers get, zero allowed

    Returns:
        New game state with the clue set on the latest round
    """
    latest_round = state.latest_round
    if latest_round is None:
        raise ValidationError("No rounds found in the game state.")
    if latest_round.codeword is not None or latest_round.guesses_allowed is not None:
        raise ValidationError("A clue has already been given this round.")

    codeword = codeword.strip()
    if not codeword:
        raise ValidationError("The codeword must not be empty.")

    # Validate clue word isn't on the board
    codeword_upper = codeword.upper()
    for word in state.words:
        if word.upper() == codeword_upper:
            raise ValidationError(f"Clue word '{codeword}' is on the board.")

    return state.with_latest_round(latest_round.with_clue(codeword, guesses_allowed))


def make_guess(state: GameState, word: str) -> GameState:
    """
    Append a guess as a new, unresolved turn of the latest round.

    Args:
        state: Current game state
        word: The word being guessed

    Returns:
        New game state with the turn appended
    """
    latest_round = state.latest_round
    if latest_round is None:
        raise ValidationError("No rounds found in the game state.")
    return state.with_latest_round(latest_round.with_turn(Turn(guessed_word=word)))


def _merge_input(state: GameState, action: Optional[TurnInput]) -> GameState:
    if action is None:
        return state
    if state.stage == Stage.CODEMASTER and isinstance(action, Clue):
        return give_clue(state, action.codeword, action.guesses_allowed)
    if state.stage == Stage.CODEBREAKER and isinstance(action, Guess):
        return make_guess(state, action.word)
    raise ValidationError(
        f"{type(action).__name__} is not accepted in the {state.stage.value} stage."
    )


def advance(state: GameState, action: Optional[TurnInput] = None) -> GameState:
    """
    Run the transition for the current stage.

    Args:
        state: Current game state
        action: Optional clue or guess to merge before the transition runs

    Returns:
        The next game state

    Raises:
        ValidationError: If the state or action fails the stage preconditions
        InvalidStageError: If the game is over or the stage is unknown
        InvariantViolation: If the board shows both teams winning
    """
    stage = state.stage
    if stage == Stage.GAMEOVER:
        raise InvalidStageError("Game has finished. No more turns.", stage=stage)
    if not isinstance(stage, Stage):
        raise InvalidStageError(f"Unknown stage: '{stage}'", stage=stage)

    state = _merge_input(state, action)

    if stage == Stage.INTRO:
        next_state = process_intro_stage(state)
    elif stage == Stage.CODEMASTER:
        next_state = process_codemaster_stage(state)
    elif stage == Stage.CODEBREAKER:
        next_state = process_codebreaker_stage(state)
    else:
        raise InvalidStageError(f"Unknown stage: '{stage}'", stage=stage)

    logger.debug("Advanced %s -> %s", stage.value, next_state.stage.value)
    return next_state
