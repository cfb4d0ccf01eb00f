"""Precondition checks run before each stage transition."""

from .errors import InvalidStageError, ValidationError
from .state import GameState, Round, Stage


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ValidationError(msg)


def _require_stage(state: GameState, stage: Stage) -> None:
    """Only a live game in `stage` may run that stage's transition."""
    if state.stage == Stage.GAMEOVER or state.winner is not None:
        raise InvalidStageError("Game has finished. No more turns.", stage=state.stage)
    if state.stage != stage:
        actual = getattr(state.stage, "value", state.stage)
        raise InvalidStageError(f"Expected the {stage.value} stage, got '{actual}'", stage=state.stage)


def _require_playing_round(state: GameState) -> Round:
    latest_round = state.latest_round
    _require(latest_round is not None, "No rounds found in the game state.")
    _require(latest_round.team.is_playing, "The latest round must belong to a playing team.")
    return latest_round


def validate_intro_stage(state: GameState) -> None:
    """The intro stage must start from a clean board."""
    _require_stage(state, Stage.INTRO)
    _require(
        not any(card.selected for card in state.cards),
        "No cards should be selected in the intro stage.",
    )
    _require(
        not any(round_.turns for round_ in state.rounds),
        "Rounds should not contain turns in the intro stage.",
    )


def validate_codemaster_stage(state: GameState) -> None:
    """The latest round must carry a complete clue."""
    _require_stage(state, Stage.CODEMASTER)
    latest_round = _require_playing_round(state)

    codeword = latest_round.codeword
    _require(
        codeword is not None and codeword.strip() != "",
        "The latest round must have a codeword set.",
    )
    _require(
        latest_round.guesses_allowed is not None,
        "The latest round must have guessesAllowed set.",
    )
    guesses_allowed = latest_round.guesses_allowed
    # bool is an int subclass; True is not a guess count
    _require(
        isinstance(guesses_allowed, int)
        and not isinstance(guesses_allowed, bool)
        and guesses_allowed >= 0,
        "guessesAllowed must be a non-negative integer.",
    )


def validate_codebreaker_stage(state: GameState) -> None:
    """The latest turn must be a fresh guess of a word on the board."""
    _require_stage(state, Stage.CODEBREAKER)
    latest_round = _require_playing_round(state)
    _require(len(latest_round.turns) > 0, "The latest round must have at least one turn.")

    latest_turn = latest_round.turns[-1]
    guessed_word = latest_turn.guessed_word
    _require(
        state.find_card(guessed_word) is not None,
        f"Guessed word '{guessed_word}' does not match any card in the game state.",
    )
    _require(latest_turn.outcome is None, "The latest turn has already been resolved.")
    guesses_allowed = latest_round.guesses_allowed
    _require(
        guesses_allowed is None
        or (
            isinstance(guesses_allowed, int)
            and not isinstance(guesses_allowed, bool)
            and guesses_allowed >= 0
        ),
        "guessesAllowed must be a non-negative integer.",
    )

    earlier_guesses = [
        turn.guessed_word
        for round_ in state.rounds[:-1]
        for turn in round_.turns
    ]
    earlier_guesses.extend(turn.guessed_word for turn in latest_round.turns[:-1])
    _require(guessed_word not in earlier_guesses, f"Word '{guessed_word}' has already been guessed.")


_VALIDATORS = {
    Stage.INTRO: validate_intro_stage,
    Stage.CODEMASTER: validate_codemaster_stage,
    Stage.CODEBREAKER: validate_codebreaker_stage,
}


def validate(stage: Stage, state: GameState) -> None:
    """
    Check the preconditions for running the transition out of `stage`.

    Args:
        stage: Stage whose transition is about to run
        state: Game state the transition will receive

    Raises:
        ValidationError: If a precondition does not hold
        InvalidStageError: If `stage` has no outgoing transition
    """
    if stage == Stage.GAMEOVER:
        raise InvalidStageError("Game has finished. No more turns.", stage=stage)

    validator = _VALIDATORS.get(stage)
    if validator is None:
        raise InvalidStageError(f"Unknown stage: '{stage}'", stage=stage)
    validator(state)
