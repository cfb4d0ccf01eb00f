"""Stage transition functions.

Each function takes the current GameState, validates it for its stage and
returns a new GameState. Inputs are never mutated.
"""

import logging
from dataclasses import replace

from .state import Card, GameState, Round, Stage, Team, TurnOutcome
from .validation import (
    validate_codebreaker_stage,
    validate_codemaster_stage,
    validate_intro_stage,
)
from .winner import determine_winner

logger = logging.getLogger(__name__)


def process_intro_stage(state: GameState) -> GameState:
    """
    Unlock the codemaster's clue for the seed round.

    Args:
        state: Game state in the INTRO stage

    Returns:
        New game state in the CODEMASTER stage
    """
    validate_intro_stage(state)
    return replace(state, stage=Stage.CODEMASTER)


def process_codemaster_stage(state: GameState) -> GameState:
    """
    Hand the board to the codebreakers once the clue is in the latest round.

    Args:
        state: Game state in the CODEMASTER stage

    Returns:
        New game state in the CODEBREAKER stage
    """
    validate_codemaster_stage(state)
    return replace(state, stage=Stage.CODEBREAKER)


def resolve_outcome(card: Card, current_team: Team) -> TurnOutcome:
    """Classify a picked card relative to the team that picked it."""
    if card.team == Team.ASSASSIN:
        return TurnOutcome.ASSASSIN_CARD
    if card.team == current_team:
        return TurnOutcome.CORRECT_TEAM_CARD
    if card.team == Team.BYSTANDER:
        return TurnOutcome.BYSTANDER_CARD
    return TurnOutcome.OTHER_TEAM_CARD


def process_codebreaker_stage(state: GameState) -> GameState:
    """
    Apply the latest guess of the current round.

    The guessed card is selected and the turn's outcome recorded. Then, in
    order:
    - a cleared team, or the assassin, ends the game;
    - no guesses left hands the turn to the other team;
    - a correct pick keeps the codebreakers guessing;
    - any other pick hands the turn to the other team.

    Args:
        state: Game state in the CODEBREAKER stage, with the guess appended
            as the latest turn

    Returns:
        New game state in the CODEBREAKER, CODEMASTER or GAMEOVER stage
    """
    validate_codebreaker_stage(state)

    current_round = state.latest_round
    current_team = current_round.team
    selected_word = current_round.latest_turn.guessed_word

    updated_cards = tuple(
        card.select() if card.word == selected_word else card
        for card in state.cards
    )
    picked_card = next(card for card in updated_cards if card.word == selected_word)
    outcome = resolve_outcome(picked_card, current_team)

    resolved_round = current_round.with_latest_turn(
        current_round.latest_turn.with_outcome(outcome)
    )
    next_state = replace(
        state.with_latest_round(resolved_round),
        cards=updated_cards,
    )
    logger.debug("%s picked '%s': %s", current_team.value, selected_word, outcome.value)

    raw_winner = determine_winner(updated_cards)
    winner = current_team.opponent if raw_winner == Team.ASSASSIN else raw_winner

    if winner is not None:
        logger.info("Game over: %s wins", winner.value)
        return replace(next_state, stage=Stage.GAMEOVER, winner=winner)

    guesses_remaining = (current_round.guesses_allowed or 0) - len(current_round.turns)

    if guesses_remaining <= 0:
        logger.debug("%s has no guesses left", current_team.value)
        return _hand_over(next_state, current_team.opponent)

    if outcome == TurnOutcome.CORRECT_TEAM_CARD:
        return next_state

    return _hand_over(next_state, current_team.opponent)


def _hand_over(state: GameState, team: Team) -> GameState:
    """Open a new round for `team` and wait for its codemaster."""
    logger.debug("Turn passes to %s", team.value)
    return replace(
        state,
        stage=Stage.CODEMASTER,
        rounds=state.rounds + (Round(team=team),),
    )
