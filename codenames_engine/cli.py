"""Command-line interface for playing a Codenames game stored in a JSON file."""

import logging
import random
from pathlib import Path
from typing import Optional

import click

from .config import GameSettings, load_settings
from .engine import Clue, Guess, advance
from .errors import GameplayError
from .generator import BoardGenerator, load_wordlist
from .serialization import load_state, save_state
from .state import GameState, Stage, Team

BOARD_COLUMNS = 5

TEAM_SYMBOLS = {
    Team.RED: "R",
    Team.GREEN: "G",
    Team.BYSTANDER: ".",
    Team.ASSASSIN: "X",
}


def render_board(state: GameState, codemaster: bool = False) -> str:
    """
    Render the board as a grid.

    Selected cards always show their team. The codemaster view also shows
    the team of every unselected card, in lower case.
    """
    cells = []
    for card in state.cards:
        symbol = TEAM_SYMBOLS[card.team]
        if card.selected:
            cells.append(f"[{symbol}] {card.word}")
        elif codemaster:
            cells.append(f" {symbol.lower()}  {card.word}")
        else:
            cells.append(f"    {card.word}")

    width = max((len(c) for c in cells), default=0) + 2
    lines = []
    for start in range(0, len(cells), BOARD_COLUMNS):
        row = cells[start:start + BOARD_COLUMNS]
        lines.append("".join(f"{c:<{width}}" for c in row).rstrip())
    return "\n".join(lines)


def _advance_file(game: str, action=None) -> GameState:
    try:
        next_state = advance(load_state(game), action)
    except GameplayError as e:
        raise click.ClickException(str(e))
    save_state(next_state, game)
    return next_state


def _echo_status(state: GameState) -> None:
    if state.stage == Stage.GAMEOVER:
        click.echo(f"Game over! {state.winner.value.upper() if state.winner else 'Nobody'} wins.")
        return
    click.echo(f"Stage: {state.stage.value}")
    if state.current_team is not None:
        click.echo(f"Team: {state.current_team.value}")
    click.echo(
        f"Cards left: red {len(state.get_remaining_words(Team.RED))}, "
        f"green {len(state.get_remaining_words(Team.GREEN))}"
    )
    latest_round = state.latest_round
    if state.stage == Stage.CODEBREAKER and latest_round is not None:
        remaining = (latest_round.guesses_allowed or 0) - len(latest_round.turns)
        click.echo(f"Clue: {latest_round.codeword} ({remaining} guesses left)")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """Codenames turn engine CLI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.option("--words-file", "-w", required=True, type=click.Path(exists=True), help="Word list, one word per line")
@click.option("--output", "-o", required=True, type=click.Path(), help="Game file to create")
@click.option("--settings", type=click.Path(exists=True), help="Settings JSON file")
@click.option("--seed", "-s", type=int, help="Random seed for reproducibility")
@click.option("--starting-team", type=click.Choice([Team.RED.value, Team.GREEN.value]), help="Override the starting team")
def new_game(words_file: str, output: str, settings: Optional[str], seed: Optional[int], starting_team: Optional[str]):
    """Deal a new board and write it to a game file."""
    try:
        game_settings = load_settings(settings) if settings else GameSettings()
        if starting_team:
            game_settings = GameSettings(
                number_of_cards=game_settings.number_of_cards,
                starting_team=Team(starting_team),
                number_of_assassins=game_settings.number_of_assassins,
            )
        generator = BoardGenerator(game_settings, rng=random.Random(seed))
        state = generator.new_game(load_wordlist(words_file))
    except ValueError as e:
        raise click.ClickException(str(e))

    save_state(state, Path(output))
    click.echo(f"Saved new game to {output} ({game_settings.starting_team.value} starts)")


@main.command()
@click.argument("game", type=click.Path(exists=True))
def start(game: str):
    """Leave the intro and wait for the first clue."""
    _echo_status(_advance_file(game))


@main.command()
@click.argument("game", type=click.Path(exists=True))
@click.argument("codeword")
@click.argument("guesses", type=click.IntRange(min=0))
def clue(game: str, codeword: str, guesses: int):
    """Give a clue for the current round."""
    _echo_status(_advance_file(game, Clue(codeword=codeword, guesses_allowed=guesses)))


@main.command()
@click.argument("game", type=click.Path(exists=True))
@click.argument("word")
def guess(game: str, word: str):
    """Guess a word on the board."""
    state = _advance_file(game, Guess(word=word))
    turn = state.rounds[-1].latest_turn
    # A handoff opens a fresh round, so the resolved turn is in the one before
    if turn is None and len(state.rounds) > 1:
        turn = state.rounds[-2].latest_turn
    if turn is not None and turn.outcome is not None:
        click.echo(f"{word}: {turn.outcome.value}")
    _echo_status(state)


@main.command()
@click.argument("game", type=click.Path(exists=True))
@click.option("--codemaster", is_flag=True, help="Show every card's team")
def show(game: str, codemaster: bool):
    """Print the board and game status."""
    try:
        state = load_state(game)
    except GameplayError as e:
        raise click.ClickException(str(e))
    click.echo(render_board(state, codemaster=codemaster))
    click.echo("")
    _echo_status(state)


if __name__ == "__main__":
    main()
