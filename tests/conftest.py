import pytest

from codenames_engine import Card, GameState, Round, Stage, Team, Turn


def _make_cards(selected_words=()):
    return [
        Card(word="red1", team=Team.RED, selected="red1" in selected_words),
        Card(word="red2", team=Team.RED, selected="red2" in selected_words),
        Card(word="green1", team=Team.GREEN, selected="green1" in selected_words),
        Card(word="green2", team=Team.GREEN, selected="green2" in selected_words),
        Card(word="bystander", team=Team.BYSTANDER, selected="bystander" in selected_words),
        Card(word="assassin", team=Team.ASSASSIN, selected="assassin" in selected_words),
    ]


@pytest.fixture
def make_cards():
    return _make_cards


@pytest.fixture
def codebreaker_state():
    """Build a CODEBREAKER state whose latest round has `guesses` as unresolved turns."""
    def build(team, guesses_allowed, guesses, selected_words=(), cards=None):
        return GameState(
            stage=Stage.CODEBREAKER,
            cards=cards if cards is not None else _make_cards(selected_words),
            rounds=[Round(
                team=team,
                codeword="clue",
                guesses_allowed=guesses_allowed,
                turns=[Turn(guessed_word=w) for w in guesses],
            )],
        )
    return build


@pytest.fixture
def five_card_board():
    return [
        Card(word="red1", team=Team.RED),
        Card(word="red2", team=Team.RED),
        Card(word="green1", team=Team.GREEN),
        Card(word="green2", team=Team.GREEN),
        Card(word="assassin", team=Team.ASSASSIN),
    ]


@pytest.fixture
def intro_state():
    return GameState(
        stage=Stage.INTRO,
        cards=_make_cards(),
        rounds=[Round(team=Team.RED)],
    )
