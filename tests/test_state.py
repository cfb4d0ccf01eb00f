"""Tests for the game state types."""

import dataclasses

import pytest
from codenames_engine import Card, GameState, Round, Stage, Team, Turn, TurnOutcome, other_team


class TestTeam:
    def test_opponent(self):
        assert Team.RED.opponent == Team.GREEN
        assert Team.GREEN.opponent == Team.RED
        assert other_team(Team.RED) == Team.GREEN

    def test_non_playing_team_has_no_opponent(self):
        with pytest.raises(ValueError):
            Team.ASSASSIN.opponent
        with pytest.raises(ValueError):
            other_team(Team.BYSTANDER)

    def test_values_match_stored_documents(self):
        assert Team("green") == Team.GREEN
        assert Stage("gameover") == Stage.GAMEOVER


class TestCard:
    def test_select_returns_new_card(self):
        card = Card(word="Coop", team=Team.RED)
        selected = card.select()
        assert selected.selected is True
        assert card.selected is False
        assert selected.team == Team.RED

    def test_cards_are_frozen(self):
        card = Card(word="Coop", team=Team.RED)
        with pytest.raises(dataclasses.FrozenInstanceError):
            card.selected = True


class TestRound:
    def test_with_turn_appends(self):
        round_ = Round(team=Team.RED)
        updated = round_.with_turn(Turn(guessed_word="Coop"))
        assert round_.turns == ()
        assert updated.latest_turn == Turn(guessed_word="Coop")

    def test_with_latest_turn_replaces_last(self):
        round_ = Round(team=Team.RED, turns=[Turn("a"), Turn("b")])
        updated = round_.with_latest_turn(Turn("b", TurnOutcome.BYSTANDER_CARD))
        assert [t.outcome for t in updated.turns] == [None, TurnOutcome.BYSTANDER_CARD]


class TestGameState:
    @pytest.fixture
    def state(self, make_cards):
        return GameState(
            stage=Stage.CODEMASTER,
            cards=make_cards(["red1"]),
            rounds=[Round(team=Team.GREEN)],
        )

    def test_lists_are_stored_as_tuples(self, make_cards):
        cards = make_cards()
        state = GameState(stage=Stage.INTRO, cards=cards, rounds=[])
        cards[0] = cards[0].select()
        assert isinstance(state.cards, tuple)
        assert state.cards[0].selected is False

    def test_current_and_other_team(self, state):
        assert state.current_team == Team.GREEN
        assert state.other_team == Team.RED

    def test_no_rounds(self, make_cards):
        state = GameState(stage=Stage.INTRO, cards=make_cards())
        assert state.latest_round is None
        assert state.current_team is None
        assert state.other_team is None

    def test_find_card(self, state):
        assert state.find_card("red1").selected is True
        assert state.find_card("missing") is None

    def test_remaining_words(self, state):
        assert state.get_remaining_words(Team.RED) == ["red2"]
        assert state.get_remaining_words(Team.GREEN) == ["green1", "green2"]
