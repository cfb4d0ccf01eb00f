"""Tests for the command-line interface."""

import pytest
from click.testing import CliRunner

from codenames_engine import Stage, Team
from codenames_engine.cli import main, render_board
from codenames_engine.serialization import load_state


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def game_file(runner, tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("\n".join(f"word{i}" for i in range(30)))
    game = tmp_path / "game.json"
    result = runner.invoke(main, ["new-game", "-w", str(words), "-o", str(game), "--seed", "7"])
    assert result.exit_code == 0, result.output
    return game


def first_word(game, team):
    return next(c.word for c in load_state(game).cards if c.team == team and not c.selected)


class TestNewGame:
    def test_creates_intro_game(self, game_file):
        state = load_state(game_file)
        assert state.stage == Stage.INTRO
        assert len(state.cards) == 25

    def test_starting_team_override(self, runner, tmp_path):
        words = tmp_path / "words.txt"
        words.write_text("\n".join(f"word{i}" for i in range(30)))
        game = tmp_path / "game.json"
        result = runner.invoke(main, ["new-game", "-w", str(words), "-o", str(game), "--starting-team", "green"])
        assert result.exit_code == 0
        assert "green starts" in result.output
        assert load_state(game).current_team == Team.GREEN

    def test_too_few_words(self, runner, tmp_path):
        words = tmp_path / "words.txt"
        words.write_text("apple\npear\n")
        result = runner.invoke(main, ["new-game", "-w", str(words), "-o", str(tmp_path / "g.json")])
        assert result.exit_code == 1
        assert "unique words" in result.output


class TestPlay:
    def test_clue_and_guess(self, runner, game_file):
        result = runner.invoke(main, ["start", str(game_file)])
        assert result.exit_code == 0
        assert "Stage: codemaster" in result.output

        result = runner.invoke(main, ["clue", str(game_file), "fruit", "2"])
        assert result.exit_code == 0
        assert "Clue: fruit (2 guesses left)" in result.output

        word = first_word(game_file, Team.RED)
        result = runner.invoke(main, ["guess", str(game_file), word])
        assert result.exit_code == 0
        assert f"{word}: CORRECT_TEAM_CARD" in result.output
        assert load_state(game_file).find_card(word).selected is True

    def test_wrong_guess_passes_turn(self, runner, game_file):
        runner.invoke(main, ["start", str(game_file)])
        runner.invoke(main, ["clue", str(game_file), "fruit", "2"])
        word = first_word(game_file, Team.BYSTANDER)
        result = runner.invoke(main, ["guess", str(game_file), word])
        assert result.exit_code == 0
        assert f"{word}: BYSTANDER_CARD" in result.output
        assert "Team: green" in result.output

    def test_assassin_ends_game(self, runner, game_file):
        runner.invoke(main, ["start", str(game_file)])
        runner.invoke(main, ["clue", str(game_file), "fruit", "2"])
        result = runner.invoke(main, ["guess", str(game_file), first_word(game_file, Team.ASSASSIN)])
        assert "Game over! GREEN wins." in result.output

        result = runner.invoke(main, ["start", str(game_file)])
        assert result.exit_code == 1
        assert "Game has finished. No more turns." in result.output

    def test_validation_error_reported(self, runner, game_file):
        runner.invoke(main, ["start", str(game_file)])
        runner.invoke(main, ["clue", str(game_file), "fruit", "2"])
        before = game_file.read_text()
        result = runner.invoke(main, ["guess", str(game_file), "banana"])
        assert result.exit_code == 1
        assert "does not match any card" in result.output
        assert game_file.read_text() == before

    def test_negative_guesses_rejected(self, runner, game_file):
        runner.invoke(main, ["start", str(game_file)])
        result = runner.invoke(main, ["clue", str(game_file), "fruit", "-1"])
        assert result.exit_code != 0


class TestShow:
    def test_codebreaker_view_hides_teams(self, runner, game_file):
        result = runner.invoke(main, ["show", str(game_file)])
        assert result.exit_code == 0
        assert "Stage: intro" in result.output
        assert " r  " not in result.output

    def test_cards_left(self, runner, game_file):
        result = runner.invoke(main, ["show", str(game_file)])
        assert "Cards left: red 9, green 8" in result.output

        runner.invoke(main, ["start", str(game_file)])
        runner.invoke(main, ["clue", str(game_file), "fruit", "2"])
        result = runner.invoke(main, ["guess", str(game_file), first_word(game_file, Team.RED)])
        assert result.exit_code == 0
        assert "Cards left: red 8, green 8" in result.output


    def test_render_codemaster_view(self, game_file):
        state = load_state(game_file)
        rendered = render_board(state, codemaster=True)
        assert len(rendered.splitlines()) == 5
        assert " x  " in rendered
