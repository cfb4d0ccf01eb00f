"""Game state types and data structures for the Codenames turn engine."""

from enum import Enum
from dataclasses import dataclass, field, replace
from typing import Optional


class Team(Enum):
    """Card ownership categories. RED and GREEN are the two playing teams."""
    RED = "red"
    GREEN = "green"
    ASSASSIN = "assassin"
    BYSTANDER = "bystander"

    @property
    def is_playing(self) -> bool:
        return self in (Team.RED, Team.GREEN)

    @property
    def opponent(self) -> "Team":
        """Get the opposing playing team."""
        if not self.is_playing:
            raise ValueError(f"'{self.value}' is not a playing team")
        return Team.GREEN if self == Team.RED else Team.RED


class Stage(Enum):
    """Stages of the turn state machine."""
    INTRO = "intro"
    CODEMASTER = "codemaster"
    CODEBREAKER = "codebreaker"
    GAMEOVER = "gameover"


class TurnOutcome(Enum):
    """How a single guess resolved."""
    CORRECT_TEAM_CARD = "CORRECT_TEAM_CARD"
    OTHER_TEAM_CARD = "OTHER_TEAM_CARD"
    BYSTANDER_CARD = "BYSTANDER_CARD"
    ASSASSIN_CARD = "ASSASSIN_CARD"


def other_team(team: Team) -> Team:
    return team.opponent


@dataclass(frozen=True)
class Card:
    """A single card on the board."""
    word: str
    team: Team
    selected: bool = False

    def select(self) -> "Card":
        """Return a new card with selected=True."""
        return Card(word=self.word, team=self.team, selected=True)


@dataclass(frozen=True)
class Turn:
    """One guess made by a codebreaker."""
    guessed_word: str
    outcome: Optional[TurnOutcome] = None

    def with_outcome(self, outcome: TurnOutcome) -> "Turn":
        return Turn(guessed_word=self.guessed_word, outcome=outcome)


@dataclass(frozen=True)
class Round:
    """A team's clue and the guesses made against it."""
    team: Team
    codeword: Optional[str] = None
    guesses_allowed: Optional[int] = None
    turns: tuple[Turn, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "turns", tuple(self.turns))

    @property
    def latest_turn(self) -> Optional[Turn]:
        return self.turns[-1] if self.turns else None

    def with_clue(self, codeword: str, guesses_allowed: int) -> "Round":
        return replace(self, codeword=codeword, guesses_allowed=guesses_allowed)

    def with_turn(self, turn: Turn) -> "Round":
        return replace(self, turns=self.turns + (turn,))

    def with_latest_turn(self, turn: Turn) -> "Round":
        """Return a new round with its most recent turn swapped for `turn`."""
        return replace(self, turns=self.turns[:-1] + (turn,))


@dataclass(frozen=True)
class GameState:
    """
    Complete state of a Codenames game.

    Instances are immutable: transitions build a new GameState from the old
    one plus a delta. Lists passed for cards, rounds or turns are stored as
    tuples, so two states never share a mutable board.
    """
    stage: Stage
    cards: tuple[Card, ...]
    rounds: tuple[Round, ...] = field(default_factory=tuple)
    winner: Optional[Team] = None

    def __post_init__(self):
        object.__setattr__(self, "cards", tuple(self.cards))
        object.__setattr__(self, "rounds", tuple(self.rounds))

    @property
    def latest_round(self) -> Optional[Round]:
        return self.rounds[-1] if self.rounds else None

    @property
    def latest_turn(self) -> Optional[Turn]:
        latest_round = self.latest_round
        return latest_round.latest_turn if latest_round else None

    @property
    def current_team(self) -> Optional[Team]:
        """The team playing the latest round."""
        latest_round = self.latest_round
        return latest_round.team if latest_round else None

    @property
    def other_team(self) -> Optional[Team]:
        team = self.current_team
        return team.opponent if team is not None else None

    @property
    def words(self) -> list[str]:
        return [card.word for card in self.cards]

    def find_card(self, word: str) -> Optional[Card]:
        """Get a card by its exact word."""
        for card in self.cards:
            if card.word == word:
                return card
        return None

    def get_remaining_words(self, team: Team) -> list[str]:
        """Get unselected words belonging to a team."""
        return [card.word for card in self.cards if card.team == team and not card.selected]

    def with_latest_round(self, round_: Round) -> "GameState":
        """Return a new state with its most recent round swapped for `round_`."""
        return replace(self, rounds=self.rounds[:-1] + (round_,))
