"""Board and initial game state generator."""

from __future__ import annotations

import math
import random
from pathlib import Path
from typing import List, Optional, Sequence

from .config import GameSettings
from .state import Card, GameState, Round, Stage, Team

# Share of the board that belongs to neither playing team
NON_TEAM_SHARE = 8 / 25


def load_wordlist(path: str | Path) -> List[str]:
    """Read one word per line, skipping blanks, comments and duplicates."""
    p = Path(path)
    words: List[str] = []
    for line in p.read_text().splitlines():
        w = line.strip()
        if not w or w.startswith("#"):
            continue
        words.append(w)
    return list(dict.fromkeys(words))


class BoardGenerator:
    """
    Deals Codenames boards.

    Word choice and key layout draw from the injected random source only, so
    a seeded generator always deals the same board.
    """

    def __init__(self, settings: Optional[GameSettings] = None, rng: Optional[random.Random] = None):
        """
        Initialize the generator.

        Args:
            settings: Board size and key layout. Defaults to a standard 25 card game.
            rng: Random source. If None, an unseeded random.Random is used.
        """
        self.settings = settings or GameSettings()
        self.rng = rng or random.Random()

    def key_counts(self) -> dict[Team, int]:
        """
        Number of cards each team gets.

        Returns:
            Mapping of team to card count, summing to number_of_cards
        """
        n = self.settings.number_of_cards
        starting_team = self.settings.starting_team

        # round half up, 25 cards -> 8 non-team cards
        non_team = math.floor(NON_TEAM_SHARE * n + 0.5)
        starting_count = math.ceil((n - non_team) / 2)
        other_count = (n - non_team) // 2
        assassins = self.settings.number_of_assassins
        bystanders = n - starting_count - other_count - assassins

        if bystanders < 0:
            raise ValueError(
                f"Too many assassins ({assassins}) for a board of {n} cards"
            )

        return {
            starting_team: starting_count,
            starting_team.opponent: other_count,
            Team.ASSASSIN: assassins,
            Team.BYSTANDER: bystanders,
        }

    def deal_cards(self, words: Sequence[str]) -> list[Card]:
        """
        Pick words and assign each a team.

        Args:
            words: Candidate words, at least number_of_cards of them

        Returns:
            Unselected cards in board order
        """
        n = self.settings.number_of_cards
        unique_words = list(dict.fromkeys(words))
        if len(unique_words) < n:
            raise ValueError(
                f"Need at least {n} unique words, got {len(unique_words)}"
            )

        chosen = self.rng.sample(unique_words, n)

        key: list[Team] = []
        for team, count in self.key_counts().items():
            key.extend([team] * count)
        self.rng.shuffle(key)

        return [Card(word=w, team=t) for w, t in zip(chosen, key)]

    def new_game(self, words: Sequence[str]) -> GameState:
        """
        Create the initial game state.

        Args:
            words: Candidate words for the board

        Returns:
            A GameState in the INTRO stage with a seed round for the starting team
        """
        return GameState(
            stage=Stage.INTRO,
            cards=self.deal_cards(words),
            rounds=[Round(team=self.settings.starting_team)],
        )
