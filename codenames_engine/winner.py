"""Terminal-condition check over the board."""

from collections import Counter
from typing import Iterable, Optional

from .errors import InvariantViolation
from .state import Card, Team


def determine_winner(cards: Iterable[Card]) -> Optional[Team]:
    """
    Decide whether the board has reached a terminal condition.

    A playing team wins once every one of its cards is selected. When any
    assassin card is selected the sentinel Team.ASSASSIN is returned; the
    caller knows which team picked it and maps the sentinel to the opponent.

    Args:
        cards: Every card on the board

    Returns:
        RED, GREEN, ASSASSIN or None if the game continues

    Raises:
        InvariantViolation: If both playing teams have cleared their cards
    """
    totals: Counter = Counter()
    selected: Counter = Counter()
    for card in cards:
        totals[card.team] += 1
        if card.selected:
            selected[card.team] += 1

    def cleared(team: Team) -> bool:
        # A team with no cards on the board has nothing to clear
        return totals[team] > 0 and selected[team] == totals[team]

    if cleared(Team.RED) and cleared(Team.GREEN):
        raise InvariantViolation("Failed to determine winner... both teams win!")

    if selected[Team.ASSASSIN] > 0:
        return Team.ASSASSIN

    if cleared(Team.RED):
        return Team.RED
    if cleared(Team.GREEN):
        return Team.GREEN
    return None
