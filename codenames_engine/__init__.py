# Codenames turn engine
from .state import GameState, Team, Stage, TurnOutcome, Card, Turn, Round, other_team
from .errors import GameplayError, ValidationError, InvalidStageError, InvariantViolation
from .validation import validate
from .winner import determine_winner
from .stages import process_intro_stage, process_codemaster_stage, process_codebreaker_stage
from .engine import advance, give_clue, make_guess, Clue, Guess, TurnInput
from .config import GameSettings, load_settings
from .generator import BoardGenerator

__all__ = [
    "GameState",
    "Team",
    "Stage",
    "TurnOutcome",
    "Card",
    "Turn",
    "Round",
    "other_team",
    "GameplayError",
    "ValidationError",
    "InvalidStageError",
    "InvariantViolation",
    "validate",
    "determine_winner",
    "process_intro_stage",
    "process_codemaster_stage",
    "process_codebreaker_stage",
    "advance",
    "give_clue",
    "make_guess",
    "Clue",
    "Guess",
    "TurnInput",
    "GameSettings",
    "load_settings",
    "BoardGenerator",
]
