"""Exceptions raised by the turn engine.

Callers map these onto their own responses: ValidationError and
InvalidStageError are client errors, InvariantViolation means the stored
board is corrupt.
"""

from typing import Optional


class GameplayError(Exception):
    """Base class for all turn engine errors."""
    pass


class ValidationError(GameplayError):
    """A stage precondition failed. The message is safe to show to players."""
    pass


class InvalidStageError(GameplayError):
    """No transition exists for the given stage."""
    def __init__(self, message: str, stage: Optional[object] = None):
        self.stage = stage
        super().__init__(message)


class InvariantViolation(GameplayError):
    """The board is in a state that correct play can never produce."""
    pass
